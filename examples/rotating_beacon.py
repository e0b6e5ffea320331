#!/usr/bin/env python3
"""Rotating URL example for uribeacon.

Prints the advertised URL and service data for a few consecutive rotation
intervals, the way a beacon would refresh its advertisement each minute.
"""

from __future__ import annotations

import time

from uribeacon import RotationConfig, UrlFrame, encoded_size, rotating_url


def main() -> None:
    """Run the rotating URL example."""
    config = RotationConfig(secret="example-secret")
    now_ms = int(time.time() * 1000)

    print("=" * 60)
    print("uribeacon Rotating URL Example")
    print("=" * 60)
    print(f"Base URL: {config.base_url}")
    print(f"Interval: {config.interval_ms / 1000:.0f} s")
    print()

    for step in range(3):
        timestamp_ms = now_ms + step * config.interval_ms
        url = rotating_url(config, timestamp_ms=timestamp_ms)
        service_data = UrlFrame(url=url).to_service_data()
        print(f"   +{step} interval(s): {url}")
        print(f"      encoded {encoded_size(url)} bytes, service data {service_data.hex()}")
    print()


if __name__ == "__main__":
    main()
