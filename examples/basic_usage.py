#!/usr/bin/env python3
"""Basic usage example for uribeacon.

This example demonstrates:
1. Encoding a URL to the compact beacon payload
2. Inspecting how the URL was segmented
3. Framing the payload as advertisement service data
4. Decoding a received frame back to the URL
"""

from __future__ import annotations

from uribeacon import (
    MAX_URL_BYTES,
    UrlFrame,
    decode,
    encode,
    fits_advertisement,
    segments,
)


def main() -> None:
    """Run the basic usage example."""
    url = "https://www.example.org/hi"

    print("=" * 60)
    print("uribeacon Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Encoding the URL...")
    payload = encode(url)
    print(f"   URL: {url} ({len(url)} characters)")
    print(f"   Encoded size: {len(payload)} bytes")
    print(f"   Hex: {payload.hex()}")
    print()

    print("2. Segments...")
    for part in segments(url):
        label = "literal" if part.code is None else f"code 0x{part.code:02x}"
        print(f"   {part.text!r:<20} {label:<10} {part.size} byte(s)")
    print(f"   Fits {MAX_URL_BYTES}-byte advertisement: {fits_advertisement(url)}")
    print()

    print("3. Framing as service data...")
    frame = UrlFrame(url=url, tx_power=-20)
    service_data = frame.to_service_data()
    print(f"   Service data: {service_data.hex()}")
    print()

    print("4. Decoding a received frame...")
    received = UrlFrame.from_service_data(service_data)
    print(f"   URL: {received.url}")
    print(f"   TX power: {received.tx_power} dBm")
    print(f"   Payload decodes to: {decode(payload)}")
    print()

    if received == frame:
        print("   ✓ Round-trip successful! Frames match.")
    else:
        print("   ✗ Round-trip failed! Frames don't match.")
    print()


if __name__ == "__main__":
    main()
