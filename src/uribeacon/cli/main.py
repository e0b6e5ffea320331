"""Main CLI entry point for uribeacon."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..cli.analyze import analyze_url
from ..codec import decode, encode
from ..exceptions import UribeaconError
from ..framing import DEFAULT_TX_POWER, frame_url, unframe_url
from ..rotation import RotationConfig, rotating_url

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uribeacon",
        description="uribeacon: URL Beacon Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  uribeacon --encode http://www.eff.org          Encode URL to hex payload
  uribeacon --encode http://www.eff.org --frame  Encode to service-data frame
  uribeacon --decode 0065666608                  Decode hex payload to URL
  uribeacon --analyze https://example.com/       Show segments and size budget
  uribeacon --rotate --secret s3cret             Print current rotating URL
        """,
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument("--encode", metavar="URL", type=str, help="Encode URL to hex payload")
    group.add_argument("--decode", metavar="HEX", type=str, help="Decode hex payload to URL")
    group.add_argument(
        "--analyze",
        metavar="URL",
        type=str,
        help="Analyze URL encoding and advertisement size",
    )
    group.add_argument("--rotate", action="store_true", help="Print the current rotating URL")

    parser.add_argument(
        "--frame",
        action="store_true",
        help="With --encode/--decode, work on the full service-data frame",
    )
    parser.add_argument(
        "--tx-power",
        type=int,
        default=DEFAULT_TX_POWER,
        help=f"TX power at 0 m in dBm for --frame (default {DEFAULT_TX_POWER})",
    )

    defaults = RotationConfig()
    parser.add_argument("--base-url", default=defaults.base_url, help="Base URL for --rotate")
    parser.add_argument("--secret", default=defaults.secret, help="Secret for --rotate")
    parser.add_argument(
        "--interval",
        type=int,
        default=defaults.interval_ms,
        metavar="MS",
        help="Rotation interval in milliseconds for --rotate",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"uribeacon {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the uribeacon CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        if args.encode is not None:
            payload = encode(args.encode)
            if args.frame:
                payload = frame_url(payload, tx_power=args.tx_power)
            print(payload.hex())
            return 0

        if args.decode is not None:
            data = bytes.fromhex(args.decode)
            if args.frame:
                tx_power, data = unframe_url(data)
                logger.debug("Frame TX power: %d dBm", tx_power)
            print(decode(data))
            return 0

        if args.analyze is not None:
            analyze_url(args.analyze)
            return 0

        if args.rotate:
            config = RotationConfig(
                base_url=args.base_url, secret=args.secret, interval_ms=args.interval
            )
            url = rotating_url(config)
            logger.info("Advertising %s", url)
            print(url)
            return 0
    except (UribeaconError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
