"""URL analysis CLI command."""

from __future__ import annotations

from ..framing.basic import HEADER_SIZE, MAX_URL_BYTES
from ..utils.sizing import segments


def analyze_url(url: str, max_bytes: int = MAX_URL_BYTES) -> bool:
    """Print how a URL is encoded and whether it fits the advertisement.

    Args:
        url: URL to analyze
        max_bytes: Advertisement budget for the encoded URL

    Returns:
        True if the encoded URL fits within max_bytes

    Raises:
        EncodeError: If the URL cannot be encoded
    """
    parts = segments(url)
    total_bytes = sum(part.size for part in parts)
    saved = len(url) - total_bytes

    print("|" * 7, "uribeacon: URL Beacon Codec", "|" * 7)
    print(f"URL: {url}")
    print(f"Characters: {len(url)}")
    print()

    print(f"{'-' * 26} Segments {'-' * 26}")
    for i, part in enumerate(parts, 1):
        if part.code is None:
            kind = "literal"
            code = "--"
        elif i == 1:
            kind = "scheme"
            code = f"0x{part.code:02x}"
        else:
            kind = "expansion"
            code = f"0x{part.code:02x}"

        desc = f"{i}. {part.text!r}"
        dots = "." * max(1, 40 - len(desc) - len(kind))
        print(f"        {desc}{dots}{kind} {code} {part.size} byte{'s' if part.size != 1 else ''}")
    print()

    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"Encoded size: {total_bytes} bytes ({saved} saved)")
    print(f"Service data frame: {total_bytes + HEADER_SIZE} bytes")

    fits = total_bytes <= max_bytes
    if fits:
        print(f"Fits advertisement: yes ({max_bytes - total_bytes} bytes spare of {max_bytes})")
    else:
        print(f"Fits advertisement: NO ({total_bytes - max_bytes} bytes over {max_bytes})")
    print()

    return fits
