"""UrlCodec: encode/decode bound to a validated pair of tables."""

from __future__ import annotations

from typing import Iterable, Optional, Union

from .decoder import decode as _decode
from .encoder import encode as _encode
from .tables import EXPANSIONS, SCHEMES, CodeTable, Entry

TableLike = Union[CodeTable, Iterable[Entry]]


class UrlCodec:
    """URL codec over a scheme table and an expansion table.

    Tables are validated when the codec is constructed, so a bad table is
    reported before any URL is encoded.

    Example:
        >>> codec = UrlCodec()
        >>> codec.decode(codec.encode("https://example.com/"))
        'https://example.com/'

    Raises:
        ConfigError: If either table violates its invariants
    """

    def __init__(self, schemes: TableLike = SCHEMES, expansions: TableLike = EXPANSIONS) -> None:
        self.schemes = CodeTable.from_pairs(schemes, ordered_prefixes=True)
        self.expansions = CodeTable.from_pairs(expansions)

    def encode(self, uri: Optional[str]) -> bytes:
        """Encode a URL. See :func:`uribeacon.codec.encoder.encode`."""
        return _encode(uri, schemes=self.schemes, expansions=self.expansions)

    def decode(self, data: bytes) -> str:
        """Decode a payload. See :func:`uribeacon.codec.decoder.decode`."""
        return _decode(data, schemes=self.schemes, expansions=self.expansions)

    def __repr__(self) -> str:
        return f"UrlCodec(schemes={len(self.schemes)}, expansions={len(self.expansions)})"
