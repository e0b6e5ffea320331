"""Scheme and expansion lookup tables.

Both tables map a one-byte code to a string. The scheme table identifies the
URL prefix in the first payload byte; the expansion table replaces common
top-level-domain suffixes anywhere after it.

Tables are validated when they are built, so a broken table fails at import
time instead of on the first encode call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Tuple, Union

from ..exceptions import ConfigError

Entry = Tuple[int, str]

URN_UUID_PREFIX = "urn:uuid:"

# Highest code point that can travel as a literal byte.
MAX_LITERAL = 0x7F


@dataclass(frozen=True)
class CodeTable:
    """Immutable, ordered table of ``(code, string)`` entries.

    Attributes:
        entries: Entries in declaration order. Encoders scan in this order.
        ordered_prefixes: Scheme-table mode. Strings are compared
            case-insensitively and an entry may not follow a shorter entry
            that is a prefix of it, so the first match is always the longest.

    Example:
        >>> table = CodeTable(((0, ".com/"), (1, ".com")))
        >>> table.lookup(1)
        '.com'
    """

    entries: Tuple[Entry, ...]
    ordered_prefixes: bool = False
    _by_code: dict = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Normalize entries and validate table invariants.

        Raises:
            ConfigError: If any invariant is violated
        """
        entries = tuple((code, text) for code, text in self.entries)
        object.__setattr__(self, "entries", entries)

        if not entries:
            raise ConfigError("Code table must have at least one entry")

        by_code: dict[int, str] = {}
        seen_strings: set[str] = set()

        for code, text in entries:
            if not isinstance(code, int) or isinstance(code, bool):
                raise ConfigError(f"Code must be an integer, got {code!r}")
            if not 0 <= code <= 0xFF:
                raise ConfigError(f"Code {code} does not fit in one byte")
            if not isinstance(text, str) or not text:
                raise ConfigError(f"Code {code}: string must be non-empty, got {text!r}")
            if code in by_code:
                raise ConfigError(
                    f"Duplicate code {code}: {by_code[code]!r} and {text!r}"
                )

            key = text.lower() if self.ordered_prefixes else text
            if key in seen_strings:
                raise ConfigError(f"Duplicate string {text!r} (code {code})")

            by_code[code] = text
            seen_strings.add(key)

        if self.ordered_prefixes:
            _check_prefix_order(entries)

        object.__setattr__(self, "_by_code", by_code)

    @classmethod
    def from_pairs(
        cls, pairs: Union[CodeTable, Iterable[Entry]], *, ordered_prefixes: bool = False
    ) -> CodeTable:
        """Build a table from raw pairs, passing existing tables through.

        Args:
            pairs: A CodeTable or an iterable of ``(code, string)`` pairs
            ordered_prefixes: Scheme-table mode (see class docstring)

        Returns:
            Validated CodeTable
        """
        if isinstance(pairs, CodeTable):
            if ordered_prefixes and not pairs.ordered_prefixes:
                return cls(pairs.entries, ordered_prefixes=True)
            return pairs
        return cls(tuple(pairs), ordered_prefixes=ordered_prefixes)

    def lookup(self, code: int) -> Optional[str]:
        """Return the string for a code, or None if the code is unknown."""
        return self._by_code.get(code)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def _check_prefix_order(entries: Tuple[Entry, ...]) -> None:
    """Reject entries that can never match because an earlier one shadows them."""
    lowered = [(code, text.lower()) for code, text in entries]
    for i, (later_code, later) in enumerate(lowered):
        for earlier_code, earlier in lowered[:i]:
            if later.startswith(earlier):
                raise ConfigError(
                    f"Scheme {later!r} (code {later_code}) is shadowed by "
                    f"earlier prefix {earlier!r} (code {earlier_code}); "
                    f"list longer prefixes first"
                )


# URL prefixes, longest first so a first-match scan is a longest-match scan.
SCHEMES = CodeTable(
    (
        (0, "http://www."),
        (1, "https://www."),
        (2, "http://"),
        (3, "https://"),
        (4, URN_UUID_PREFIX),
    ),
    ordered_prefixes=True,
)

# Generic TLD suffixes for http/https URLs.
EXPANSIONS = CodeTable(
    (
        (0, ".com/"),
        (1, ".org/"),
        (2, ".edu/"),
        (3, ".net/"),
        (4, ".info/"),
        (5, ".biz/"),
        (6, ".gov/"),
        (7, ".com"),
        (8, ".org"),
        (9, ".edu"),
        (10, ".net"),
        (11, ".info"),
        (12, ".biz"),
        (13, ".gov"),
    )
)
