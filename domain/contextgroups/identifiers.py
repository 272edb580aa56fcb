"""Context group identifiers with numeric-aware ordering."""

import re
from functools import total_ordering

from pydantic import BaseModel, ConfigDict

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def is_integer_cid(cid: str) -> bool:
    """Return True if the CID is an (optionally signed) run of ASCII digits."""
    return _INTEGER_RE.fullmatch(cid) is not None


def compare_identifiers(a: str, b: str) -> int:
    """
    Three-way comparison of two CID strings.

    Both integer: numeric order, with the string form breaking ties so that
    "010" and "10" stay distinct. Otherwise: plain string order.

    Examples:
        >>> compare_identifiers("9", "10")
        -1
        >>> compare_identifiers("10", "10a")
        -1
    """
    if a == b:
        return 0
    if is_integer_cid(a) and is_integer_cid(b):
        us, them = int(a), int(b)
        if us != them:
            return -1 if us < them else 1
    return -1 if a < b else 1


@total_ordering
class ContextGroupIdentifier(BaseModel):
    """Registry key for a context group. Equal iff the CID strings are equal."""

    model_config = ConfigDict(frozen=True)

    cid: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContextGroupIdentifier):
            return NotImplemented
        return self.cid == other.cid

    def __hash__(self) -> int:
        return hash(self.cid)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ContextGroupIdentifier):
            return NotImplemented
        return compare_identifiers(self.cid, other.cid) < 0

    def __str__(self) -> str:
        return self.cid
