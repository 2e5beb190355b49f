"""Dotted version parsing for ranking interpreters reported by lookup providers."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from itertools import zip_longest
from typing import Final

_DC_KW = {"frozen": True, "kw_only": True, "slots": True} if sys.version_info >= (3, 10) else {"frozen": True}

_SEGMENT_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    (\d+)               # numeric part
    (?:(a|b|rc)(\d*))?  # optional pre-release suffix
    """,
    re.VERBOSE,
)
_PRE_ORDER: Final[dict[str, int]] = {"a": 1, "b": 2, "rc": 3}


@dataclass(**_DC_KW)
class DottedVersion:
    """Segment-wise numeric version, so that ``3.10.2`` sorts above ``3.9.9``."""

    version_str: str
    release: tuple[int, ...]
    pre_type: str | None
    pre_num: int | None

    @classmethod
    def from_string(cls, version_str: str) -> DottedVersion:
        stripped = version_str.strip()
        if not stripped:
            msg = f"Invalid version: {version_str!r}"
            raise ValueError(msg)
        release: list[int] = []
        pre_type: str | None = None
        pre_num: int | None = None
        for segment in stripped.split("."):
            match = _SEGMENT_RE.match(segment)
            number, suffix, suffix_num = match.groups() if match else ("", None, None)
            release.append(int(number) if number else 0)
            if suffix is not None:
                pre_type, pre_num = suffix, int(suffix_num) if suffix_num else 0
                break
        return cls(version_str=stripped, release=tuple(release), pre_type=pre_type, pre_num=pre_num)

    def _padded(self, other: DottedVersion) -> tuple[tuple[int, ...], tuple[int, ...]]:
        pairs = list(zip_longest(self.release, other.release, fillvalue=0))
        return tuple(a for a, _ in pairs), tuple(b for _, b in pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DottedVersion):
            return NotImplemented
        mine, theirs = self._padded(other)
        return mine == theirs and self.pre_type == other.pre_type and self.pre_num == other.pre_num

    def __hash__(self) -> int:
        release = list(self.release)
        while release and release[-1] == 0:
            release.pop()
        return hash((tuple(release), self.pre_type, self.pre_num))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DottedVersion):
            return NotImplemented
        mine, theirs = self._padded(other)
        if mine != theirs:
            return mine < theirs
        if self.pre_type is None:
            return False
        if other.pre_type is None:
            return True
        if _PRE_ORDER[self.pre_type] != _PRE_ORDER[other.pre_type]:
            return _PRE_ORDER[self.pre_type] < _PRE_ORDER[other.pre_type]
        return (self.pre_num or 0) < (other.pre_num or 0)

    def __le__(self, other: object) -> bool:
        return self == other or self < other

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DottedVersion):
            return NotImplemented
        return not self <= other

    def __ge__(self, other: object) -> bool:
        return not self < other

    def __str__(self) -> str:
        return self.version_str

    def __repr__(self) -> str:
        return f"DottedVersion('{self.version_str}')"


__all__ = [
    "DottedVersion",
]
