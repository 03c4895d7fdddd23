"""Dotted numeric version strings and their ordering.

Swagger and OpenAPI documents declare their format version as a short dotted
string (``"2.0"``, ``"3.0.1"``).  :class:`Version` parses such strings into a
tuple of integers so the orchestrator can gate the accepted range and pick the
version-specific parsing branch.

Missing trailing components compare as zero, so ``Version.parse("3.0")``
equals ``Version.parse("3.0.0")``.
"""

from __future__ import annotations

import enum
from typing import Any

from swagmodel.exceptions import MalformedVersion


class Ordering(enum.IntEnum):
    """Result of :meth:`Version.compare`."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class Version:
    """An ordered tuple of non-negative integers.

    Instances are immutable and hashable; equal versions (after zero padding)
    hash equally.
    """

    __slots__ = ("_parts", "_text")

    def __init__(self, parts: tuple[int, ...], text: str | None = None) -> None:
        self._parts = tuple(parts)
        self._text = text if text is not None else ".".join(str(p) for p in parts)

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a dot-separated version string.

        Args:
            text: The version string, e.g. ``"3.0.1"``.

        Returns:
            The parsed :class:`Version`.

        Raises:
            MalformedVersion: If any component is empty or not a
                non-negative decimal integer.
        """
        text = str(text).strip()
        parts: list[int] = []
        for component in text.split("."):
            if not component.isdecimal():
                raise MalformedVersion(
                    f"Malformed version '{text}': component '{component}' is not a non-negative integer"
                )
            parts.append(int(component))
        return cls(tuple(parts), text)

    @property
    def parts(self) -> tuple[int, ...]:
        return self._parts

    def compare(self, other: Version) -> Ordering:
        """Compare component-wise, padding the shorter version with zeros."""
        width = max(len(self._parts), len(other._parts))
        mine = self._parts + (0,) * (width - len(self._parts))
        theirs = other._parts + (0,) * (width - len(other._parts))
        if mine < theirs:
            return Ordering.LESS
        if mine > theirs:
            return Ordering.GREATER
        return Ordering.EQUAL

    def in_range(self, lo: Version, hi: Version) -> bool:
        """Return ``True`` if ``lo <= self <= hi`` (both bounds inclusive)."""
        return self.compare(lo) != Ordering.LESS and self.compare(hi) != Ordering.GREATER

    def _normalized(self) -> tuple[int, ...]:
        parts = list(self._parts)
        while parts and parts[-1] == 0:
            parts.pop()
        return tuple(parts)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == Ordering.EQUAL

    def __lt__(self, other: Version) -> bool:
        return self.compare(other) == Ordering.LESS

    def __le__(self, other: Version) -> bool:
        return self.compare(other) != Ordering.GREATER

    def __gt__(self, other: Version) -> bool:
        return self.compare(other) == Ordering.GREATER

    def __ge__(self, other: Version) -> bool:
        return self.compare(other) != Ordering.LESS

    def __hash__(self) -> int:
        return hash(self._normalized())

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Version({self._text!r})"


V2 = Version.parse("2.0")
V3 = Version.parse("3.0.0")
V3_0_1 = Version.parse("3.0.1")

MIN_VERSION = V2
"""Oldest accepted document version (Swagger 2.0)."""

MAX_VERSION = V3_0_1
"""Newest accepted document version (OpenAPI 3.0.1)."""
