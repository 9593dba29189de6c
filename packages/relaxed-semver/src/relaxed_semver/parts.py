# SPDX-License-Identifier: MIT
"""Version parts and their ordering.

A version string is split on periods into parts. Each part is either:
- a release part: purely numeric (``12``), or ``v`` followed by digits (``v8``)
- a text part: a number, a separator and a modifier with an optional
  trailing number (``1-rc2``, ``0_snapshot``)
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Union

# Modifier ordering (higher = later in release cycle). Keys are lowercase.
MODIFIER_PRIORITIES = MappingProxyType(
    {
        "snapshot": 0,
        "rc": 1,
        "pre": 1,
    }
)

# Modifiers missing from the table rank below every known one and tie with each other
UNKNOWN_MODIFIER_PRIORITY = -1

# Separators allowed between a number and a modifier, scanned in this order
SEPARATORS = ("-", "_")


def modifier_priority(modifier: str) -> int:
    """Return the ordering priority of a modifier keyword (case-insensitive)."""
    return MODIFIER_PRIORITIES.get(modifier.lower(), UNKNOWN_MODIFIER_PRIORITY)


@dataclass(frozen=True, slots=True)
class ReleasePart:
    """A purely numeric version part.

    Attributes:
        value: Parsed integer value
        display: Original text of the part, used for rendering only
    """

    value: int
    display: str


@dataclass(frozen=True, slots=True)
class TextPart:
    """A version part carrying a modifier, such as ``1-rc2``.

    Attributes:
        value: Leading integer
        separator: Character between the number and the modifier (``-`` or ``_``)
        modifier: Modifier keyword, case preserved (e.g. "rc", "SNAPSHOT")
        modifier_number: Digits following the modifier, or None when absent
    """

    value: int
    separator: str
    modifier: str
    modifier_number: Optional[int] = None

    @property
    def priority(self) -> int:
        return modifier_priority(self.modifier)

    @property
    def display(self) -> str:
        number = "" if self.modifier_number is None else str(self.modifier_number)
        return f"{self.value}{self.separator}{self.modifier}{number}"


VersionPart = Union[ReleasePart, TextPart]


def _sign(a: int, b: int) -> int:
    return (a > b) - (a < b)


def _compare_modifier_numbers(a: Optional[int], b: Optional[int]) -> int:
    # An absent number sorts below any present one, 0 included
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    return _sign(a, b)


def compare_parts(a: VersionPart, b: VersionPart) -> int:
    """Compare two version parts.

    Returns:
        -1 if a < b
        0 if a and b rank equally
        1 if a > b

    Note:
        The numeric value always decides first. On a tie, a text part ranks
        below a release part (``1-rc1`` < ``1``). Two text parts then compare
        by modifier priority and finally by modifier number. Ranking equally
        does not imply equality: ``1-foo1`` and ``1-bar1`` tie here but are
        different parts.

    Examples:
        >>> compare_parts(ReleasePart(1, "1"), ReleasePart(2, "2"))
        -1
        >>> compare_parts(TextPart(1, "-", "rc", 1), ReleasePart(1, "1"))
        -1
        >>> compare_parts(TextPart(1, "-", "rc", 1), TextPart(1, "-", "pre", 2))
        -1
    """
    if a.value != b.value:
        return _sign(a.value, b.value)

    if isinstance(a, ReleasePart):
        return 0 if isinstance(b, ReleasePart) else 1
    if isinstance(b, ReleasePart):
        return -1

    if a.priority != b.priority:
        return _sign(a.priority, b.priority)
    return _compare_modifier_numbers(a.modifier_number, b.modifier_number)
