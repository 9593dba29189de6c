# SPDX-License-Identifier: MIT
"""Relaxed semantic version parsing.

Accepts any number of period-delimited parts rather than strict
MAJOR.MINOR.PATCH:
- Release parts: 1, 12, v8 (the ``v`` prefix is a known vendor quirk)
- Text parts: 1-rc2, 0-SNAPSHOT, 3_pre
- Build metadata: everything after the first ``+``, kept for display only
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .parts import SEPARATORS, ReleasePart, TextPart, VersionPart, compare_parts

_DIGITS = re.compile(r"[0-9]+")

# Release part with the optional single "v" vendor prefix (14.v8.1 means 14.8.1)
_RELEASE_PATTERN = re.compile(r"v?(?P<value>[0-9]+)")

# Text after a separator: modifier keyword with optional trailing number
_MODIFIER_PATTERN = re.compile(r"(?P<modifier>[^0-9]+)(?P<number>[0-9]*)")


class FormatError(Exception):
    """Raised when a version string cannot be parsed.

    Attributes:
        segment: The offending part of the version string
        version: The whole version string
        message: Human readable description
    """

    def __init__(self, segment: str, version: str, message: str = ""):
        self.segment = segment
        self.version = version
        self.message = message or (
            f"Failed to parse version part {segment!r} (whole version text: {version!r})"
        )
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class SemanticVersion:
    """A comparable, generalised semantic version.

    Each part contributes to the ranking with decreasing priority from left
    to right. Equality and hashing look at the parts only; build metadata is
    carried for rendering.

    Attributes:
        parts: Parsed version parts, most significant first
        build_metadata: Text after ``+`` in the original string
    """

    parts: tuple[VersionPart, ...] = ()
    build_metadata: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parts", tuple(self.parts))

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        return parse_version(text)

    @classmethod
    def release(cls, *values: int) -> "SemanticVersion":
        return release(*values)

    def compare(self, other: "SemanticVersion") -> int:
        """Compare with another version.

        Parts are compared pairwise from the left; the first difference
        decides. If one version is a prefix of the other, the shorter one is
        lesser (``1.2`` < ``1.2.0``).

        Returns:
            -1, 0 or 1
        """
        for mine, theirs in zip(self.parts, other.parts):
            result = compare_parts(mine, theirs)
            if result:
                return result
        return (len(self.parts) > len(other.parts)) - (len(self.parts) < len(other.parts))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) >= 0

    def take(self, count: int) -> "SemanticVersion":
        """Return a version made of the first ``count`` parts, without build metadata."""
        return SemanticVersion(self.parts[: max(count, 0)])

    def starts_with(self, other: "SemanticVersion") -> bool:
        """Return True if ``other``'s parts are an exact prefix of this version's parts."""
        if len(other.parts) > len(self.parts):
            return False
        return self.parts[: len(other.parts)] == other.parts

    @property
    def is_prerelease(self) -> bool:
        """Return True if any part carries a modifier."""
        return any(isinstance(part, TextPart) for part in self.parts)

    def render(self) -> str:
        """Return the display form, e.g. ``1.12.v2-rc1+build.5``."""
        main = ".".join(part.display for part in self.parts)
        if self.build_metadata.strip():
            return f"{main}+{self.build_metadata}"
        return main

    def __str__(self) -> str:
        return self.render()


def _parse_int(segment: str, version: str) -> int:
    if not _DIGITS.fullmatch(segment):
        raise FormatError(
            segment,
            version,
            f"Failed to parse version part as integer: {segment!r} (whole version text: {version!r})",
        )
    return int(segment)


def _parse_text_part(segment: str, separator: str, version: str) -> TextPart:
    number, modifier_text = segment.split(separator, 1)
    value = _parse_int(number, version)

    match = _MODIFIER_PATTERN.fullmatch(modifier_text)
    if not match:
        raise FormatError(
            segment,
            version,
            f"Failed to split text version part {segment!r} into number and modifier "
            f"(whole version text: {version!r})",
        )

    digits = match.group("number")
    return TextPart(
        value=value,
        separator=separator,
        modifier=match.group("modifier"),
        modifier_number=int(digits) if digits else None,
    )


def _parse_part(segment: str, version: str) -> VersionPart:
    for separator in SEPARATORS:
        if separator in segment:
            return _parse_text_part(segment, separator, version)

    match = _RELEASE_PATTERN.fullmatch(segment)
    if not match:
        raise FormatError(
            segment,
            version,
            f"Failed to parse version part as integer: {segment!r} (whole version text: {version!r})",
        )
    return ReleasePart(value=int(match.group("value")), display=segment)


def parse_version(text: str) -> SemanticVersion:
    """Parse a version string into a comparable SemanticVersion.

    Args:
        text: Version string, e.g. "1.12.2", "1.0-rc1", "14.v8.1+build.7"

    Returns:
        A SemanticVersion with one part per period-delimited segment

    Raises:
        FormatError: If any segment is neither numeric nor number-separator-modifier

    Examples:
        >>> parse_version("1.12.2").render()
        '1.12.2'
        >>> parse_version("1.0-rc1") < parse_version("1.0")
        True
        >>> parse_version("1.0+abc") == parse_version("1.0+xyz")
        True
    """
    if not isinstance(text, str):
        raise FormatError(
            str(text), str(text), f"Version must be a string, got {type(text).__name__}"
        )

    main, _, metadata = text.partition("+")
    parts = [_parse_part(segment, text) for segment in main.split(".")]
    return SemanticVersion(tuple(parts), metadata)


def release(*values: int) -> SemanticVersion:
    """Create a release version with one numeric part per value.

    Examples:
        >>> str(release(1, 12, 2))
        '1.12.2'
    """
    return SemanticVersion(tuple(ReleasePart(value, str(value)) for value in values))


def is_valid_version(text: str) -> bool:
    """Check if a string can be parsed as a version.

    Examples:
        >>> is_valid_version("1.0-rc1")
        True
        >>> is_valid_version("1..2")
        False
    """
    try:
        parse_version(text)
    except FormatError:
        return False
    return True
