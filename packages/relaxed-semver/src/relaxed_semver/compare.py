# SPDX-License-Identifier: MIT
"""Version comparison helpers.

Ordering: snapshot < rc == pre < release, unknown modifiers below snapshot.
Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from typing import Iterable, Union

from .parts import ReleasePart, VersionPart
from .semver import SemanticVersion, parse_version

VersionLike = Union[str, SemanticVersion]


def _coerce(version: VersionLike) -> SemanticVersion:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or SemanticVersion)
        version2: Second version (string or SemanticVersion)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 rank equally
        1 if version1 > version2

    Raises:
        FormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.12", "1.12.2")
        -1
        >>> compare_versions("1.0-rc1", "1.0-pre1")
        0
        >>> compare_versions("14.v8.1", "14.8.1")
        0
    """
    return _coerce(version1).compare(_coerce(version2))


def _part_key(part: VersionPart) -> tuple:
    # Release parts sort after text parts with the same value
    if isinstance(part, ReleasePart):
        return (part.value, 1)
    number_key = (0,) if part.modifier_number is None else (1, part.modifier_number)
    return (part.value, 0, part.priority, number_key)


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Keys order the same way SemanticVersion does: a key that is a prefix of
    another sorts first, just like the shorter version.

    Examples:
        >>> sorted(["1.0", "1.0-rc1", "1.0-SNAPSHOT", "0.9"], key=version_key)
        ['0.9', '1.0-SNAPSHOT', '1.0-rc1', '1.0']
    """
    return tuple(_part_key(part) for part in _coerce(version).parts)


def max_version(versions: Iterable[VersionLike]) -> SemanticVersion:
    """Return the highest of the given versions.

    Raises:
        ValueError: If no versions are given
        FormatError: If any version string is invalid
    """
    parsed = [_coerce(version) for version in versions]
    if not parsed:
        raise ValueError("max_version() requires at least one version")
    return max(parsed)


def min_version(versions: Iterable[VersionLike]) -> SemanticVersion:
    """Return the lowest of the given versions.

    Raises:
        ValueError: If no versions are given
        FormatError: If any version string is invalid
    """
    parsed = [_coerce(version) for version in versions]
    if not parsed:
        raise ValueError("min_version() requires at least one version")
    return min(parsed)
