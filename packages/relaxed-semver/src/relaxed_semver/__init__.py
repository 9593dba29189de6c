# SPDX-License-Identifier: MIT
"""Relaxed semantic version parsing and comparison.

This package parses free-form version strings that do not strictly follow
MAJOR.MINOR.PATCH into comparable values. Parts may be numeric, carry a
pre-release modifier (snapshot, rc, pre) or use a ``v`` prefix.

Example:
    >>> from relaxed_semver import parse_version, release, compare_versions
    >>>
    >>> version = parse_version("1.12.2-pre3+build.7")
    >>> version.build_metadata
    'build.7'
    >>> version < release(1, 12, 2)
    True
    >>>
    >>> compare_versions("1.0-SNAPSHOT", "1.0-rc1")
    -1
"""

__version__ = "0.1.0"

from .parts import (
    ReleasePart,
    TextPart,
    VersionPart,
    MODIFIER_PRIORITIES,
    UNKNOWN_MODIFIER_PRIORITY,
    compare_parts,
    modifier_priority,
)
from .semver import (
    SemanticVersion,
    parse_version,
    release,
    is_valid_version,
    FormatError,
)
from .compare import (
    compare_versions,
    version_key,
    max_version,
    min_version,
)
from .requirements import (
    VersionRequirement,
    RequirementsConfig,
    RequirementError,
)

__all__ = [
    # Version parts
    "ReleasePart",
    "TextPart",
    "VersionPart",
    "MODIFIER_PRIORITIES",
    "UNKNOWN_MODIFIER_PRIORITY",
    "compare_parts",
    "modifier_priority",
    # Version parsing
    "SemanticVersion",
    "parse_version",
    "release",
    "is_valid_version",
    "FormatError",
    # Version comparison
    "compare_versions",
    "version_key",
    "max_version",
    "min_version",
    # Compatibility checks
    "VersionRequirement",
    "RequirementsConfig",
    "RequirementError",
]
