# SPDX-License-Identifier: MIT
"""Version requirements for compatibility checks.

Requirements are declared in pyproject.toml:

    [tool.relaxed-semver.requirements]
    minecraft = "1.12"
    forge = { minimum = "14.23.5", maximum = "15" }
    mixin = { prefix = "0.8" }

A plain string is a minimum version. ``minimum`` is inclusive, ``maximum``
is exclusive and ``prefix`` restricts to one version family.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .semver import FormatError, SemanticVersion, parse_version

logger = logging.getLogger(__name__)

TOOL_TABLE = "relaxed-semver"

_BOUND_KEYS = ("minimum", "maximum", "prefix")


class RequirementError(Exception):
    """Raised when requirement configuration is invalid."""

    pass


@dataclass(frozen=True)
class VersionRequirement:
    """A constraint on the versions of a named dependency.

    Attributes:
        name: Dependency name
        minimum: Lowest accepted version (inclusive)
        maximum: First rejected version (exclusive)
        prefix: Accepted versions must start with these parts
    """

    name: str
    minimum: Optional[SemanticVersion] = None
    maximum: Optional[SemanticVersion] = None
    prefix: Optional[SemanticVersion] = None

    def __post_init__(self) -> None:
        if self.minimum is not None and self.maximum is not None and self.minimum >= self.maximum:
            raise RequirementError(
                f"Requirement {self.name!r}: minimum {self.minimum} is not below maximum {self.maximum}"
            )

    def is_satisfied_by(self, version: Union[str, SemanticVersion]) -> bool:
        """Check whether a version meets this requirement.

        Raises:
            FormatError: If ``version`` is a malformed string
        """
        if isinstance(version, str):
            version = parse_version(version)
        if self.minimum is not None and version < self.minimum:
            return False
        if self.maximum is not None and version >= self.maximum:
            return False
        if self.prefix is not None and not version.starts_with(self.prefix):
            return False
        return True

    def describe(self) -> str:
        """Return the constraint as text, e.g. ``>=1.12, <1.13``."""
        constraints = []
        if self.minimum is not None:
            constraints.append(f">={self.minimum}")
        if self.maximum is not None:
            constraints.append(f"<{self.maximum}")
        if self.prefix is not None:
            constraints.append(f"=={self.prefix}.*")
        return ", ".join(constraints) or "*"

    def __str__(self) -> str:
        return f"{self.name} {self.describe()}"


def _parse_bound(name: str, key: str, value: Any) -> SemanticVersion:
    if not isinstance(value, str):
        raise RequirementError(
            f"Requirement {name!r}: {key} must be a string, got {type(value).__name__}"
        )
    try:
        return parse_version(value)
    except FormatError as e:
        raise RequirementError(f"Requirement {name!r}: invalid {key} version: {e.message}") from e


def _parse_requirement(name: str, entry: Any) -> VersionRequirement:
    if isinstance(entry, str):
        return VersionRequirement(name, minimum=_parse_bound(name, "minimum", entry))

    if not isinstance(entry, dict):
        raise RequirementError(
            f"Requirement {name!r} must be a version string or a table, got {type(entry).__name__}"
        )

    unknown = sorted(set(entry) - set(_BOUND_KEYS))
    if unknown:
        raise RequirementError(f"Requirement {name!r} has unknown keys: {', '.join(unknown)}")

    bounds = {key: _parse_bound(name, key, entry[key]) for key in _BOUND_KEYS if key in entry}
    return VersionRequirement(name, **bounds)


@dataclass
class RequirementsConfig:
    """Named version requirements loaded from configuration.

    Attributes:
        requirements: Requirements keyed by dependency name
    """

    requirements: dict[str, VersionRequirement] = field(default_factory=dict)

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "RequirementsConfig":
        """Create a RequirementsConfig from a pyproject.toml file.

        Args:
            pyproject_path: Path to pyproject.toml

        Returns:
            RequirementsConfig instance

        Raises:
            RequirementError: If the file or a requirement is invalid
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(pyproject_path)
        if not path.exists():
            raise FileNotFoundError(f"pyproject.toml not found: {path}")

        try:
            with open(path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise RequirementError(f"Invalid TOML syntax: {e}") from e

        logger.debug("Loading version requirements from %s", path)
        return cls.from_pyproject_dict(pyproject)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "RequirementsConfig":
        """Create a RequirementsConfig from a parsed pyproject.toml dictionary.

        Raises:
            RequirementError: If a requirement is invalid
        """
        tool = pyproject.get("tool", {})
        if not isinstance(tool, dict):
            raise RequirementError("[tool] must be a table")

        tool_semver = tool.get(TOOL_TABLE, {})
        if not isinstance(tool_semver, dict):
            raise RequirementError(f"[tool.{TOOL_TABLE}] must be a table")

        table = tool_semver.get("requirements", {})
        if not isinstance(table, dict):
            raise RequirementError(f"[tool.{TOOL_TABLE}.requirements] must be a table")

        requirements = {name: _parse_requirement(name, entry) for name, entry in table.items()}
        for requirement in requirements.values():
            logger.debug("Loaded requirement %s", requirement)
        return cls(requirements=requirements)

    def check(self, name: str, version: Union[str, SemanticVersion]) -> bool:
        """Check a dependency version. Names without a requirement always pass.

        Raises:
            FormatError: If ``version`` is a malformed string, whatever the name
        """
        if isinstance(version, str):
            version = parse_version(version)
        requirement = self.requirements.get(name)
        if requirement is None:
            return True
        return requirement.is_satisfied_by(version)

    def unsatisfied(
        self, versions: Mapping[str, Union[str, SemanticVersion]]
    ) -> list[VersionRequirement]:
        """Return the requirements not met by the given dependency versions.

        Dependencies missing from ``versions`` are not reported.

        Raises:
            FormatError: If any version string is malformed
        """
        return [
            self.requirements[name]
            for name, version in versions.items()
            if not self.check(name, version)
        ]
