# SPDX-License-Identifier: MIT
"""Integration test: check dependency versions against a sample project.

This test verifies the compatibility check flow:
- Requirements load from [tool.relaxed-semver.requirements] in pyproject.toml
- Installed versions are parsed from free-form version strings
- Unsatisfied requirements are reported by name
"""

from pathlib import Path

import pytest

from relaxed_semver import RequirementsConfig, max_version, parse_version


class TestSampleModCompatibility:
    """Integration tests for checking the sample project's dependencies."""

    @pytest.fixture
    def config(self) -> RequirementsConfig:
        """Load requirements from the sample project."""
        return RequirementsConfig.from_pyproject(
            Path(__file__).parent / "sample_mod" / "pyproject.toml"
        )

    def test_loads_all_requirements(self, config: RequirementsConfig):
        assert set(config.requirements) == {"minecraft", "forge", "mixin"}

    def test_compatible_environment(self, config: RequirementsConfig):
        installed = {
            "minecraft": "1.12.2",
            "forge": "14.23.5.2860",
            "mixin": "0.8.2+git.abc123",
        }
        assert config.unsatisfied(installed) == []

    def test_incompatible_environment(self, config: RequirementsConfig):
        installed = {
            "minecraft": "1.16.5",
            "forge": "14.23.5-rc1",
            "mixin": "0.7.11-SNAPSHOT",
        }
        failing = sorted(requirement.name for requirement in config.unsatisfied(installed))
        assert failing == ["forge", "minecraft", "mixin"]

    def test_snapshot_minimum(self, config: RequirementsConfig):
        """Test that a snapshot minimum admits its release candidates."""
        assert config.check("mixin", "0.8-rc1")
        assert config.check("mixin", "0.8-SNAPSHOT")
        assert not config.check("mixin", "0.8-alpha1")

    def test_vendor_prefixed_forge_version(self, config: RequirementsConfig):
        """Test that a v-prefixed part counts as its number."""
        assert config.check("forge", "14.v23.5")

    def test_pick_newest_compatible(self, config: RequirementsConfig):
        """Test that 15.0-pre1 ranks above an exclusive maximum of 15."""
        available = ["14.23.4", "14.23.5.2847", "14.23.5.2860", "15.0-pre1", "15.0"]
        compatible = [v for v in available if config.check("forge", v)]
        assert "15.0-pre1" not in compatible
        assert max_version(compatible) == parse_version("14.23.5.2860")
