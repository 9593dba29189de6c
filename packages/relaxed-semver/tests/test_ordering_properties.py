# SPDX-License-Identifier: MIT
"""Property-based tests for version ordering.

These tests verify that:
- Ordering is total, antisymmetric and transitive
- Rendering a canonical version parses back to an equal version
- take() and starts_with() agree with each other
- version_key() sorts the same way as SemanticVersion
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from relaxed_semver import (
    SemanticVersion,
    compare_versions,
    parse_version,
    release,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=30)

modifiers = st.sampled_from(["snapshot", "SNAPSHOT", "rc", "RC", "pre", "alpha", "beta", "foo"])

# Canonical parts: no leading zeros, modifier number absent or present
release_segments = numbers.map(str)
text_segments = st.builds(
    lambda value, sep, modifier, number: f"{value}{sep}{modifier}{'' if number is None else number}",
    numbers,
    st.sampled_from(["-", "_"]),
    modifiers,
    st.one_of(st.none(), numbers),
)
vendor_segments = numbers.map(lambda value: f"v{value}")

segments = st.one_of(release_segments, text_segments, vendor_segments)

version_strings = st.builds(
    lambda parts, metadata: ".".join(parts) + (f"+{metadata}" if metadata else ""),
    st.lists(segments, min_size=1, max_size=5),
    st.one_of(st.just(""), st.from_regex(r"[a-z0-9.]{1,8}", fullmatch=True)),
)

versions = version_strings.map(parse_version)


# =============================================================================
# Ordering laws
# =============================================================================


class TestOrderingProperties:
    """Ordering laws over generated versions."""

    @given(a=versions, b=versions)
    @settings(max_examples=200)
    def test_totality_and_antisymmetry(self, a: SemanticVersion, b: SemanticVersion):
        """Exactly one of a < b, a ranks equal to b, a > b holds."""
        outcomes = [a < b, a.compare(b) == 0, a > b]
        assert outcomes.count(True) == 1
        assert a.compare(b) == -b.compare(a)

    @given(a=versions, b=versions, c=versions)
    @settings(max_examples=200)
    def test_transitivity(self, a: SemanticVersion, b: SemanticVersion, c: SemanticVersion):
        low, mid, high = sorted([a, b, c])
        assert low <= mid <= high
        assert low <= high
        if a < b and b < c:
            assert a < c

    @given(a=versions, b=versions)
    def test_equal_versions_rank_equal(self, a: SemanticVersion, b: SemanticVersion):
        if a == b:
            assert a.compare(b) == 0
            assert hash(a) == hash(b)

    @given(a=versions, b=versions)
    def test_version_key_agrees(self, a: SemanticVersion, b: SemanticVersion):
        key_a, key_b = version_key(a), version_key(b)
        expected = (key_a > key_b) - (key_a < key_b)
        assert compare_versions(a, b) == expected

    @given(values=st.lists(numbers, max_size=5), extra=numbers)
    def test_longer_release_is_greater(self, values: list[int], extra: int):
        assert release(*values) < release(*values, extra)


# =============================================================================
# Rendering and prefix laws
# =============================================================================


class TestRenderProperties:
    """Round trips through render()."""

    @given(text=version_strings)
    @settings(max_examples=200)
    def test_render_reproduces_canonical_input(self, text: str):
        assert parse_version(text).render() == text

    @given(version=versions)
    def test_render_round_trip(self, version: SemanticVersion):
        reparsed = parse_version(version.render())
        assert reparsed == version
        assert reparsed.build_metadata == version.build_metadata


class TestPrefixProperties:
    """take() and starts_with() laws."""

    @given(version=versions, count=st.integers(min_value=0, max_value=6))
    def test_take_is_prefix(self, version: SemanticVersion, count: int):
        prefix = version.take(count)
        assert len(prefix.parts) == min(count, len(version.parts))
        assert version.starts_with(prefix)
        assert prefix <= version

    @given(a=versions, b=versions)
    def test_starts_with_matches_take(self, a: SemanticVersion, b: SemanticVersion):
        assert a.starts_with(b) == (a.take(len(b.parts)) == b)
