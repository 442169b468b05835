# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing and comparison.

These tests verify that:
- The leading "v" never changes the parsed version
- Rendering with to_string and parsing again is lossless
- compare is reflexive, antisymmetric and transitive
- Unmapped operators are never satisfied
"""

from __future__ import annotations

from hypothesis import given, strategies as st

from semver_ops import (
    MAX_COMPONENT,
    SemVerString,
    compare_prerelease,
    compare_versions,
    parse_version,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

components = st.integers(min_value=0, max_value=MAX_COMPONENT)

triples = st.tuples(components, components, components)

# Dot or hyphen separated alphanumeric identifiers
identifiers = st.from_regex(r"[0-9A-Za-z]{1,8}(?:[.\-][0-9A-Za-z]{1,8}){0,3}", fullmatch=True)

optional_identifiers = st.one_of(st.just(""), identifiers)

default_operators = st.sampled_from(["", ">", ">=", "<", "<="])

# Accepted by the default operator pattern but not one of its symbols
unmapped_operators = st.sampled_from([">>", ">>=", "<<", "<<=", "<>", "|", "|=", "><="])


@st.composite
def version_strings(draw, operators=default_operators):
    """Generate an operator-qualified version string."""
    op = draw(operators)
    major, minor, patch = draw(triples)
    prefix = draw(st.sampled_from(["", "v"]))
    raw = f"{op}{prefix}{major}.{minor}.{patch}"
    prerelease = draw(optional_identifiers)
    if prerelease:
        raw += f"-{prerelease}"
    metadata = draw(optional_identifiers)
    if metadata:
        raw += f"+{metadata}"
    return raw


def compare_strings(raw1, raw2):
    return compare_versions(parse_version(raw1), parse_version(raw2))


# =============================================================================
# Parsing properties
# =============================================================================


@given(triples)
def test_v_prefix_optional(triple):
    """Parsing with and without the leading v gives equal versions."""
    major, minor, patch = triple
    with_v = parse_version(f"v{major}.{minor}.{patch}")
    without_v = parse_version(f"{major}.{minor}.{patch}")
    assert with_v == without_v
    assert (with_v.major, with_v.minor, with_v.patch) == triple


@given(version_strings())
def test_round_trip(raw):
    """to_string output parses back to an equal version."""
    v = SemVerString(raw).get()
    assert parse_version(v.to_string()) == v


@given(version_strings())
def test_string_never_has_operator(raw):
    """The plain rendering always starts with v."""
    assert str(parse_version(raw)).startswith("v")


# =============================================================================
# Comparison properties
# =============================================================================


@given(version_strings())
def test_compare_reflexive(raw):
    """Every version compares equal to itself."""
    v = parse_version(raw)
    assert v.compare(v) == 0


@given(version_strings(), version_strings())
def test_compare_antisymmetric(a, b):
    """Swapping arguments flips the sign of the result."""
    assert compare_strings(a, b) == -compare_strings(b, a)


@given(triples, triples, triples)
def test_compare_transitive(a, b, c):
    """Ordering over major.minor.patch is transitive."""
    va, vb, vc = (parse_version("v%d.%d.%d" % t) for t in (a, b, c))
    if va.compare(vb) <= 0 and vb.compare(vc) <= 0:
        assert va.compare(vc) <= 0


@given(triples, triples)
def test_compare_matches_tuple_order(a, b):
    """Without pre-releases, precedence follows integer tuple order."""
    expected = (a > b) - (a < b)
    assert compare_strings("v%d.%d.%d" % a, "v%d.%d.%d" % b) == expected


@given(triples, identifiers)
def test_prerelease_below_release(triple, prerelease):
    """A pre-release always ranks below the same release."""
    base = "v%d.%d.%d" % triple
    assert compare_strings(f"{base}-{prerelease}", base) == -1


@given(identifiers, identifiers)
def test_prerelease_extension_ranks_higher(prerelease, extra):
    """Appending identifiers to a pre-release raises its precedence."""
    assert compare_prerelease(f"{prerelease}.{extra}", prerelease) == 1


@given(triples, optional_identifiers, identifiers, identifiers)
def test_metadata_ignored(triple, prerelease, meta1, meta2):
    """Build metadata never affects precedence."""
    base = "v%d.%d.%d" % triple
    if prerelease:
        base += f"-{prerelease}"
    assert compare_strings(f"{base}+{meta1}", f"{base}+{meta2}") == 0


# =============================================================================
# Operator properties
# =============================================================================


@given(version_strings(operators=unmapped_operators), version_strings())
def test_unmapped_operator_never_satisfied(constraint, candidate):
    """Operators outside the symbol table never match any candidate."""
    v = parse_version(constraint)
    assert v.operator != ""
    assert v.op_compare(parse_version(candidate)) is False


@given(version_strings(operators=st.just("")))
def test_exact_version_satisfied_by_itself(raw):
    """A version without operator is satisfied by an equal version."""
    v = parse_version(raw)
    assert v.op_compare(v) is True
