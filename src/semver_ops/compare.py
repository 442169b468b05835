# SPDX-License-Identifier: MIT
"""Version precedence and operator constraint checks.

Build metadata is ignored in comparisons per SemVer spec. Pre-release
identifiers are compared as plain ASCII strings, so numeric identifiers are
NOT compared numerically ("10" < "2").
"""

from __future__ import annotations

from itertools import zip_longest
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .semver import Version


def compare_prerelease(pre1: str, pre2: str) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    A version without pre-release has higher precedence than one with
    pre-release (1.0.0 > 1.0.0-alpha). The shorter identifier list is padded
    with empty strings, which sort before any identifier, so alpha.1.1 >
    alpha.1.

    Examples:
        >>> compare_prerelease("rc", "alpha.1.1")
        1
        >>> compare_prerelease("alpha.1", "alpha.alpha.1")
        -1
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    for p1, p2 in zip_longest(pre1.split("."), pre2.split("."), fillvalue=""):
        if p1 != p2:
            return 1 if p1 > p2 else -1

    return 0


def compare_versions(v1: Version, v2: Version) -> int:
    """Compare the precedence of two versions.

    Args:
        v1: First version
        v2: Second version

    Returns:
        -1 if v1 < v2
        0 if v1 == v2
        1 if v1 > v2

    Note:
        Operators and build metadata are ignored.
    """
    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    return compare_prerelease(v1.prerelease, v2.prerelease)


def op_compare(constraint: Version, candidate: Version) -> bool:
    """Check whether ``candidate`` satisfies the operator on ``constraint``.

    The constraint is read as a requirement, so ``>v1.0.0`` is satisfied by
    ``v1.1.0``. Operators are interpreted with the constraint's own grammar
    and tested in the order: none, GTE, GT, LTE, LT. An operator matching
    none of them is never satisfied.

    Args:
        constraint: Version carrying the operator
        candidate: Version to test, its operator is ignored

    Returns:
        True if the candidate satisfies the constraint
    """
    result = compare_versions(constraint, candidate)
    ops = constraint.grammar.operators

    if constraint.operator == "":
        return result == 0
    if constraint.operator == ops.gte:
        return result <= 0
    if constraint.operator == ops.gt:
        return result < 0
    if constraint.operator == ops.lte:
        return result >= 0
    if constraint.operator == ops.lt:
        return result > 0
    return False
