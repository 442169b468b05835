# SPDX-License-Identifier: MIT
"""Semantic version parsing and operator comparisons.

This package parses semantic versions following https://semver.org, with an
optional leading comparison operator (``>=v1.2.3``) whose syntax can be
customized for any package manager format.

Example:
    >>> from semver_ops import SemVerString, compare_versions
    >>>
    >>> version = SemVerString(">=v1.2.3-alpha.1+build.456").get()
    >>> version.operator
    '>='
    >>> version.prerelease
    'alpha.1'
    >>>
    >>> version.op_compare(SemVerString("v1.3.0").get())
    True
    >>>
    >>> compare_versions(SemVerString("v3.14.15").get(), SemVerString("3.14.15").get())
    0
"""

__version__ = "0.1.0"

from .grammar import (
    Operator,
    Operators,
    Grammar,
    GrammarError,
    config,
    DEFAULT_GRAMMAR,
    DEFAULT_OPERATORS,
    DEFAULT_OPERATOR_PATTERN,
    SEMVER_BODY,
)
from .semver import (
    Version,
    SemVerString,
    parse_version,
    ZERO_VERSION,
    MAX_COMPONENT,
)
from .compare import (
    compare_versions,
    compare_prerelease,
    op_compare,
)
from .pyproject import (
    GrammarConfigError,
    grammar_from_pyproject_dict,
    load_grammar,
)

__all__ = [
    # Grammar
    "Operator",
    "Operators",
    "Grammar",
    "GrammarError",
    "config",
    "DEFAULT_GRAMMAR",
    "DEFAULT_OPERATORS",
    "DEFAULT_OPERATOR_PATTERN",
    "SEMVER_BODY",
    # Version parsing
    "Version",
    "SemVerString",
    "parse_version",
    "ZERO_VERSION",
    "MAX_COMPONENT",
    # Version comparison
    "compare_versions",
    "compare_prerelease",
    "op_compare",
    # pyproject.toml configuration
    "GrammarConfigError",
    "grammar_from_pyproject_dict",
    "load_grammar",
]
