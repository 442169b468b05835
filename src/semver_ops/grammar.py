# SPDX-License-Identifier: MIT
"""Operator syntax and the regular expression grammar used to parse versions.

A grammar pairs a set of comparison operator symbols with a compiled pattern
recognizing ``<optional operator><semver body>``. The semver body is fixed;
only the operator fragment and its symbols can be customized.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import NewType, Optional

logger = logging.getLogger(__name__)

Operator = NewType("Operator", str)

# https://semver.org with an optional "v" prefix. Dots are left unescaped.
SEMVER_BODY = (
    r"(?:v)?([\d]+).([\d]+).([\d]+)"
    r"(?:-((?:[.|-]?[\d\w]+)+))?"
    r"(?:\+)?((?:[.|-]?[\d\w]+)+)?"
)

DEFAULT_OPERATOR_PATTERN = r"[>|<]+=?"

# operator prefix, major, minor, patch, pre-release, build metadata
GROUP_COUNT = 6


class GrammarError(Exception):
    """Raised when a grammar cannot be built from the supplied operator syntax."""

    def __init__(self, pattern: str, message: str = ""):
        self.pattern = pattern
        self.message = message or f"Invalid operator pattern: {pattern!r}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Operators:
    """Operator symbols for each comparison role.

    Attributes:
        gt: Greater than symbol
        gte: Greater than or equal to symbol
        lt: Less than symbol
        lte: Less than or equal to symbol
    """

    gt: Operator
    gte: Operator
    lt: Operator
    lte: Operator


DEFAULT_OPERATORS = Operators(
    gt=Operator(">"),
    gte=Operator(">="),
    lt=Operator("<"),
    lte=Operator("<="),
)


@dataclass(frozen=True, slots=True)
class Grammar:
    """A compiled version grammar.

    Build instances with :func:`config`; the constructor does not validate.

    Attributes:
        operators: Symbols used to interpret a parsed operator
        operator_pattern: The operator fragment, without anchors
        pattern: The compiled ``^(operator)?body$`` expression
    """

    operators: Operators
    operator_pattern: str
    pattern: re.Pattern[str]

    def match(self, raw: str) -> Optional[re.Match[str]]:
        """Return the first line of ``raw`` matching the grammar, if any."""
        return self.pattern.search(raw)


def _strip_anchors(operator_pattern: str) -> str:
    if operator_pattern.startswith("^"):
        operator_pattern = operator_pattern[1:]
    if operator_pattern.endswith("$"):
        operator_pattern = operator_pattern[:-1]
    return operator_pattern


def config(operators: Operators, operator_pattern: str) -> Grammar:
    """Build a grammar with custom operator syntax.

    The operator fragment is combined with the semver body as
    ``^(operator_pattern)?body$``. Any ``^`` or ``$`` anchors on the
    fragment are removed first.

    Args:
        operators: Symbols mapped to the four comparison roles
        operator_pattern: Regular expression fragment matching operator text

    Returns:
        A ready to use Grammar

    Raises:
        GrammarError: If the fragment is not a valid regular expression or
            introduces its own capture groups

    Examples:
        >>> grammar = config(
        ...     Operators(gt="+", gte="+=", lt="-", lte="-="), r"[\\+|-]+=?"
        ... )
        >>> grammar.operators.gte
        '+='
    """
    fragment = _strip_anchors(operator_pattern)
    source = f"^({fragment})?{SEMVER_BODY}$"

    try:
        compiled = re.compile(source, re.MULTILINE | re.ASCII)
    except re.error as e:
        raise GrammarError(operator_pattern, f"Invalid operator pattern {operator_pattern!r}: {e}") from e

    if compiled.groups != GROUP_COUNT:
        raise GrammarError(
            operator_pattern,
            f"Operator pattern {operator_pattern!r} must not contain capture groups, "
            "use (?:...) for grouping",
        )

    logger.debug("Compiled version grammar %r for operators %r", source, operators)
    return Grammar(operators=operators, operator_pattern=fragment, pattern=compiled)


DEFAULT_GRAMMAR = config(DEFAULT_OPERATORS, DEFAULT_OPERATOR_PATTERN)
