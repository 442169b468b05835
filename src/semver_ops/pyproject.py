# SPDX-License-Identifier: MIT
"""Load custom operator syntax from a pyproject.toml file.

Example configuration::

    [tool.semver-ops]
    operator-pattern = "[\\\\+|-]+=?"

    [tool.semver-ops.operators]
    gt = "+"
    gte = "+="
    lt = "-"
    lte = "-="

Operators that are not listed keep their default symbol.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .grammar import (
    DEFAULT_GRAMMAR,
    DEFAULT_OPERATOR_PATTERN,
    DEFAULT_OPERATORS,
    Grammar,
    GrammarError,
    Operator,
    Operators,
    config,
)

TOOL_SECTION = "semver-ops"


class GrammarConfigError(GrammarError):
    """Raised when grammar configuration in pyproject.toml is invalid."""

    def __init__(self, message: str, pattern: str = ""):
        super().__init__(pattern, message)


def _string_setting(table: dict[str, Any], key: str, default: str) -> str:
    value = table.get(key, default)
    if not isinstance(value, str):
        raise GrammarConfigError(
            f"[tool.{TOOL_SECTION}] {key} must be a string, got {type(value).__name__}"
        )
    return value


def grammar_from_pyproject_dict(pyproject: dict[str, Any]) -> Grammar:
    """Build a Grammar from a parsed pyproject.toml dictionary.

    Args:
        pyproject: Parsed pyproject.toml as a dictionary

    Returns:
        DEFAULT_GRAMMAR if there is no [tool.semver-ops] section, otherwise
        a grammar built from its settings

    Raises:
        GrammarConfigError: If a setting has the wrong type
        GrammarError: If the operator pattern is not a valid expression
    """
    tool = pyproject.get("tool", {})
    if not isinstance(tool, dict):
        raise GrammarConfigError("[tool] must be a table")

    section = tool.get(TOOL_SECTION)
    if section is None:
        return DEFAULT_GRAMMAR
    if not isinstance(section, dict):
        raise GrammarConfigError(f"[tool.{TOOL_SECTION}] must be a table")

    operator_table = section.get("operators", {})
    if not isinstance(operator_table, dict):
        raise GrammarConfigError(f"[tool.{TOOL_SECTION}.operators] must be a table")

    operators = Operators(
        gt=Operator(_string_setting(operator_table, "gt", DEFAULT_OPERATORS.gt)),
        gte=Operator(_string_setting(operator_table, "gte", DEFAULT_OPERATORS.gte)),
        lt=Operator(_string_setting(operator_table, "lt", DEFAULT_OPERATORS.lt)),
        lte=Operator(_string_setting(operator_table, "lte", DEFAULT_OPERATORS.lte)),
    )
    pattern = _string_setting(section, "operator-pattern", DEFAULT_OPERATOR_PATTERN)

    return config(operators, pattern)


def load_grammar(pyproject_path: str | Path) -> Grammar:
    """Build a Grammar from a pyproject.toml file.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        The configured Grammar

    Raises:
        GrammarConfigError: If the file is not valid TOML or settings are invalid
        FileNotFoundError: If the file does not exist
    """
    path = Path(pyproject_path)
    if not path.exists():
        raise FileNotFoundError(f"pyproject.toml not found: {path}")

    try:
        with open(path, "rb") as f:
            pyproject = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise GrammarConfigError(f"Invalid TOML syntax: {e}") from e

    return grammar_from_pyproject_dict(pyproject)
