# SPDX-License-Identifier: MIT
"""Semantic version parsing with an optional comparison operator prefix.

Supports ``[operator][v]MAJOR.MINOR.PATCH`` with optional pre-release and
build metadata:
- Operator: >, >=, <, <= (or a custom set, see :func:`semver_ops.config`)
- Pre-release: -alpha, -alpha.1, -rc-2
- Build metadata: +build, +build.123, +20240101

Parsing never fails. Input that does not match the grammar becomes the zero
version ``v0.0.0`` with no operator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .compare import compare_versions, op_compare
from .grammar import DEFAULT_GRAMMAR, GROUP_COUNT, Grammar, Operator

logger = logging.getLogger(__name__)

# Numeric components are unsigned 16-bit; larger values saturate.
MAX_COMPONENT = 0xFFFF


class SemVerString(str):
    """A version string with an optional comparison operator.

    For example ``>=v1.3.1``, ``<=v3.0.0``, ``>1.0.2`` or ``0.0.1-alpha``.
    The leading "v" is optional.

    Being a plain ``str`` subclass it can be stored in and loaded from any
    format that handles strings, including pydantic models.
    """

    __slots__ = ()

    def get(self, grammar: Optional[Grammar] = None) -> "Version":
        """Parse this string into a Version.

        Args:
            grammar: Grammar to parse with, defaults to DEFAULT_GRAMMAR

        Returns:
            The parsed Version, or the zero version if the string does not match
        """
        return parse_version(self, grammar)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(),
            serialization=core_schema.to_string_ser_schema(),
        )


@dataclass(frozen=True, slots=True)
class Version:
    """A parsed semantic version augmented with a comparison operator.

    Attributes:
        operator: Operator text as matched, empty for an exact version
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Pre-release identifiers after "-", empty if none
        metadata: Build metadata after "+", empty if none. Never compared.
        grammar: Grammar the version was parsed with, used to interpret
            ``operator``. Excluded from equality and hashing.
    """

    operator: str = ""
    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: str = ""
    metadata: str = ""
    grammar: Grammar = field(default=DEFAULT_GRAMMAR, compare=False, repr=False)

    def __str__(self) -> str:
        """Return the version as ``v{major}.{minor}.{patch}[-pre][+meta]``."""
        version = f"v{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.metadata:
            version += f"+{self.metadata}"
        return version

    def string(self) -> str:
        """Return the version without its operator."""
        return str(self)

    def to_string(self) -> SemVerString:
        """Return the version with its operator, e.g. ``>=v1.2.3-pre+meta``.

        Parsing the result with the same grammar gives back an equal Version.
        """
        return SemVerString(f"{self.operator}{self}")

    @property
    def build_metadata(self) -> str:
        return self.metadata

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease != ""

    @property
    def base_version(self) -> str:
        """Return the version without operator, pre-release or build metadata."""
        return f"v{self.major}.{self.minor}.{self.patch}"

    def compare(self, other: Version) -> int:
        """Compare precedence with another version.

        Returns:
            1 if this version is greater, -1 if it is lower, 0 if equal.
            Operators and build metadata are ignored.
        """
        return compare_versions(self, other)

    def op_compare(self, other: Version) -> bool:
        """Check ``other`` against this version's operator.

        With no operator this is an equality check. Any operator on ``other``
        is ignored, and an operator not in this version's grammar is never
        satisfied.

        Examples:
            >>> parse_version(">=v1.0.0").op_compare(parse_version("v1.1.0"))
            True
        """
        return op_compare(self, other)


ZERO_VERSION = Version()


def _component(digits: str) -> int:
    return min(int(digits), MAX_COMPONENT)


def parse_version(version_string: str, grammar: Optional[Grammar] = None) -> Version:
    """Parse a version string, with optional operator, into a Version.

    Args:
        version_string: A string such as ``>=v1.2.3-alpha.1+build.5``
        grammar: Grammar to parse with, defaults to DEFAULT_GRAMMAR

    Returns:
        A Version with parsed components. Strings that do not match the
        grammar give the zero version (v0.0.0, no operator).

    Examples:
        >>> parse_version(">=v1.2.3-pre+meta")
        Version(operator='>=', major=1, minor=2, patch=3, prerelease='pre', metadata='meta')

        >>> parse_version("nosemver")
        Version(operator='', major=0, minor=0, patch=0, prerelease='', metadata='')
    """
    grammar = grammar if grammar is not None else DEFAULT_GRAMMAR

    if not isinstance(version_string, str):
        logger.debug("Not a version string: %r", version_string)
        return Version(grammar=grammar)

    match = grammar.match(version_string)
    if match is None or len(match.groups()) != GROUP_COUNT:
        logger.debug("No version match for %r, using v0.0.0", version_string)
        return Version(grammar=grammar)

    operator, major, minor, patch, prerelease, metadata = match.groups()
    return Version(
        operator=Operator(operator or ""),
        major=_component(major),
        minor=_component(minor),
        patch=_component(patch),
        prerelease=prerelease or "",
        metadata=metadata or "",
        grammar=grammar,
    )
