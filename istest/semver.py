"""
Semantic Versioning 2.0.0 parsing and precedence.

Grammar: MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]

Precedence rules (https://semver.org/#spec-item-11):
    1. Compare MAJOR, MINOR, PATCH numerically
    2. A release has higher precedence than any of its pre-releases
    3. Pre-release identifiers compare left to right:
       - numeric identifiers compare numerically
       - alphanumeric identifiers compare in ASCII order
       - numeric identifiers rank below alphanumeric ones
       - a shorter list ranks lower when all shared identifiers are equal
    4. Build metadata is ignored
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union


_NUMERIC = r"0|[1-9][0-9]*"
_PRERELEASE_ID = r"(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
_BUILD_ID = r"[0-9a-zA-Z-]+"

SEMVER_PATTERN = re.compile(
    rf"(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?"
    rf"(?:\+(?P<build>{_BUILD_ID}(?:\.{_BUILD_ID})*))?",
    re.ASCII,
)


class VersionParseError(ValueError):
    """Raised when a string is not a valid semantic version."""
    pass


@dataclass(frozen=True)
class SemanticVersion:
    """
    A parsed semantic version.

    Equality and ordering go through ``precedence_key()`` so that build
    metadata never affects comparison.
    """
    major: int
    minor: int
    patch: int
    prerelease: tuple[Union[int, str], ...] = ()
    build: tuple[str, ...] = ()

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def precedence_key(self) -> tuple:
        """
        Sort key implementing SemVer precedence.

        Releases get ``(1,)`` so they sort above every pre-release key
        ``(0, ...)``. Each pre-release identifier becomes ``(0, n, "")``
        when numeric or ``(1, 0, s)`` when alphanumeric.
        """
        if not self.prerelease:
            pre: tuple = (1,)
        else:
            pre = (0, tuple(
                (0, ident, "") if isinstance(ident, int) else (1, 0, ident)
                for ident in self.prerelease
            ))
        return (self.major, self.minor, self.patch, pre)

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(str(i) for i in self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


def parse_version(text: str) -> SemanticVersion:
    """
    Parse a semantic version string.

    Raises:
        VersionParseError: If the string does not match the grammar
    """
    match = SEMVER_PATTERN.fullmatch(text)
    if match is None:
        raise VersionParseError(f"Invalid semantic version: {text!r}")

    prerelease: tuple[Union[int, str], ...] = ()
    if match.group("prerelease"):
        prerelease = tuple(
            int(ident) if ident.isdigit() else ident
            for ident in match.group("prerelease").split(".")
        )

    build: tuple[str, ...] = ()
    if match.group("build"):
        build = tuple(match.group("build").split("."))

    return SemanticVersion(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prerelease=prerelease,
        build=build,
    )


def try_parse_version(text: str) -> Optional[SemanticVersion]:
    """Parse a version, returning None instead of raising."""
    try:
        return parse_version(text)
    except VersionParseError:
        return None


def compare_versions(left: SemanticVersion, right: SemanticVersion) -> int:
    """Return -1, 0 or 1 by SemVer precedence."""
    a, b = left.precedence_key(), right.precedence_key()
    return (a > b) - (a < b)
