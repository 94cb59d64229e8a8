# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Validation of requested ZLint release versions."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Final, Literal, TypeAlias

from .errors import InvalidVersionError

LATEST: Final = "latest"
VERSION_MARKER: Final[str] = "v"
SEMVER_PATTERN: Final[re.Pattern[str]] = re.compile(r"v([0-9]+)\.([0-9]+)\.([0-9]+)")


@dataclass(frozen=True, slots=True)
class SemanticVersion:
    """Released version identified by a ``major.minor.patch`` triple.

    ``tag`` keeps the release tag exactly as validated so that it is never
    rewritten (``v01.2.3`` stays ``v01.2.3``).
    """

    major: int
    minor: int
    patch: int
    tag: str = field(default="", compare=False)

    def __str__(self) -> str:
        if self.tag:
            return self.tag
        return f"{VERSION_MARKER}{self.major}.{self.minor}.{self.patch}"


Version: TypeAlias = Literal["latest"] | SemanticVersion


def parse_version(raw: str) -> Version:
    """Validate ``raw`` and return the structured version it names.

    ``"latest"`` passes through untouched. Anything else must read
    ``vMAJOR.MINOR.PATCH``; a bare ``MAJOR.MINOR.PATCH`` gets the leading
    ``v`` added first.

    Args:
        raw: Version string supplied by the user.

    Returns:
        Version: ``"latest"`` or the parsed :class:`SemanticVersion`.

    Raises:
        InvalidVersionError: If ``raw`` does not match either accepted form.
    """

    if raw == LATEST:
        return LATEST

    candidate = f"{VERSION_MARKER}{raw}" if raw[:1].isdigit() else raw
    match = SEMVER_PATTERN.fullmatch(candidate)
    if match is None:
        raise InvalidVersionError(
            f"Invalid version: {raw}. Please use 'v.major.minor.patch' or 'latest'.",
            version=raw,
        )
    major, minor, patch = (int(part) for part in match.groups())
    return SemanticVersion(major=major, minor=minor, patch=patch, tag=candidate)


def normalize_version(raw: str) -> str:
    """Return the canonical string form of ``raw`` (see :func:`parse_version`)."""

    return str(parse_version(raw))


__all__ = ["LATEST", "SemanticVersion", "Version", "normalize_version", "parse_version"]
