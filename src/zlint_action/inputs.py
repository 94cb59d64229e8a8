# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Action input ingestion following the GitHub Actions ``INPUT_*`` convention."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict

YES_LITERALS: Final[frozenset[str]] = frozenset({"yes", "y", "true", "1"})

BINARY_INPUT: Final[str] = "binary"
VERSION_INPUT: Final[str] = "version"
DIFF_ONLY_INPUT: Final[str] = "diff-only"
DEFAULT_VERSION: Final[str] = "latest"

InputLookup = Callable[[str], str]


def input_env_name(name: str) -> str:
    """Return the environment variable the runner uses for input ``name``."""

    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, env: Mapping[str, str] | None = None) -> str:
    """Return the trimmed value of input ``name`` or an empty string when unset.

    Args:
        name: Input name as declared in ``action.yml``.
        env: Environment mapping consulted instead of :data:`os.environ`.

    Returns:
        str: Input value with surrounding whitespace removed.
    """

    source = os.environ if env is None else env
    return source.get(input_env_name(name), "").strip()


def is_yes(value: str) -> bool:
    """Return ``True`` when ``value`` is one of the accepted affirmative tokens."""

    return bool(value) and value.lower() in YES_LITERALS


class ActionInputs(BaseModel):
    """Raw action inputs prior to validation."""

    model_config = ConfigDict(frozen=True)

    binary: str = ""
    version: str = DEFAULT_VERSION
    diff_only: bool = False

    @classmethod
    def from_lookup(cls, lookup: InputLookup) -> ActionInputs:
        """Read every input through ``lookup``.

        Args:
            lookup: Callable returning the raw string for an input name.

        Returns:
            ActionInputs: Inputs with defaults applied for empty values.
        """

        return cls(
            binary=lookup(BINARY_INPUT),
            version=lookup(VERSION_INPUT) or DEFAULT_VERSION,
            diff_only=is_yes(lookup(DIFF_ONLY_INPUT)),
        )

    @classmethod
    def from_environment(cls, env: Mapping[str, str] | None = None) -> ActionInputs:
        """Read every input from ``INPUT_*`` environment variables."""

        return cls.from_lookup(lambda name: get_input(name, env))


__all__ = [
    "ActionInputs",
    "BINARY_INPUT",
    "DEFAULT_VERSION",
    "DIFF_ONLY_INPUT",
    "VERSION_INPUT",
    "InputLookup",
    "YES_LITERALS",
    "get_input",
    "input_env_name",
    "is_yes",
]
