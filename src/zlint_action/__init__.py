# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""GitHub Action that downloads ZLint and runs it against a repository."""

from __future__ import annotations

from .action import run_action
from .config import Configuration, assemble_configuration
from .context import EventContext
from .errors import (
    ActionError,
    BaseRefError,
    BinaryNotExecutableError,
    BinaryNotFoundError,
    ConfigError,
    DownloadError,
    GitFetchError,
    InvalidVersionError,
    UnsupportedPlatformError,
)
from .inputs import ActionInputs
from .locator import BinaryLocator, BinaryRequest

__all__ = [
    "ActionError",
    "ActionInputs",
    "BaseRefError",
    "BinaryLocator",
    "BinaryNotExecutableError",
    "BinaryNotFoundError",
    "BinaryRequest",
    "ConfigError",
    "Configuration",
    "DownloadError",
    "EventContext",
    "GitFetchError",
    "InvalidVersionError",
    "UnsupportedPlatformError",
    "assemble_configuration",
    "run_action",
]
