# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the ZLint action."""

from __future__ import annotations


class ActionError(Exception):
    """Base class for errors that fail the action run."""


class UnsupportedPlatformError(ActionError):
    """Raised when no ZLint release exists for the host OS or CPU."""

    def __init__(self, message: str, *, platform: str, arch: str) -> None:
        super().__init__(message)
        self.platform = platform
        self.arch = arch


class ConfigError(ActionError):
    """Raised when the action inputs describe an unusable configuration."""


class BinaryNotExecutableError(ConfigError):
    """Raised when a user-supplied binary lacks the owner-execute bit."""


class BinaryNotFoundError(ConfigError):
    """Raised when a user-supplied binary cannot be stat'ed."""


class InvalidVersionError(ConfigError):
    """Raised when a requested release version is malformed."""

    def __init__(self, message: str, *, version: str) -> None:
        super().__init__(message)
        self.version = version


class DownloadError(ActionError):
    """Raised when a release artifact cannot be fetched."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class BaseRefError(ActionError):
    """Raised when diff mode cannot determine the pull request base branch."""


class GitFetchError(ActionError):
    """Raised when fetching the pull request base branch fails."""

    def __init__(self, ref: str, returncode: int) -> None:
        super().__init__(f"Failed to fetch base branch '{ref}': git exited with code {returncode}")
        self.ref = ref
        self.returncode = returncode


__all__ = [
    "ActionError",
    "BaseRefError",
    "BinaryNotExecutableError",
    "BinaryNotFoundError",
    "ConfigError",
    "DownloadError",
    "GitFetchError",
    "InvalidVersionError",
    "UnsupportedPlatformError",
]
