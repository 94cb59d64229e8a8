# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate a usable ZLint binary: verify a provided one or download a release."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .download import Downloader, fetch_artifact, make_executable
from .errors import BinaryNotExecutableError, BinaryNotFoundError
from .logging import ActionLogger
from .platforms import REPOSITORY_URL, PlatformTarget, resolve_platform
from .versioning import LATEST, Version, parse_version

ARTIFACT_NAME: Final[str] = "zlint"
DOWNLOAD_SOURCE: Final[str] = "github-actions"


@dataclass(frozen=True, slots=True)
class BinaryRequest:
    """What the user asked for: an existing binary path or a release version."""

    binary: str = ""
    version: str = LATEST

    @property
    def uses_existing_binary(self) -> bool:
        return bool(self.binary)


def release_url(version: Version, target: PlatformTarget) -> str:
    """Return the download URL of the ZLint artifact for ``version`` and ``target``.

    Args:
        version: Validated release version.
        target: Resolved platform target.

    Returns:
        str: Release asset URL tagged with the download provenance.
    """

    download_part = "latest/download" if version == LATEST else f"download/{version}"
    return (
        f"{REPOSITORY_URL}/releases/{download_part}/"
        f"{ARTIFACT_NAME}-{target.artifact_suffix}?source={DOWNLOAD_SOURCE}"
    )


def verify_existing_binary(binary_path: Path) -> None:
    """Ensure a binary at ``binary_path`` exists and is executable by its owner.

    Args:
        binary_path: Path to the binary to verify.

    Raises:
        BinaryNotExecutableError: If the file lacks the owner-execute bit.
        BinaryNotFoundError: If the file cannot be stat'ed.
    """

    try:
        mode = binary_path.stat().st_mode
    except OSError as exc:
        raise BinaryNotFoundError(f"Could not find ZLint binary at '{binary_path}'.") from exc
    if not mode & stat.S_IXUSR:
        raise BinaryNotExecutableError(f"ZLint binary at '{binary_path}' is not executable.")


class BinaryLocator:
    """Resolve a :class:`BinaryRequest` to the path of a verified executable."""

    def __init__(
        self,
        logger: ActionLogger,
        *,
        downloader: Downloader = fetch_artifact,
        platform: PlatformTarget | None = None,
    ) -> None:
        self._logger = logger
        self._downloader = downloader
        self._platform = platform

    def locate(self, request: BinaryRequest) -> Path:
        """Return the path of the binary described by ``request``.

        Args:
            request: Binary path or version requested by the user.

        Returns:
            Path: Absolute path of an existing, executable ZLint binary.
        """

        if request.uses_existing_binary:
            return self.use_existing(request.binary)
        return self.download(request.version)

    def use_existing(self, binary: str) -> Path:
        """Verify the user-supplied ``binary`` and return its absolute path."""

        self._logger.info(f"Using existing binary at '{binary}'")
        resolved = Path(os.path.abspath(binary))
        verify_existing_binary(resolved)
        self._logger.info("Binary found")
        return resolved

    def download(self, raw_version: str) -> Path:
        """Download the release named by ``raw_version`` for the host platform.

        Args:
            raw_version: ``"latest"`` or a ``vMAJOR.MINOR.PATCH`` string.

        Returns:
            Path: Downloaded binary with its execute bits set.
        """

        self._logger.info(f"Verifying version: {raw_version}")
        version = parse_version(raw_version)
        target = self._platform or resolve_platform()
        url = release_url(version, target)
        self._logger.info(f"Downloading ZLint binary from {url}")
        binary = self._downloader(url)
        make_executable(binary)
        return binary


__all__ = ["BinaryLocator", "BinaryRequest", "release_url", "verify_existing_binary"]
