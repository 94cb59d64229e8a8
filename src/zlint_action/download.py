# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fetch release artifacts over HTTPS into the runner's temporary directory."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
import uuid
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

import requests

from .errors import DownloadError

RUNNER_TEMP_ENV: Final[str] = "RUNNER_TEMP"
DOWNLOAD_TIMEOUT: Final[int] = 60
CHUNK_SIZE: Final[int] = 64 * 1024

Downloader = Callable[[str], Path]

LOGGER = logging.getLogger(__name__)


def download_directory(env: Mapping[str, str] | None = None) -> Path:
    """Return the directory downloads are written to.

    Args:
        env: Environment mapping consulted instead of :data:`os.environ`.

    Returns:
        Path: ``RUNNER_TEMP`` when set, otherwise the system temporary directory.
    """

    source = os.environ if env is None else env
    runner_temp = source.get(RUNNER_TEMP_ENV)
    return Path(runner_temp) if runner_temp else Path(tempfile.gettempdir())


def fetch_artifact(url: str, *, destination_dir: Path | None = None, timeout: int = DOWNLOAD_TIMEOUT) -> Path:
    """Download ``url`` to a uniquely named file and return its path.

    A single attempt is made; any transport or HTTP error is fatal.

    Args:
        url: Artifact download URL.
        destination_dir: Directory receiving the file. Defaults to
            :func:`download_directory`.
        timeout: Connect/read timeout in seconds applied to the request.

    Returns:
        Path: Location of the downloaded file.

    Raises:
        DownloadError: If the request fails, the response is not successful,
            or the file cannot be written.
    """

    directory = destination_dir or download_directory()
    destination = directory / str(uuid.uuid4())
    LOGGER.debug("downloading %s to %s", url, destination)
    try:
        directory.mkdir(parents=True, exist_ok=True)
        with requests.get(url, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            with destination.open("wb") as handle:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        handle.write(chunk)
    except (requests.RequestException, OSError) as exc:
        _discard(destination)
        raise DownloadError(f"Failed to download {url}: {exc}", url=url) from exc
    return destination


def _discard(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError:
        LOGGER.debug("could not remove partial download %s", path)


def make_executable(path: Path) -> None:
    """Set executable permissions on ``path`` for user/group/other."""

    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


__all__ = ["Downloader", "download_directory", "fetch_artifact", "make_executable"]
