# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Map the host operating system and CPU onto ZLint release artifact names."""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass
from typing import Final
from urllib.parse import quote

from .errors import UnsupportedPlatformError

REPOSITORY_URL: Final[str] = "https://github.com/DonIsaac/zlint"

OS_ALIASES: Final[dict[str, str]] = {
    "win32": "windows",
    "windows": "windows",
    "darwin": "macos",
    "macos": "macos",
    "linux": "linux",
}

ARCH_ALIASES: Final[dict[str, str]] = {
    "arm64": "aarch64",
    "aarch64": "aarch64",
    "x64": "x86_64",
    "amd64": "x86_64",
    "x86_64": "x86_64",
}


@dataclass(frozen=True, slots=True)
class PlatformTarget:
    """Operating system and architecture pair used in artifact names."""

    os: str
    arch: str

    @property
    def artifact_suffix(self) -> str:
        """Return the ``<os>-<arch>`` suffix of the release artifact."""

        return f"{self.os}-{self.arch}"


def issue_url(title: str) -> str:
    """Return a pre-filled bug report URL for the upstream repository.

    Args:
        title: Issue title describing the problem.

    Returns:
        str: URL opening the bug report template with ``title`` filled in.
    """

    return (
        f"{REPOSITORY_URL}/issues/new?assignees=&labels=C-bug&projects="
        f"&template=bug_report.md&title={quote(title)}"
    )


def host_platform() -> tuple[str, str]:
    """Return the raw ``(platform, machine)`` identifiers of the current host."""

    return sys.platform, platform.machine()


def resolve_platform(host: str | None = None, machine: str | None = None) -> PlatformTarget:
    """Resolve the release target for ``host`` and ``machine``.

    Args:
        host: Raw platform identifier such as ``"linux"`` or ``"win32"``.
            Defaults to the current interpreter's platform.
        machine: Raw CPU identifier such as ``"x86_64"`` or ``"arm64"``.
            Defaults to the current machine.

    Returns:
        PlatformTarget: Normalised OS and architecture pair.

    Raises:
        UnsupportedPlatformError: If either identifier has no ZLint release.
    """

    if host is None or machine is None:
        default_host, default_machine = host_platform()
        host = default_host if host is None else host
        machine = default_machine if machine is None else machine

    raw = f"{host}-{machine}"
    os_name = OS_ALIASES.get(host.lower())
    if os_name is None:
        url = issue_url(f"github actions: OS not supported ({raw})")
        raise UnsupportedPlatformError(
            f"ZLint does not currently support {host} ({raw}). Please open an issue on github: {url}",
            platform=host,
            arch=machine,
        )

    arch = ARCH_ALIASES.get(machine.lower())
    if arch is None:
        url = issue_url(f"github actions: CPU arch not supported ({raw})")
        raise UnsupportedPlatformError(
            f"ZLint does not currently support {machine} ({raw}). Please open an issue on github: {url}",
            platform=host,
            arch=machine,
        )

    return PlatformTarget(os=os_name, arch=arch)


__all__ = ["ARCH_ALIASES", "OS_ALIASES", "PlatformTarget", "host_platform", "issue_url", "resolve_platform"]
