# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Assemble the immutable run configuration from the action inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .inputs import ActionInputs
from .locator import BinaryLocator, BinaryRequest
from .logging import ActionLogger


class Configuration(BaseModel):
    """Resolved settings consumed by the lint orchestrator."""

    model_config = ConfigDict(frozen=True)

    binary: Path
    diff_only: bool = False


def assemble_configuration(
    inputs: ActionInputs,
    *,
    locator: BinaryLocator,
    logger: ActionLogger,
) -> Configuration:
    """Resolve ``inputs`` into a :class:`Configuration`.

    An explicit ``binary`` input takes precedence and the ``version`` input
    is ignored; otherwise the requested release is downloaded. The binary is
    verified before the configuration is built.

    Args:
        inputs: Raw action inputs.
        locator: Locator used to verify or download the binary.
        logger: Sink receiving the ``Configuring ZLint`` group.

    Returns:
        Configuration: Settings pointing at a verified executable.
    """

    with logger.group("Configuring ZLint"):
        request = BinaryRequest(binary=inputs.binary, version=inputs.version)
        binary = locator.locate(request)
        return Configuration(binary=binary, diff_only=inputs.diff_only)


__all__ = ["Configuration", "assemble_configuration"]
