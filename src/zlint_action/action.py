# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Top-level flow: configure, lint, and translate the outcome into an exit status."""

from __future__ import annotations

import asyncio

from .config import assemble_configuration
from .context import EventContext
from .errors import ActionError
from .inputs import ActionInputs
from .locator import BinaryLocator
from .logging import ActionLogger
from .orchestration import lint_repository


def run_action(
    inputs: ActionInputs,
    *,
    event: EventContext,
    logger: ActionLogger,
    locator: BinaryLocator | None = None,
) -> int:
    """Run the action end to end.

    Configuration errors and filesystem errors abort before any process is
    spawned and are reported with ``set_failed``. Lint failures are reported
    by the orchestrator when they are decided.

    Args:
        inputs: Raw action inputs.
        event: Triggering workflow event.
        logger: Sink for user-facing output.
        locator: Binary locator override; defaults to one bound to ``logger``.

    Returns:
        int: ``0`` when ZLint passed, ``1`` otherwise.
    """

    try:
        config = assemble_configuration(inputs, locator=locator or BinaryLocator(logger), logger=logger)
        outcome = asyncio.run(lint_repository(config, event=event, logger=logger))
    except (ActionError, OSError) as exc:
        logger.set_failed(exc)
        return 1
    return 0 if outcome.succeeded else 1


__all__ = ["run_action"]
