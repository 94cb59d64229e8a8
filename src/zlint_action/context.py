# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Snapshot of the workflow event that triggered the run."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field

PULL_REQUEST_EVENTS: Final[frozenset[str]] = frozenset({"pull_request", "pull_request_target"})

LOGGER = logging.getLogger(__name__)


class EventContext(BaseModel):
    """Triggering event name, payload and pull request base branch."""

    model_config = ConfigDict(frozen=True)

    event_name: str = ""
    payload: dict[str, Any] = Field(default_factory=dict)
    base_ref: str | None = None

    @property
    def is_pull_request(self) -> bool:
        """Return ``True`` for pull-request-class events."""

        return self.event_name in PULL_REQUEST_EVENTS

    def pull_request_base_ref(self) -> str | None:
        """Return the base branch of the triggering pull request, if known.

        ``GITHUB_BASE_REF`` wins; the event payload is consulted otherwise.
        """

        if self.base_ref:
            return self.base_ref
        pull_request = self.payload.get("pull_request")
        if not isinstance(pull_request, Mapping):
            return None
        base = pull_request.get("base")
        if not isinstance(base, Mapping):
            return None
        ref = base.get("ref")
        return ref if isinstance(ref, str) and ref else None

    @classmethod
    def from_environment(cls, env: Mapping[str, str] | None = None) -> EventContext:
        """Build the context from the runner's ``GITHUB_*`` variables.

        Args:
            env: Environment mapping consulted instead of :data:`os.environ`.

        Returns:
            EventContext: Context with the payload loaded from ``GITHUB_EVENT_PATH``.
        """

        source = os.environ if env is None else env
        return cls(
            event_name=source.get("GITHUB_EVENT_NAME", ""),
            payload=_load_payload(source.get("GITHUB_EVENT_PATH")),
            base_ref=source.get("GITHUB_BASE_REF") or None,
        )


def _load_payload(event_path: str | None) -> dict[str, Any]:
    if not event_path:
        return {}
    path = Path(event_path)
    if not path.is_file():
        LOGGER.debug("event payload %s does not exist", path)
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        LOGGER.debug("could not read event payload %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


__all__ = ["EventContext", "PULL_REQUEST_EVENTS"]
