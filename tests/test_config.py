# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for action inputs and configuration assembly."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from zlint_action.config import Configuration, assemble_configuration
from zlint_action.errors import BinaryNotFoundError
from zlint_action.inputs import ActionInputs, get_input, input_env_name, is_yes
from zlint_action.locator import BinaryRequest


class StubLocator:
    """Locator double recording the requests it receives."""

    def __init__(self, result: Path | Exception) -> None:
        self.result = result
        self.requests: list[BinaryRequest] = []

    def locate(self, request: BinaryRequest) -> Path:
        self.requests.append(request)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


@pytest.mark.parametrize("value", ["yes", "Y", "TRUE", "true", "1", "yEs"])
def test_is_yes_accepts_truthy_tokens(value: str) -> None:
    assert is_yes(value)


@pytest.mark.parametrize("value", ["", "no", "false", "0", "on", "enabled", "yes please"])
def test_is_yes_rejects_everything_else(value: str) -> None:
    assert not is_yes(value)


def test_input_env_name_follows_runner_convention() -> None:
    assert input_env_name("diff-only") == "INPUT_DIFF-ONLY"
    assert input_env_name("some input") == "INPUT_SOME_INPUT"


def test_inputs_from_environment_apply_defaults() -> None:
    inputs = ActionInputs.from_environment({})

    assert inputs == ActionInputs(binary="", version="latest", diff_only=False)


def test_inputs_from_environment_read_values() -> None:
    env = {
        "INPUT_BINARY": "  ./bin/zlint  ",
        "INPUT_VERSION": "v0.7.1",
        "INPUT_DIFF-ONLY": "Yes",
    }

    inputs = ActionInputs.from_environment(env)

    assert get_input("binary", env) == "./bin/zlint"
    assert inputs.binary == "./bin/zlint"
    assert inputs.version == "v0.7.1"
    assert inputs.diff_only is True


def test_assemble_uses_existing_binary_and_ignores_version(tmp_path: Path, logger) -> None:  # noqa: ANN001
    locator = StubLocator(tmp_path / "zlint")
    inputs = ActionInputs(binary="zlint", version="garbage", diff_only=True)

    config = assemble_configuration(inputs, locator=locator, logger=logger)  # type: ignore[arg-type]

    assert config == Configuration(binary=tmp_path / "zlint", diff_only=True)
    assert locator.requests == [BinaryRequest(binary="zlint", version="garbage")]
    assert locator.requests[0].uses_existing_binary
    assert logger.records[0] == ("group", "Configuring ZLint")
    assert logger.records[-1] == ("endgroup", "")


def test_assemble_downloads_when_no_binary(tmp_path: Path, logger) -> None:  # noqa: ANN001
    locator = StubLocator(tmp_path / "downloaded")

    config = assemble_configuration(ActionInputs(), locator=locator, logger=logger)  # type: ignore[arg-type]

    assert config.binary == tmp_path / "downloaded"
    assert config.diff_only is False
    assert not locator.requests[0].uses_existing_binary
    assert locator.requests[0].version == "latest"


def test_assemble_closes_group_on_failure(logger) -> None:  # noqa: ANN001
    locator = StubLocator(BinaryNotFoundError("Could not find ZLint binary at 'x'."))

    with pytest.raises(BinaryNotFoundError):
        assemble_configuration(ActionInputs(binary="x"), locator=locator, logger=logger)  # type: ignore[arg-type]

    assert logger.records == [("group", "Configuring ZLint"), ("endgroup", "")]


def test_configuration_is_immutable(tmp_path: Path) -> None:
    config = Configuration(binary=tmp_path / "zlint")

    with pytest.raises(ValidationError):
        config.diff_only = True  # type: ignore[misc]
