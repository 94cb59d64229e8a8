# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for release version validation."""

from __future__ import annotations

import pytest

from zlint_action.errors import ConfigError, InvalidVersionError
from zlint_action.versioning import LATEST, SemanticVersion, normalize_version, parse_version


def test_latest_passes_through() -> None:
    assert parse_version("latest") == LATEST
    assert normalize_version("latest") == "latest"


@pytest.mark.parametrize("raw", ["v0.0.1", "v1.2.3", "v10.20.30", "v01.02.03", "v1.0.00"])
def test_prefixed_versions_are_unchanged(raw: str) -> None:
    assert normalize_version(raw) == raw


def test_bare_version_gets_marker() -> None:
    assert parse_version("1.2.3") == SemanticVersion(1, 2, 3)
    assert normalize_version("1.2.3") == "v1.2.3"
    assert normalize_version("01.2.3") == "v01.2.3"


def test_leading_zeros_compare_by_number_but_keep_the_tag() -> None:
    padded = parse_version("v01.02.03")

    assert padded == SemanticVersion(1, 2, 3)
    assert str(padded) == "v01.02.03"
    assert str(SemanticVersion(1, 2, 3)) == "v1.2.3"


@pytest.mark.parametrize("raw", ["1.2", "abc", "v1.2.3.4", "Latest", "v1.2.3-rc.1", "v1.2.3\n", "v1.x.3", ""])
def test_invalid_versions_are_rejected(raw: str) -> None:
    with pytest.raises(InvalidVersionError) as excinfo:
        parse_version(raw)

    message = str(excinfo.value)
    assert f"Invalid version: {raw}." in message
    assert "'v.major.minor.patch'" in message
    assert "'latest'" in message
    assert excinfo.value.version == raw


def test_invalid_version_is_a_config_error() -> None:
    with pytest.raises(ConfigError):
        parse_version("nope")
