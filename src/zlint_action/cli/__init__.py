# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line interface for the ZLint action.

The Typer application lives in :mod:`zlint_action.cli.app`.
"""

from __future__ import annotations
