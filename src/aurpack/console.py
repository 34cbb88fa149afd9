#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Console helpers: structured command loggers and `::` progress lines."""

from __future__ import annotations

from typing import Any

import click
from provide.foundation.console import perr, pout
from provide.foundation.logger import get_logger

PROMPT = "::"


def get_command_logger(name: str) -> Any:
    """Return a structured logger scoped to an aurpack component."""
    return get_logger(f"aurpack.{name}")


def progress(message: str, color: str | None = None) -> None:
    """Print a bold `:: message` progress line to stdout."""
    pout(f"{click.style(PROMPT, bold=True)} {click.style(message, fg=color, bold=True)}")


def error_line(error: BaseException) -> None:
    """Print the single `:: Error: ...` line reported on failure."""
    perr(f"{click.style(PROMPT, bold=True)} {click.style('Error', fg='red', bold=True)}: {error}")


# 🌶️📦🔚
