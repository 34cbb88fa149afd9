#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""aurpack runtime configuration read from the environment."""

from __future__ import annotations

from pathlib import Path

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from aurpack.config.defaults import DEFAULT_OUTPUT_SUBDIR, DEFAULT_TARGET_DIR

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


@define
class AurRuntimeConfig(RuntimeConfig):
    """aurpack runtime configuration for CLI startup."""

    log_level: str = field(
        default="WARNING",
        env_var="AURPACK_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for aurpack operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    archive: str | None = field(
        default=None,
        env_var="CARGO_AUR_ARCHIVE",
        metadata={"help": "Explicit source location written to the PKGBUILD, bypassing git host detection"},
    )

    target_dir: str = field(
        default=DEFAULT_TARGET_DIR,
        env_var="CARGO_TARGET_DIR",
        metadata={"help": "Cargo's target directory, where release binaries are read from"},
    )

    @property
    def default_output_dir(self) -> Path:
        """Output directory used when none is given on the command line."""
        return Path(self.target_dir) / DEFAULT_OUTPUT_SUBDIR


# 🌶️📦🔚
