#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""aurpack configuration: fixed defaults and environment-driven runtime settings."""

from __future__ import annotations

from aurpack.config.runtime import AurRuntimeConfig

__all__ = [
    "AurRuntimeConfig",
]

# 🌶️📦🔚
