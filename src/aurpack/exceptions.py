#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for aurpack."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class AurError(FoundationError):
    """Base exception for all aurpack errors."""

    pass


class ManifestReadError(AurError):
    """Raised when the Cargo manifest cannot be read from disk."""

    pass


class ManifestParseError(AurError):
    """Raised when the Cargo manifest is not valid TOML or lacks a required field."""

    pass


class MissingLicenseError(AurError):
    """Raised when the license must be bundled but no LICENSE file exists."""

    pass


class MissingTargetError(AurError):
    """Raised when a static build is requested without the musl target installed."""

    pass


class FilenameEncodingError(AurError):
    """Raised when a located file name is not valid UTF-8."""

    pass


class BuildError(AurError):
    """Raised when an external build tool exits unsuccessfully."""

    pass


# 🌶️📦🔚
