#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""aurpack: release Rust binaries to the Arch User Repository."""

from __future__ import annotations

from provide.foundation.utils import get_version

from aurpack.exceptions import AurError, BuildError, MissingLicenseError
from aurpack.manifest import Manifest, load_manifest
from aurpack.metadata import ResolvedMetadata, resolve_metadata
from aurpack.package import AurBuildResult, build_aur_package
from aurpack.pkgbuild import render_pkgbuild

__version__ = get_version("aurpack", caller_file=__file__)

__all__ = [
    "AurBuildResult",
    "AurError",
    "BuildError",
    "Manifest",
    "MissingLicenseError",
    "ResolvedMetadata",
    "__version__",
    "build_aur_package",
    "load_manifest",
    "render_pkgbuild",
    "resolve_metadata",
]

# 🌶️📦🔚
