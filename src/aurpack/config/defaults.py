#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for aurpack."""

from __future__ import annotations

# =================================
# Manifest defaults
# =================================
MANIFEST_FILE = "Cargo.toml"
BINARY_PACKAGE_SUFFIX = "-bin"

# =================================
# Build defaults
# =================================
DEFAULT_TARGET_DIR = "target"
DEFAULT_OUTPUT_SUBDIR = "cargo-aur"
RELEASE_DIR = "release"
MUSL_TARGET = "x86_64-unknown-linux-musl"

# =================================
# PKGBUILD defaults
# =================================
PKGBUILD_FILE = "PKGBUILD"
ARCH = "x86_64"
PKGREL = 1
PKGVER_PLACEHOLDER = "$pkgver"
GENERATOR_URL = "https://crates.io/crates/cargo-aur"
ABSOLUTE_URL_PREFIX = "https://"

# =================================
# License defaults
# =================================
LICENSE_FILE_PREFIX = "LICENSE"

# Common licenses shipped in Arch Linux's `licenses` package under
# /usr/share/licenses/common. The package carries more, but these are the
# ones Rust crates actually declare.
LICENSES = (
    "AGPL-3.0-only",
    "AGPL-3.0-or-later",
    "Apache-2.0",
    "BSL-1.0",  # Boost Software License
    "GPL-2.0-only",
    "GPL-2.0-or-later",
    "GPL-3.0-only",
    "GPL-3.0-or-later",
    "LGPL-2.0-only",
    "LGPL-2.0-or-later",
    "LGPL-3.0-only",
    "LGPL-3.0-or-later",
    "MPL-2.0",  # Mozilla Public License
    "Unlicense",  # Not to be confused with "Unlicensed"
)

# =================================
# Git host prefixes (tested in order)
# =================================
GITHUB_PREFIX = "https://github"
GITLAB_PREFIX = "https://gitlab"

# 🌶️📦🔚
