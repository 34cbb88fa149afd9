#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Decide whether a license file has to ship inside the package."""

from __future__ import annotations

from pathlib import Path

from aurpack.config.defaults import LICENSE_FILE_PREFIX, LICENSES
from aurpack.exceptions import FilenameEncodingError, MissingLicenseError


def must_copy_license(license: str) -> bool:
    """Whether `license` is missing from ``/usr/share/licenses/common/``.

    Such licenses (MIT and BSD-3-Clause are the usual suspects among crates)
    must be installed by the PKGBUILD itself.
    """
    return license not in LICENSES


def find_license_file(root: Path) -> Path:
    """Locate the project's ``LICENSE*`` file.

    Entries are checked in name order so the same file is picked on every run.

    Raises:
        MissingLicenseError: If `root` holds no file whose name starts with LICENSE
    """
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.name.startswith(LICENSE_FILE_PREFIX) and entry.is_file():
            return entry

    raise MissingLicenseError(f"Missing LICENSE file in {root.resolve()}")


def license_file_name(path: Path) -> str:
    """The file name of `path`, guaranteed to be valid UTF-8 text."""
    name = path.name
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as e:
        raise FilenameEncodingError(f"License file name is not valid UTF-8: {name!r}") from e
    return name


# 🌶️📦🔚
