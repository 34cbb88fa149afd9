#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Compose and write the PKGBUILD.

Field order is fixed; AUR tooling and reviewers rely on it, so the text is
assembled completely in memory and written in a single step.
"""

from __future__ import annotations

from pathlib import Path

from provide.foundation.file import atomic_write_text

from aurpack.config.defaults import ABSOLUTE_URL_PREFIX, ARCH, GENERATOR_URL, PKGREL
from aurpack.console import get_command_logger
from aurpack.formatting import format_array, format_dependencies
from aurpack.licenses import license_file_name
from aurpack.manifest import Manifest
from aurpack.metadata import ResolvedMetadata

log = get_command_logger("pkgbuild")


def source_location(source: str, repository: str) -> str:
    """Make a non-URL source relative to the repository."""
    if source.startswith(ABSOLUTE_URL_PREFIX):
        return source
    return f"{repository}/{source}"


def render_pkgbuild(
    manifest: Manifest,
    resolved: ResolvedMetadata,
    sha256: str,
    license_file: Path | None = None,
) -> str:
    """Render the complete PKGBUILD text.

    Args:
        manifest: The loaded manifest
        resolved: Effective name, source and dependencies
        sha256: Hex digest of the release tarball
        license_file: License to install alongside the binary, if the
            license is not already shipped by Arch

    Returns:
        PKGBUILD text ending in a newline
    """
    lines = [f"# Maintainer: {author}" for author in manifest.authors]
    lines += [
        "#",
        f"# This PKGBUILD was generated by `cargo aur`: {GENERATOR_URL}",
        "",
        f"pkgname={resolved.package_name}",
        f"pkgver={manifest.version}",
        f"pkgrel={PKGREL}",
        f'pkgdesc="{manifest.description}"',
        f'url="{manifest.homepage}"',
        format_array("license", [manifest.license]),
        format_array("arch", [ARCH]),
        format_array("provides", [manifest.name]),
        format_array("conflicts", [manifest.name]),
    ]

    dependencies = format_dependencies(resolved.depends, resolved.optdepends)
    if dependencies:
        lines.append(dependencies)

    lines += [
        format_array("source", [source_location(resolved.source, manifest.repository)]),
        format_array("sha256sums", [sha256]),
        "",
        "package() {",
        f'    install -Dm755 {manifest.binary_name} -t "$pkgdir/usr/bin"',
    ]

    if license_file is not None:
        name = license_file_name(license_file)
        lines.append(f'    install -Dm644 {name} "$pkgdir/usr/share/licenses/$pkgname/{name}"')

    lines.append("}")
    return "\n".join(lines) + "\n"


def write_pkgbuild(path: Path, text: str) -> Path:
    """Write a rendered PKGBUILD to `path` in one atomic step."""
    atomic_write_text(path, text)
    log.debug("PKGBUILD written", path=str(path), size=len(text))
    return path


# 🌶️📦🔚
