#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Resolve the effective packaging metadata for a manifest."""

from __future__ import annotations

from attrs import field, frozen

from aurpack.config.defaults import BINARY_PACKAGE_SUFFIX
from aurpack.githost import source_url
from aurpack.manifest import LegacyMetadata, Manifest


@frozen
class ResolvedMetadata:
    """Packaging values after applying overrides and defaults."""

    package_name: str
    source: str
    depends: tuple[str, ...] = field(default=(), converter=tuple)
    optdepends: tuple[str, ...] = field(default=(), converter=tuple)
    uses_legacy: bool = False


def resolve_metadata(manifest: Manifest, archive_override: str | None = None) -> ResolvedMetadata:
    """Reconcile the aur block, the legacy block and the defaults.

    Precedence is all-or-nothing: once ``[package.metadata.aur]`` exists, its
    dependency lists are used even when empty and the legacy lists are
    ignored entirely.

    Args:
        manifest: The loaded manifest
        archive_override: Source location from the environment, used in place
            of the git host template when the aur block names no archive

    Returns:
        The effective package name, source and dependency lists
    """
    aur = manifest.aur
    block = manifest.dependency_block

    if aur is not None and aur.name is not None:
        package_name = aur.name
    else:
        package_name = f"{manifest.name}{BINARY_PACKAGE_SUFFIX}"

    if aur is not None and aur.archive is not None:
        source = aur.archive
    else:
        source = source_url(manifest.git_host, manifest.repository, manifest.name, archive_override)

    return ResolvedMetadata(
        package_name=package_name,
        source=source,
        depends=block.depends if block is not None else (),
        optdepends=block.optdepends if block is not None else (),
        uses_legacy=isinstance(block, LegacyMetadata),
    )


# 🌶️📦🔚
