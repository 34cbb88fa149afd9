#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Public API for building an AUR binary package."""

from __future__ import annotations

from pathlib import Path

from attrs import frozen
from provide.foundation.file.directory import ensure_dir

from aurpack.build import create_tarball, musl_check, release_binary, release_build, sha256sum
from aurpack.config.defaults import MANIFEST_FILE, PKGBUILD_FILE
from aurpack.config.runtime import AurRuntimeConfig
from aurpack.console import get_command_logger, progress
from aurpack.licenses import find_license_file, must_copy_license
from aurpack.manifest import load_manifest
from aurpack.metadata import resolve_metadata
from aurpack.pkgbuild import render_pkgbuild, write_pkgbuild

log = get_command_logger("package")


@frozen
class AurBuildResult:
    """Files produced by a successful build."""

    tarball: Path
    pkgbuild: Path
    sha256: str


def build_aur_package(
    manifest_path: Path = Path(MANIFEST_FILE),
    output_dir: Path | None = None,
    musl: bool = False,
    dry_run: bool = False,
    config: AurRuntimeConfig | None = None,
) -> AurBuildResult | None:
    """Build a release tarball and PKGBUILD for a Rust crate.

    Steps run strictly in order and any failure aborts the rest:
    musl check, manifest load, metadata resolution, license lookup,
    ``cargo build``, strip and tar, checksum, PKGBUILD.

    Args:
        manifest_path: Path to the crate's Cargo.toml
        output_dir: Where the tarball and PKGBUILD go
            (default: ``$CARGO_TARGET_DIR/cargo-aur``)
        musl: Build a static binary against the musl target
        dry_run: Stop after validating the manifest and license
        config: Runtime configuration (default: read from the environment)

    Returns:
        The produced files, or None for a dry run

    Raises:
        AurError: For any manifest, license, toolchain or build failure
        OSError: For filesystem failures
    """
    config = config or AurRuntimeConfig.from_env()
    project_root = manifest_path.parent
    target_dir = project_root / config.target_dir
    output_dir = output_dir or project_root / config.default_output_dir

    # A static build needs the musl target installed.
    if musl:
        progress("Checking for musl toolchain...")
        musl_check()

    # The output directory must exist before tar writes into it.
    ensure_dir(output_dir)

    manifest = load_manifest(manifest_path)
    log.debug("Manifest loaded", name=manifest.name, version=manifest.version)

    resolved = resolve_metadata(manifest, archive_override=config.archive)
    if resolved.uses_legacy:
        log.warning("Dependencies read from deprecated [package.metadata] location", crate=manifest.name)
        progress(
            "Dependencies in [package.metadata] are deprecated; move them to [package.metadata.aur].",
            color="yellow",
        )

    license_file = None
    if must_copy_license(manifest.license):
        progress("LICENSE file will be installed manually.", color="yellow")
        license_file = find_license_file(project_root)
        log.debug("License file located", path=str(license_file))

    if dry_run:
        log.info("Dry run, skipping build", crate=manifest.name)
        return None

    release_build(project_root, musl)
    binary = release_binary(target_dir, manifest.binary_name, musl)
    tarball = create_tarball(manifest, binary, output_dir, project_root, license_file)
    digest = sha256sum(tarball)

    text = render_pkgbuild(manifest, resolved, digest, license_file)
    pkgbuild = write_pkgbuild(output_dir / PKGBUILD_FILE, text)

    log.info("AUR package built", tarball=str(tarball), pkgbuild=str(pkgbuild))
    return AurBuildResult(tarball=tarball, pkgbuild=pkgbuild, sha256=digest)


# 🌶️📦🔚
