#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""External tool invocations: cargo, rustup, strip and tar.

Every call blocks until the tool exits. There are no timeouts or retries;
a failing tool aborts the build.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

from provide.foundation.file import safe_copy
from provide.foundation.process import run

from aurpack.config.defaults import MUSL_TARGET, RELEASE_DIR
from aurpack.console import get_command_logger, progress
from aurpack.exceptions import BuildError, MissingTargetError
from aurpack.manifest import Manifest

log = get_command_logger("build")

HASH_CHUNK_SIZE = 1024 * 1024


def musl_check() -> None:
    """Ensure the ``x86_64-unknown-linux-musl`` target is installed.

    Raises:
        MissingTargetError: If rustup does not list the target as installed
    """
    result = run(["rustup", "target", "list", "--installed"], capture_output=True, check=False)
    if result.returncode != 0:
        raise BuildError(f"rustup exited with status {result.returncode}: {result.stderr.strip()}")

    installed = result.stdout.splitlines()
    log.debug("Installed rustup targets", targets=installed)
    if MUSL_TARGET not in installed:
        raise MissingTargetError(f"Missing {MUSL_TARGET} target. Install it with: rustup target add {MUSL_TARGET}")


def release_build(project_root: Path, musl: bool = False) -> None:
    """Run ``cargo build --release``, statically linked against musl if asked."""
    cmd = ["cargo", "build", "--release"]
    if musl:
        cmd.append(f"--target={MUSL_TARGET}")

    progress("Running release build...")
    log.info("Running release build", cmd=cmd, cwd=str(project_root))
    result = run(cmd, cwd=project_root, capture_output=False, check=False)
    if result.returncode != 0:
        raise BuildError(f"cargo build exited with status {result.returncode}")


def release_binary(target_dir: Path, binary_name: str, musl: bool = False) -> Path:
    """Where cargo leaves the release binary."""
    release_dir = target_dir / MUSL_TARGET / RELEASE_DIR if musl else target_dir / RELEASE_DIR
    return release_dir / binary_name


def strip(binary: Path) -> None:
    """Strip the release binary, so that we aren't compressing more bytes than we need to."""
    progress("Stripping binary...")
    result = run(["strip", str(binary)], capture_output=True, check=False)
    if result.returncode != 0:
        raise BuildError(f"strip failed on {binary}: {result.stderr.strip()}")


def create_tarball(
    manifest: Manifest,
    binary: Path,
    output_dir: Path,
    project_root: Path,
    license_file: Path | None = None,
) -> Path:
    """Strip `binary` and pack it, plus an optional license, into the release tarball.

    The binary is staged in `project_root` under its plain name so that it
    sits at the top level of the archive, where the PKGBUILD expects it.

    Returns:
        Path to the created tarball
    """
    tarball = manifest.tarball(output_dir).absolute()
    staged = project_root / manifest.binary_name

    strip(binary)
    safe_copy(binary, staged, overwrite=True)

    cmd = ["tar", "czf", str(tarball), manifest.binary_name]
    if license_file is not None:
        cmd.append(license_file.name)

    progress("Packing tarball...")
    try:
        result = run(cmd, cwd=project_root, capture_output=True, check=False)
    finally:
        staged.unlink(missing_ok=True)

    if result.returncode != 0:
        raise BuildError(f"tar failed creating {tarball}: {result.stderr.strip()}")

    log.info("Tarball created", tarball=str(tarball))
    return tarball


def sha256sum(path: Path) -> str:
    """Hex SHA-256 digest of a file."""
    digest = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(HASH_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


# 🌶️📦🔚
