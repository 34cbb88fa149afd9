#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""aurpack command-line interface entrypoint (``cargo aur``)."""

from __future__ import annotations

from pathlib import Path

from attrs import evolve
import click
from provide.foundation import TelemetryConfig, get_hub
from provide.foundation.errors import FoundationError
from provide.foundation.utils import get_version

from aurpack.config import AurRuntimeConfig
from aurpack.config.defaults import MANIFEST_FILE
from aurpack.console import error_line, get_command_logger, progress
from aurpack.package import build_aur_package

__version__ = get_version("aurpack", caller_file=__file__)

log = get_command_logger("cli")


def _initialize_logging(runtime: AurRuntimeConfig) -> None:
    """Initialize Foundation logging at the configured level."""
    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name="aurpack",
        logging=evolve(
            base_telemetry.logging,
            default_level=runtime.log_level,  # type: ignore[arg-type]
        ),
    )
    get_hub().initialize_foundation(telemetry_config)


@click.command("cargo-aur", context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="cargo-aur",
    message="%(version)s",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Set a custom output directory (default: target/cargo-aur).",
)
@click.option(
    "--musl",
    "-m",
    is_flag=True,
    help="Use the MUSL build target to produce a static binary.",
)
@click.option(
    "--dryrun",
    "--dry-run",
    "-d",
    "dry_run",
    is_flag=True,
    help="Don't actually build anything.",
)
# `cargo aur` passes "aur" through as the first argument.
@click.argument("free_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, output: Path | None, musl: bool, dry_run: bool, free_args: tuple[str, ...]) -> None:
    """Prepare a Rust project for release on the Arch User Repository.

    Reads Cargo.toml from the current directory, builds a release tarball
    and writes a matching PKGBUILD next to it.

    Configure via environment variables:
    - CARGO_AUR_ARCHIVE: Use this source location instead of the git host URL
    - CARGO_TARGET_DIR: Cargo's target directory (default: target)
    - AURPACK_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    """
    try:
        runtime = AurRuntimeConfig.from_env()
        _initialize_logging(runtime)
        log.debug("cargo-aur started", output=str(output) if output else None, musl=musl, dry_run=dry_run)

        build_aur_package(
            manifest_path=Path(MANIFEST_FILE),
            output_dir=output,
            musl=musl,
            dry_run=dry_run,
            config=runtime,
        )
    except (FoundationError, OSError, ValueError) as e:
        log.error("cargo-aur failed", error=str(e))
        error_line(e)
        ctx.exit(1)

    progress("Done.", color="green")


main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚
