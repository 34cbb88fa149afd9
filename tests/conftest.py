#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for aurpack tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from aurpack.manifest import AurMetadata, LegacyMetadata, Manifest

CARGO_TOML = """\
[package]
name = "foo"
version = "1.2.3"
authors = ["Jane Doe <jane@example.com>"]
description = "A tool that does foo"
homepage = "https://github.com/u/foo"
repository = "https://github.com/u/foo"
license = "MIT"
edition = "2021"

[dependencies]
serde = "1"
"""


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture(autouse=True)
def clean_cargo_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's cargo environment out of the tests."""
    for var in ("CARGO_AUR_ARCHIVE", "CARGO_TARGET_DIR", "AURPACK_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def cargo_project(tmp_path: Path) -> Path:
    """A crate directory with a Cargo.toml, a LICENSE and a built release binary."""
    project = tmp_path / "foo"
    project.mkdir()
    (project / "Cargo.toml").write_text(CARGO_TOML)
    (project / "LICENSE").write_text("MIT License\n")

    release = project / "target" / "release"
    release.mkdir(parents=True)
    (release / "foo").write_bytes(b"\x7fELF fake binary")
    return project


def make_manifest(
    aur: AurMetadata | None = None,
    legacy: LegacyMetadata | None = None,
    **overrides: object,
) -> Manifest:
    """Build a Manifest with sensible defaults for tests."""
    values: dict[str, object] = {
        "name": "foo",
        "version": "1.2.3",
        "authors": ["Jane Doe <jane@example.com>"],
        "description": "A tool that does foo",
        "homepage": "https://github.com/u/foo",
        "repository": "https://github.com/u/foo",
        "license": "MIT",
    }
    values.update(overrides)
    return Manifest(aur=aur, legacy=legacy, **values)  # type: ignore[arg-type]


@pytest.fixture
def manifest() -> Manifest:
    return make_manifest()


@pytest.fixture
def manifest_factory() -> Callable[..., Manifest]:
    """Factory fixture for manifests with selected fields overridden."""
    return make_manifest


# 🌶️📦🔚
