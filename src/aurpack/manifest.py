#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Typed view of the `Cargo.toml` fields needed to write a PKGBUILD.

Packaging metadata may live in two places. The current location is the
``[package.metadata.aur]`` table; early releases read ``depends`` and
``optdepends`` straight from ``[package.metadata]``. Both are modelled so the
resolver can apply its precedence explicitly.
"""

from __future__ import annotations

from pathlib import Path
import tomllib
from typing import Any

from attrs import field, frozen

from aurpack.config.defaults import ARCH
from aurpack.exceptions import ManifestParseError, ManifestReadError
from aurpack.githost import GitHost, classify

REQUIRED_FIELDS = ("name", "version", "description", "homepage", "repository", "license")


@frozen
class AurMetadata:
    """The values of a ``[package.metadata.aur]`` table."""

    archive: str | None = None
    name: str | None = None
    depends: tuple[str, ...] = field(default=(), converter=tuple)
    optdepends: tuple[str, ...] = field(default=(), converter=tuple)


@frozen
class LegacyMetadata:
    """Deprecated ``depends``/``optdepends`` keys directly under ``[package.metadata]``."""

    depends: tuple[str, ...] = field(default=(), converter=tuple)
    optdepends: tuple[str, ...] = field(default=(), converter=tuple)


@frozen
class Manifest:
    """Immutable snapshot of one crate's manifest."""

    name: str
    version: str
    authors: tuple[str, ...] = field(converter=tuple)
    description: str
    homepage: str
    repository: str
    license: str
    binary: str | None = None
    aur: AurMetadata | None = None
    legacy: LegacyMetadata | None = None

    @property
    def binary_name(self) -> str:
        """The name of the main binary this project compiles to."""
        return self.binary or self.name

    @property
    def tarball_name(self) -> str:
        return f"{self.name}-{self.version}-{ARCH}.tar.gz"

    def tarball(self, output_dir: Path) -> Path:
        """The path of the binary tarball this crate produces in `output_dir`."""
        return output_dir / self.tarball_name

    @property
    def git_host(self) -> GitHost:
        return classify(self.repository)

    @property
    def dependency_block(self) -> AurMetadata | LegacyMetadata | None:
        """The metadata block that supplies dependencies.

        The ``[package.metadata.aur]`` block wins as a whole whenever it is
        present, even if its lists are empty. The legacy block is consulted
        only when no aur block exists.
        """
        if self.aur is not None:
            return self.aur
        return self.legacy

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Manifest:
        """Build a Manifest from parsed TOML data."""
        package = data.get("package")
        if not isinstance(package, dict):
            raise ManifestParseError("Manifest has no [package] table")

        values: dict[str, Any] = {}
        for key in REQUIRED_FIELDS:
            value = package.get(key)
            if not isinstance(value, str):
                raise ManifestParseError(f"Missing or invalid string field 'package.{key}'")
            values[key] = value

        values["authors"] = _string_list(package, "authors", "package", required=True)

        metadata = package.get("metadata", {})
        if not isinstance(metadata, dict):
            raise ManifestParseError("'package.metadata' must be a table")

        return cls(
            binary=_first_binary(data),
            aur=_aur_metadata(metadata),
            legacy=_legacy_metadata(metadata),
            **values,
        )


def load_manifest(path: Path) -> Manifest:
    """Read and parse a `Cargo.toml`.

    Raises:
        ManifestReadError: If the file cannot be read
        ManifestParseError: If the file is not valid TOML or lacks required fields
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestReadError(f"Could not read {path}: {e}") from e

    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ManifestParseError(f"Could not parse {path}: {e}") from e

    return Manifest.from_dict(data)


def _string_list(table: dict[str, Any], key: str, where: str, required: bool = False) -> list[str]:
    if key not in table:
        if required:
            raise ManifestParseError(f"Missing field '{where}.{key}'")
        return []

    value = table[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ManifestParseError(f"'{where}.{key}' must be a list of strings")
    return value


def _optional_string(table: dict[str, Any], key: str, where: str) -> str | None:
    value = table.get(key)
    if value is not None and not isinstance(value, str):
        raise ManifestParseError(f"'{where}.{key}' must be a string")
    return value


def _first_binary(data: dict[str, Any]) -> str | None:
    bins = data.get("bin", [])
    if not isinstance(bins, list):
        raise ManifestParseError("'bin' must be an array of tables")
    if not bins:
        return None

    first = bins[0]
    if not isinstance(first, dict):
        raise ManifestParseError("'bin' must be an array of tables")
    return _optional_string(first, "name", "bin")


def _aur_metadata(metadata: dict[str, Any]) -> AurMetadata | None:
    aur = metadata.get("aur")
    if aur is None:
        return None
    if not isinstance(aur, dict):
        raise ManifestParseError("'package.metadata.aur' must be a table")

    where = "package.metadata.aur"
    return AurMetadata(
        archive=_optional_string(aur, "archive", where),
        name=_optional_string(aur, "name", where),
        depends=_string_list(aur, "depends", where),
        optdepends=_string_list(aur, "optdepends", where),
    )


def _legacy_metadata(metadata: dict[str, Any]) -> LegacyMetadata | None:
    if "depends" not in metadata and "optdepends" not in metadata:
        return None

    where = "package.metadata"
    return LegacyMetadata(
        depends=_string_list(metadata, "depends", where),
        optdepends=_string_list(metadata, "optdepends", where),
    )


# 🌶️📦🔚
