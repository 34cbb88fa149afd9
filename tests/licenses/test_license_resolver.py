#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for license bundling decisions and LICENSE file discovery."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from aurpack.config.defaults import LICENSES
from aurpack.exceptions import FilenameEncodingError, MissingLicenseError
from aurpack.licenses import find_license_file, license_file_name, must_copy_license


class TestMustCopyLicense:
    def test_allow_list_size(self) -> None:
        assert len(LICENSES) == 14
        assert len(set(LICENSES)) == 14

    @pytest.mark.parametrize("license", LICENSES)
    def test_common_licenses_need_no_copy(self, license: str) -> None:
        assert not must_copy_license(license)

    @pytest.mark.parametrize(
        "license",
        [
            "MIT",
            "BSD-3-Clause",
            "MIT OR Apache-2.0",
            "apache-2.0",
            "Apache-2.0 ",
            "Unlicensed",
            "GPL-3.0",
            "",
        ],
    )
    def test_other_licenses_need_copy(self, license: str) -> None:
        assert must_copy_license(license)


class TestFindLicenseFile:
    def test_finds_license(self, tmp_path: Path) -> None:
        (tmp_path / "README.md").write_text("readme")
        (tmp_path / "LICENSE").write_text("license")

        assert find_license_file(tmp_path) == tmp_path / "LICENSE"

    def test_prefix_match(self, tmp_path: Path) -> None:
        (tmp_path / "LICENSE-MIT").write_text("license")

        assert find_license_file(tmp_path).name == "LICENSE-MIT"

    def test_first_by_name(self, tmp_path: Path) -> None:
        (tmp_path / "LICENSE-MIT").write_text("mit")
        (tmp_path / "LICENSE-APACHE").write_text("apache")

        assert find_license_file(tmp_path).name == "LICENSE-APACHE"

    def test_prefix_is_case_sensitive(self, tmp_path: Path) -> None:
        (tmp_path / "license.txt").write_text("license")

        with pytest.raises(MissingLicenseError):
            find_license_file(tmp_path)

    def test_directories_are_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "LICENSES").mkdir()

        with pytest.raises(MissingLicenseError, match="Missing LICENSE file"):
            find_license_file(tmp_path)

    def test_missing_license(self, tmp_path: Path) -> None:
        with pytest.raises(MissingLicenseError):
            find_license_file(tmp_path)


class TestLicenseFileName:
    def test_plain_name(self, tmp_path: Path) -> None:
        assert license_file_name(tmp_path / "LICENSE-MIT") == "LICENSE-MIT"

    def test_undecodable_name(self, tmp_path: Path) -> None:
        name = os.fsdecode(b"LICENSE-\xff")

        with pytest.raises(FilenameEncodingError):
            license_file_name(tmp_path / name)


# 🌶️📦🔚
