#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Render PKGBUILD bash array literals."""

from __future__ import annotations

from collections.abc import Sequence


def format_array(name: str, items: Sequence[str]) -> str:
    """Render ``name=("a" "b")``. Items are double-quoted and space separated."""
    quoted = " ".join(f'"{item}"' for item in items)
    return f"{name}=({quoted})"


def format_dependencies(depends: Sequence[str], optdepends: Sequence[str]) -> str:
    """Render the ``depends`` and ``optdepends`` lines of a PKGBUILD.

    An empty list produces no line at all. When both lists have entries the
    two lines are separated by a single newline; there is never a trailing
    newline.
    """
    lines = []
    if depends:
        lines.append(format_array("depends", depends))
    if optdepends:
        lines.append(format_array("optdepends", optdepends))
    return "\n".join(lines)


# 🌶️📦🔚
