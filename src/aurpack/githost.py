#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Git forge detection and release tarball URL templates.

The repository URL decides which forge hosts the project, and each forge
publishes release assets under a different path. Templates keep the literal
``$pkgver`` token so that makepkg expands it at build time.
"""

from __future__ import annotations

from enum import Enum

from aurpack.config.defaults import ARCH, GITHUB_PREFIX, GITLAB_PREFIX, PKGVER_PLACEHOLDER


class GitHost(Enum):
    """The git forge in which a project's source code is stored."""

    GITHUB = "github"
    GITLAB = "gitlab"
    GENERIC = "generic"


RELEASE_ASSET_TEMPLATE = "{repository}/releases/download/v{pkgver}/{name}-{pkgver}-{arch}.tar.gz"

_TEMPLATES = {
    GitHost.GITHUB: RELEASE_ASSET_TEMPLATE,
    GitHost.GITLAB: "{repository}/-/archive/v{pkgver}/{name}-{pkgver}-{arch}.tar.gz",
    # Gitea, Forgejo and Codeberg share GitHub's release asset layout.
    GitHost.GENERIC: RELEASE_ASSET_TEMPLATE,
}


def classify(repository: str) -> GitHost:
    """Classify a repository URL by prefix. The first matching rule wins."""
    if repository.startswith(GITHUB_PREFIX):
        return GitHost.GITHUB
    if repository.startswith(GITLAB_PREFIX):
        return GitHost.GITLAB
    return GitHost.GENERIC


def source_url(host: GitHost, repository: str, name: str, override: str | None = None) -> str:
    """The expected tarball location for a project hosted on `host`.

    Args:
        host: Forge the repository lives on
        repository: Repository URL from the manifest
        name: Crate name, used in the tarball file name
        override: Explicit archive location; returned verbatim when set

    Returns:
        Download URL containing the unexpanded ``$pkgver`` token
    """
    if override is not None:
        return override

    return _TEMPLATES[host].format(
        repository=repository,
        name=name,
        pkgver=PKGVER_PLACEHOLDER,
        arch=ARCH,
    )


def expand_pkgver(template: str, version: str) -> str:
    """Substitute ``$pkgver`` the way makepkg does when it downloads sources."""
    return template.replace(PKGVER_PLACEHOLDER, version)


# 🌶️📦🔚
