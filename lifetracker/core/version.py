"""Build/version metadata.

The version comes from the installed distribution; CI may override it and
stamp the commit and build date through ``LT_VERSION``, ``LT_GIT_SHA`` and
``LT_BUILD_DATE``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import metadata

DIST_NAME = "lifetracker"
DEV_VERSION = "0.0.0-dev"


@dataclass(frozen=True)
class BuildInfo:
    version: str
    git_sha: str = ""
    build_date: str = ""

    @property
    def label(self) -> str:
        details = ", ".join(p for p in (self.git_sha, self.build_date) if p)
        return f"v{self.version} ({details})" if details else f"v{self.version}"


def _installed_version() -> str:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return DEV_VERSION


def get_build_info() -> BuildInfo:
    return BuildInfo(
        version=os.getenv("LT_VERSION", "").strip() or _installed_version(),
        git_sha=os.getenv("LT_GIT_SHA", "").strip(),
        build_date=os.getenv("LT_BUILD_DATE", "").strip(),
    )


def get_version_string() -> str:
    return get_build_info().label
