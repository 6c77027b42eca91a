from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import metadata

from powerctl import APP_NAME

ENV_GIT_COMMIT = "POWERCTL_GIT_COMMIT"
ENV_BUILD_DATE = "POWERCTL_BUILD_DATE"


@dataclass(frozen=True)
class BuildInfo:
    """Build metadata, constructed once at startup and passed to the CLI."""

    version: str = "dev"
    git_commit: str = "unknown"
    build_date: str = "unknown"

    @classmethod
    def from_environment(cls) -> BuildInfo:
        try:
            dist_version = metadata.version(APP_NAME)
        except metadata.PackageNotFoundError:
            dist_version = cls.version
        return cls(
            version=dist_version,
            git_commit=os.getenv(ENV_GIT_COMMIT) or cls.git_commit,
            build_date=os.getenv(ENV_BUILD_DATE) or cls.build_date,
        )


def format_version(info: BuildInfo) -> str:
    return "\n".join(
        [
            f"{APP_NAME} version {info.version}",
            f"Git commit: {info.git_commit}",
            f"Built: {info.build_date}",
        ]
    )
