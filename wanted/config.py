"""Wanted generator configuration.

Settings that are stable across invocations (where default repositories live,
which git binary to run, where auxiliary repositories are cloned) are kept in
a Pydantic v2 model so they are validated once at construction time and can be
overridden from environment variables.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field

from wanted.vcs.refs import default_git_url


DEFAULT_MULTI_REPO_DEPENDENCIES: list[str] = [
    "aiohttp>=3.9",
    "cachetools>=5.3",
    "orjson>=3.9",
    "protobuf>=4.25",
    "PyMySQL>=1.1",
    "returns>=0.22",
    "structlog>=24.1",
]


class Config(BaseModel):
    """Global Wanted configuration.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and handed to :class:`~wanted.pipeline.ScaffoldPipeline`.
    """

    git_host: str = Field(default="git@github.com", min_length=1)
    git_org: str = Field(default="timCF", min_length=1)
    git_binary: str = Field(default="git", min_length=1)
    aux_dir: str = Field(
        default="priv",
        min_length=1,
        description="Subdirectory of the project that holds the auxiliary repositories",
    )
    multi_repo_dependencies: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MULTI_REPO_DEPENDENCIES),
        description="Runtime dependencies declared by multi-repo projects",
    )

    def default_git_url(self, app: str, suffix: str = "") -> str:
        """Return the conventional ``<host>:<org>/<app><suffix>.git`` URL."""
        return default_git_url(self.git_host, self.git_org, app, suffix)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            WANTED_GIT_HOST, WANTED_GIT_ORG, WANTED_GIT_BINARY, WANTED_AUX_DIR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("WANTED_GIT_HOST"):
            kwargs["git_host"] = os.environ["WANTED_GIT_HOST"]
        if os.environ.get("WANTED_GIT_ORG"):
            kwargs["git_org"] = os.environ["WANTED_GIT_ORG"]
        if os.environ.get("WANTED_GIT_BINARY"):
            kwargs["git_binary"] = os.environ["WANTED_GIT_BINARY"]
        if os.environ.get("WANTED_AUX_DIR"):
            kwargs["aux_dir"] = os.environ["WANTED_AUX_DIR"]
        return cls(**kwargs)
