"""Git repository references.

A :class:`GitRepoRef` pairs a repository URL with the local directory name
git would clone it into.  The name is derived once, when the reference is
built, and reused for the ignore-file entries, the submodule manifest and the
clone destination.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from wanted.errors import MalformedGitUrl, UnreachableGitRemote
from wanted.vcs.runner import CommandRunner

_DIRNAME_PATTERN = re.compile(r"^.+/(?P<dirname>[^/]+)\.git$")


def derive_directory_name(url: str) -> str:
    """Return the last ``/``-delimited segment of *url* without ``.git``.

    Examples::

        derive_directory_name("git@github.com:org/foo_ui.git") -> "foo_ui"
        derive_directory_name("https://host/org/foo.git")      -> "foo"

    Raises:
        MalformedGitUrl: If *url* does not end in ``/<name>.git``.
    """
    match = _DIRNAME_PATTERN.match(url)
    if match is None:
        raise MalformedGitUrl(url)
    return match["dirname"]


def default_git_url(host: str, org: str, app: str, suffix: str = "") -> str:
    """Return the conventional ``<host>:<org>/<app><suffix>.git`` URL."""
    return f"{host}:{org}/{app}{suffix}.git"


@dataclass(frozen=True)
class GitRepoRef:
    """A repository URL and its derived local directory name."""

    url: str
    dirname: str

    @classmethod
    def from_url(cls, url: str) -> "GitRepoRef":
        return cls(url=url, dirname=derive_directory_name(url))


class SubmoduleLink(BaseModel):
    """Where an auxiliary repository lives inside the project."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    url: str


def probe_reachable(ref: GitRepoRef, runner: CommandRunner, git: str = "git") -> None:
    """Check that ``git ls-remote`` succeeds for *ref*.

    Raises:
        UnreachableGitRemote: If the command exits with a non-zero status.
            The raw command output is attached as ``output``.
    """
    result = runner.run(git, ["ls-remote", ref.url])
    if not result.ok:
        raise UnreachableGitRemote(
            f"Unacceptable subproject git repository, git ls-remote {ref.url} "
            f"exited with {result.returncode}: {result.output}",
            url=ref.url,
            command=result.command,
            output=result.output,
        )


def probe_all(refs: Iterable[GitRepoRef], runner: CommandRunner, git: str = "git") -> None:
    """Probe every reference in order, stopping at the first unreachable one."""
    for ref in refs:
        probe_reachable(ref, runner, git=git)
