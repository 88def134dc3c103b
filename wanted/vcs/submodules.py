"""Cloning of the primary and auxiliary repositories of a multi-repo project.

The primary repository is cloned first and becomes the project directory.
Auxiliary repositories (UI, then protocol) are cloned afterwards into a
subdirectory of the project and registered in ``.gitmodules``.

Cloning is sequential and fail-fast.  A failure aborts the run but leaves
everything cloned so far on disk: nothing is rolled back.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from wanted.errors import CloneFailed
from wanted.scaffolder.templates import TemplateRenderer
from wanted.utils import ensure_dir
from wanted.vcs.refs import GitRepoRef, SubmoduleLink
from wanted.vcs.runner import CommandRunner


class SubmoduleOrchestrator:
    """Clones repositories and describes the submodule layout.

    Attributes:
        completed: Paths of every successful clone, in order.
    """

    def __init__(
        self,
        runner: CommandRunner,
        renderer: TemplateRenderer,
        aux_dir: str = "priv",
        git: str = "git",
    ) -> None:
        self.runner = runner
        self.renderer = renderer
        self.aux_dir = aux_dir
        self.git = git
        self.completed: list[Path] = []

    def links(self, refs: Sequence[GitRepoRef]) -> list[SubmoduleLink]:
        """Return the submodule path of each reference, in order."""
        return [
            SubmoduleLink(name=ref.dirname, path=f"{self.aux_dir}/{ref.dirname}", url=ref.url)
            for ref in refs
        ]

    def build_linkage_descriptor(self, links: Sequence[SubmoduleLink]) -> str:
        """Render the ``.gitmodules`` text for *links*, as returned by :meth:`links`."""
        return self.renderer.render(
            "gitmodules",
            {"submodules": [link.model_dump() for link in links]},
        )

    def clone_root(self, ref: GitRepoRef, destination: str | Path) -> Path:
        """Clone the primary repository into *destination*.

        The clone runs from the destination's parent directory, which must
        exist, and creates *destination* itself.

        Raises:
            CloneFailed: If ``git clone`` exits with a non-zero status.
        """
        destination = Path(destination)
        self._clone(ref, destination.parent, destination.name)
        return destination

    def clone_auxiliary(self, refs: Sequence[GitRepoRef], project_root: str | Path) -> list[Path]:
        """Clone every auxiliary repository into ``<project_root>/<aux_dir>``.

        Stops at the first failure; repositories cloned before it are kept.

        Raises:
            CloneFailed: If any ``git clone`` exits with a non-zero status.
        """
        parent = ensure_dir(Path(project_root) / self.aux_dir)
        return [self._clone(ref, parent, ref.dirname) for ref in refs]

    def _clone(self, ref: GitRepoRef, cwd: Path, target: str) -> Path:
        result = self.runner.run(self.git, ["clone", ref.url, target], cwd=cwd)
        if not result.ok:
            raise CloneFailed(
                f"git clone {ref.url} failed (exit {result.returncode}): {result.output}",
                url=ref.url,
                command=result.command,
                output=result.output,
            )
        path = cwd / target
        self.completed.append(path)
        return path
