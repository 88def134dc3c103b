"""Rendering and writing of the generated project files.

Takes a fully assembled :class:`TemplateContext` and produces the project's
files in a fixed order: README, ignore-file, (multi-repo) submodule manifest
and Makefile, build descriptor, config, library entry point, and tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from wanted.errors import FileConflict, MissingContextKey
from wanted.utils import print_created, write_file
from wanted.vcs.refs import SubmoduleLink

from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class TemplateContext(BaseModel):
    """Every value the templates can reference.

    Optional fields that are left unset are dropped from :meth:`as_dict`, so a
    template that references one of them fails with ``MissingContextKey``.
    """

    model_config = ConfigDict(frozen=True)

    app: str = Field(..., description="Application identifier")
    mod: str = Field(..., description="Module identifier")
    version: str = Field(..., description="Short toolchain version")
    dependencies: tuple[str, ...] = Field(default=(), description="Runtime dependencies")
    multi_repo: bool = False

    # Multi-repo only
    aux_dir: str | None = None
    git_app: str | None = None
    git_ui: str | None = None
    git_proto: str | None = None
    dir_ui: str | None = None
    dir_proto: str | None = None
    submodules: tuple[SubmoduleLink, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        """Return the mapping handed to the renderer."""
        return self.model_dump(exclude_none=True)


@dataclass(frozen=True)
class GeneratedFile:
    """A project-relative path and its rendered content."""

    path: str
    content: str


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Renders the file catalog and writes it below a project root."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def build_files(
        self,
        context: TemplateContext,
        linkage: str | None = None,
    ) -> list[GeneratedFile]:
        """Render every file of the project, in catalog order.

        Args:
            context: The assembled template context.
            linkage: The ``.gitmodules`` text, rendered from
                ``context.submodules``.  Required in the multi-repo variant.

        Returns:
            The generated files, in the order they must be written.

        Raises:
            MissingContextKey: If a multi-repo context comes without
                *linkage*, or a template references an absent key.
        """
        ctx = context.as_dict()
        app = context.app

        files = [
            GeneratedFile("README.md", self.renderer.render("readme", ctx)),
            GeneratedFile(".gitignore", self.renderer.render("gitignore", ctx)),
        ]
        if context.multi_repo:
            if linkage is None:
                raise MissingContextKey(
                    "Multi-repo projects need the .gitmodules text", template_id="gitmodules"
                )
            files.append(GeneratedFile(".gitmodules", linkage))
            files.append(GeneratedFile("Makefile", self.renderer.render("makefile", ctx)))

        files.extend([
            GeneratedFile("pyproject.toml", self.renderer.render("pyproject", ctx)),
            GeneratedFile("config/config.toml", self.renderer.render("config", ctx)),
            GeneratedFile(f"src/{app}/__init__.py", self.renderer.render("lib", ctx)),
            GeneratedFile("tests/conftest.py", self.renderer.render("test_helper", ctx)),
            GeneratedFile(f"tests/test_{app}.py", self.renderer.render("test", ctx)),
        ])
        return files

    def write(
        self,
        root: str | Path,
        files: Sequence[GeneratedFile],
        *,
        force: bool = False,
        confirm: Callable[[str], bool] | None = None,
    ) -> list[Path]:
        """Write *files* below *root*.

        An existing file with identical content is left untouched.  One with
        different content is overwritten when *force* is set; otherwise
        *confirm* is asked with the relative path and the file is skipped if
        it answers ``False``.

        Raises:
            FileConflict: If a file exists with different content and
                neither *force* nor *confirm* is given.  Files written
                before it stay on disk.
        """
        root = Path(root)
        written: list[Path] = []
        for generated in files:
            destination = root / generated.path
            action = "creating"
            if destination.exists():
                if destination.read_text(encoding="utf-8") == generated.content:
                    print_created(generated.path, "identical")
                    continue
                if not force:
                    if confirm is None:
                        raise FileConflict(generated.path)
                    if not confirm(generated.path):
                        print_created(generated.path, "skipping")
                        continue
                action = "overwriting"
            write_file(destination, generated.content)
            print_created(generated.path, action)
            written.append(destination)
        return written
