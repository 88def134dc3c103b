"""Wanted scaffold pipeline.

Drives one project generation from start to finish, in a fixed order where
each step is a hard precondition for the next:

1. Derive and validate the application and module identifiers and check
   that neither is already taken.
2. (multi-repo) Resolve the git references and probe every remote.
3. (multi-repo) Clone the primary repository as the project directory;
   otherwise create the project directory.
4. Assemble the template context.
5. Render and write the project files.
6. (multi-repo) Clone the auxiliary repositories.

Any failure aborts the run immediately.  Nothing is rolled back: files written
and repositories cloned before the failure stay on disk.

In the multi-repo variant the primary clone usually already holds a README or
other files the generator writes.  Those are overwritten with ``--force``;
otherwise the user is asked per file when running on a terminal, and the run
stops with ``FileConflict`` when nobody can be asked.  ``--force`` cannot
resume an interrupted multi-repo run: the primary clone refuses an existing
project directory, so remove it and start again.

Usage::

    wanted new hello_world
    wanted new hello_world --app hello --module Hello.World
    wanted new hello_world --multi-repo --git-ui git@github.com:org/hello_ui.git
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from pydantic import BaseModel, ConfigDict

from wanted.config import Config
from wanted.errors import WantedError
from wanted.naming import (
    ImportRegistry,
    NameRegistry,
    check_application_availability,
    check_module_availability,
    derive_application_identifier,
    derive_module_identifier,
)
from wanted.scaffolder import ProjectGenerator, TemplateContext, TemplateRenderer
from wanted.utils import (
    confirm_overwrite,
    console,
    ensure_dir,
    print_error,
    print_success,
    print_summary_table,
)
from wanted.vcs.refs import GitRepoRef, probe_all
from wanted.vcs.runner import CommandRunner, SubprocessRunner
from wanted.vcs.submodules import SubmoduleOrchestrator
from wanted.version import short_version, toolchain_version


# ---------------------------------------------------------------------------
# Request / result
# ---------------------------------------------------------------------------


class ScaffoldRequest(BaseModel):
    """One generation request, as given on the command line."""

    model_config = ConfigDict(frozen=True)

    path: str
    app: str | None = None
    module: str | None = None
    multi_repo: bool = False
    git_app: str | None = None
    git_ui: str | None = None
    git_proto: str | None = None
    force: bool = False


@dataclass
class ScaffoldResult:
    """What a successful run produced."""

    root: Path
    app: str
    mod: str
    files: list[Path] = field(default_factory=list)
    clones: list[Path] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class ScaffoldPipeline:
    """Generates a project from a :class:`ScaffoldRequest`.

    Attributes:
        config: Generator configuration.
        runner: Executes git commands.
        registry: Answers whether the module or application name is taken.
        renderer: Renders the template catalog.
        version: Full toolchain version embedded in the build descriptor.
        confirm: Asked before overwriting an existing file that differs from
            the generated one.  ``None`` makes such a file a ``FileConflict``.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        runner: CommandRunner | None = None,
        registry: NameRegistry | None = None,
        renderer: TemplateRenderer | None = None,
        version: str | None = None,
        confirm: Callable[[str], bool] | None = None,
    ) -> None:
        self.config = config or Config()
        self.runner = runner or SubprocessRunner()
        self.registry = registry or ImportRegistry()
        self.renderer = renderer or TemplateRenderer()
        self.version = version or toolchain_version()
        self.confirm = confirm
        self.generator = ProjectGenerator(self.renderer)
        self.orchestrator = SubmoduleOrchestrator(
            self.runner,
            self.renderer,
            aux_dir=self.config.aux_dir,
            git=self.config.git_binary,
        )

    def run(self, request: ScaffoldRequest) -> ScaffoldResult:
        """Generate the project described by *request*.

        Raises:
            WantedError: On the first failing step.
        """
        root = Path(request.path).expanduser().resolve()

        # 1. Identifiers
        app = derive_application_identifier(request.path, request.app)
        check_application_availability(app, self.registry)
        mod = derive_module_identifier(app, request.module)
        check_module_availability(mod, self.registry)
        version = short_version(self.version)

        if not request.multi_repo:
            # 2. Project directory
            ensure_dir(root)
            context = TemplateContext(
                app=app,
                mod=mod,
                version=version,
            )
            files = self.generator.build_files(context)
            written = self.generator.write(
                root, files, force=request.force, confirm=self.confirm
            )
            return ScaffoldResult(root=root, app=app, mod=mod, files=written)

        # 2. Resolve and probe every remote before touching the filesystem
        git_ui = GitRepoRef.from_url(request.git_ui or self.config.default_git_url(app, "_ui"))
        git_proto = GitRepoRef.from_url(
            request.git_proto or self.config.default_git_url(app, "_proto")
        )
        git_app = GitRepoRef.from_url(request.git_app or self.config.default_git_url(app))
        probe_all([git_ui, git_proto, git_app], self.runner, git=self.config.git_binary)

        # 3. The primary clone creates the project directory
        ensure_dir(root.parent)
        self.orchestrator.clone_root(git_app, root)

        # 4. Context
        auxiliary = [git_ui, git_proto]
        links = self.orchestrator.links(auxiliary)
        context = TemplateContext(
            app=app,
            mod=mod,
            version=version,
            dependencies=tuple(self.config.multi_repo_dependencies),
            multi_repo=True,
            aux_dir=self.config.aux_dir,
            git_app=git_app.url,
            git_ui=git_ui.url,
            git_proto=git_proto.url,
            dir_ui=git_ui.dirname,
            dir_proto=git_proto.dirname,
            submodules=tuple(links),
        )

        # 5. Files; the primary clone may already hold some of them
        files = self.generator.build_files(
            context,
            linkage=self.orchestrator.build_linkage_descriptor(context.submodules),
        )
        written = self.generator.write(root, files, force=request.force, confirm=self.confirm)

        # 6. Auxiliary repositories
        self.orchestrator.clone_auxiliary(auxiliary, root)

        return ScaffoldResult(
            root=root,
            app=app,
            mod=mod,
            files=written,
            clones=list(self.orchestrator.completed),
        )


def _print_next_steps(result: ScaffoldResult, path: str) -> None:
    print_summary_table(
        {
            "Application": result.app,
            "Module": result.mod,
            "Location": str(result.root),
            "Files written": str(len(result.files)),
            "Repositories cloned": str(len(result.clones)),
        },
        title="Wanted project",
    )
    print_success("Your project was created successfully.")
    console.print(
        "You can install it and run its tests with:\n\n"
        f"    cd {path}\n"
        "    pip install -e \".[dev]\"\n"
        "    pytest\n",
        highlight=False,
        markup=False,
    )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wanted",
        description="Wanted -- project scaffold generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  wanted new hello_world\n"
            "  wanted new ./apps/hello --app hello_app --module Hello.App\n"
            "  wanted new hello_world --multi-repo\n"
            "  wanted new hello_world --git-ui git@github.com:org/hello_world_ui.git\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser("new", help="create a new project")
    new_parser.add_argument("path", help="Path of the project to create")
    new_parser.add_argument(
        "--app",
        default=None,
        help="Application name (defaults to the last segment of PATH)",
    )
    new_parser.add_argument(
        "--module",
        default=None,
        help="Module name (defaults to the camelized application name)",
    )
    new_parser.add_argument(
        "--multi-repo",
        action="store_true",
        help="Clone the application repository and add UI/protocol submodules",
    )
    new_parser.add_argument("--git-app", default=None, help="Application repository URL")
    new_parser.add_argument("--git-ui", default=None, help="UI repository URL")
    new_parser.add_argument("--git-proto", default=None, help="Protocol repository URL")
    new_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing files with different content instead of asking",
    )
    return parser


def parse_request(argv: Sequence[str] | None = None) -> ScaffoldRequest:
    """Parse command line arguments into a :class:`ScaffoldRequest`."""
    parser = build_parser()
    args = parser.parse_args(argv)

    multi_repo = args.multi_repo or any((args.git_app, args.git_ui, args.git_proto))
    if multi_repo and (args.app or args.module):
        parser.error("--app and --module cannot be combined with a multi-repo project")

    return ScaffoldRequest(
        path=args.path,
        app=args.app,
        module=args.module,
        multi_repo=multi_repo,
        git_app=args.git_app,
        git_ui=args.git_ui,
        git_proto=args.git_proto,
        force=args.force,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``wanted``."""
    request = parse_request(argv)
    confirm = confirm_overwrite if sys.stdin.isatty() else None
    pipeline = ScaffoldPipeline(Config.from_env(), confirm=confirm)

    try:
        result = pipeline.run(request)
    except WantedError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    _print_next_steps(result, request.path)


if __name__ == "__main__":
    main()
