"""Shared pytest fixtures for the Wanted test suite.

Provides reusable fixtures for:
- A fake command runner that records git invocations
- A fake name registry
- A pipeline wired to both fakes
- Temporary output directories
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

import pytest

from wanted.config import Config
from wanted.pipeline import ScaffoldPipeline
from wanted.vcs.runner import CommandResult


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class FakeRunner:
    """Command runner that records calls instead of starting processes.

    ``failures`` maps ``(subcommand, url)`` to ``(returncode, output)``.
    Successful ``git clone URL TARGET`` calls create ``cwd/TARGET`` so the
    rest of the pipeline sees the directory a real clone would leave behind.
    """

    def __init__(self, failures: dict[tuple[str, str], tuple[int, str]] | None = None) -> None:
        self.failures = dict(failures or {})
        self.calls: list[tuple[str, tuple[str, ...], Path | None]] = []

    def run(
        self,
        program: str,
        args: Sequence[str],
        cwd: str | Path | None = None,
    ) -> CommandResult:
        args = tuple(args)
        self.calls.append((program, args, Path(cwd) if cwd else None))
        command = " ".join((program, *args))

        key = (args[0], args[1]) if len(args) > 1 else (args[0], "")
        if key in self.failures:
            returncode, output = self.failures[key]
            return CommandResult(command=command, returncode=returncode, output=output)

        if args[0] == "clone" and cwd is not None:
            (Path(cwd) / args[2]).mkdir(parents=True, exist_ok=True)
        return CommandResult(command=command, returncode=0, output="")

    def subcommands(self) -> list[tuple[str, str]]:
        """Return ``(subcommand, url)`` for every recorded call."""
        return [(args[0], args[1]) for _, args, _ in self.calls]


class FakeRegistry:
    """Name registry answering from a fixed set of taken names."""

    def __init__(self, taken: Sequence[str] = ()) -> None:
        self.taken = set(taken)
        self.queries: list[str] = []

    def exists(self, name: str) -> bool:
        self.queries.append(name)
        return name in self.taken


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A runner where every git command succeeds."""
    return FakeRunner()


@pytest.fixture
def fake_registry() -> FakeRegistry:
    """A registry where ``Existing`` (module) and ``json`` (package) are taken."""
    return FakeRegistry(taken=["Existing", "json"])


@pytest.fixture
def config() -> Config:
    return Config(git_host="git@example.com", git_org="acme")


@pytest.fixture
def make_pipeline(config: Config, fake_registry: FakeRegistry):
    """Factory building a pipeline around a runner (fake by default)."""

    def factory(
        runner: FakeRunner | None = None,
        version: str = "3.12.4",
        confirm: Callable[[str], bool] | None = None,
    ) -> ScaffoldPipeline:
        return ScaffoldPipeline(
            config,
            runner=runner or FakeRunner(),
            registry=fake_registry,
            version=version,
            confirm=confirm,
        )

    return factory


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory for generated projects (auto-cleanup)."""
    out = tmp_path / "out"
    out.mkdir()
    return out.resolve()
