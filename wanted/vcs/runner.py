"""Blocking command execution for git operations.

Every external process the generator starts goes through a
:class:`CommandRunner`, so tests can substitute a fake that records calls
instead of invoking a real binary.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from rich.markup import escape

from wanted.utils import console


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a finished command."""

    command: str
    returncode: int
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    """Runs ``program args...`` in *cwd* and waits for it to finish."""

    def run(
        self,
        program: str,
        args: Sequence[str],
        cwd: str | Path | None = None,
    ) -> CommandResult: ...


class SubprocessRunner:
    """Run commands with :func:`subprocess.run`.

    stdout and stderr are merged into a single captured output so that git's
    diagnostics (which it writes to stderr) travel with the result.  There is
    no timeout: a hanging command hangs the generator.
    """

    def __init__(self, verbose: bool = True) -> None:
        self.verbose = verbose

    def run(
        self,
        program: str,
        args: Sequence[str],
        cwd: str | Path | None = None,
    ) -> CommandResult:
        cmd = [program, *args]
        cmd_str = " ".join(cmd)
        if self.verbose:
            console.print(f"[cyan]* running[/cyan] {escape(cmd_str)}", highlight=False)

        try:
            completed = subprocess.run(
                cmd,
                cwd=str(cwd) if cwd else None,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as exc:
            # Binary missing or not executable
            return CommandResult(command=cmd_str, returncode=127, output=str(exc))

        return CommandResult(
            command=cmd_str,
            returncode=completed.returncode,
            output=(completed.stdout or "").strip(),
        )
