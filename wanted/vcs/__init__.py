"""Git support: command execution, repository references, and submodule cloning."""

from wanted.vcs.runner import CommandResult, CommandRunner, SubprocessRunner
from wanted.vcs.refs import (
    GitRepoRef,
    SubmoduleLink,
    default_git_url,
    derive_directory_name,
    probe_all,
    probe_reachable,
)
from wanted.vcs.submodules import SubmoduleOrchestrator

__all__ = [
    "CommandResult",
    "CommandRunner",
    "GitRepoRef",
    "SubmoduleLink",
    "SubmoduleOrchestrator",
    "SubprocessRunner",
    "default_git_url",
    "derive_directory_name",
    "probe_all",
    "probe_reachable",
]
