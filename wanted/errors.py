"""Exception hierarchy for the Wanted scaffold generator.

Every failure raised while generating a project derives from
:class:`WantedError`.  None of them are retried or recovered locally: they
propagate up to the CLI entry point, which prints a single diagnostic and
exits with a non-zero status.
"""

from __future__ import annotations


class WantedError(Exception):
    """Base class for all scaffold generation failures."""


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


class IdentifierError(WantedError):
    """Raised when an application or module identifier is rejected."""

    def __init__(self, message: str, name: str = "") -> None:
        self.name = name
        super().__init__(message)


class InvalidApplicationName(IdentifierError):
    """The application name does not match ``^[a-z][a-z0-9_]*$`` or is a Python keyword."""


class InvalidModuleName(IdentifierError):
    """The module name is not a dot-separated sequence of PascalCase segments."""


class ModuleNameTaken(IdentifierError):
    """The module name already denotes an existing top-level name."""


class ApplicationNameTaken(IdentifierError):
    """The application package name would shadow, or be shadowed by, an importable module."""


# ---------------------------------------------------------------------------
# Versions
# ---------------------------------------------------------------------------


class VersionParseError(WantedError):
    """The toolchain version is not a well-formed semantic version."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Unable to parse version {version!r} as major.minor.patch[-pre]")


# ---------------------------------------------------------------------------
# Git
# ---------------------------------------------------------------------------


class ConfigError(WantedError):
    """Raised for invalid generator configuration."""


class MalformedGitUrl(ConfigError):
    """The git URL does not end in a ``/<name>.git`` path segment."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(
            f"Unacceptable git repository URL {url!r}: "
            "expected it to end with /<name>.git"
        )


class GitError(WantedError):
    """Raised when a git command exits with a non-zero status."""

    def __init__(self, message: str, url: str = "", command: str = "", output: str = "") -> None:
        self.url = url
        self.command = command
        self.output = output
        super().__init__(message)


class UnreachableGitRemote(GitError):
    """``git ls-remote`` failed for a repository reference."""


class CloneFailed(GitError):
    """``git clone`` failed for a repository reference."""


# ---------------------------------------------------------------------------
# Templates and files
# ---------------------------------------------------------------------------


class TemplateError(WantedError):
    """Raised when a template cannot be rendered."""

    def __init__(self, message: str, template_id: str = "") -> None:
        self.template_id = template_id
        super().__init__(message)


class UnknownTemplate(TemplateError):
    """The template id is not part of the catalog."""


class MissingContextKey(TemplateError):
    """A template references a key that is absent from the context."""


class FileConflict(WantedError):
    """A generated file already exists with different content."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"{path} already exists with different content, pass --force to overwrite it"
        )
