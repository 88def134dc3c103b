"""Application and module identifier derivation.

The application identifier names the generated project (and its Python
package); the module identifier is the PascalCase namespace used for the
application and supervisor names inside the generated code.  Both are derived
from the target path unless the caller supplies an explicit override.
"""

from __future__ import annotations

import importlib.util
import keyword
import re
import sys
from pathlib import Path
from typing import Protocol

from wanted.errors import (
    ApplicationNameTaken,
    InvalidApplicationName,
    InvalidModuleName,
    ModuleNameTaken,
)

APP_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")
MODULE_NAME_PATTERN = re.compile(r"^[A-Z][a-zA-Z0-9_]*(\.[A-Z][a-zA-Z0-9_]*)*$")


# ---------------------------------------------------------------------------
# Name registry
# ---------------------------------------------------------------------------


class NameRegistry(Protocol):
    """Answers whether a top-level name is already taken."""

    def exists(self, name: str) -> bool: ...


class ImportRegistry:
    """Name registry backed by the running interpreter's import system.

    A name is taken when it is already imported or when the import machinery
    can locate it on ``sys.path``.
    """

    def exists(self, name: str) -> bool:
        if name in sys.modules:
            return True
        try:
            spec = importlib.util.find_spec(name)
        except (ImportError, ValueError):
            # Parent package of a dotted name is missing
            return False
        # A bare directory on sys.path (namespace package) does not count
        return spec is not None and spec.origin is not None


# ---------------------------------------------------------------------------
# Derivation
# ---------------------------------------------------------------------------


def camelize(name: str) -> str:
    """Convert ``some_thing`` to ``SomeThing``.

    Only underscores delimit words; the rest of each word keeps its casing so
    that ``http_API`` becomes ``HttpAPI``.
    """
    return "".join(part[0].upper() + part[1:] for part in name.split("_") if part)


def _is_valid_app_name(name: str) -> bool:
    return APP_NAME_PATTERN.match(name) is not None and not keyword.iskeyword(name)


def derive_application_identifier(path: str | Path, override: str | None = None) -> str:
    """Return the validated application identifier.

    Args:
        path: Target path of the new project.  Its final segment is used when
            no override is given.
        override: Explicit name from ``--app``.

    Raises:
        InvalidApplicationName: If the name does not match the pattern or is
            a Python keyword.
    """
    if override is not None:
        if not _is_valid_app_name(override):
            raise InvalidApplicationName(
                "Application name must start with a letter and have only lowercase "
                f"letters, numbers and underscore, and must not be a Python keyword, got: {override!r}",
                name=override,
            )
        return override

    name = Path(path).expanduser().resolve().name
    if not _is_valid_app_name(name):
        raise InvalidApplicationName(
            f"Application name {name!r} inferred from the path {str(path)!r} must start "
            "with a letter, have only lowercase letters, numbers and underscore, and must not "
            "be a Python keyword. "
            "Please pass an explicit name with --app",
            name=name,
        )
    return name


def derive_module_identifier(app: str, override: str | None = None) -> str:
    """Return the validated module identifier for *app*.

    Raises:
        InvalidModuleName: If the name is not a valid dotted PascalCase name.
    """
    name = override if override is not None else camelize(app)
    if not MODULE_NAME_PATTERN.match(name):
        raise InvalidModuleName(
            f"Module name must be a valid dotted name (for example: Foo.Bar), got: {name!r}",
            name=name,
        )
    return name


def check_module_availability(module: str, registry: NameRegistry) -> None:
    """Raise :class:`ModuleNameTaken` if *module* is already registered."""
    if registry.exists(module):
        raise ModuleNameTaken(
            f"Module name {module!r} is already taken, please choose another name",
            name=module,
        )


def check_application_availability(app: str, registry: NameRegistry) -> None:
    """Raise :class:`ApplicationNameTaken` if *app* is already importable.

    The generated package is imported as ``app``, so an existing module of
    the same name would shadow it (or be shadowed by it).
    """
    if registry.exists(app):
        raise ApplicationNameTaken(
            f"Application name {app!r} clashes with an existing Python module, "
            "please choose another name",
            name=app,
        )
