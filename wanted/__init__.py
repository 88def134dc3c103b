"""Wanted -- project scaffold generator.

Creates a ready-to-build Python project from a target path: README, ignore
file, build descriptor, config, an application/supervisor entry point, and a
pytest suite.  In its multi-repo form the project is cloned from an existing
repository and UI/protocol repositories are attached as git submodules.

Quick usage::

    from wanted import ScaffoldPipeline, ScaffoldRequest

    result = ScaffoldPipeline().run(ScaffoldRequest(path="hello_world"))
"""

from wanted.config import Config
from wanted.pipeline import ScaffoldPipeline, ScaffoldRequest, ScaffoldResult

__all__ = [
    "Config",
    "ScaffoldPipeline",
    "ScaffoldRequest",
    "ScaffoldResult",
]

__version__ = "0.1.0"
