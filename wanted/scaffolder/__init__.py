"""Wanted scaffolder -- renders and writes the project files.

Quick usage::

    from wanted.scaffolder import ProjectGenerator, TemplateContext

    context = TemplateContext(app="hello_world", mod="HelloWorld", version="3.12")
    generator = ProjectGenerator()
    generator.write("/tmp/hello_world", generator.build_files(context))
"""

from wanted.scaffolder.templates import CATALOG_IDS, TemplateRenderer, load_catalog
from wanted.scaffolder.generator import GeneratedFile, ProjectGenerator, TemplateContext

__all__ = [
    "CATALOG_IDS",
    "GeneratedFile",
    "ProjectGenerator",
    "TemplateContext",
    "TemplateRenderer",
    "load_catalog",
]
