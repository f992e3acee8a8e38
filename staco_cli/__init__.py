"""Staco CLI -- development tools for the Staco web-application skeleton.

Renames a freshly cloned skeleton and generates controller, view and
component boilerplate under ``app/``.

Quick usage::

    from staco_cli import ArtifactGenerator, Config

    generator = ArtifactGenerator(Config(project_root="/path/to/project"))
    generator.generate("view", "dashboard")
"""

from staco_cli.config import Config
from staco_cli.generator import (
    ArtifactExistsError,
    ArtifactGenerator,
    StacoError,
    UsageError,
)
from staco_cli.renamer import ProjectRenamer, RenameStepResult
from staco_cli.templates import TemplateRenderer

__all__ = [
    "ArtifactExistsError",
    "ArtifactGenerator",
    "Config",
    "ProjectRenamer",
    "RenameStepResult",
    "StacoError",
    "TemplateRenderer",
    "UsageError",
]

__version__ = "0.1.0"
