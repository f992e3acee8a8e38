"""Staco CLI configuration.

A single typed ``Config`` model holds the project root every command works
against, the default project name that ``rename`` looks for, and the paths
derived from both.  Commands never resolve the root on their own; a
``Config`` is built once by the CLI entry point (or by a test) and passed
down.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_PROJECT_NAME = "Staco"


class Config(BaseModel):
    """Project root and the literals/paths derived from it."""

    project_root: Path = Field(default_factory=Path.cwd)
    default_name: str = Field(
        default=DEFAULT_PROJECT_NAME,
        min_length=1,
        description="Project name shipped with the skeleton; rename only rewrites this literal",
    )

    # ------------------------------------------------------------------
    # Rename targets
    # ------------------------------------------------------------------

    @property
    def index_path(self) -> Path:
        """The skeleton's ``index.html``."""
        return self.project_root / "index.html"

    @property
    def base_path_file(self) -> Path:
        """The base-path configuration script."""
        return self.project_root / "config" / "base-path.js"

    @property
    def readme_path(self) -> Path:
        return self.project_root / "README.md"

    # ------------------------------------------------------------------
    # Generation targets
    # ------------------------------------------------------------------

    @property
    def controllers_dir(self) -> Path:
        return self.project_root / "app" / "Controllers"

    @property
    def views_dir(self) -> Path:
        return self.project_root / "app" / "Views"

    @property
    def components_dir(self) -> Path:
        return self.project_root / "app" / "Components"

    # ------------------------------------------------------------------
    # Default literals matched by rename
    # ------------------------------------------------------------------

    @property
    def base_path_literal(self) -> str:
        """Return statement of the stock ``getBasePath()``."""
        return f"return '/{self.default_name}/';"

    @property
    def prefix_check_literal(self) -> str:
        """Pathname prefix check of the stock ``getBasePath()``."""
        return f"pathname.startsWith('/{self.default_name}')"

    @property
    def readme_heading(self) -> str:
        return f"# {self.default_name}"
