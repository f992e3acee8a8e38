"""Boilerplate generation for controllers, views and components.

``ArtifactGenerator`` resolves a kind token (``controller``/``c``,
``view``/``v``, ``component``/``comp``), derives the target path under
``app/`` and writes the rendered template.  Generation is create-only: an
existing target raises ``ArtifactExistsError`` before anything is written.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .config import Config
from .templates import TemplateRenderer
from .utils import (
    controller_class_name,
    ensure_parent_dir,
    file_exists,
    relative_display,
    slugify_name,
)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class StacoError(Exception):
    """Base class for conditions the CLI reports instead of crashing on."""


class UsageError(StacoError):
    """Raised for a missing argument or an unrecognised command token.

    ``hint`` is an optional follow-up line (usage text, valid choices).
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        self.hint = hint
        super().__init__(message)


class ArtifactExistsError(StacoError):
    """Raised when a generation target is already on disk."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


# ---------------------------------------------------------------------------
# Kinds
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ArtifactKind:
    """One generator target: where it lives and how it is named."""

    name: str
    label: str
    aliases: tuple[str, ...]
    extension: str

    def display_name(self, name: str) -> str:
        """Identifier used in status lines (class name for controllers)."""
        if self.name == "controller":
            return controller_class_name(name)
        return name

    def filename(self, name: str) -> str:
        if self.name == "controller":
            return f"{controller_class_name(name)}.{self.extension}"
        return f"{slugify_name(name)}.{self.extension}"


CONTROLLER = ArtifactKind("controller", "Controller", ("controller", "c"), "js")
VIEW = ArtifactKind("view", "View", ("view", "v"), "html")
COMPONENT = ArtifactKind("component", "Component", ("component", "comp"), "html")

KINDS: tuple[ArtifactKind, ...] = (CONTROLLER, VIEW, COMPONENT)

AVAILABLE_TYPES_HINT = "Available types: " + ", ".join(kind.name for kind in KINDS)


def resolve_kind(token: str | None) -> ArtifactKind:
    """Map a kind token or alias to its ``ArtifactKind``.

    Raises:
        UsageError: If *token* is missing or not a known alias.
    """
    if not token:
        raise UsageError("Please provide a generator type.", hint=AVAILABLE_TYPES_HINT)
    for kind in KINDS:
        if token in kind.aliases:
            return kind
    raise UsageError(f"Unknown generator type: {token}", hint=AVAILABLE_TYPES_HINT)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GeneratedArtifact:
    """A file written by :meth:`ArtifactGenerator.generate`."""

    kind: ArtifactKind
    name: str
    path: Path
    relative_path: str


class ArtifactGenerator:
    """Writes controller, view and component boilerplate under ``app/``."""

    def __init__(self, config: Config, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self._directories: dict[str, Path] = {
            CONTROLLER.name: config.controllers_dir,
            VIEW.name: config.views_dir,
            COMPONENT.name: config.components_dir,
        }
        self._renderers: dict[str, Callable[[str], str]] = {
            CONTROLLER.name: self.renderer.render_controller,
            VIEW.name: self.renderer.render_view,
            COMPONENT.name: self.renderer.render_component,
        }

    # -- Public API --------------------------------------------------------

    def target_path(self, kind: ArtifactKind, name: str) -> Path:
        """Return the path a *kind* artifact called *name* is written to."""
        return self._directories[kind.name] / kind.filename(name)

    def generate(self, kind: ArtifactKind | str, name: str | None) -> GeneratedArtifact:
        """Render and write one artifact.

        Args:
            kind: An ``ArtifactKind`` or any of its alias tokens.
            name: Artifact name as typed by the user.

        Returns:
            The written artifact.

        Raises:
            UsageError: If *name* is empty or *kind* is unknown.
            ArtifactExistsError: If the target file already exists.  Nothing
                is written in that case.
        """
        if not isinstance(kind, ArtifactKind):
            kind = resolve_kind(kind)
        if not name:
            raise UsageError(f"Please provide a {kind.name} name.")

        path = self.target_path(kind, name)
        if file_exists(path):
            raise ArtifactExistsError(
                path, f"{kind.label} '{kind.display_name(name)}' already exists."
            )

        content = self._renderers[kind.name](name)
        ensure_parent_dir(path)
        path.write_text(content, encoding="utf-8")

        return GeneratedArtifact(
            kind=kind,
            name=name,
            path=path,
            relative_path=relative_display(path, self.config.project_root),
        )

    def generate_controller(self, name: str | None) -> GeneratedArtifact:
        return self.generate(CONTROLLER, name)

    def generate_view(self, name: str | None) -> GeneratedArtifact:
        return self.generate(VIEW, name)

    def generate_component(self, name: str | None) -> GeneratedArtifact:
        return self.generate(COMPONENT, name)
