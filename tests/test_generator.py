"""Tests for boilerplate generation (staco_cli.generator).

Covers:
- Kind resolution and aliases
- Target path conventions per kind
- Create-only writes (conflicts leave the first file untouched)
- Missing names and unknown kinds write nothing
- Directory creation for fresh projects
"""

from __future__ import annotations

from pathlib import Path

import pytest

from staco_cli.config import Config
from staco_cli.generator import (
    AVAILABLE_TYPES_HINT,
    COMPONENT,
    CONTROLLER,
    KINDS,
    VIEW,
    ArtifactExistsError,
    ArtifactGenerator,
    StacoError,
    UsageError,
    resolve_kind,
)


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def generator(empty_root: Path) -> ArtifactGenerator:
    return ArtifactGenerator(Config(project_root=empty_root))


# ---------------------------------------------------------------------------
# Kinds
# ---------------------------------------------------------------------------


class TestResolveKind:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("controller", CONTROLLER),
            ("c", CONTROLLER),
            ("view", VIEW),
            ("v", VIEW),
            ("component", COMPONENT),
            ("comp", COMPONENT),
        ],
    )
    def test_aliases(self, token: str, expected):
        assert resolve_kind(token) is expected

    def test_unknown_kind(self):
        with pytest.raises(UsageError) as exc_info:
            resolve_kind("widget")
        assert str(exc_info.value) == "Unknown generator type: widget"
        assert exc_info.value.hint == "Available types: controller, view, component"

    def test_missing_kind(self):
        with pytest.raises(UsageError) as exc_info:
            resolve_kind(None)
        assert str(exc_info.value) == "Please provide a generator type."
        assert "None" not in str(exc_info.value)
        assert exc_info.value.hint == AVAILABLE_TYPES_HINT

    def test_kinds_order(self):
        assert [kind.name for kind in KINDS] == ["controller", "view", "component"]
        assert AVAILABLE_TYPES_HINT.endswith("controller, view, component")

    def test_errors_share_base(self):
        assert issubclass(UsageError, StacoError)
        assert issubclass(ArtifactExistsError, StacoError)


# ---------------------------------------------------------------------------
# Target paths
# ---------------------------------------------------------------------------


class TestTargetPath:
    def test_controller_path(self, generator: ArtifactGenerator, empty_root: Path):
        path = generator.target_path(CONTROLLER, "user")
        assert path == empty_root / "app" / "Controllers" / "UserController.js"

    def test_view_path_lowercased(self, generator: ArtifactGenerator, empty_root: Path):
        path = generator.target_path(VIEW, "UserProfile")
        assert path == empty_root / "app" / "Views" / "userprofile.html"

    def test_component_path_lowercased(self, generator: ArtifactGenerator, empty_root: Path):
        path = generator.target_path(COMPONENT, "NavBar")
        assert path == empty_root / "app" / "Components" / "navbar.html"


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


class TestGenerate:
    def test_controller_written(self, generator: ArtifactGenerator, empty_root: Path):
        artifact = generator.generate_controller("user")
        assert artifact.path.is_file()
        assert artifact.relative_path == "app/Controllers/UserController.js"
        assert artifact.kind is CONTROLLER
        assert "window.UserController" in artifact.path.read_text(encoding="utf-8")

    def test_view_written(self, generator: ArtifactGenerator, empty_root: Path):
        artifact = generator.generate_view("foo")
        path = empty_root / "app" / "Views" / "foo.html"
        assert artifact.path == path
        assert "<!-- title: Foo -->" in path.read_text(encoding="utf-8")

    def test_component_written(self, generator: ArtifactGenerator, empty_root: Path):
        artifact = generator.generate_component("Card")
        assert artifact.relative_path == "app/Components/card.html"
        assert "Card Component" in artifact.path.read_text(encoding="utf-8")

    def test_generate_by_alias(self, generator: ArtifactGenerator):
        artifact = generator.generate("comp", "badge")
        assert artifact.kind is COMPONENT

    def test_creates_missing_directories(self, generator: ArtifactGenerator, empty_root: Path):
        assert not (empty_root / "app").exists()
        generator.generate_view("home")
        assert (empty_root / "app" / "Views").is_dir()

    def test_existing_app_dir_reused(self, generator: ArtifactGenerator, empty_root: Path):
        views = empty_root / "app" / "Views"
        views.mkdir(parents=True)
        (views / "other.html").write_text("keep", encoding="utf-8")
        generator.generate_view("home")
        assert (views / "other.html").read_text(encoding="utf-8") == "keep"
        assert (views / "home.html").is_file()


class TestCreateOnly:
    def test_second_controller_conflicts(self, generator: ArtifactGenerator):
        first = generator.generate_controller("user")
        original = first.path.read_bytes()
        with pytest.raises(ArtifactExistsError) as exc_info:
            generator.generate_controller("user")
        assert str(exc_info.value) == "Controller 'UserController' already exists."
        assert exc_info.value.path == first.path
        assert first.path.read_bytes() == original

    def test_hand_edited_view_not_overwritten(self, generator: ArtifactGenerator):
        path = generator.generate_view("foo").path
        path.write_text("custom", encoding="utf-8")
        with pytest.raises(ArtifactExistsError, match="View 'Foo' already exists."):
            generator.generate_view("Foo")
        assert path.read_text(encoding="utf-8") == "custom"

    def test_component_conflict(self, generator: ArtifactGenerator):
        generator.generate_component("card")
        with pytest.raises(ArtifactExistsError, match="Component 'card' already exists."):
            generator.generate_component("card")


class TestNoWrites:
    @pytest.mark.parametrize("kind", ["controller", "view", "component"])
    @pytest.mark.parametrize("name", [None, ""])
    def test_missing_name(self, generator: ArtifactGenerator, empty_root: Path, snapshot, kind, name):
        before = snapshot(empty_root)
        with pytest.raises(UsageError, match=f"Please provide a {kind} name."):
            generator.generate(kind, name)
        assert snapshot(empty_root) == before

    def test_unknown_kind(self, generator: ArtifactGenerator, empty_root: Path, snapshot):
        before = snapshot(empty_root)
        with pytest.raises(UsageError, match="Unknown generator type: widget"):
            generator.generate("widget", "foo")
        assert snapshot(empty_root) == before
