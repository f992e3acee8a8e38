"""Shared pytest fixtures for the Staco CLI test suite.

Provides:
- An empty project root
- A project root populated with the stock skeleton files rename touches
- A ``Config`` bound to that root
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from staco_cli.config import Config


# ---------------------------------------------------------------------------
# Skeleton file contents
# ---------------------------------------------------------------------------

INDEX_HTML = textwrap.dedent("""\
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8">
        <title>Staco</title>
        <script src="config/base-path.js"></script>
    </head>
    <body>
        <div id="app"></div>
    </body>
    </html>
    """)

BASE_PATH_JS = textwrap.dedent("""\
    function getBasePath() {
        const pathname = window.location.pathname;
        if (pathname.startsWith('/Staco')) {
            return '/Staco/';
        }
        return '/';
    }
    """)

README_MD = textwrap.dedent("""\
    # Staco

    A tiny single-page application skeleton.
    """)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def empty_root(tmp_path: Path) -> Path:
    """Project root with nothing in it."""
    root = tmp_path / "empty-project"
    root.mkdir()
    yield root


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Project root containing the stock ``index.html``, base-path script and README."""
    root = tmp_path / "staco-project"
    (root / "config").mkdir(parents=True)
    (root / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (root / "config" / "base-path.js").write_text(BASE_PATH_JS, encoding="utf-8")
    (root / "README.md").write_text(README_MD, encoding="utf-8")
    yield root


@pytest.fixture
def config(project_root: Path) -> Config:
    """A ``Config`` bound to the skeleton project root."""
    return Config(project_root=project_root)


@pytest.fixture
def snapshot():
    """Callable mapping every entry under a root to its bytes (``None`` for directories).

    Two equal snapshots mean nothing was created, removed or rewritten.
    """

    def _snapshot(root: Path) -> dict[str, bytes | None]:
        return {
            path.relative_to(root).as_posix(): path.read_bytes() if path.is_file() else None
            for path in sorted(root.rglob("*"))
        }

    return _snapshot
