"""Project renaming.

``ProjectRenamer`` rewrites the stock project name in three files of the
skeleton.  The steps are independent and best-effort: a missing file or a
file that no longer carries the default literal is reported as a warning
and the next step still runs.  Matching is deliberately narrow:

- ``index.html``: the first ``<title>...</title>`` element.
- ``config/base-path.js``: the literals ``return '/Staco/';`` and
  ``pathname.startsWith('/Staco')``, first occurrence of each.  The file is
  left untouched unless the return literal is present.
- ``README.md``: a leading ``# Staco`` heading prefix.
"""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, Field

from .config import Config
from .generator import UsageError
from .templates import TemplateRenderer
from .utils import file_exists, read_source, write_source

_TITLE_RE = re.compile(r"<title\s*>.*?</title\s*>", re.DOTALL)

StepStatus = Literal["updated", "skipped", "missing"]


class RenameStepResult(BaseModel):
    """Outcome of one rename step."""

    step: str = Field(..., description="File the step targets, relative to the project root")
    status: StepStatus
    message: str

    @property
    def ok(self) -> bool:
        return self.status == "updated"


class ProjectRenamer:
    """Rewrites the default project name in ``index.html``, the base-path
    script and ``README.md``."""

    def __init__(self, config: Config, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    def rename(self, new_name: str | None) -> list[RenameStepResult]:
        """Run all three steps for *new_name* and return their results in order.

        Raises:
            UsageError: If *new_name* is empty.  No file is touched.
        """
        if not new_name:
            raise UsageError(
                "Please provide a new project name.",
                hint="Usage: staco rename <new-name>",
            )
        return [
            self.update_index(new_name),
            self.update_base_path(new_name),
            self.update_readme(new_name),
        ]

    # -- Steps -------------------------------------------------------------

    def update_index(self, new_name: str) -> RenameStepResult:
        path = self.config.index_path
        if not file_exists(path):
            return RenameStepResult(
                step="index.html", status="missing", message="index.html not found"
            )

        content = read_source(path)
        title = self.renderer.render_title(new_name)
        updated, count = _TITLE_RE.subn(lambda _match: title, content, count=1)
        if not count:
            return RenameStepResult(
                step="index.html",
                status="skipped",
                message="index.html has no <title> element. Skipping.",
            )

        write_source(path, updated)
        return RenameStepResult(
            step="index.html", status="updated", message="Updated index.html title"
        )

    def update_base_path(self, new_name: str) -> RenameStepResult:
        path = self.config.base_path_file
        step = "config/base-path.js"
        if not file_exists(path):
            return RenameStepResult(step=step, status="missing", message=f"{step} not found")

        content = read_source(path)
        literal = self.config.base_path_literal
        if literal not in content:
            return RenameStepResult(
                step=step,
                status="skipped",
                message=(
                    f"{step} does not contain standard '/{self.config.default_name}/' "
                    "string. Skipping."
                ),
            )

        content = content.replace(literal, self.renderer.render_base_path_return(new_name), 1)
        content = content.replace(
            self.config.prefix_check_literal,
            self.renderer.render_prefix_check(new_name),
            1,
        )
        write_source(path, content)
        return RenameStepResult(step=step, status="updated", message=f"Updated {step}")

    def update_readme(self, new_name: str) -> RenameStepResult:
        path = self.config.readme_path
        if not file_exists(path):
            return RenameStepResult(
                step="README.md", status="missing", message="README.md not found"
            )

        content = read_source(path)
        heading = self.config.readme_heading
        if not content.startswith(heading):
            return RenameStepResult(
                step="README.md",
                status="skipped",
                message=f"README.md does not start with '{heading}'. Skipping.",
            )

        content = self.renderer.render_readme_heading(new_name) + content[len(heading):]
        write_source(path, content)
        return RenameStepResult(
            step="README.md", status="updated", message="Updated README.md title"
        )
