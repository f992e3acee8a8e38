"""Jinja2 template rendering for generated artifacts.

Provides the ``TemplateRenderer`` class which holds the fixed inline
templates for each generator kind (controller, view, component) and the
small fragments written by ``rename``.  Every ``render_*`` method is pure:
it maps a name to file contents and never touches the file system.
"""

from __future__ import annotations

from typing import Any

from jinja2 import Environment

from .utils import capitalize, controller_class_name, slugify_name


# ---------------------------------------------------------------------------
# Inline templates
# ---------------------------------------------------------------------------

CONTROLLER_TEMPLATE = """\
// app/Controllers/{{ name | controller_class }}.js
window.{{ name | controller_class }} = {
    // Data to be available in the view
    async index() {
        return {
            title: '{{ name | ucfirst }} Page',
            message: 'Welcome to {{ name | ucfirst }}'
        };
    },

    // Example action
    async submit() {
        console.log('{{ name | controller_class }} action triggered');
    }
};
"""

VIEW_TEMPLATE = """\
<!-- title: {{ name | ucfirst }} -->
<layout name="main">
    <slot name="content">
        <div class="container mx-auto px-4 py-8">
            <h1 class="text-3xl font-bold mb-4" x-text="title"></h1>
            <p class="text-gray-600" x-text="message"></p>
        </div>
    </slot>
</layout>
"""

COMPONENT_TEMPLATE = """\
<!-- app/Components/{{ name | slug }}.html -->
<div class="p-4 bg-white rounded-lg shadow" x-data="{ open: false }">
    <h3 class="font-bold text-lg mb-2">{{ name | ucfirst }} Component</h3>
    <slot></slot>
</div>
"""

TITLE_TEMPLATE = "<title>{{ name }}</title>"
BASE_PATH_RETURN_TEMPLATE = "return '/{{ name }}/';"
PREFIX_CHECK_TEMPLATE = "pathname.startsWith('/{{ name }}')"
README_HEADING_TEMPLATE = "# {{ name }}"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the Staco boilerplate templates.

    Autoescaping is off: names are substituted verbatim into JavaScript and
    HTML, exactly as typed on the command line.
    """

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["ucfirst"] = capitalize
        self.env.filters["slug"] = slugify_name
        self.env.filters["controller_class"] = controller_class_name

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    # -- Generated artifacts -----------------------------------------------

    def render_controller(self, name: str) -> str:
        return self.render_string(CONTROLLER_TEMPLATE, {"name": name})

    def render_view(self, name: str) -> str:
        return self.render_string(VIEW_TEMPLATE, {"name": name})

    def render_component(self, name: str) -> str:
        return self.render_string(COMPONENT_TEMPLATE, {"name": name})

    # -- Rename fragments --------------------------------------------------

    def render_title(self, name: str) -> str:
        """``<title>`` element written into ``index.html``."""
        return self.render_string(TITLE_TEMPLATE, {"name": name})

    def render_base_path_return(self, name: str) -> str:
        return self.render_string(BASE_PATH_RETURN_TEMPLATE, {"name": name})

    def render_prefix_check(self, name: str) -> str:
        return self.render_string(PREFIX_CHECK_TEMPLATE, {"name": name})

    def render_readme_heading(self, name: str) -> str:
        return self.render_string(README_HEADING_TEMPLATE, {"name": name})
