"""
Template engine wrapper for declaration emission.

Provides a simple interface for Jinja2 template rendering
with the built-in struct and interface templates.
"""

from typing import Any, Dict, Optional, Union
from pathlib import Path

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    TemplateNotFound,
    select_autoescape,
)

from .naming import to_camel_case, to_pascal_case, to_snake_case


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


# Body lines carry their own indentation and comment suffix; block tags sit
# on their own lines so trim_blocks drops the newline after them.
GO_STRUCT_TEMPLATE = """type {{ struct_name }} struct {
{% for field in fields %}
\t{{ field.name }} {{ field.type }} {{ field.tag }}{{ field.comment }}
{% endfor %}
}"""

TS_INTERFACE_TEMPLATE = """{{ prefix }}interface {{ interface_name }} {
{% for field in fields %}
  {{ field.name }}{{ field.marker }}: {{ field.type }};{{ field.comment }}
{% endfor %}
}"""

BUILTIN_TEMPLATES = {
    "struct.go.j2": GO_STRUCT_TEMPLATE,
    "interface.ts.j2": TS_INTERFACE_TEMPLATE,
}


class TemplateEngine:
    """Wrapper for Jinja2 template engine with naming filters."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory whose templates take precedence over the
                built-in ones of the same name
        """
        self.template_dir = template_dir
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with naming filters."""
        self._memory_loader = DictLoader(dict(BUILTIN_TEMPLATES))
        if self.template_dir and self.template_dir.exists():
            loader = ChoiceLoader(
                [FileSystemLoader(str(self.template_dir)), self._memory_loader]
            )
        else:
            loader = self._memory_loader

        self._env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
        )

        self._env.filters["snake_case"] = to_snake_case
        self._env.filters["camel_case"] = to_camel_case
        self._env.filters["pascal_case"] = to_pascal_case

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {template_name}") from e
        return template.render(**context)

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """Render a template string with the given context."""
        return self._env.from_string(template_string).render(**context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        A file of the same name in ``template_dir`` still takes precedence.

        Args:
            name: Template name
            content: Template content
        """
        self._memory_loader.mapping[name] = content
        if self._env.cache is not None:
            self._env.cache.clear()


def create_template_engine(
    template_dir: Optional[Union[str, Path]] = None,
) -> TemplateEngine:
    """Create a template engine, falling back to the built-in templates."""
    if template_dir is not None:
        template_dir = Path(template_dir)
    return TemplateEngine(template_dir)
