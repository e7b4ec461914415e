from pathlib import Path
from typing import Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

TEMPLATES_PATH = Path(__file__).resolve().parent / "templates"


class ExportTemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for Markdown exports.

    Templates are stored in beacon/contexts/export/templates/{name}.md.jinja.
    Undefined variables raise instead of rendering as empty strings.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding *.md.jinja files. Defaults to
                            beacon/contexts/export/templates/
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["percent"] = lambda value: f"{round(value * 100)}%"

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without extension (e.g., 'resume')

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        if name in self._cache:
            return self._cache[name]

        template_file = f"{name}.md.jinja"
        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Export template '{name}' not found at {self.templates_path / template_file}"
            ) from e

        self._cache[name] = template
        return template

    def is_cached(self, name: str) -> bool:
        return name in self._cache

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()
