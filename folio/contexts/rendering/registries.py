"""
Page Template Registry

Loads and caches the Jinja2 templates that wrap a painted frame in an HTML page.
"""

from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

TEMPLATES_PATH = Path(__file__).parent / "templates"
PAGE_TEMPLATE = "page.html.jinja"


class PageTemplateRegistry:
    """
    Registry for loading and caching Jinja2 page templates.

    Templates live in folio/contexts/rendering/templates/. Painted terminal
    markup is passed in already escaped by rich and marked safe in the template.
    """

    def __init__(self, templates_path: Path = None):
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, name: str = PAGE_TEMPLATE) -> Template:
        """
        Get a template by file name, loading and caching it if necessary.

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        if name in self._cache:
            return self._cache[name]

        try:
            template = self.env.get_template(name)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Page template '{name}' not found in {self.templates_path}"
            ) from e

        self._cache[name] = template
        return template

    def render_page(self, name: str = PAGE_TEMPLATE, **context: Any) -> str:
        """Render a page template with the given context."""
        return self.get_template(name).render(**context)

    def is_cached(self, name: str) -> bool:
        return name in self._cache

    def clear_cache(self) -> None:
        self._cache.clear()
