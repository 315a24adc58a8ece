"""
Templating Registries

Centralized registry for loading and caching the HTML templates.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

from vitae.contexts.templating.formatting import FILTERS

load_dotenv()
TEMPLATE_PATH = Path(os.getenv("RESUME_TEMPLATE_PATH", Path(__file__).parent / "template"))


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Layout under the template root:
    - types/{type_name}/template.html.jinja: one template per resume section
    - structure/: document skeleton and embedded stylesheet
    - wrappers/: section wrapper (heading + body)

    Every template is rendered with autoescaping on, so any value interpolated
    with {{ }} has &, <, > and quotes replaced by entities unless it is
    already Markup.
    """

    def __init__(self, template_path: Path = None):
        """
        Initialize the template registry.

        Args:
            template_path: Template root. Defaults to RESUME_TEMPLATE_PATH from
                environment, else the templates shipped with the package
        """
        if template_path is None:
            template_path = TEMPLATE_PATH

        self.template_path = Path(template_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.template_path)),
            autoescape=True,
            # Catches silent failures
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters.update(FILTERS)

    def _load(self, relative_path: str) -> Template:
        if relative_path in self._cache:
            return self._cache[relative_path]

        try:
            template = self.env.get_template(relative_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found: {self.template_path / relative_path}"
            ) from e

        self._cache[relative_path] = template
        return template

    def get_template(self, type_name: str) -> Template:
        """
        Get a section template by type name, loading and caching it if necessary.

        Args:
            type_name: Name of the section type (e.g., 'skills')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        return self._load(f"types/{type_name}/template.html.jinja")

    def get_structure_template(self, name: str) -> Template:
        """Get a document-level template (e.g. 'structure/document', 'wrappers/section')."""
        return self._load(f"{name}.html.jinja")

    def get_template_path(self, type_name: str) -> Path:
        """
        Get the file path for a section type's template.

        Args:
            type_name: Name of the section type

        Returns:
            Path to template file
        """
        return self.template_path / "types" / type_name / "template.html.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, type_name: str) -> bool:
        """
        Check if a section template is in the cache.

        Args:
            type_name: Name of the section type

        Returns:
            True if cached, False otherwise
        """
        return f"types/{type_name}/template.html.jinja" in self._cache
