"""
Templating Context

Responsibilities:
- Renders a ProfileRecord to a self-contained HTML document
- Manages the HTML template system (template/)
- Applies escaping to every interpolated field and drops empty optional sections
- Embeds the print stylesheet

Owns: Section builders, HTML templates, date display formatting
Never: Reads data files or launches the browser
"""

from vitae.contexts.templating.html_generator import (
    ProfileToHTMLConverter,
    SectionFragment,
    render,
)
from vitae.contexts.templating.registries import TemplateRegistry

__all__ = [
    "ProfileToHTMLConverter",
    "SectionFragment",
    "TemplateRegistry",
    "render",
]
