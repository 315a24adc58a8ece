"""
HTML Generator

Converts a ProfileRecord to a complete, self-contained HTML document.

Each section has a builder returning a SectionFragment (heading plus escaped
body markup). Optional sections return None when there is nothing to show.
generate_document() composes the fragments inside the document template,
which embeds the print stylesheet.
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from jinja2 import TemplateError
from markupsafe import Markup

from vitae.contexts.intake.profile_data_structure import Basics, ProfileRecord
from vitae.contexts.templating.logger import _log_debug, _log_error
from vitae.contexts.templating.registries import TemplateRegistry
from vitae.exceptions import RenderError
from vitae.utils.text_processing import strip_url_scheme

# Section headings, in document order
SECTION_HEADINGS = {
    "skills": "Technical Skills",
    "work_history": "Professional Experience",
    "education": "Education",
    "publications": "Publications",
    "awards": "Awards",
    "languages": "Languages",
}


@dataclass(frozen=True)
class SectionFragment:
    """
    Rendered body of one resume section.

    Attributes:
        key: Section type (e.g. 'skills'); also names its CSS hook
        heading: Visible section heading
        body: Escaped HTML for the section content
    """

    key: str
    heading: str
    body: Markup


def _require_sequence(value: Any, section: str, field: str) -> tuple:
    """Return value as a tuple, or raise RenderError if it is not a list-like field."""
    if isinstance(value, (list, tuple)):
        return tuple(value)
    raise RenderError(
        f"Field '{field}' must be a list, got {type(value).__name__}", section=section
    )


class ProfileToHTMLConverter:
    """Converts a ProfileRecord to an HTML document."""

    def __init__(self, template_registry: TemplateRegistry = None):
        self.template_registry = template_registry or TemplateRegistry()

    def _render(self, type_name: str, section: str, **context) -> Markup:
        """Render a section template, converting any failure to RenderError."""
        try:
            template = self.template_registry.get_template(type_name)
            return Markup(template.render(**context))
        except (TemplateError, AttributeError, TypeError, ValueError) as e:
            _log_error(f"Failed to render section '{section}': {e}")
            raise RenderError(
                f"Could not render section '{section}'", section=section, original_error=e
            ) from e

    def _fragment(self, key: str, **context) -> SectionFragment:
        return SectionFragment(
            key=key,
            heading=SECTION_HEADINGS[key],
            body=self._render(key, key, **context),
        )

    def build_header(self, basics: Basics) -> Markup:
        """
        Name, label, contact line and profile links.

        Contact line: email · phone · "City, CC" · personal URL without scheme.
        Profile links display without scheme or "www.".
        """
        if not isinstance(basics, Basics):
            raise RenderError(
                f"basics must be a Basics record, got {type(basics).__name__}", section="header"
            )

        contact_parts = [
            basics.email,
            basics.phone,
            basics.location.display if basics.location else None,
            strip_url_scheme(basics.url) if basics.url else None,
        ]

        profile_links = [
            {"url": profile.url, "display": strip_url_scheme(profile.url, strip_www=True)}
            for profile in _require_sequence(basics.profiles, "header", "basics.profiles")
            if profile.url
        ]

        return self._render(
            "header",
            "header",
            basics=basics,
            contact_parts=[part for part in contact_parts if part],
            profile_links=profile_links,
        )

    def build_summary(self, basics: Basics) -> Optional[str]:
        """Summary paragraph text, or None when the record has none."""
        return basics.summary or None

    def build_skills(self, profile: ProfileRecord) -> SectionFragment:
        """Skill groups, one row each: "Name: kw1, kw2"."""
        skills = _require_sequence(profile.skills, "skills", "skills")
        for i, group in enumerate(skills):
            _require_sequence(group.keywords, "skills", f"skills[{i}].keywords")
        return self._fragment("skills", skills=skills)

    def build_work(self, profile: ProfileRecord) -> SectionFragment:
        """Work entries with title, organization, date range, summary and highlights."""
        entries = _require_sequence(profile.work, "work_history", "work")
        for i, entry in enumerate(entries):
            _require_sequence(entry.highlights, "work_history", f"work[{i}].highlights")
        return self._fragment("work_history", entries=entries)

    def build_education(self, profile: ProfileRecord) -> SectionFragment:
        """Education rows: institution · degree, date range."""
        entries = _require_sequence(profile.education, "education", "education")
        return self._fragment("education", entries=entries)

    def build_publications(self, profile: ProfileRecord) -> Optional[SectionFragment]:
        """Publications as "name | publisher | year"; None when there are none."""
        publications = _require_sequence(profile.publications, "publications", "publications")
        if not publications:
            return None
        return self._fragment("publications", publications=publications)

    def build_awards(self, profile: ProfileRecord) -> Optional[SectionFragment]:
        """Awards as "title | awarder | year"; None when there are none."""
        awards = _require_sequence(profile.awards, "awards", "awards")
        if not awards:
            return None
        return self._fragment("awards", awards=awards)

    def build_languages(self, profile: ProfileRecord) -> Optional[SectionFragment]:
        """Spoken languages as "Language (Fluency)", comma separated; None when there are none."""
        languages = _require_sequence(profile.languages, "languages", "languages")
        if not languages:
            return None
        return self._fragment("languages", languages=languages)

    def build_sections(self, profile: ProfileRecord) -> List[SectionFragment]:
        """All sections with content, in document order."""
        fragments = [
            self.build_skills(profile),
            self.build_work(profile),
            self.build_education(profile),
            self.build_publications(profile),
            self.build_awards(profile),
            self.build_languages(profile),
        ]
        return [fragment for fragment in fragments if fragment is not None]

    def _wrap_section(self, fragment: SectionFragment) -> Markup:
        wrapper = self.template_registry.get_structure_template("wrappers/section")
        return Markup(wrapper.render(key=fragment.key, heading=fragment.heading, body=fragment.body))

    def generate_document(self, profile: ProfileRecord) -> str:
        """
        Generate the complete HTML document for a profile.

        Args:
            profile: Loaded profile record

        Returns:
            HTML document text with embedded stylesheet

        Raises:
            RenderError: If a field has an unexpected shape or a template fails
        """
        if not isinstance(profile, ProfileRecord):
            raise RenderError(f"Expected a ProfileRecord, got {type(profile).__name__}")

        header = self.build_header(profile.basics)
        summary = self.build_summary(profile.basics)
        fragments = self.build_sections(profile)
        _log_debug(f"Sections: {', '.join(fragment.key for fragment in fragments)}")

        try:
            sections = [self._wrap_section(fragment) for fragment in fragments]
            document = self.template_registry.get_structure_template("structure/document")
            return document.render(
                title=profile.basics.name,
                header=header,
                summary=summary,
                sections=sections,
            )
        except TemplateError as e:
            _log_error(f"Failed to render document: {e}")
            raise RenderError("Could not render document", section="document", original_error=e) from e


def render(profile: ProfileRecord, template_registry: TemplateRegistry = None) -> str:
    """
    Render a profile record to a complete HTML document.

    Pure and deterministic: the same record always yields byte-identical
    output. Publications, awards and languages are omitted when empty.

    Args:
        profile: Loaded profile record
        template_registry: Optional registry (default: packaged templates)

    Returns:
        HTML document text

    Raises:
        RenderError: If a field has an unexpected shape or a template fails
    """
    return ProfileToHTMLConverter(template_registry).generate_document(profile)
