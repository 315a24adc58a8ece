"""
Profile Record Data Structures

Immutable representation of the resume data file (JSON Resume layout).
Built once by the profile loader and handed to the templating context.

Dates are kept as validated partial ISO strings (YYYY, YYYY-MM or YYYY-MM-DD);
formatting for display is the renderer's job.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Location:
    """
    Postal location from basics.location.

    Attributes:
        city: City name
        country_code: ISO country code (e.g. "KR")
        region: State or province
        address: Street address
        postal_code: Postal code
    """

    city: Optional[str] = None
    country_code: Optional[str] = None
    region: Optional[str] = None
    address: Optional[str] = None
    postal_code: Optional[str] = None

    @property
    def display(self) -> str:
        """'City, CC' with whichever part is present."""
        return ", ".join(part for part in (self.city, self.country_code) if part)


@dataclass(frozen=True)
class SocialProfile:
    """Named external profile link (GitHub, LinkedIn, ...)."""

    network: Optional[str] = None
    username: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class Basics:
    """
    Identity and contact block.

    Attributes:
        name: Full name (required)
        label: Headline under the name (e.g. "Software Engineer")
        summary: Summary paragraph
        email: Contact email
        phone: Contact phone
        url: Personal website
        location: Postal location
        profiles: External profile links, in source order
    """

    name: str
    label: Optional[str] = None
    summary: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    url: Optional[str] = None
    location: Optional[Location] = None
    profiles: Tuple[SocialProfile, ...] = ()


@dataclass(frozen=True)
class SkillGroup:
    """Named group of skill keywords."""

    name: str
    keywords: Tuple[str, ...] = ()


@dataclass(frozen=True)
class WorkEntry:
    """
    One position in the work history.

    Attributes:
        position: Job title
        name: Organization
        start_date: Partial ISO date, None renders nothing
        end_date: Partial ISO date, None renders "Present"
        summary: One-line description shown under the title
        highlights: Bullet points, in source order
    """

    position: Optional[str] = None
    name: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    summary: Optional[str] = None
    highlights: Tuple[str, ...] = ()
    url: Optional[str] = None
    location: Optional[str] = None


@dataclass(frozen=True)
class EducationEntry:
    institution: Optional[str] = None
    study_type: Optional[str] = None
    area: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    score: Optional[str] = None
    courses: Tuple[str, ...] = ()

    @property
    def degree(self) -> str:
        """'{studyType} in {area}' with whichever part is present."""
        return " in ".join(part for part in (self.study_type, self.area) if part)


@dataclass(frozen=True)
class SpokenLanguage:
    language: str
    fluency: Optional[str] = None


@dataclass(frozen=True)
class Publication:
    name: str
    publisher: Optional[str] = None
    release_date: Optional[str] = None
    url: Optional[str] = None
    summary: Optional[str] = None


@dataclass(frozen=True)
class Award:
    title: str
    awarder: Optional[str] = None
    date: Optional[str] = None
    summary: Optional[str] = None


@dataclass(frozen=True)
class ProfileRecord:
    """
    Complete resume data for one build.

    Every list-like field is a tuple and defaults to empty, so renderers never
    need to guard against missing sections.
    """

    basics: Basics
    skills: Tuple[SkillGroup, ...] = ()
    work: Tuple[WorkEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    languages: Tuple[SpokenLanguage, ...] = ()
    publications: Tuple[Publication, ...] = ()
    awards: Tuple[Award, ...] = ()

    def section_counts(self) -> dict:
        """Number of entries per list section (used for logging)."""
        return {
            "skills": len(self.skills),
            "work": len(self.work),
            "education": len(self.education),
            "languages": len(self.languages),
            "publications": len(self.publications),
            "awards": len(self.awards),
        }
