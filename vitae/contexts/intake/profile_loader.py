"""
Profile Loader

Parses the resume data file into an immutable ProfileRecord.

The file follows the JSON Resume layout. A .json file is read with the json
module (escaped surrogate pairs decode, a repeated key keeps its last value);
any other file is read with OmegaConf as YAML. Either the whole record parses
or ParseError is raised; no partial records are returned.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from vitae.contexts.intake.logger import _log_debug, _log_error, log_profile_loaded
from vitae.contexts.intake.profile_data_structure import (
    Award,
    Basics,
    EducationEntry,
    Location,
    ProfileRecord,
    Publication,
    SkillGroup,
    SocialProfile,
    SpokenLanguage,
    WorkEntry,
)
from vitae.exceptions import ParseError
from vitae.utils.timestamp import parse_partial_date

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", "."))
RESUME_DATA_PATH = PROJECT_ROOT / os.getenv("RESUME_DATA_PATH", "resume.json")


class _RecordReader:
    """
    Field accessors that raise ParseError with the offending location.

    Keeps the path of the file being read so every error names it.
    """

    def __init__(self, path: Path):
        self.path = path

    def fail(self, message: str, where: str) -> ParseError:
        return ParseError(message, path=self.path, field=where)

    def mapping(self, value: Any, where: str) -> Dict[str, Any]:
        if not isinstance(value, dict):
            raise self.fail(f"Expected a mapping, got {type(value).__name__}", where)
        return value

    def items(self, data: Dict[str, Any], key: str, where: str) -> List[Any]:
        """List field; absent or null means empty."""
        value = data.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise self.fail(f"Expected a list, got {type(value).__name__}", f"{where}{key}")
        return value

    def text(self, data: Dict[str, Any], key: str, where: str, required: bool = False) -> Optional[str]:
        value = data.get(key)
        if value is None or value == "":
            if required:
                raise self.fail("Missing required field", f"{where}{key}")
            return None
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise self.fail(f"Expected text, got {type(value).__name__}", f"{where}{key}")
        return str(value)

    def texts(self, data: Dict[str, Any], key: str, where: str) -> tuple:
        """List of strings (keywords, highlights, courses)."""
        entries = self.items(data, key, where)
        result = []
        for i, entry in enumerate(entries):
            if isinstance(entry, bool) or not isinstance(entry, (str, int, float)):
                raise self.fail(
                    f"Expected text, got {type(entry).__name__}", f"{where}{key}[{i}]"
                )
            result.append(str(entry))
        return tuple(result)

    def date(self, data: Dict[str, Any], key: str, where: str) -> Optional[str]:
        value = data.get(key)
        if value is None or value == "":
            return None
        try:
            return parse_partial_date(value)
        except ValueError as e:
            raise self.fail(str(e), f"{where}{key}") from e


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid structured data: {e}", path=path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Could not read profile data: {e}", path=path) from e


def _read_yaml(path: Path) -> Any:
    try:
        config = OmegaConf.load(path)
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid structured data: {e}", path=path) from e
    except (OSError, ValueError, OmegaConfBaseException) as e:
        raise ParseError(f"Could not read profile data: {e}", path=path) from e

    if not isinstance(config, DictConfig):
        return config
    # Text may legitimately contain "${...}"; leave interpolations unresolved
    return OmegaConf.to_container(config, resolve=False)


def _read_document(path: Path) -> Dict[str, Any]:
    """Load the data file into plain containers, raising ParseError on any failure."""
    if not path.exists():
        raise ParseError("Profile data file not found", path=path)
    if not path.is_file():
        raise ParseError("Profile data path is not a file", path=path)

    if path.suffix.lower() == ".json":
        document = _read_json(path)
    else:
        document = _read_yaml(path)

    if not isinstance(document, dict):
        raise ParseError(
            f"Top level must be a mapping, got {type(document).__name__}", path=path
        )
    return document


def _parse_basics(reader: _RecordReader, document: Dict[str, Any]) -> Basics:
    if "basics" not in document or document["basics"] is None:
        raise reader.fail("Missing required section", "basics")
    data = reader.mapping(document["basics"], "basics")
    where = "basics."

    location = None
    raw_location = data.get("location")
    if isinstance(raw_location, dict):
        location = Location(
            city=reader.text(raw_location, "city", "basics.location."),
            country_code=reader.text(raw_location, "countryCode", "basics.location."),
            region=reader.text(raw_location, "region", "basics.location."),
            address=reader.text(raw_location, "address", "basics.location."),
            postal_code=reader.text(raw_location, "postalCode", "basics.location."),
        )
    elif raw_location is not None:
        # Free-form location string
        location = Location(city=reader.text(data, "location", where))

    profiles = []
    for i, entry in enumerate(reader.items(data, "profiles", where)):
        item_where = f"basics.profiles[{i}]."
        entry = reader.mapping(entry, item_where.rstrip("."))
        profiles.append(
            SocialProfile(
                network=reader.text(entry, "network", item_where),
                username=reader.text(entry, "username", item_where),
                url=reader.text(entry, "url", item_where),
            )
        )

    return Basics(
        name=reader.text(data, "name", where, required=True),
        label=reader.text(data, "label", where),
        summary=reader.text(data, "summary", where),
        email=reader.text(data, "email", where),
        phone=reader.text(data, "phone", where),
        url=reader.text(data, "url", where),
        location=location,
        profiles=tuple(profiles),
    )


def _parse_entries(reader: _RecordReader, document: Dict[str, Any], key: str, build) -> tuple:
    """Apply build(entry, where) to every mapping in a top-level list section."""
    result = []
    for i, entry in enumerate(reader.items(document, key, "")):
        where = f"{key}[{i}]"
        result.append(build(reader.mapping(entry, where), f"{where}."))
    return tuple(result)


def parse_profile(document: Dict[str, Any], path: Union[Path, str] = None) -> ProfileRecord:
    """
    Build a ProfileRecord from already-parsed JSON Resume data.

    Args:
        document: Mapping with basics, work, education, skills, ... keys
        path: Source file, used only in error messages

    Returns:
        ProfileRecord with every absent list section set to empty

    Raises:
        ParseError: If any section or field has the wrong shape
    """
    reader = _RecordReader(Path(path) if path else None)
    document = reader.mapping(document, "<root>")

    def skill_group(entry, where):
        return SkillGroup(
            name=reader.text(entry, "name", where, required=True),
            keywords=reader.texts(entry, "keywords", where),
        )

    def work_entry(entry, where):
        return WorkEntry(
            position=reader.text(entry, "position", where),
            # Older JSON Resume files use "company"
            name=reader.text(entry, "name", where) or reader.text(entry, "company", where),
            start_date=reader.date(entry, "startDate", where),
            end_date=reader.date(entry, "endDate", where),
            summary=reader.text(entry, "summary", where),
            highlights=reader.texts(entry, "highlights", where),
            url=reader.text(entry, "url", where),
            location=reader.text(entry, "location", where),
        )

    def education_entry(entry, where):
        return EducationEntry(
            institution=reader.text(entry, "institution", where),
            study_type=reader.text(entry, "studyType", where),
            area=reader.text(entry, "area", where),
            start_date=reader.date(entry, "startDate", where),
            end_date=reader.date(entry, "endDate", where),
            score=reader.text(entry, "score", where),
            courses=reader.texts(entry, "courses", where),
        )

    def spoken_language(entry, where):
        return SpokenLanguage(
            language=reader.text(entry, "language", where, required=True),
            fluency=reader.text(entry, "fluency", where),
        )

    def publication(entry, where):
        return Publication(
            name=reader.text(entry, "name", where, required=True),
            publisher=reader.text(entry, "publisher", where),
            release_date=reader.date(entry, "releaseDate", where),
            url=reader.text(entry, "url", where),
            summary=reader.text(entry, "summary", where),
        )

    def award(entry, where):
        return Award(
            title=reader.text(entry, "title", where, required=True),
            awarder=reader.text(entry, "awarder", where),
            date=reader.date(entry, "date", where),
            summary=reader.text(entry, "summary", where),
        )

    return ProfileRecord(
        basics=_parse_basics(reader, document),
        skills=_parse_entries(reader, document, "skills", skill_group),
        work=_parse_entries(reader, document, "work", work_entry),
        education=_parse_entries(reader, document, "education", education_entry),
        languages=_parse_entries(reader, document, "languages", spoken_language),
        publications=_parse_entries(reader, document, "publications", publication),
        awards=_parse_entries(reader, document, "awards", award),
    )


def load_profile(path: Union[Path, str] = RESUME_DATA_PATH) -> ProfileRecord:
    """
    Load the resume data file into a ProfileRecord.

    Args:
        path: Data file (default: RESUME_DATA_PATH from environment, resume.json)

    Returns:
        Fully parsed ProfileRecord

    Raises:
        ParseError: If the file is missing, unreadable, not valid structured
            data, or does not have the shape of a profile record

    Example:
        profile = load_profile(Path("resume.json"))
        print(profile.basics.name)
    """
    path = Path(path)
    _log_debug(f"Reading profile data: {path}")

    try:
        document = _read_document(path)
        profile = parse_profile(document, path=path)
    except ParseError as e:
        _log_error(f"Failed to load profile: {e.message}")
        raise

    log_profile_loaded(path, profile.section_counts())
    return profile
