"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound
from jinja2.exceptions import UndefinedError

from vitae.contexts.templating.registries import TemplateRegistry


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.template_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
@pytest.mark.parametrize(
    "type_name",
    ["header", "skills", "work_history", "education", "publications", "awards", "languages"],
)
def test_get_section_templates(type_name):
    """Test that every section type has a template."""
    registry = TemplateRegistry()
    template = registry.get_template(type_name)

    assert template is not None
    assert registry.is_cached(type_name)


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("skills")
    template2 = registry.get_template("skills")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_template("nonexistent_type")


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    registry = TemplateRegistry()
    path = registry.get_template_path("skills")

    assert isinstance(path, Path)
    assert path.name == "template.html.jinja"
    assert path.parent.name == "skills"
    assert path.exists()


@pytest.mark.unit
def test_clear_cache():
    """Test cache clearing."""
    registry = TemplateRegistry()

    registry.get_template("skills")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_structure_templates():
    """Test loading the document skeleton and section wrapper."""
    registry = TemplateRegistry()

    assert registry.get_structure_template("structure/document") is not None
    assert registry.get_structure_template("wrappers/section") is not None


@pytest.mark.unit
def test_autoescape_enabled():
    """Test that interpolated values are escaped."""
    registry = TemplateRegistry()
    template = registry.env.from_string("<p>{{ value }}</p>")

    assert template.render(value="a < b & c > d") == "<p>a &lt; b &amp; c &gt; d</p>"


@pytest.mark.unit
def test_strict_undefined():
    """Test that a missing template variable fails loudly."""
    registry = TemplateRegistry()
    template = registry.get_template("skills")

    with pytest.raises(UndefinedError):
        template.render()


@pytest.mark.unit
def test_date_filters_registered():
    """Test that date display filters are available to templates."""
    registry = TemplateRegistry()
    template = registry.env.from_string("{{ start | date_range(end) }} / {{ when | year }}")

    assert template.render(start="2020-03-01", end=None, when="2022-09-15") == "Mar 2020 – Present / 2022"


@pytest.mark.unit
def test_custom_template_path(tmp_path):
    """Test pointing the registry at another template root."""
    type_dir = tmp_path / "types" / "skills"
    type_dir.mkdir(parents=True)
    (type_dir / "template.html.jinja").write_text("custom {{ skills | length }}", encoding="utf-8")

    registry = TemplateRegistry(template_path=tmp_path)

    assert registry.get_template("skills").render(skills=[1, 2]) == "custom 2"
