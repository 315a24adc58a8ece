"""Unit tests for build error messages."""

from pathlib import Path

import pytest

from vitae.exceptions import ExportError, ParseError, RenderError, SettingsError, VitaeError


@pytest.mark.unit
def test_parse_error_message_parts():
    """Test that ParseError names the field and the file."""
    error = ParseError("Invalid date", path=Path("resume.json"), field="work[2].startDate")

    assert str(error) == "Invalid date\nField: work[2].startDate\nFile: resume.json"
    assert error.field == "work[2].startDate"


@pytest.mark.unit
def test_parse_error_is_value_error():
    """Test ParseError can be caught as a ValueError."""
    with pytest.raises(ValueError):
        raise ParseError("bad")


@pytest.mark.unit
def test_render_error_keeps_original():
    """Test that RenderError carries the section and the underlying error."""
    cause = TypeError("'int' object is not iterable")
    error = RenderError("Could not render section", section="skills", original_error=cause)

    assert error.original_error is cause
    assert "Section: skills" in str(error)
    assert "Original error: 'int' object is not iterable" in str(error)


@pytest.mark.unit
def test_export_error_minimal_message():
    """Test that optional parts are left out when not given."""
    assert str(ExportError("PDF file was not written")) == "PDF file was not written"


@pytest.mark.unit
@pytest.mark.parametrize("error_class", [ParseError, RenderError, ExportError, SettingsError])
def test_all_errors_share_base(error_class):
    """Test the CLI can catch every fatal error through VitaeError."""
    assert issubclass(error_class, VitaeError)


@pytest.mark.unit
def test_settings_error_names_setting_and_preset():
    """Test that SettingsError points at the setting and the preset file."""
    error = SettingsError("Margins must map sides to CSS lengths", Path("a5.yaml"), "margins")

    assert str(error) == "Margins must map sides to CSS lengths\nSetting: margins\nPreset: a5.yaml"
    assert isinstance(error, ValueError)
