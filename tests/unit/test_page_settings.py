"""Unit tests for PDF page settings and YAML presets."""

from pathlib import Path

import pytest

from vitae.contexts.rendering import defaults
from vitae.contexts.rendering.defaults import DEFAULT_MARGINS, PageSettings, load_page_settings
from vitae.exceptions import SettingsError, VitaeError

CONFIGS_PATH = Path(__file__).parent.parent.parent / "configs"


@pytest.mark.unit
def test_default_page_settings():
    """Test the fixed A4 / 20mm defaults."""
    settings = PageSettings()

    assert settings.format == "A4"
    assert settings.margins == DEFAULT_MARGINS
    assert settings.print_background is True


@pytest.mark.unit
def test_default_margins_not_shared():
    """Test that each PageSettings gets its own margins dict."""
    first = PageSettings()
    first.margins["top"] = "1in"

    assert PageSettings().margins["top"] == "20mm"


@pytest.mark.unit
def test_partial_preset_merges_over_defaults(tmp_path):
    """Test that a preset only overrides the keys it names."""
    preset = tmp_path / "preset.yaml"
    preset.write_text("format: Letter\nmargins:\n  top: 0.5in\n", encoding="utf-8")

    settings = load_page_settings(preset)

    assert settings.format == "Letter"
    assert settings.margins["top"] == "0.5in"
    assert settings.margins["bottom"] == "20mm"
    assert settings.print_background is True


@pytest.mark.unit
def test_shipped_letter_preset():
    """Test the Letter preset shipped in configs/."""
    settings = load_page_settings(CONFIGS_PATH / "export_letter.yaml")

    assert settings.format == "Letter"
    assert set(settings.margins.values()) == {"0.75in"}


@pytest.mark.unit
def test_unknown_preset_key_rejected(tmp_path):
    """Test that typos in a preset are reported."""
    preset = tmp_path / "preset.yaml"
    preset.write_text("fromat: Letter\n", encoding="utf-8")

    with pytest.raises(ValueError, match="fromat"):
        load_page_settings(preset)


@pytest.mark.unit
def test_unknown_preset_key_is_settings_error(tmp_path):
    """Test that preset errors belong to the build error hierarchy."""
    preset = tmp_path / "preset.yaml"
    preset.write_text("fromat: Letter\n", encoding="utf-8")

    with pytest.raises(SettingsError) as excinfo:
        load_page_settings(preset)

    assert isinstance(excinfo.value, VitaeError)
    assert excinfo.value.path == preset


@pytest.mark.unit
def test_missing_preset(tmp_path):
    """Test that a preset path that does not exist is reported."""
    with pytest.raises(SettingsError, match="not found"):
        load_page_settings(tmp_path / "nope.yaml")


@pytest.mark.unit
def test_invalid_preset_yaml(tmp_path):
    """Test that unparseable YAML is reported."""
    preset = tmp_path / "preset.yaml"
    preset.write_text("format: [Letter\n", encoding="utf-8")

    with pytest.raises(SettingsError, match="Invalid YAML"):
        load_page_settings(preset)


@pytest.mark.unit
def test_preset_root_must_be_mapping(tmp_path):
    """Test that a list at the top level is rejected."""
    preset = tmp_path / "preset.yaml"
    preset.write_text("- Letter\n", encoding="utf-8")

    with pytest.raises(SettingsError):
        load_page_settings(preset)


@pytest.mark.unit
@pytest.mark.parametrize(
    "content, key",
    [
        ("margins: 1in\n", "margins"),
        ("margins:\n  middle: 1in\n", "margins"),
        ("margins:\n  top: [1, 2]\n", "margins.top"),
        ("format: ''\n", "format"),
        ("print_background: sometimes\n", "print_background"),
        ("timeout_ms: -5\n", "timeout_ms"),
        ("timeout_ms: soon\n", "timeout_ms"),
    ],
)
def test_preset_values_of_wrong_shape(tmp_path, content, key):
    """Test that settings of the wrong type are rejected, naming the setting."""
    preset = tmp_path / "preset.yaml"
    preset.write_text(content, encoding="utf-8")

    with pytest.raises(SettingsError) as excinfo:
        load_page_settings(preset)

    if excinfo.value.key is not None:
        assert excinfo.value.key == key


@pytest.mark.unit
def test_preset_from_environment(tmp_path, monkeypatch):
    """Test that EXPORT_PRESET_PATH is used when no preset is passed."""
    preset = tmp_path / "preset.yaml"
    preset.write_text("format: Legal\n", encoding="utf-8")
    monkeypatch.setattr(defaults, "EXPORT_PRESET_PATH", str(preset))

    assert load_page_settings().format == "Legal"


@pytest.mark.unit
def test_null_margins_rejected(tmp_path):
    """Test that margins: null is reported instead of failing on None."""
    preset = tmp_path / "preset.yaml"
    preset.write_text("margins: null\n", encoding="utf-8")

    with pytest.raises(SettingsError) as excinfo:
        load_page_settings(preset)

    assert excinfo.value.key == "margins"
