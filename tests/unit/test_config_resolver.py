"""Unit tests for render preset resolution."""

import pytest

from folio.contexts.rendering.config_resolver import (
    DEFAULT_PRESETS_PATH,
    get_page_settings,
    get_server_settings,
    load_viewport_presets,
    resolve_viewport,
)


@pytest.fixture
def custom_presets(tmp_path):
    path = tmp_path / "render_presets.yaml"
    path.write_text(
        "viewport:\n"
        "  tiny:\n"
        "    width: 30\n"
        "    height: 12\n"
        "server:\n"
        "  host: 0.0.0.0\n"
        "  port: 9000\n"
        "  min_cols: 10\n"
        "  max_cols: 50\n"
        "  min_rows: 5\n"
        "  max_rows: 20\n"
    )
    return path


@pytest.mark.unit
def test_packaged_presets_exist():
    assert DEFAULT_PRESETS_PATH.exists()


@pytest.mark.unit
def test_viewport_presets_are_flattened():
    presets = load_viewport_presets(DEFAULT_PRESETS_PATH)

    assert "viewport_desktop" in presets
    assert presets["viewport_desktop"] == {"width": 100, "height": 40}


@pytest.mark.unit
@pytest.mark.parametrize(
    "name,expected",
    [
        ("desktop", (100, 40)),
        ("viewport_desktop", (100, 40)),
        ("compact", (80, 24)),
        ("wide", (160, 48)),
    ],
)
def test_resolve_viewport(name, expected):
    """Short and flattened preset names resolve to the same size."""
    assert resolve_viewport(name, DEFAULT_PRESETS_PATH) == expected


@pytest.mark.unit
def test_resolve_unknown_viewport_lists_available():
    with pytest.raises(ValueError) as exc_info:
        resolve_viewport("phone", DEFAULT_PRESETS_PATH)

    message = str(exc_info.value)
    assert "'phone' not found" in message
    assert "desktop" in message


@pytest.mark.unit
def test_default_server_settings():
    settings = get_server_settings(DEFAULT_PRESETS_PATH)

    assert settings["host"] == "127.0.0.1"
    assert settings["port"] == 8000
    assert settings["min_cols"] < settings["max_cols"]
    assert settings["min_rows"] < settings["max_rows"]


@pytest.mark.unit
def test_custom_presets_file(custom_presets):
    """A presets file elsewhere replaces the packaged one entirely."""
    assert resolve_viewport("tiny", custom_presets) == (30, 12)
    assert get_server_settings(custom_presets)["port"] == 9000

    # No page section: template falls back to its own defaults
    assert get_page_settings(custom_presets) == {}

    with pytest.raises(ValueError):
        resolve_viewport("desktop", custom_presets)
