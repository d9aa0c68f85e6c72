"""
Render Preset Resolution

Loads named viewport sizes and host settings from render_presets.yaml.

Examples:
    >>> resolve_viewport("desktop")
    (100, 40)

    >>> get_server_settings()["port"]
    8000
"""

import os
from pathlib import Path
from typing import Any, Dict, Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_PRESETS_PATH = Path(__file__).parent / "config" / "render_presets.yaml"
RENDER_PRESETS_PATH = Path(os.getenv("RENDER_PRESETS_PATH", str(DEFAULT_PRESETS_PATH)))

DEFAULT_VIEWPORT = "desktop"


def load_render_presets(config_path: Path = None) -> Dict[str, Any]:
    """
    Load render_presets.yaml as a plain dict.

    Args:
        config_path: Optional path to config file (defaults to RENDER_PRESETS_PATH)

    Returns:
        Nested dict with "viewport", "server" and "page" sections
    """
    if config_path is None:
        config_path = RENDER_PRESETS_PATH

    return OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)


def load_viewport_presets(config_path: Path = None) -> Dict[str, Dict[str, int]]:
    """
    Load viewport presets and flatten to a single-level dict.

    Collapses nested structure: viewport.desktop -> viewport_desktop

    Returns:
        Example: {"viewport_desktop": {"width": 100, "height": 40}, ...}
    """
    presets = load_render_presets(config_path)
    return {f"viewport_{name}": size for name, size in presets.get("viewport", {}).items()}


def resolve_viewport(preset_name: str = DEFAULT_VIEWPORT, config_path: Path = None) -> Tuple[int, int]:
    """
    Resolve a viewport preset name to (width, height).

    Accepts either the short name ("desktop") or the flattened name
    ("viewport_desktop").

    Raises:
        ValueError: If the preset is not defined
    """
    presets = load_viewport_presets(config_path)
    key = preset_name if preset_name.startswith("viewport_") else f"viewport_{preset_name}"

    if key not in presets:
        available = [name.removeprefix("viewport_") for name in presets]
        raise ValueError(f"Viewport preset '{preset_name}' not found. Available presets: {available}")

    size = presets[key]
    return int(size["width"]), int(size["height"])


def get_server_settings(config_path: Path = None) -> Dict[str, Any]:
    """Browser host settings: host, port and the cols/rows bounds for paint requests."""
    return load_render_presets(config_path)["server"]


def get_page_settings(config_path: Path = None) -> Dict[str, Any]:
    """HTML page settings passed to the page template."""
    return load_render_presets(config_path).get("page", {})
