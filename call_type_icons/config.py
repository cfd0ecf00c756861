"""JSON config at %APPDATA%\\call-type-icons\\config.json.

Holds the styling context for the call-type icons: icon size, margin,
tint colors and whether the carrier variant is active. Missing keys are
filled from defaults; the file is only read, never written.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "carrier_variant": False,
    "icon_size": 16,
    "icon_margin": 4,
    "colors": {
        "incoming": "#36a94a",   # green
        "outgoing": "#3c78d8",   # blue
        "missed": "#d73a49",     # red
        "voicemail": "#8a8a8a",
        "secondary": "#737373",  # video/ims/wifi
    },
}


def _config_dir() -> Path:
    return Path(os.environ.get("APPDATA", Path.home())) / "call-type-icons"


def config_path() -> Path:
    return _config_dir() / "config.json"


def _defaults() -> dict:
    return {**DEFAULT_CONFIG, "colors": dict(DEFAULT_CONFIG["colors"])}


def load_config(path: Path | None = None) -> dict:
    path = path or config_path()
    if not path.exists():
        return _defaults()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        log.error("Failed to load config: %s", e)
        return _defaults()
    if not isinstance(data, dict):
        log.error("Ignoring config %s: expected a JSON object", path)
        return _defaults()
    colors = data.get("colors") or {}
    if not isinstance(colors, dict):
        log.error("Ignoring config %s: colors must be a JSON object", path)
        return _defaults()
    merged = {**_defaults(), **data}
    merged["colors"] = {**DEFAULT_CONFIG["colors"], **colors}
    return merged
