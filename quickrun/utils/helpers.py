"""
Helper utilities for the Quickrun launcher.

Provides:
- Settings loading (TOML merged over defaults)
- Logging setup
- Generated stylesheet location
- Launcher window management
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from loguru import logger

LOG_LEVEL_ENV = "QUICKRUN_LOG"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "launcher": {
        "title": "Applications",
        "placeholder": "Search",
        "page_size": 7,
        "clear_key": "k",
    },
    "appearance": {
        "background_color": "#004847",
        "foreground_color": "#ffffff",
        "font": "JetBrains Mono",
    },
}


def setup_logging(level: Optional[str] = None) -> None:
    """
    Send loguru output to stderr at the requested level.

    Args:
        level: Log level name; read from $QUICKRUN_LOG when None (default WARNING)
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def user_cache_dir() -> Path:
    """Per-user cache directory for generated files ($XDG_CACHE_HOME/quickrun)."""
    base = os.environ.get("XDG_CACHE_HOME") or str(Path.home() / ".cache")
    return Path(base) / "quickrun"


def write_stylesheet(css: str, cache_dir: Optional[Path] = None) -> Path:
    """
    Write the generated stylesheet into the user cache directory.

    Args:
        css: Stylesheet text
        cache_dir: Target directory; user_cache_dir() if None

    Returns:
        Path of the written quickrun.css
    """
    if cache_dir is None:
        cache_dir = user_cache_dir()
    cache_dir.mkdir(parents=True, exist_ok=True)
    css_path = cache_dir / "quickrun.css"
    css_path.write_text(css)
    return css_path


def close_launcher():
    """
    Close all Quickrun launcher windows.

    Hides all windows with namespace starting with "quickrun-".
    """
    from ignis.app import IgnisApp

    app = IgnisApp.get_default()

    for window in app.get_windows():
        if window.namespace and window.namespace.startswith("quickrun-"):
            window.set_visible(False)


def load_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load launcher settings from TOML file.

    Args:
        settings_path: File to read; data/settings.toml beside the package if None

    Returns:
        Dictionary containing settings with defaults applied

    Example settings structure:
        {
            "launcher": {
                "title": "Applications",
                "placeholder": "Search",
                "page_size": 7,
                "clear_key": "k"
            },
            "appearance": {
                "background_color": "#004847",
                "foreground_color": "#ffffff",
                "font": "JetBrains Mono"
            }
        }
    """
    if settings_path is None:
        settings_path = Path(__file__).parent.parent / "data" / "settings.toml"

    if not settings_path.exists():
        logger.info(f"Settings file not found at {settings_path}, using defaults")
        return _deep_merge(DEFAULT_SETTINGS, {})

    try:
        loaded = toml.load(settings_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning(f"Could not load settings from {settings_path}: {e}")
        return _deep_merge(DEFAULT_SETTINGS, {})

    return _deep_merge(DEFAULT_SETTINGS, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = {}
    for key, value in base.items():
        result[key] = _deep_merge(value, {}) if isinstance(value, dict) else value

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
