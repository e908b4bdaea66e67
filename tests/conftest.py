"""
Shared test fixtures for the Quickrun launcher test suite.

Provides temporary desktop entry directories and settings files that use
real file I/O (no mocking of the filesystem).
"""

from pathlib import Path

import pytest
import toml

from quickrun.catalog import Entry, EntryCatalog, SourceKind


def write_desktop(directory: Path, app_id: str, name=None, exec_template=None, extra="") -> Path:
    """Write a .desktop file and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    lines = ["[Desktop Entry]", "Type=Application"]
    if name is not None:
        lines.append(f"Name={name}")
    if exec_template is not None:
        lines.append(f"Exec={exec_template}")
    if extra:
        lines.append(extra)
    path = directory / f"{app_id}.desktop"
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def system_dir(tmp_path):
    return tmp_path / "usr" / "share" / "applications"


@pytest.fixture
def local_dir(tmp_path):
    return tmp_path / "home" / ".local" / "share" / "applications"


@pytest.fixture
def sources(system_dir, local_dir):
    """Two-level source list: system first, user-local last."""
    return [(SourceKind.SYSTEM, system_dir), (SourceKind.LOCAL, local_dir)]


@pytest.fixture
def app_catalog():
    """The three-entry catalog used by the selection scenarios."""
    return EntryCatalog([
        Entry("Firefox", "firefox"),
        Entry("Files", "nautilus"),
        Entry("Terminal", "xterm"),
    ])


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with a partial override."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "launcher": {"placeholder": "Run...", "page_size": 10},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path
