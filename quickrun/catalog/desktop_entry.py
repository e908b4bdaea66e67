"""
Desktop Entry Parsing - Read .desktop files into plain records.

A record carries the application id (file stem), the unlocalized Name and
the raw Exec template. Files that cannot be read or parsed yield no record;
callers never see parse errors.
"""

import configparser
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional

from loguru import logger

DESKTOP_ENTRY_GROUP = "Desktop Entry"


@dataclass(frozen=True)
class DesktopEntryRecord:
    """One parsed .desktop file."""
    app_id: str
    name: Optional[str] = None
    exec_template: Optional[str] = None
    path: Optional[Path] = None


def parse_desktop_file(path: Path) -> Optional[DesktopEntryRecord]:
    """
    Parse a single .desktop file.

    Args:
        path: Path to the .desktop file

    Returns:
        DesktopEntryRecord, or None if the file is unreadable or malformed
    """
    parser = configparser.ConfigParser(interpolation=None, strict=False, delimiters=("=",))
    # Keys are case-sensitive in desktop entries (Name vs name)
    parser.optionxform = str

    try:
        text = path.read_text(encoding="utf-8")
        parser.read_string(text, source=str(path))
    except (OSError, UnicodeDecodeError, configparser.Error) as e:
        logger.debug(f"Skipping {path}: {e}")
        return None

    name = None
    exec_template = None
    if parser.has_section(DESKTOP_ENTRY_GROUP):
        group = parser[DESKTOP_ENTRY_GROUP]
        name = group.get("Name") or None
        exec_template = group.get("Exec")
        if exec_template is not None and not exec_template.strip():
            exec_template = None

    return DesktopEntryRecord(
        app_id=path.stem,
        name=name,
        exec_template=exec_template,
        path=path,
    )


def iter_records(sources: Iterable[tuple]) -> Iterator[DesktopEntryRecord]:
    """
    Yield records from every source directory, in source order.

    Args:
        sources: (kind, directory) pairs; directories that don't exist are skipped

    Yields:
        DesktopEntryRecord for each parseable .desktop file
    """
    for kind, directory in sources:
        directory = Path(directory)
        if not directory.is_dir():
            logger.debug(f"Source {kind} has no directory at {directory}")
            continue

        for path in sorted(directory.rglob("*.desktop")):
            if not path.is_file():
                continue
            logger.debug(f"path {path}")
            record = parse_desktop_file(path)
            if record is not None:
                yield record
