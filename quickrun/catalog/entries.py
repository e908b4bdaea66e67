"""
Entry Catalog - Launchable entries de-duplicated by label.

Sources are read in priority order with user-local directories last, so a
local .desktop file overrides a system one that shows the same label:

  1. /var/lib/snapd/desktop/applications
  2. /var/lib/flatpak/exports/share/applications
  3. /usr/share/applications
  4. ~/Desktop
  5. ~/.local/share/flatpak/exports/share/applications
  6. ~/.local/share/applications

Known limitation: field codes are stripped without regard to Exec quoting,
so a quoted "%f" or an argument with embedded spaces is not handled.
"""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Optional

from loguru import logger

from quickrun.catalog.desktop_entry import DesktopEntryRecord, iter_records
from quickrun.errors import HomeDirectoryError

FIELD_CODES = ("%f", "%F", "%u", "%U", "%d", "%D", "%n", "%N", "%i", "%k", "%v", "%m")
_FIELD_CODE_RE = re.compile("|".join(re.escape(code) for code in FIELD_CODES))


class SourceKind(Enum):
    SYSTEM_SNAP = "system-snap"
    SYSTEM_FLATPAK = "system-flatpak"
    SYSTEM = "system"
    LOCAL_DESKTOP = "local-desktop"
    LOCAL_FLATPAK = "local-flatpak"
    LOCAL = "local"


@dataclass(frozen=True)
class Entry:
    """A launchable item: what the user sees and what gets executed."""
    label: str
    command_line: str


def strip_field_codes(template: str) -> str:
    """
    Remove desktop entry field codes from an Exec template.

    Tokens are replaced with nothing; surrounding whitespace is kept, so
    "firefox %u --new-window" becomes "firefox  --new-window".
    """
    return _FIELD_CODE_RE.sub("", template)


def _resolve_home() -> Path:
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeDirectoryError("You do not have a home directory") from e

    # expanduser() leaves "~" untouched when nothing resolves
    if str(home) == "~" or not str(home):
        raise HomeDirectoryError("You do not have a home directory")
    return home


def default_sources(home: Optional[Path] = None) -> list[tuple[SourceKind, Path]]:
    """
    Build the ordered list of desktop entry directories.

    Args:
        home: Home directory override (resolved from the environment if None)

    Returns:
        (SourceKind, directory) pairs, user-local directories last

    Raises:
        HomeDirectoryError: If no home directory can be resolved
    """
    if home is None:
        home = _resolve_home()
    home = Path(home)

    return [
        (SourceKind.SYSTEM_SNAP, Path("/var/lib/snapd/desktop/applications")),
        (SourceKind.SYSTEM_FLATPAK, Path("/var/lib/flatpak/exports/share/applications")),
        (SourceKind.SYSTEM, Path("/usr/share/applications")),
        (SourceKind.LOCAL_DESKTOP, home / "Desktop"),
        (SourceKind.LOCAL_FLATPAK, home / ".local/share/flatpak/exports/share/applications"),
        (SourceKind.LOCAL, home / ".local/share/applications"),
    ]


class EntryCatalog:
    """
    Ordered, read-only collection of entries with unique labels.

    Built once at startup. Other components refer to entries by position.
    """

    def __init__(self, entries: Iterable[Entry] = ()):
        self._entries: list[Entry] = []
        self._positions: dict[str, int] = {}
        for entry in entries:
            self._insert(entry)

    @classmethod
    def from_records(cls, records: Iterable[DesktopEntryRecord]) -> "EntryCatalog":
        """
        Normalize records into a catalog.

        Records without an Exec template are skipped. A later record with
        the same label replaces the earlier one in place.
        """
        catalog = cls()
        for record in records:
            if record.exec_template is None:
                logger.debug(f"Skipping {record.path or record.app_id}: no Exec")
                continue

            # Fall back to the app id, which usually says what will run
            label = record.name if record.name else record.app_id
            catalog._insert(Entry(label, strip_field_codes(record.exec_template)))

        logger.debug(f"Catalog built with {len(catalog)} entries")
        return catalog

    def _insert(self, entry: Entry) -> None:
        position = self._positions.get(entry.label)
        if position is None:
            self._positions[entry.label] = len(self._entries)
            self._entries.append(entry)
        else:
            self._entries[position] = entry

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> Entry:
        return self._entries[index]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    @property
    def labels(self) -> list[str]:
        return [entry.label for entry in self._entries]


def build_catalog(sources: Optional[Iterable[tuple]] = None) -> EntryCatalog:
    """
    Discover desktop entries and build the catalog.

    Args:
        sources: (kind, directory) pairs in priority order; default_sources() if None

    Returns:
        EntryCatalog

    Raises:
        HomeDirectoryError: If sources is None and no home directory resolves
    """
    if sources is None:
        sources = default_sources()
    return EntryCatalog.from_records(iter_records(sources))
