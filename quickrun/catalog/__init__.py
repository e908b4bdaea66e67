# Quickrun Catalog Package
"""
Desktop entry discovery and normalization.

Turns .desktop files from a layered set of directories into a de-duplicated
list of launchable entries.
"""

from .desktop_entry import DesktopEntryRecord, parse_desktop_file, iter_records
from .entries import (
    Entry,
    EntryCatalog,
    SourceKind,
    build_catalog,
    default_sources,
    strip_field_codes,
)

__all__ = [
    "DesktopEntryRecord",
    "parse_desktop_file",
    "iter_records",
    "Entry",
    "EntryCatalog",
    "SourceKind",
    "build_catalog",
    "default_sources",
    "strip_field_codes",
]
