"""
Tests for desktop entry discovery and the EntryCatalog.

Uses real .desktop files written under tmp_path.
"""

from pathlib import Path

import pytest

from quickrun.catalog import (
    DesktopEntryRecord,
    Entry,
    EntryCatalog,
    SourceKind,
    build_catalog,
    default_sources,
    iter_records,
    parse_desktop_file,
    strip_field_codes,
)
from quickrun.catalog import entries as entries_module
from quickrun.errors import HomeDirectoryError

from conftest import write_desktop


class TestStripFieldCodes:
    """Field codes are removed, everything else is left alone."""

    def test_token_removed_spaces_preserved(self):
        assert strip_field_codes("firefox %u --new-window") == "firefox  --new-window"

    def test_all_recognized_codes(self):
        template = "app %f %F %u %U %d %D %n %N %i %k %v %m"
        assert strip_field_codes(template).split() == ["app"]

    def test_unrecognized_codes_kept(self):
        assert strip_field_codes("app %c %x") == "app %c %x"

    def test_no_codes(self):
        assert strip_field_codes("xterm -e top") == "xterm -e top"


class TestParseDesktopFile:
    """Parsing single files into records."""

    def test_reads_name_and_exec(self, tmp_path):
        path = write_desktop(tmp_path, "firefox", name="Firefox", exec_template="firefox %u")
        record = parse_desktop_file(path)
        assert record == DesktopEntryRecord("firefox", "Firefox", "firefox %u", path)

    def test_localized_name_is_not_used(self, tmp_path):
        path = write_desktop(tmp_path, "files", exec_template="nautilus", extra="Name[de]=Dateien")
        record = parse_desktop_file(path)
        assert record.name is None

    def test_missing_exec(self, tmp_path):
        path = write_desktop(tmp_path, "docs", name="Docs")
        assert parse_desktop_file(path).exec_template is None

    def test_blank_exec_counts_as_missing(self, tmp_path):
        path = write_desktop(tmp_path, "blank", name="Blank", exec_template="   ")
        assert parse_desktop_file(path).exec_template is None

    def test_percent_signs_survive(self, tmp_path):
        path = write_desktop(tmp_path, "pct", name="Pct", exec_template="printf 100%%")
        assert parse_desktop_file(path).exec_template == "printf 100%%"

    def test_malformed_file_skipped(self, tmp_path):
        path = tmp_path / "broken.desktop"
        path.write_text("this is not an ini file\n")
        assert parse_desktop_file(path) is None

    def test_undecodable_file_skipped(self, tmp_path):
        path = tmp_path / "binary.desktop"
        path.write_bytes(b"[Desktop Entry]\nName=\xff\xfe\n")
        assert parse_desktop_file(path) is None

    def test_missing_file_skipped(self, tmp_path):
        assert parse_desktop_file(tmp_path / "gone.desktop") is None


class TestIterRecords:
    """Walking source directories."""

    def test_sources_walked_in_order(self, sources, system_dir, local_dir):
        write_desktop(system_dir, "b", name="B", exec_template="b")
        write_desktop(local_dir, "a", name="A", exec_template="a")
        ids = [record.app_id for record in iter_records(sources)]
        assert ids == ["b", "a"]

    def test_missing_directory_skipped(self, tmp_path):
        records = list(iter_records([(SourceKind.SYSTEM, tmp_path / "nope")]))
        assert records == []

    def test_subdirectories_included(self, system_dir):
        write_desktop(system_dir / "kde", "konsole", name="Konsole", exec_template="konsole")
        records = list(iter_records([(SourceKind.SYSTEM, system_dir)]))
        assert [r.app_id for r in records] == ["konsole"]

    def test_other_files_ignored(self, system_dir):
        system_dir.mkdir(parents=True)
        (system_dir / "mimeinfo.cache").write_text("[MIME Cache]\n")
        assert list(iter_records([(SourceKind.SYSTEM, system_dir)])) == []


class TestEntryCatalog:
    """Normalization and override-by-label."""

    def test_label_falls_back_to_app_id(self):
        catalog = EntryCatalog.from_records([DesktopEntryRecord("org.gnome.Calculator", None, "gnome-calculator")])
        assert catalog[0] == Entry("org.gnome.Calculator", "gnome-calculator")

    def test_records_without_exec_skipped(self):
        catalog = EntryCatalog.from_records([
            DesktopEntryRecord("docs", "Docs", None),
            DesktopEntryRecord("xterm", "XTerm", "xterm"),
        ])
        assert catalog.labels == ["XTerm"]

    def test_later_record_overrides_in_place(self):
        catalog = EntryCatalog.from_records([
            DesktopEntryRecord("a", "Editor", "vim"),
            DesktopEntryRecord("b", "Browser", "firefox"),
            DesktopEntryRecord("c", "Editor", "nvim"),
        ])
        assert list(catalog) == [Entry("Editor", "nvim"), Entry("Browser", "firefox")]

    def test_local_source_overrides_system(self, sources, system_dir, local_dir):
        write_desktop(system_dir, "firefox", name="Firefox", exec_template="firefox %u")
        write_desktop(local_dir, "firefox-custom", name="Firefox", exec_template="firefox --private-window %U")

        catalog = build_catalog(sources)

        assert len(catalog) == 1
        assert catalog[0] == Entry("Firefox", "firefox --private-window ")

    def test_labels_unique(self, sources, system_dir, local_dir):
        for directory in (system_dir, local_dir):
            write_desktop(directory, "term", name="Terminal", exec_template="xterm")
            write_desktop(directory, "files", name="Files", exec_template="nautilus %U")
        catalog = build_catalog(sources)
        assert sorted(catalog.labels) == ["Files", "Terminal"]

    def test_broken_files_do_not_fail_build(self, sources, system_dir):
        write_desktop(system_dir, "good", name="Good", exec_template="good")
        (system_dir / "bad.desktop").write_text("garbage")
        assert build_catalog(sources).labels == ["Good"]


class TestDefaultSources:
    """Source directory ordering and the home directory requirement."""

    def test_local_directories_last(self, tmp_path):
        sources = default_sources(home=tmp_path)
        kinds = [kind for kind, _ in sources]
        assert kinds == [
            SourceKind.SYSTEM_SNAP,
            SourceKind.SYSTEM_FLATPAK,
            SourceKind.SYSTEM,
            SourceKind.LOCAL_DESKTOP,
            SourceKind.LOCAL_FLATPAK,
            SourceKind.LOCAL,
        ]
        assert sources[-1][1] == tmp_path / ".local/share/applications"
        assert sources[3][1] == tmp_path / "Desktop"

    def test_no_home_directory_fails(self, monkeypatch):
        def _no_home():
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(entries_module.Path, "home", _no_home)
        with pytest.raises(HomeDirectoryError):
            default_sources()

    def test_unexpanded_home_fails(self, monkeypatch):
        monkeypatch.setattr(entries_module.Path, "home", lambda: Path("~"))
        with pytest.raises(HomeDirectoryError):
            build_catalog()
