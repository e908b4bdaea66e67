"""
Quickrun Launcher - Main Ignis Configuration

This file is the entry point for Ignis. It builds the entry catalog once,
then creates the launcher window around a LauncherController.

Usage:
  ignis init -c /path/to/quickrun/config.py
"""

from ignis.app import IgnisApp
from loguru import logger

from quickrun.catalog import build_catalog
from quickrun.engine import Key, LauncherController, parse_clear_key
from quickrun.panels.launcher import LauncherPanel, build_css
from quickrun.utils.helpers import close_launcher, load_settings, setup_logging, write_stylesheet

setup_logging()
settings = load_settings()
launcher_settings = settings["launcher"]

app = IgnisApp.get_default()

try:
    css_path = write_stylesheet(build_css(settings["appearance"]))
    app.apply_css(str(css_path))
except Exception as e:
    logger.warning(f"Could not apply launcher stylesheet: {e}")

catalog = build_catalog()

try:
    clear_key = parse_clear_key(launcher_settings["clear_key"])
except ValueError as e:
    logger.warning(f"{e}, using 'k'")
    clear_key = Key.K

controller = LauncherController(
    catalog,
    title=launcher_settings["title"],
    placeholder=launcher_settings["placeholder"],
    page_size=launcher_settings["page_size"],
    clear_key=clear_key,
    on_close=close_launcher,
)

launcher_panel = LauncherPanel(controller)
launcher_window = launcher_panel.create_window()
launcher_window.panel = launcher_panel

logger.info(f"Quickrun launcher initialized with {len(catalog)} entries")
