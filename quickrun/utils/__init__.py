# Quickrun Utilities Package
"""
Shared utility functions and helpers for the Quickrun launcher.
"""

from .helpers import close_launcher, load_settings, setup_logging

__all__ = ["close_launcher", "load_settings", "setup_logging"]
