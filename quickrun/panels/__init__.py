# Quickrun Panels Package
"""
Ignis window that feeds key events into the engine and draws its state.
"""

from .launcher import LauncherPanel

__all__ = ["LauncherPanel"]
