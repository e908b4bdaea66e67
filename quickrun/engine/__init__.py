# Quickrun Engine Package
"""
Interactive selection engine.

The controller owns a text buffer and a filter index and forwards each
input event to them in a fixed order: buffer, then filter, then view.
"""

from .keys import Key, InputEvent, ModifierState, parse_clear_key
from .buffer import TextInputBuffer
from .filter import Direction, FilterIndex
from .pagination import PAGE_SIZE, PageWindow, PaginationView, visible_window
from .controller import LauncherController, RenderState

__all__ = [
    "Key",
    "InputEvent",
    "ModifierState",
    "parse_clear_key",
    "TextInputBuffer",
    "Direction",
    "FilterIndex",
    "PAGE_SIZE",
    "PageWindow",
    "PaginationView",
    "visible_window",
    "LauncherController",
    "RenderState",
]
