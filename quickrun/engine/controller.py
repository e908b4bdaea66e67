"""
Launcher Controller - Root owner of the selection engine's state.

Every input event is forwarded in a fixed order:
  1. Text buffer (edits and modifier tracking)
  2. Filter index (re-applied from the buffer)
  3. View (navigation and activation)

A successful launch is terminal: the controller stops handling events.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

from quickrun.catalog.entries import EntryCatalog
from quickrun.engine.buffer import TextInputBuffer
from quickrun.engine.filter import Direction, FilterIndex
from quickrun.engine.keys import InputEvent, Key, ModifierState, parse_clear_key
from quickrun.engine.pagination import PAGE_SIZE, PaginationView
from quickrun.services.launch import LaunchInvoker


@dataclass(frozen=True)
class RenderState:
    """Everything the render collaborator needs for one frame."""
    title: str
    display_text: str
    show_cursor: bool
    labels: tuple[str, ...]
    highlighted: Optional[int]


class LauncherController:
    """
    Routes input events through buffer, filter and view.

    Args:
        catalog: Entries to choose from
        invoker: LaunchInvoker for the chosen entry
        title: Heading shown above the search box
        placeholder: Search box text before anything is typed
        page_size: Entries per visible page
        clear_key: Letter that clears the buffer together with control (not n or p)
        on_close: Called when the user asks to dismiss the launcher
    """

    def __init__(
        self,
        catalog: EntryCatalog,
        invoker: Optional[LaunchInvoker] = None,
        title: str = "Applications",
        placeholder: str = "Search",
        page_size: int = PAGE_SIZE,
        clear_key: Key = Key.K,
        on_close: Optional[Callable[[], None]] = None,
    ):
        self.catalog = catalog
        self.invoker = invoker if invoker is not None else LaunchInvoker()
        self.title = title
        self.placeholder = placeholder
        self.on_close = on_close

        self.modifiers = ModifierState()
        self.buffer = TextInputBuffer(self.modifiers, clear_key=parse_clear_key(clear_key.value))
        self.filter_index = FilterIndex(catalog.labels)
        self.view = PaginationView(catalog, self.filter_index, page_size)
        self.finished = False

    def handle_event(self, event: InputEvent) -> None:
        """Process one input event."""
        if self.finished:
            return

        self.buffer.handle_key(event)
        self.filter_index.set_filter(self.buffer.text or None)

        if event.pressed:
            self._handle_navigation(event.key)

    def _handle_navigation(self, key: Key) -> None:
        ctrl = self.modifiers.ctrl
        if key is Key.UP or (ctrl and key is Key.P):
            self.filter_index.move_selection(Direction.UP)
        elif key is Key.DOWN or (ctrl and key is Key.N):
            self.filter_index.move_selection(Direction.DOWN)
        elif key is Key.RETURN:
            self.activate()
        elif key is Key.ESCAPE:
            self.reset()
            if self.on_close is not None:
                self.on_close()

    def activate(self) -> bool:
        """
        Launch the selected entry.

        Returns:
            True if the launch was handed off, False otherwise
        """
        entry = self.view.selected_entry()
        if entry is None:
            return False

        if not self.invoker.launch(entry.command_line):
            logger.warning(f"Could not launch '{entry.label}'")
            return False

        self.finished = True
        return True

    def reset(self) -> None:
        """Return to Idle: empty buffer, no filter, first entry selected, no modifiers held."""
        self.buffer.text = ""
        self.buffer.dirty = False
        self.modifiers.ctrl = False
        self.filter_index.set_filter(None)
        self.filter_index.selection_position = 0

    def render_state(self) -> RenderState:
        window = self.view.window()
        return RenderState(
            title=self.title,
            display_text=self.buffer.display_text(self.placeholder),
            show_cursor=self.buffer.show_cursor,
            labels=tuple(self.view.visible_labels()),
            highlighted=window.highlighted if window.indices else None,
        )
