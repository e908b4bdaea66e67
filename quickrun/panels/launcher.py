"""
Launcher Panel - Ignis window around the selection engine.

The panel holds no selection logic. It:
- Translates GTK key presses/releases into InputEvents
- Forwards them to the LauncherController
- Redraws the title, search text and the visible page after each event
"""

from typing import Any, Dict

from ignis import widgets
from gi.repository import Gtk, Gdk

from quickrun.engine.controller import LauncherController
from quickrun.engine.keys import InputEvent, Key

CURSOR = "|"


def translate_key(keyval: int, pressed: bool) -> InputEvent:
    """
    Build an InputEvent from a GDK keyval.

    Args:
        keyval: GDK keyval from the key controller
        pressed: True for key-pressed, False for key-released

    Returns:
        InputEvent with the logical key and any printable text
    """
    key = Key.from_name(Gdk.keyval_name(keyval))

    text = ""
    if pressed:
        codepoint = Gdk.keyval_to_unicode(keyval)
        if codepoint:
            char = chr(codepoint)
            if char.isprintable():
                text = char

    return InputEvent(key, pressed, text)


def build_css(appearance: Dict[str, Any]) -> str:
    """Stylesheet for the launcher from the [appearance] settings."""
    background = appearance["background_color"]
    foreground = appearance["foreground_color"]
    font = appearance["font"]
    return (
        ".quickrun-panel {\n"
        f"  background-color: {background};\n"
        f"  color: {foreground};\n"
        f"  font-family: \"{font}\";\n"
        "}\n"
        ".quickrun-search, .quickrun-entry {\n"
        f"  border: 1px solid {foreground};\n"
        "}\n"
        ".quickrun-entry.selected {\n"
        f"  background-color: {foreground};\n"
        f"  color: {background};\n"
        "}\n"
    )


class LauncherPanel:
    """
    Single launcher window driven by a LauncherController.
    """

    def __init__(self, controller: LauncherController):
        self.controller = controller

        # Widgets (created in create_window)
        self.title_label = None
        self.search_label = None
        self.results_box = None

    def create_window(self):
        """
        Create the launcher window.

        Returns:
            widgets.Window grabbing the keyboard while visible
        """
        self.title_label = widgets.Label(css_classes=["quickrun-title"])
        self.search_label = widgets.Label(css_classes=["quickrun-search"], halign="start")
        self.results_box = widgets.Box(vertical=True, css_classes=["quickrun-results"])

        self.refresh()

        window = widgets.Window(
            namespace="quickrun-launcher",
            exclusivity="ignore",
            kb_mode="exclusive",  # Take all key input like a keyboard grab
            layer="overlay",
            default_width=800,
            default_height=500,
            child=widgets.Box(
                vertical=True,
                css_classes=["quickrun-panel"],
                child=[self.title_label, self.search_label, self.results_box],
            ),
        )

        key_controller = Gtk.EventControllerKey()
        key_controller.connect("key-pressed", self._on_key_press)
        key_controller.connect("key-released", self._on_key_release)
        window.add_controller(key_controller)

        # Start from Idle every time the launcher is shown again
        window.connect("notify::visible", self._on_visibility_changed)

        return window

    def _on_visibility_changed(self, window, param):
        """Reset the engine when the window is hidden."""
        if not window.get_visible():
            self.controller.reset()
            self.refresh()

    def _on_key_press(self, controller, keyval, keycode, state):
        self.controller.handle_event(translate_key(keyval, True))
        self.refresh()
        return True

    def _on_key_release(self, controller, keyval, keycode, state):
        self.controller.handle_event(translate_key(keyval, False))
        self.refresh()

    def refresh(self):
        """Redraw every widget from the controller's render state."""
        state = self.controller.render_state()

        self.title_label.set_label(state.title)
        text = state.display_text + CURSOR if state.show_cursor else state.display_text
        self.search_label.set_label(text)

        # Clear existing (GTK4 way)
        child = self.results_box.get_first_child()
        while child:
            next_child = child.get_next_sibling()
            self.results_box.remove(child)
            child = next_child

        for offset, label in enumerate(state.labels):
            css_classes = ["quickrun-entry"]
            if offset == state.highlighted:
                css_classes.append("selected")
            self.results_box.append(
                widgets.Label(label=label, css_classes=css_classes, halign="start")
            )
