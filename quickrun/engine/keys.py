"""
Input model shared by the engine and the windowing adapter.

Key identities use GDK key names so the panel can map a keyval straight
to a Key with Gdk.keyval_name().
"""

from dataclasses import dataclass
from enum import Enum


class Key(Enum):
    BACKSPACE = "BackSpace"
    RETURN = "Return"
    ESCAPE = "Escape"
    UP = "Up"
    DOWN = "Down"
    LEFT_CTRL = "Control_L"
    RIGHT_CTRL = "Control_R"
    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"
    TEXT = "text"  # Pure text input with no interesting key identity
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str | None) -> "Key":
        """Map a GDK key name to a Key; unknown names become OTHER."""
        if not name:
            return cls.OTHER
        try:
            return cls(name)
        except ValueError:
            pass
        # Letter keys arrive upper-cased while shift is held
        if len(name) == 1:
            try:
                return cls(name.lower())
            except ValueError:
                return cls.OTHER
        return cls.OTHER


CONTROL_KEYS = frozenset({Key.LEFT_CTRL, Key.RIGHT_CTRL})
LETTER_KEYS = frozenset(key for key in Key if len(key.value) == 1)
# Ctrl+N / Ctrl+P move the selection
NAVIGATION_CHORD_KEYS = frozenset({Key.N, Key.P})


def parse_clear_key(name: str) -> Key:
    """
    Resolve the clear_key setting.

    Args:
        name: A single letter, e.g. "k"

    Returns:
        The letter Key

    Raises:
        ValueError: If name is not a letter or is taken by Ctrl+N / Ctrl+P navigation
    """
    key = Key.from_name(name) if isinstance(name, str) else Key.OTHER
    if key not in LETTER_KEYS:
        raise ValueError(f"clear_key must be a single letter, got {name!r}")
    if key in NAVIGATION_CHORD_KEYS:
        raise ValueError(f"clear_key {name!r} is already used for navigation")
    return key


@dataclass(frozen=True)
class InputEvent:
    """
    One discrete key event.

    Attributes:
        key: Logical key identity
        pressed: True for press, False for release
        text: Decoded text to insert ("" for non-text keys)
    """
    key: Key
    pressed: bool = True
    text: str = ""

    @classmethod
    def typed(cls, text: str) -> "InputEvent":
        """Event for typed text."""
        return cls(Key.TEXT, True, text)


@dataclass
class ModifierState:
    """Modifier keys currently held. One instance is shared by all consumers."""
    ctrl: bool = False

    def update(self, event: InputEvent) -> bool:
        """Track control press/release. Returns True if the event was a modifier."""
        if event.key in CONTROL_KEYS:
            self.ctrl = event.pressed
            return True
        return False
