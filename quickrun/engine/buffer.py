"""
Text Input Buffer - The search text the user types.

Handles:
  - Printable text (ignored while control is held)
  - Backspace: delete last character
  - Ctrl+Backspace: delete last whitespace-delimited word
  - Ctrl+<clear key>: clear the buffer
  - Control press/release: modifier tracking only

The placeholder is shown until the first edit, and again whenever
editing leaves the buffer empty.
"""

from typing import Optional

from loguru import logger

from quickrun.engine.keys import InputEvent, Key, ModifierState


class TextInputBuffer:
    """Mutable search buffer with modifier-aware key handling."""

    def __init__(self, modifiers: Optional[ModifierState] = None, clear_key: Key = Key.K):
        self.text = ""
        self.dirty = False
        self.modifiers = modifiers if modifiers is not None else ModifierState()
        self.clear_key = clear_key

    def handle_key(self, event: InputEvent) -> bool:
        """
        Apply one input event to the buffer.

        Args:
            event: The key event

        Returns:
            True if the buffer content changed
        """
        if self.modifiers.update(event):
            return False
        if not event.pressed:
            return False

        if event.key is Key.BACKSPACE:
            if self.modifiers.ctrl:
                return self.delete_word()
            return self.delete_char()

        if self.modifiers.ctrl:
            # Control chords edit the buffer, they never insert text
            if event.key is self.clear_key:
                return self.clear()
            return False

        if event.text:
            return self.insert(event.text)
        return False

    def insert(self, text: str) -> bool:
        if not text:
            return False
        self.text += text
        self.dirty = True
        logger.debug(f"buffer is now {self.text!r}")
        return True

    def delete_char(self) -> bool:
        if not self.text:
            return False
        self._replace(self.text[:-1])
        return True

    def delete_word(self) -> bool:
        """Drop the last word; remaining words keep one trailing space each."""
        if not self.text:
            return False
        words = self.text.split()
        self._replace("".join(word + " " for word in words[:-1]))
        return True

    def clear(self) -> bool:
        if not self.text:
            return False
        self._replace("")
        return True

    def _replace(self, text: str) -> None:
        self.text = text
        # Back to the placeholder once the buffer is blank again
        self.dirty = bool(text)

    @property
    def show_cursor(self) -> bool:
        return self.dirty

    def display_text(self, placeholder: str = "Search") -> str:
        """Buffer text once the user has typed, otherwise the placeholder."""
        return self.text if self.dirty else placeholder
