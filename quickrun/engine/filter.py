"""
Filter Index - Which catalog entries match the current search text.

Matching is a plain case-sensitive substring check against the label.
The selection is a position within the matches, not a catalog index, and
goes back to the first match whenever the filter value changes.
"""

from enum import Enum
from typing import Optional, Sequence

from loguru import logger


class Direction(Enum):
    UP = -1
    DOWN = 1


class FilterIndex:
    """
    Ordered subset of catalog positions matching the active filter.

    Args:
        labels: Entry labels in catalog order
    """

    def __init__(self, labels: Sequence[str]):
        self._labels = list(labels)
        self.active_filter: Optional[str] = None
        self.matching_indices: list[int] = list(range(len(self._labels)))
        self.selection_position = 0

    def set_filter(self, new_filter: Optional[str]) -> None:
        """
        Apply a filter value; None shows every entry.

        Re-applying the stored value is a no-op and keeps the selection.
        """
        if new_filter == self.active_filter:
            return

        # TODO keep the selection on the current entry when it still matches
        self.selection_position = 0
        if new_filter is None:
            self.matching_indices = list(range(len(self._labels)))
        else:
            self.matching_indices = [
                i for i, label in enumerate(self._labels) if new_filter in label
            ]
        self.active_filter = new_filter
        logger.debug(f"filter {new_filter!r} matches {len(self.matching_indices)} entries")

    def move_selection(self, direction: Direction) -> None:
        """Move the selection one step, stopping at either end."""
        if not self.matching_indices:
            return
        last = len(self.matching_indices) - 1
        position = self.selection_position + direction.value
        self.selection_position = max(0, min(position, last))

    def activate(self) -> Optional[int]:
        """
        Catalog index of the selected entry.

        Returns:
            The index, or None when nothing matches
        """
        if not self.matching_indices:
            logger.debug("Activate with no matching entries")
            return None
        return self.matching_indices[self.selection_position]
