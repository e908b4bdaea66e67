"""
Pagination - Which slice of the matches is on screen.

Pages are fixed blocks of PAGE_SIZE matches. Moving the selection past the
end of a page flips to the next block with the highlight at its top.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from quickrun.catalog.entries import Entry, EntryCatalog
from quickrun.engine.filter import FilterIndex

PAGE_SIZE = 7


@dataclass(frozen=True)
class PageWindow:
    """The visible page: catalog indices plus the highlighted offset within it."""
    page_start: int
    indices: tuple[int, ...]
    highlighted: int


def visible_window(
    matching_indices: Sequence[int],
    selection_position: int,
    page_size: int = PAGE_SIZE,
) -> PageWindow:
    """
    Compute the page containing the selection.

    Args:
        matching_indices: Catalog indices that match the filter
        selection_position: Position of the selection within matching_indices
        page_size: Entries per page

    Returns:
        PageWindow (indices is empty when there are no matches)

    Raises:
        ValueError: If page_size is not positive
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")

    page_start = (selection_position // page_size) * page_size
    indices = tuple(matching_indices[page_start:page_start + page_size])
    return PageWindow(
        page_start=page_start,
        indices=indices,
        highlighted=selection_position - page_start,
    )


class PaginationView:
    """Read-only view over a catalog and its filter index."""

    def __init__(self, catalog: EntryCatalog, filter_index: FilterIndex, page_size: int = PAGE_SIZE):
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.catalog = catalog
        self.filter_index = filter_index
        self.page_size = page_size

    def window(self) -> PageWindow:
        return visible_window(
            self.filter_index.matching_indices,
            self.filter_index.selection_position,
            self.page_size,
        )

    def visible_labels(self) -> list[str]:
        return [self.catalog[i].label for i in self.window().indices]

    def selected_entry(self) -> Optional[Entry]:
        """The highlighted entry, or None when nothing matches."""
        index = self.filter_index.activate()
        if index is None:
            return None
        return self.catalog[index]
