"""
Browsing a paged remote collection with a selection that persists across pages.

This package holds the page and selection state of a session and the bulk-selection routine that continues
pagination until enough records are selected.
"""

from .accumulator import SelectionAccumulator
from .errors import BrowserException, InvalidPageNumber, InvalidSelectionCount, SelectionCancelled
from .pagination import PaginationController, PaginationSnapshot
from .selection import SelectionStore
from .session import BrowserSession, BulkSelection
from .view import TableView

__all__ = (
    # State
    "BrowserSession",
    "BulkSelection",
    "PaginationController",
    "PaginationSnapshot",
    "SelectionAccumulator",
    "SelectionStore",
    # Rendering
    "TableView",
    # Errors
    "BrowserException",
    "InvalidPageNumber",
    "InvalidSelectionCount",
    "SelectionCancelled",
)
