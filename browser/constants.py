"""
Constants for the artwork browser.

Column layout and user-facing text shared by the session and its table view.
"""

from collections import namedtuple

Column = namedtuple("Column", "field header")

# Table Layout
COLUMNS = (
    Column("title", "Title"),
    Column("place_of_origin", "Place of Origin"),
    Column("artist_display", "Artist"),
    Column("inscriptions", "Inscriptions"),
    Column("date_start", "Start Date"),
    Column("date_end", "End Date"),
)
PAGE_REPORT_TEMPLATE = "{first} to {last} of {total}"

# Error Messages
MSG_PAGE_FAILED = "Could not load page {page}: {error}"
MSG_SELECTION_FAILED = "Could not select {count} artworks: {error}"
MSG_SELECTION_CANCELLED = "Selection of {count} artworks was cancelled."
