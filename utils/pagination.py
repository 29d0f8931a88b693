"""
Pagination arithmetic shared by the page controller and bulk selection.

Page numbers are 1-based; row offsets are 0-based.
"""


def get_total_pages(total: int, per_page: int) -> int:
    """Calculate total pages needed for a collection of the given size."""
    if per_page <= 0:
        raise ValueError("per_page must be positive")
    return (max(total, 0) + per_page - 1) // per_page


def get_page_for_offset(offset: int, per_page: int) -> int:
    """Get the page number containing the row at the given absolute offset."""
    if per_page <= 0:
        raise ValueError("per_page must be positive")
    return offset // per_page + 1


def get_first_row(page: int, per_page: int) -> int:
    """Get the absolute offset of the first row on a page."""
    return (page - 1) * per_page
