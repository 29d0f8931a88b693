from artic.errors import InvalidPageNumber

__all__ = ('BrowserException', 'InvalidPageNumber', 'InvalidSelectionCount', 'SelectionCancelled')


class BrowserException(Exception):
    """Base class for all browser exceptions."""

    def __init__(self, msg):
        super().__init__(msg)


class InvalidSelectionCount(BrowserException, ValueError):
    """A bulk selection asked for a negative number of records."""

    def __init__(self, count):
        super().__init__(f"Cannot select {count!r} records.")
        self.count = count


class SelectionCancelled(BrowserException):
    """A bulk selection was cancelled before it finished fetching."""

    def __init__(self, msg="Selection cancelled."):
        super().__init__(msg)
