"""
The cross-page selection set.
"""

import logging

log = logging.getLogger(__name__)


class SelectionStore:
    """
    Maps record identity to the selected record. Reads back in insertion order.

    Selection is independent of whatever page is loaded; it lives for the whole session.
    """

    def __init__(self, records=()):
        self._selected = {}
        self.merge_in(records)

    def merge_in(self, records):
        """
        Adds records to the selection. A record that is already selected is overwritten with the given copy,
        but keeps its place in the order.
        """
        for record in records:
            self._selected[record.key] = record

    def replace_all(self, records):
        """Discards the current selection and selects exactly the given records."""
        selected = {}
        for record in records:
            selected[record.key] = record
        log.debug(f"selection replaced: {len(self._selected)} -> {len(selected)} records")
        self._selected = selected

    def read_all(self):
        """
        :rtype: list[artic.models.Artwork]
        """
        return list(self._selected.values())

    def keys(self):
        return list(self._selected.keys())

    def __len__(self):
        return len(self._selected)

    def __contains__(self, item):
        key = getattr(item, "key", item)
        return key in self._selected

    def __repr__(self):
        return f"<SelectionStore records={len(self._selected)}>"
