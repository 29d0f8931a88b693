"""
What the rendering layer gets to see. Views are snapshots; nothing here mutates session state.
"""

from collections import namedtuple

from browser.constants import COLUMNS, PAGE_REPORT_TEMPLATE


class TableView(namedtuple(
    "TableView",
    "rows total_records first_row page_size selection filter_visible requested_count error",
)):
    """
    :ivar rows: The loaded page's records.
    :ivar selection: The selected records, in selection order.
    :ivar error: The user-facing message of the last failed operation, or None.
    """

    __slots__ = ()
    columns = COLUMNS

    @property
    def page_report(self):
        """e.g. "13 to 24 of 30". Rows are 1-based."""
        if not self.rows:
            return PAGE_REPORT_TEMPLATE.format(first=0, last=0, total=self.total_records)
        return PAGE_REPORT_TEMPLATE.format(
            first=self.first_row + 1, last=self.first_row + len(self.rows), total=self.total_records
        )

    def is_selected(self, record):
        return any(s.key == record.key for s in self.selection)

    def cells(self, record):
        """The display strings of a record, one per column."""
        out = []
        for column in self.columns:
            value = getattr(record, column.field)
            out.append("" if value is None else str(value))
        return out
