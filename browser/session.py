import asyncio
import logging
from collections import namedtuple

from artic.errors import ArticException, ClientException
from browser import constants
from browser.accumulator import SelectionAccumulator
from browser.errors import SelectionCancelled
from browser.pagination import PaginationController
from browser.selection import SelectionStore
from browser.view import TableView
from utils.config import PAGE_SIZE
from utils.pagination import get_page_for_offset

log = logging.getLogger(__name__)

BulkSelection = namedtuple("BulkSelection", "requested selected added")


class BrowserSession:
    """
    All the state of one browsing session: the loaded page, the selection, and the selection-count popover.

    The rendering layer reads a TableView from ``view()`` and reports user actions back through the ``on_*`` and
    ``submit_selection`` handlers. Failed operations leave state as it was, remember a user-facing message in
    ``last_error``, and re-raise.
    """

    def __init__(self, fetcher, page_size: int = PAGE_SIZE):
        self.pagination = PaginationController(fetcher, page_size)
        self.accumulator = SelectionAccumulator(fetcher)
        self.selection = SelectionStore()
        self.filter_visible = False
        self.requested_count = None
        self.last_error = None
        self._cancel_events = set()

    @property
    def page_size(self):
        return self.pagination.page_size

    # ==== navigation ====
    async def load(self):
        """Loads the first page."""
        return await self.go_to_page(1)

    async def go_to_page(self, page: int):
        try:
            loaded = await self.pagination.go_to_page(page)
        except ArticException as e:
            self.last_error = constants.MSG_PAGE_FAILED.format(page=page, error=e)
            log.warning(self.last_error)
            raise
        self.last_error = None
        return loaded

    async def on_page_change(self, first: int, rows: int):
        """A page link was clicked. ``first`` is the absolute offset of the page's first row."""
        return await self.go_to_page(get_page_for_offset(first, rows))

    # ==== manual selection ====
    def on_selection_change(self, records):
        """The user toggled rows in the table; ``records`` is the complete new selection."""
        self.selection.replace_all(records)

    # ==== bulk selection ====
    def toggle_filter(self):
        self.filter_visible = not self.filter_visible
        return self.filter_visible

    def set_requested_count(self, value):
        """
        Sets the number of records to select, clamped to the collection size. None clears it.

        :type value: int or None
        """
        if value is None:
            self.requested_count = None
        else:
            self.requested_count = min(max(int(value), 0), self.pagination.total_records)
        return self.requested_count

    async def submit_selection(self, count: int = None):
        """
        Selects the first ``count`` records from the current page on, fetching further pages if needed, and
        merges them into the selection.

        If no count is given or entered, nothing happens and None is returned. If a fetch fails or the selection
        is cancelled, the selection is unchanged and the error is raised.

        :param int count: How many records to select. Defaults to the entered count.
        :rtype: BulkSelection or None
        """
        if count is None:
            count = self.requested_count
        if count is None:
            return None

        snapshot = self.pagination.snapshot()
        cancel_event = asyncio.Event()
        self._cancel_events.add(cancel_event)
        try:
            records = await self.accumulator.ensure(
                count,
                snapshot.loaded_page,
                snapshot.current_page,
                self.page_size,
                snapshot.total_records,
                cancel_event=cancel_event,
            )
        except SelectionCancelled:
            self.last_error = constants.MSG_SELECTION_CANCELLED.format(count=count)
            log.info(self.last_error)
            raise
        except ClientException as e:
            self.last_error = constants.MSG_SELECTION_FAILED.format(count=count, error=e)
            log.warning(self.last_error)
            raise
        finally:
            self._cancel_events.discard(cancel_event)

        before = len(self.selection)
        self.selection.merge_in(records)
        self.filter_visible = False
        self.last_error = None
        return BulkSelection(requested=count, selected=len(records), added=len(self.selection) - before)

    def cancel_selection(self):
        """Cancels every bulk selection in progress. Returns whether there were any."""
        if not self._cancel_events:
            return False
        for cancel_event in self._cancel_events:
            cancel_event.set()
        return True

    # ==== rendering ====
    def view(self):
        """
        :rtype: TableView
        """
        return TableView(
            rows=self.pagination.loaded_page.records,
            total_records=self.pagination.total_records,
            first_row=self.pagination.first_row,
            page_size=self.page_size,
            selection=tuple(self.selection.read_all()),
            filter_visible=self.filter_visible,
            requested_count=self.requested_count,
            error=self.last_error,
        )
