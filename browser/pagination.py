import logging
from collections import namedtuple

from artic.models import Page
from browser.errors import InvalidPageNumber
from utils.config import PAGE_SIZE
from utils.pagination import get_first_row, get_page_for_offset, get_total_pages

log = logging.getLogger(__name__)

PaginationSnapshot = namedtuple("PaginationSnapshot", "current_page loaded_page total_records")


class PaginationController:
    """
    Owns the current page of the collection and the last reported collection total.

    Every navigation re-fetches its page; state is only ever replaced as a whole, after a fetch succeeds.
    """

    def __init__(self, fetcher, page_size: int = PAGE_SIZE):
        """
        :param fetcher: Anything with an async ``fetch(page_number) -> FetchResult``.
        :param int page_size: The fixed page size of the session.
        """
        self.fetcher = fetcher
        self.page_size = page_size
        self.current_page = 1
        self.loaded_page = Page.empty(1, page_size)
        self.total_records = 0

    @property
    def first_row(self):
        return get_first_row(self.current_page, self.page_size)

    @property
    def total_pages(self):
        return get_total_pages(self.total_records, self.page_size)

    async def go_to_page(self, target_page: int):
        """
        Loads the given page. Pages past the end of the collection are not rejected; they load as whatever the
        remote source returns for them (usually nothing).

        If the fetch fails, nothing changes and the error is raised.

        :param int target_page: The 1-based page number.
        :rtype: artic.models.Page
        """
        if target_page < 1:
            raise InvalidPageNumber(target_page)

        page, total = await self.fetcher.fetch(target_page)

        self.loaded_page = page
        self.total_records = total
        self.current_page = target_page
        log.debug(f"now on page {target_page} (row {self.first_row}): {len(page)} of {total} records")
        return page

    async def go_to_offset(self, row_offset: int, page_size: int = None):
        """
        Loads the page containing the given absolute row offset.

        :param int row_offset: The 0-based offset of a row, e.g. the first row of a clicked page link.
        :param int page_size: The page size the offset was computed with. Defaults to ours.
        :rtype: artic.models.Page
        """
        if page_size is None:
            page_size = self.page_size
        return await self.go_to_page(get_page_for_offset(row_offset, page_size))

    def snapshot(self):
        """
        The current page, loaded page and total, as of now. Later navigation does not change a snapshot.

        :rtype: PaginationSnapshot
        """
        return PaginationSnapshot(self.current_page, self.loaded_page, self.total_records)
