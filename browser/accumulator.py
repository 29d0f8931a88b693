"""
Bulk selection: selecting the first N records from the current page on, fetching further pages as needed.
"""

import logging

from browser.errors import InvalidSelectionCount, SelectionCancelled
from utils.pagination import get_total_pages

log = logging.getLogger(__name__)


class SelectionAccumulator:
    def __init__(self, fetcher):
        """
        :param fetcher: Anything with an async ``fetch(page_number) -> FetchResult``.
        """
        self.fetcher = fetcher

    async def ensure(self, requested_count, loaded_page, current_page, page_size, total_records, cancel_event=None):
        """
        Gets the first ``requested_count`` records starting at the loaded page.

        Pages after ``current_page`` are fetched one at a time, in order, until there are enough records or there
        are no more pages according to ``total_records``. The total is only read from the arguments, never from the
        pages fetched along the way.

        If any fetch fails, the error is raised and nothing is returned.

        :param int requested_count: How many records to select.
        :type loaded_page: artic.models.Page
        :param int current_page: The number of the loaded page.
        :param int page_size: The fixed page size of the session.
        :param int total_records: The collection total as last reported.
        :param cancel_event: If set while fetching, the selection is cancelled before the next fetch.
        :type cancel_event: asyncio.Event or None
        :returns: At most ``requested_count`` records, in collection order.
        :rtype: list[artic.models.Artwork]
        :raises SelectionCancelled: if ``cancel_event`` was set.
        """
        if requested_count < 0:
            raise InvalidSelectionCount(requested_count)

        records = list(loaded_page)[:requested_count]
        if len(records) >= requested_count:
            return records

        last_page = get_total_pages(total_records, page_size)
        next_page = current_page + 1
        while len(records) < requested_count and next_page <= last_page:
            if cancel_event is not None and cancel_event.is_set():
                log.debug(f"selection of {requested_count} cancelled before page {next_page}")
                raise SelectionCancelled()
            page, _ = await self.fetcher.fetch(next_page)
            records.extend(page)
            next_page += 1

        log.debug(
            f"accumulated {len(records)} records for selection of {requested_count} "
            f"(pages {current_page}-{next_page - 1})"
        )
        return records[:requested_count]
