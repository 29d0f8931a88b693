import logging
from collections import namedtuple

import aiohttp
import cachetools
import pydantic

from artic.baseclient import BaseClient
from artic.errors import DecodeError, InvalidPageNumber
from artic.models import Artwork, Page
from utils.config import (
    ARTIC_API_URL, ARTWORKS_ROUTE, PAGE_CACHE_SIZE, PAGE_CACHE_TTL, PAGE_SIZE, REQUEST_TIMEOUT,
)

log = logging.getLogger(__name__)

FetchResult = namedtuple("FetchResult", "page total")


class PageFetcher(BaseClient):
    """
    Fetches single pages of the artworks collection.
    Asyncio-compatible; does not retry, and never touches any caller's state.
    """

    SERVICE_BASE = ARTIC_API_URL
    logger = log

    def __init__(self, http: aiohttp.ClientSession = None, page_size: int = PAGE_SIZE):
        """
        :param http: The session to make requests with. If None, one is created on first use and owned by the
                     fetcher.
        :param int page_size: The page size the remote source is expected to use.
        """
        super().__init__(http)
        self.page_size = page_size

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def fetch(self, page_number: int):
        """
        Fetches one page of artworks.

        GET /artworks?page={page_number}

        :param int page_number: The 1-based page number.
        :rtype: FetchResult
        :raises InvalidPageNumber: if the page number is less than 1.
        :raises NetworkError: if the transport fails or the API returns an error status.
        :raises DecodeError: if the response is not the shape we expect.
        """
        if page_number < 1:
            raise InvalidPageNumber(page_number)
        if self.http is None:
            self.http = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=REQUEST_TIMEOUT))

        data = await self.get(ARTWORKS_ROUTE, params={"page": page_number})
        return self.parse_page(data, page_number)

    def parse_page(self, data, page_number: int):
        """
        Translates a raw response body into a page and the reported collection total.

        :rtype: FetchResult
        """
        if not isinstance(data, dict):
            log.warning(f"Bad artworks response for page {page_number} (not an object):\n{data}")
            raise DecodeError("Collection API response is not an object.")

        records = data.get("data")
        if not isinstance(records, list):
            log.warning(f"Bad artworks response for page {page_number} (no data array):\n{data}")
            raise DecodeError("Collection API response is missing its data array.")

        pagination = data.get("pagination")
        total = pagination.get("total") if isinstance(pagination, dict) else None
        if not isinstance(total, int) or isinstance(total, bool):
            log.warning(f"Bad artworks response for page {page_number} (no pagination total):\n{data}")
            raise DecodeError("Collection API response is missing its pagination total.")

        try:
            artworks = [Artwork.from_dict(r) for r in records]
        except pydantic.ValidationError as e:
            log.warning(f"Could not decode artworks on page {page_number}: {e}")
            raise DecodeError(f"Collection API returned a malformed artwork: {e}") from e

        limit = pagination.get("limit")
        if limit is not None and limit != self.page_size:
            log.warning(f"Collection API page size is {limit}, but we expect {self.page_size}")

        log.debug(f"Fetched page {page_number}: {len(artworks)} artworks of {total}")
        return FetchResult(Page(artworks, page_number, self.page_size), total)

    async def close(self):
        if self.http is not None:
            await self.http.close()


class CachedPageFetcher:
    """
    Wraps a page fetcher with an in-memory TTL cache keyed by page number.

    Cached pages also carry the total that was reported with them, so callers that stop on the total should
    expect it to be as stale as the cache.
    """

    def __init__(self, fetcher, ttl: int = PAGE_CACHE_TTL, maxsize: int = PAGE_CACHE_SIZE):
        self.fetcher = fetcher
        self.page_size = fetcher.page_size
        self._cache = cachetools.TTLCache(maxsize, ttl)

    async def fetch(self, page_number: int):
        cached = self._cache.get(page_number)
        if cached is not None:
            log.debug(f"found page {page_number} in page cache")
            return cached

        result = await self.fetcher.fetch(page_number)
        self._cache[page_number] = result
        return result

    def invalidate(self):
        self._cache.clear()

    async def close(self):
        await self.fetcher.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def create_fetcher(http: aiohttp.ClientSession = None, page_size: int = PAGE_SIZE):
    """
    Creates the page fetcher for a session. The page cache is only used if PAGE_CACHE_TTL is set.

    :rtype: PageFetcher or CachedPageFetcher
    """
    fetcher = PageFetcher(http, page_size=page_size)
    if PAGE_CACHE_TTL > 0:
        return CachedPageFetcher(fetcher)
    return fetcher
