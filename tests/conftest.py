"""
Fixtures shared by the browser tests: an in-memory paged collection and sessions over it.
"""

import pytest

from browser import BrowserSession, PaginationController, SelectionAccumulator
from tests.mocks import MockPagedSource

PAGE_SIZE = 12


@pytest.fixture
def source():
    """A collection of 30 artworks: two full pages of 12 and a last page of 6."""
    return MockPagedSource(30, page_size=PAGE_SIZE)


@pytest.fixture
def controller(source):
    return PaginationController(source, page_size=PAGE_SIZE)


@pytest.fixture
def accumulator(source):
    return SelectionAccumulator(source)


@pytest.fixture
async def session(source):
    """A session with the first page loaded and the fetch log cleared."""
    session = BrowserSession(source, page_size=PAGE_SIZE)
    await session.load()
    source.clear()
    return session
