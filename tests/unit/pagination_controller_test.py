import pytest

from artic.errors import DecodeError, NetworkError
from browser import InvalidPageNumber, PaginationController
from tests.factories import ids
from tests.mocks import MockPagedSource

pytestmark = pytest.mark.asyncio


async def test_initial_state(controller):
    assert controller.current_page == 1
    assert controller.first_row == 0
    assert len(controller.loaded_page) == 0
    assert controller.total_records == 0
    assert controller.total_pages == 0


async def test_go_to_page(controller, source):
    page = await controller.go_to_page(2)

    assert source.requests == [2]
    assert controller.current_page == 2
    assert controller.first_row == 12
    assert controller.loaded_page is page
    assert ids(page) == list(range(13, 25))
    assert controller.total_records == 30
    assert controller.total_pages == 3


async def test_go_to_page_idempotent(controller, source):
    await controller.go_to_page(2)
    first = controller.snapshot()
    await controller.go_to_page(2)
    second = controller.snapshot()

    assert first == second
    assert source.requests == [2, 2]


async def test_navigation_refetches(controller, source):
    for target in (1, 3, 1):
        await controller.go_to_page(target)
        if target == 1:
            assert controller.first_row == 0
            assert ids(controller.loaded_page) == list(range(1, 13))

    assert source.requests == [1, 3, 1]


async def test_partial_last_page(controller):
    page = await controller.go_to_page(3)
    assert ids(page) == list(range(25, 31))
    assert controller.first_row == 24


async def test_out_of_range_page_accepted(controller):
    page = await controller.go_to_page(9)
    assert len(page) == 0
    assert controller.current_page == 9
    assert controller.first_row == 96
    assert controller.total_records == 30


async def test_invalid_page_number(controller, source):
    with pytest.raises(InvalidPageNumber):
        await controller.go_to_page(0)
    assert source.requests == []
    assert controller.current_page == 1


@pytest.mark.parametrize("offset,expected_page", [(0, 1), (12, 2), (24, 3), (13, 2), (11, 1)])
async def test_go_to_offset(controller, offset, expected_page):
    await controller.go_to_offset(offset, 12)
    assert controller.current_page == expected_page
    assert controller.first_row == (expected_page - 1) * 12


async def test_go_to_offset_default_page_size(controller):
    await controller.go_to_offset(24)
    assert controller.current_page == 3


@pytest.mark.parametrize("exc", [NetworkError("down"), DecodeError("garbage")])
async def test_failed_navigation_leaves_state(controller, source, exc):
    await controller.go_to_page(1)
    before = controller.snapshot()
    source.fail_on(2, exc)

    with pytest.raises(type(exc)):
        await controller.go_to_page(2)

    assert controller.snapshot() == before
    assert controller.first_row == 0


async def test_total_refreshed_on_every_fetch():
    source = MockPagedSource(30)
    controller = PaginationController(source, page_size=12)
    await controller.go_to_page(1)
    assert controller.total_records == 30

    source.reported_total = 42
    await controller.go_to_page(2)
    assert controller.total_records == 42


async def test_snapshot_is_not_affected_by_later_navigation(controller):
    await controller.go_to_page(1)
    snapshot = controller.snapshot()
    await controller.go_to_page(3)

    assert snapshot.current_page == 1
    assert ids(snapshot.loaded_page) == list(range(1, 13))
