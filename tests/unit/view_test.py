from browser import TableView
from browser.constants import COLUMNS
from tests.factories import make_artwork


def make_view(rows=(), total=0, first_row=0, selection=()):
    return TableView(
        rows=tuple(rows),
        total_records=total,
        first_row=first_row,
        page_size=12,
        selection=tuple(selection),
        filter_visible=False,
        requested_count=None,
        error=None,
    )


def test_page_report():
    rows = [make_artwork(i) for i in range(13, 25)]
    assert make_view(rows, total=30, first_row=12).page_report == "13 to 24 of 30"


def test_page_report_partial_last_page():
    rows = [make_artwork(i) for i in range(25, 31)]
    assert make_view(rows, total=30, first_row=24).page_report == "25 to 30 of 30"


def test_page_report_empty():
    assert make_view().page_report == "0 to 0 of 0"
    assert make_view(total=30, first_row=96).page_report == "0 to 0 of 30"


def test_columns():
    assert [c.header for c in COLUMNS] == [
        "Title", "Place of Origin", "Artist", "Inscriptions", "Start Date", "End Date"
    ]


def test_cells():
    view = make_view()
    record = make_artwork(3, inscriptions=None, date_start=1883)
    assert view.cells(record) == ["Artwork 3", "France", "Artist 3\nFrench, 1840-1926", "", "1883", "1893"]


def test_is_selected():
    view = make_view(rows=[make_artwork(1), make_artwork(2)], selection=[make_artwork(2), make_artwork(40)])
    assert not view.is_selected(make_artwork(1))
    assert view.is_selected(make_artwork(2))
    assert view.is_selected(make_artwork(40))
