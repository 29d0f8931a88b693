from artic.models import Artwork


def artwork_json(artwork_id):
    """A raw artwork as the collection API returns it, including fields we don't use."""
    offset = artwork_id % 10 if isinstance(artwork_id, int) else 0
    return {
        "id": artwork_id,
        "api_model": "artworks",
        "title": f"Artwork {artwork_id}",
        "place_of_origin": "France",
        "artist_display": f"Artist {artwork_id}\nFrench, 1840-1926",
        "inscriptions": None,
        "date_start": 1880 + offset,
        "date_end": 1890 + offset,
    }


def make_artwork(artwork_id, **overrides):
    data = artwork_json(artwork_id)
    data.update(overrides)
    return Artwork.from_dict(data)


def page_body(page, total, per_page=12):
    """A raw response body for one page of a collection of artworks with ids 1..total."""
    start = (page - 1) * per_page
    ids = range(start + 1, min(start + per_page, total) + 1)
    return {
        "pagination": {
            "total": total,
            "limit": per_page,
            "offset": start,
            "total_pages": (total + per_page - 1) // per_page,
            "current_page": page,
        },
        "data": [artwork_json(i) for i in ids],
    }


def ids(records):
    return [r.id for r in records]
