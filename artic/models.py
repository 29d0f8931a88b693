"""
Models for the artworks collection of the Art Institute of Chicago API.

https://api.artic.edu/docs/#artworks
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

from utils.pagination import get_first_row


class ApiBaseModel(BaseModel):
    """A base pydantic model for immutable API entities. Fields the API adds later are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def from_dict(cls, d):
        return cls.model_validate(d)

    def to_dict(self):
        return self.model_dump()


class Artwork(ApiBaseModel):
    id: Union[int, str]
    title: Optional[str] = None
    place_of_origin: Optional[str] = None
    artist_display: Optional[str] = None
    inscriptions: Optional[str] = None
    date_start: Optional[int] = None
    date_end: Optional[int] = None

    @property
    def key(self):
        """The identity key of this artwork."""
        return self.id


class Page:
    """An ordered, immutable slice of the remote collection."""

    __slots__ = ("records", "number", "size")

    def __init__(self, records, number: int, size: int):
        """
        :type records: collections.abc.Iterable[Artwork]
        :param int number: The 1-based page number.
        :param int size: The fixed page size of the session.
        """
        self.records = tuple(records)
        self.number = number
        self.size = size

    @classmethod
    def empty(cls, number: int, size: int):
        return cls((), number, size)

    @property
    def first_row(self):
        """The absolute 0-based offset of this page's first row."""
        return get_first_row(self.number, self.size)

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def __getitem__(self, item):
        return self.records[item]

    def __eq__(self, other):
        if not isinstance(other, Page):
            return NotImplemented
        return (self.records, self.number, self.size) == (other.records, other.number, other.size)

    def __hash__(self):
        return hash((self.records, self.number, self.size))

    def __repr__(self):
        return f"<Page number={self.number} size={self.size} records={len(self.records)}>"
