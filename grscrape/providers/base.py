# grscrape/providers/base.py
from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Protocol, Tuple


class GrscrapeError(Exception):
    """Base class for errors that end a whole lookup/search call."""


class DocumentError(GrscrapeError):
    """The HTML handed over could not be read as a document at all."""


class AcquisitionError(GrscrapeError):
    """Navigation, required wait or HTTP fetch failed."""


def _freeze(acc: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of the accumulator with its lists turned into tuples."""
    return {k: tuple(v) if isinstance(v, list) else v for k, v in acc.items()}


@dataclass(frozen=True)
class EditionDetails:
    format: Optional[str] = None
    published: Optional[str] = None
    isbn13: Optional[str] = None
    isbn10: Optional[str] = None
    asin: Optional[str] = None
    language: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class BookDetailRecord:
    """
    One book detail page. Every field may be absent: None for scalars,
    () for sequences, and an all-None EditionDetails.
    Numeric values stay text (commas removed), e.g. "55061".
    """
    title: Optional[str] = None
    series: Optional[str] = None
    authors: Tuple[str, ...] = ()

    rating: Optional[str] = None
    number_of_ratings: Optional[str] = None
    number_of_reviews: Optional[str] = None

    genres: Tuple[str, ...] = ()
    settings: Tuple[str, ...] = ()

    number_of_pages: Optional[str] = None
    first_published: Optional[str] = None
    description: Optional[str] = None
    cover_image: Optional[str] = None

    edition_details: EditionDetails = field(default_factory=EditionDetails)

    @classmethod
    def from_accumulator(cls, acc: Dict[str, Any]) -> "BookDetailRecord":
        acc = _freeze(acc)
        edition = acc.pop("edition_details", None) or {}
        return cls(edition_details=EditionDetails(**edition), **acc)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "series": self.series,
            "authors": list(self.authors),
            "rating": self.rating,
            "numberOfRatings": self.number_of_ratings,
            "numberOfReviews": self.number_of_reviews,
            "genres": list(self.genres),
            "settings": list(self.settings),
            "numberOfPages": self.number_of_pages,
            "firstPublished": self.first_published,
            "description": self.description,
            "coverImage": self.cover_image,
            "editionDetails": self.edition_details.to_dict(),
        }


@dataclass(frozen=True)
class BookSearchRecord:
    """One row of a search results listing."""
    title: Optional[str] = None
    authors: Tuple[str, ...] = ()
    details_url: Optional[str] = None
    goodreads_id: Optional[str] = None
    published_year: Optional[str] = None
    average_rating: Optional[str] = None
    number_of_ratings: Optional[str] = None

    @classmethod
    def from_accumulator(cls, acc: Dict[str, Any]) -> "BookSearchRecord":
        return cls(**_freeze(acc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "authors": list(self.authors),
            "detailsUrl": self.details_url,
            "goodreadsId": self.goodreads_id,
            "publishedYear": self.published_year,
            "averageRating": self.average_rating,
            "numberOfRatings": self.number_of_ratings,
        }


def new_accumulator(record_cls) -> Dict[str, Any]:
    """Fresh all-absent accumulator keyed by the record's attribute names."""
    acc: Dict[str, Any] = {}
    for f in fields(record_cls):
        if f.name == "edition_details":
            acc[f.name] = EditionDetails().to_dict()
        elif f.default == ():
            acc[f.name] = []  # filled in place, frozen on the way out
        else:
            acc[f.name] = f.default
    return acc


class Fetcher(Protocol):
    """
    Acquisition contract: return the rendered HTML of a page.
    - fetch_detail: book detail page for a Goodreads book id
    - fetch_search: a fully built search URL
    Failures raise AcquisitionError; optional page interactions never do.
    """

    def fetch_detail(self, book_id: str) -> str:
        ...

    def fetch_search(self, url: str) -> str:
        ...
