"""Listing pipeline: search filter, tag filter, then pagination over a sorted list."""

from collections.abc import Sequence
from dataclasses import dataclass

from contactbook.application.dto import ContactPage
from contactbook.application.normalize import positive_int
from contactbook.domain import Contact, phone_digits

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 50

TAG_ALL = "All"
TAG_FAVOURITE = "Favourite"


@dataclass(frozen=True)
class ContactQuery:
    """Normalized listing parameters. Build from raw request values with from_params."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    search: str = ""
    tag: str | None = None

    def __post_init__(self):
        term = self.search.strip().casefold() if isinstance(self.search, str) else ""
        object.__setattr__(self, "search", term)

    @classmethod
    def from_params(
        cls,
        page: object = None,
        limit: object = None,
        search: object = None,
        tag: object = None,
    ) -> "ContactQuery":
        tag_filter = tag if isinstance(tag, str) and tag and tag != TAG_ALL else None
        return cls(
            page=positive_int(page, DEFAULT_PAGE),
            limit=positive_int(limit, DEFAULT_LIMIT),
            search=search if isinstance(search, str) else "",
            tag=tag_filter,
        )


def matches_search(contact: Contact, term: str) -> bool:
    """True if the (already case-folded) term is in name, phone digits or email."""
    if not term:
        return True
    if term in contact.name.casefold():
        return True
    term_digits = phone_digits(term)
    if term_digits and term_digits in phone_digits(contact.phone):
        return True
    return bool(contact.email) and term in contact.email.casefold()


def matches_tag(contact: Contact, tag: str | None) -> bool:
    if tag is None or tag == TAG_ALL:
        return True
    if tag == TAG_FAVOURITE:
        return contact.is_favorite
    return tag in contact.tags


def run_query(contacts: Sequence[Contact], query: ContactQuery) -> ContactPage:
    """Filter and paginate contacts, keeping their order.

    total_count counts every match; the page window is
    [(page - 1) * limit, page * limit) and is empty when out of range.
    """
    filtered = [
        c
        for c in contacts
        if matches_search(c, query.search) and matches_tag(c, query.tag)
    ]
    total = len(filtered)
    start = (query.page - 1) * query.limit
    end = query.page * query.limit
    return ContactPage(
        items=filtered[start:end],
        total_count=total,
        page=query.page,
        has_next_page=end < total,
    )
