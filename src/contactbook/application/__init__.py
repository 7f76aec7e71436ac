"""Application layer: use cases, the listing pipeline, ports, and DTOs. Depends only on domain."""

from contactbook.application.contact_service import ContactService
from contactbook.application.dto import UNSET, ContactPage, TagsResult
from contactbook.application.errors import (
    ContactBookError,
    NotFoundError,
    ValidationError,
)
from contactbook.application.ports import ContactRepository
from contactbook.application.query import (
    TAG_ALL,
    TAG_FAVOURITE,
    ContactQuery,
    run_query,
)

__all__ = [
    "TAG_ALL",
    "TAG_FAVOURITE",
    "UNSET",
    "ContactBookError",
    "ContactPage",
    "ContactQuery",
    "ContactRepository",
    "ContactService",
    "NotFoundError",
    "TagsResult",
    "ValidationError",
    "run_query",
]
