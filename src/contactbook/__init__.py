"""
Contact book core: clean-architecture layout.

- domain: Contact entity and ordering keys. No outer dependencies.
- application: use cases (ContactService), listing pipeline, ports, DTOs, errors.
- infrastructure: adapters (InMemoryContactRepository), seed data, keep-alive.
"""

from contactbook.application import (
    UNSET,
    ContactPage,
    ContactQuery,
    ContactRepository,
    ContactService,
    NotFoundError,
    TagsResult,
    ValidationError,
)
from contactbook.domain import Contact
from contactbook.infrastructure import InMemoryContactRepository

__all__ = [
    "UNSET",
    "Contact",
    "ContactPage",
    "ContactQuery",
    "ContactRepository",
    "ContactService",
    "InMemoryContactRepository",
    "NotFoundError",
    "TagsResult",
    "ValidationError",
]
