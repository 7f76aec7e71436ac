"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Iterable
from typing import Protocol

from contactbook.domain import Contact


class ContactRepository(Protocol):
    """Holds the contact collection (kept sorted by name) and the tag registry."""

    def add(self, contact: Contact) -> None:
        """Store a new contact and restore name order."""
        ...

    def add_many(self, contacts: Iterable[Contact]) -> None:
        """Bulk load (seeding). Sorts once at the end."""
        ...

    def get_by_id(self, contact_id: str) -> Contact | None:
        """Return the contact with the given id, or None."""
        ...

    def list_all(self) -> list[Contact]:
        """Return a copy of all contacts in ascending name order."""
        ...

    def replace(self, contact: Contact, *, resort: bool = False) -> bool:
        """Swap the stored contact with the same id. Returns False if not found."""
        ...

    def remove(self, contact_id: str) -> Contact | None:
        """Delete and return the contact, or None if not found."""
        ...

    def count(self) -> int:
        ...

    def list_tags(self) -> list[str]:
        """Return the tag registry sorted case-insensitively."""
        ...

    def add_tag(self, tag: str) -> bool:
        """Register a tag. Returns False if it already exists (case-insensitive)."""
        ...
