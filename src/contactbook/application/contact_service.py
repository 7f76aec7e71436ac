"""Contact listing, create/update/delete, and the tag registry. One lock per service."""

import threading
from dataclasses import replace

from contactbook.application.dto import UNSET, ContactPage, TagsResult
from contactbook.application.errors import NotFoundError, ValidationError
from contactbook.application.normalize import (
    clean_tags,
    optional_email,
    optional_image_url,
    required_text,
)
from contactbook.application.ports import ContactRepository
from contactbook.application.query import ContactQuery, run_query
from contactbook.domain import Contact


class ContactService:
    """Core use cases over a ContactRepository. Every operation holds the same lock,
    so no read sees a half-applied mutation and no two mutations interleave."""

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository
        self._lock = threading.RLock()

    def list_contacts(self, query: ContactQuery | None = None) -> ContactPage:
        """Filtered, paginated view of the contacts in name order."""
        query = query or ContactQuery()
        with self._lock:
            contacts = self._repo.list_all()
        return run_query(contacts, query)

    def get_contact(self, contact_id: str) -> Contact:
        with self._lock:
            contact = self._repo.get_by_id(contact_id)
        if contact is None:
            raise NotFoundError(contact_id)
        return contact

    def count(self) -> int:
        with self._lock:
            return self._repo.count()

    def create_contact(
        self,
        name: object,
        phone: object,
        email: object = None,
        image_url: object = None,
        tags: object = None,
    ) -> Contact:
        """Validate and store a new contact. Name and phone are required."""
        name_clean = required_text(name)
        phone_clean = required_text(phone)
        if name_clean is None or phone_clean is None:
            raise ValidationError("Name and phone are required.")

        contact = Contact(
            name=name_clean,
            phone=phone_clean,
            email=optional_email(email),
            image_url=optional_image_url(image_url),
            is_favorite=False,
            tags=clean_tags(tags),
        )
        with self._lock:
            self._repo.add(contact)
        return contact

    def update_contact(
        self,
        contact_id: str,
        *,
        is_favorite: object = UNSET,
        tags: object = UNSET,
    ) -> Contact:
        """Apply a partial update. Omitted fields keep their stored value.

        tags, when given, replaces the stored list; a value that is not a list
        (null included) clears it. is_favorite must be a bool; None leaves it as is.
        """
        if (
            is_favorite is not UNSET
            and is_favorite is not None
            and not isinstance(is_favorite, bool)
        ):
            raise ValidationError("isFavorite must be a boolean.")

        changes: dict = {}
        if isinstance(is_favorite, bool):
            changes["is_favorite"] = is_favorite
        tags_given = tags is not UNSET
        if tags_given:
            changes["tags"] = clean_tags(tags)

        with self._lock:
            current = self._repo.get_by_id(contact_id)
            if current is None:
                raise NotFoundError(contact_id)
            updated = replace(current, **changes)
            self._repo.replace(updated, resort=tags_given)
        return updated

    def delete_contact(self, contact_id: str) -> Contact:
        """Remove the contact and return its last state."""
        with self._lock:
            removed = self._repo.remove(contact_id)
        if removed is None:
            raise NotFoundError(contact_id)
        return removed

    def list_tags(self) -> list[str]:
        with self._lock:
            return self._repo.list_tags()

    def create_tag(self, tag_name: object) -> TagsResult:
        """Register a tag. An existing tag (any case) is left alone with created=False."""
        name = required_text(tag_name)
        if name is None:
            raise ValidationError("tagName (string) is required.")
        with self._lock:
            created = self._repo.add_tag(name)
            return TagsResult(tags=self._repo.list_tags(), created=created)
