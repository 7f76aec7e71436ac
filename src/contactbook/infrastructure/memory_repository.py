"""In-memory implementation of ContactRepository (no DB)."""

from collections.abc import Iterable

from contactbook.domain import Contact, name_sort_key, tag_key

DEFAULT_TAGS = ("Family", "Work", "Friend")


def _sort_contacts(contacts: list[Contact]) -> None:
    contacts.sort(key=lambda c: name_sort_key(c.name))


class InMemoryContactRepository:
    """Stores contacts in a list kept in ascending name order, plus a tag registry.
    Not thread-safe on its own; ContactService serializes access."""

    def __init__(self, tags: Iterable[str] = DEFAULT_TAGS) -> None:
        self._contacts: list[Contact] = []
        self._tags: list[str] = []
        for tag in tags:
            self.add_tag(tag)

    def _index_of(self, contact_id: str) -> int:
        for i, contact in enumerate(self._contacts):
            if contact.id == contact_id:
                return i
        return -1

    def add(self, contact: Contact) -> None:
        if self._index_of(contact.id) != -1:
            raise ValueError(f"Duplicate contact id: {contact.id}")
        self._contacts.append(contact)
        _sort_contacts(self._contacts)

    def add_many(self, contacts: Iterable[Contact]) -> None:
        seen = {c.id for c in self._contacts}
        for contact in contacts:
            if contact.id in seen:
                raise ValueError(f"Duplicate contact id: {contact.id}")
            seen.add(contact.id)
            self._contacts.append(contact)
        _sort_contacts(self._contacts)

    def get_by_id(self, contact_id: str) -> Contact | None:
        i = self._index_of(contact_id)
        return self._contacts[i] if i != -1 else None

    def list_all(self) -> list[Contact]:
        return list(self._contacts)

    def replace(self, contact: Contact, *, resort: bool = False) -> bool:
        i = self._index_of(contact.id)
        if i == -1:
            return False
        self._contacts[i] = contact
        if resort:
            _sort_contacts(self._contacts)
        return True

    def remove(self, contact_id: str) -> Contact | None:
        i = self._index_of(contact_id)
        if i == -1:
            return None
        return self._contacts.pop(i)

    def count(self) -> int:
        return len(self._contacts)

    def list_tags(self) -> list[str]:
        return list(self._tags)

    def add_tag(self, tag: str) -> bool:
        key = tag_key(tag)
        if any(tag_key(existing) == key for existing in self._tags):
            return False
        self._tags.append(tag)
        self._tags.sort(key=tag_key)
        return True
