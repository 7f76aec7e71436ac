"""Domain layer: entities and value objects. No dependencies on outer layers."""

from contactbook.domain.entities import Contact, name_sort_key, tag_key
from contactbook.domain.phone import phone_digits

__all__ = ["Contact", "name_sort_key", "phone_digits", "tag_key"]
