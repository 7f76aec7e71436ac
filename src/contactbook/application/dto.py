"""Data transfer objects returned by ContactService."""

from dataclasses import dataclass, field

from contactbook.domain import Contact


class _Unset:
    """Marker for "field not provided" in partial updates (distinct from None)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


@dataclass(frozen=True)
class ContactPage:
    """One page of a filtered contact listing."""

    items: list[Contact] = field(default_factory=list)
    total_count: int = 0
    page: int = 1
    has_next_page: bool = False


@dataclass(frozen=True)
class TagsResult:
    """Tag registry after create_tag. created is False when the tag already existed."""

    tags: list[str]
    created: bool
