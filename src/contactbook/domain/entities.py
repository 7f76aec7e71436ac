"""Domain entities: Contact, plus the ordering keys used for contacts and tags."""

import unicodedata
import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Contact:
    """
    Represents a person in the contact book.
    A Contact is immutable; updates produce a new instance with the same id.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: str = field(default="")
    phone: str = field(default="")
    email: str | None = None
    image_url: str | None = None
    is_favorite: bool = False
    tags: tuple[str, ...] = ()

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Contact name must be non-empty.")

        if not self.phone or not self.phone.strip():
            raise ValueError("Contact phone must be non-empty.")

        object.__setattr__(self, "tags", tuple(self.tags))

    def to_dict(self) -> dict:
        """JSON shape used by the HTTP API (camelCase keys)."""
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "email": self.email,
            "imageUrl": self.image_url,
            "isFavorite": self.is_favorite,
            "tags": list(self.tags),
        }


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def name_sort_key(name: str) -> tuple[str, str]:
    """Locale-style ordering: accents and case ignored first, lowercase wins ties.

    Gives "alice" < "Bob" < "Émile" < "eve", where plain str ordering would put
    every uppercase letter before every lowercase one.
    """
    return (_strip_accents(name).casefold(), name.swapcase())


def tag_key(tag: str) -> str:
    """Key for case-insensitive tag comparison and ordering."""
    return tag.casefold()
