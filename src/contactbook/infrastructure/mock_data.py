"""Synthetic contacts for seeding the in-memory store at startup."""

import logging
import random
import uuid

from contactbook.application.ports import ContactRepository
from contactbook.domain import Contact

logger = logging.getLogger(__name__)

DEFAULT_SEED_COUNT = 5000

FIRST_NAMES = (
    "Aaliyah", "Aaron", "Adele", "Ahmed", "Aiko", "Alejandro", "Alice", "Amara",
    "Anders", "Ángel", "Bao", "Beatriz", "Benjamin", "Björn", "Carla", "Chen",
    "Chloé", "Dmitri", "Elena", "Émile", "Fatima", "Felix", "Grace", "Hannah",
    "Hiroshi", "Ines", "Isaac", "Jamal", "Jana", "Kofi", "Laila", "Liam",
    "Lucía", "Marco", "Maya", "Nadia", "Noah", "Olga", "Omar", "Priya",
    "Quinn", "Rafael", "Rosa", "Sami", "Sofia", "Tariq", "Uma", "Valentina",
    "Wei", "Yara", "Zoe",
)

LAST_NAMES = (
    "Abbott", "Adeyemi", "Andersson", "Bianchi", "Brown", "Castillo", "Chen",
    "Dubois", "Eriksen", "Fernández", "Garcia", "Gómez", "Haddad", "Ivanova",
    "Jensen", "Kim", "Kowalski", "Lee", "Martin", "Müller", "Nakamura",
    "Nguyen", "O'Connor", "Okafor", "Patel", "Petrov", "Quispe", "Rossi",
    "Santos", "Schmidt", "Silva", "Singh", "Smith", "Tanaka", "Thompson",
    "Usman", "Van der Berg", "Walker", "Wang", "Xu", "Yilmaz", "Zhang",
)

_PHONE_FORMATS = (
    "({a}) {b}-{c}",
    "{a}-{b}-{c}",
    "{a}.{b}.{c}",
    "+1-{a}-{b}-{c}",
    "1-{a}-{b}-{c} x{ext}",
)

# (tag, probability)
_TAG_ODDS = (("Family", 0.2), ("Work", 0.3), ("Friend", 0.1))


def _phone(rng: random.Random) -> str:
    fmt = rng.choice(_PHONE_FORMATS)
    return fmt.format(
        a=rng.randint(200, 999),
        b=rng.randint(200, 999),
        c=f"{rng.randint(0, 9999):04d}",
        ext=rng.randint(10, 9999),
    )


def _contact_id(rng: random.Random) -> str:
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def generate_contacts(count: int, rng: random.Random | None = None) -> list[Contact]:
    """Build count random contacts. Pass a seeded rng for reproducible output."""
    rng = rng or random.Random()
    out = []
    for i in range(count):
        contact_id = _contact_id(rng)
        tags = tuple(tag for tag, odds in _TAG_ODDS if rng.random() < odds)
        out.append(
            Contact(
                id=contact_id,
                name=f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
                phone=_phone(rng),
                email=f"user_{i}@example.com",
                image_url=(
                    f"https://i.pravatar.cc/150?u={contact_id}"
                    if rng.random() < 0.5
                    else None
                ),
                is_favorite=rng.random() < 0.1,
                tags=tags,
            )
        )
    return out


def seed_repository(
    repository: ContactRepository,
    count: int = DEFAULT_SEED_COUNT,
    seed: int | None = None,
) -> int:
    """Fill the repository with generated contacts. Returns how many were added."""
    logger.info("Generating %d mock contacts...", count)
    rng = random.Random(seed)
    repository.add_many(generate_contacts(count, rng))
    logger.info("Mock data generation complete.")
    return count
