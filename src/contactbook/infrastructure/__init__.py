"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.keep_alive import run_keep_alive, start_keep_alive
from contactbook.infrastructure.memory_repository import (
    DEFAULT_TAGS,
    InMemoryContactRepository,
)
from contactbook.infrastructure.mock_data import (
    DEFAULT_SEED_COUNT,
    generate_contacts,
    seed_repository,
)

__all__ = [
    "DEFAULT_SEED_COUNT",
    "DEFAULT_TAGS",
    "InMemoryContactRepository",
    "generate_contacts",
    "run_keep_alive",
    "seed_repository",
    "start_keep_alive",
]
