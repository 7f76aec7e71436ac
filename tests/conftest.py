"""Keep the module-level app small: importing api.main seeds the default store."""

import os

os.environ.setdefault("SEED_CONTACTS", "50")
os.environ.setdefault("SEED_RANDOM", "0")
