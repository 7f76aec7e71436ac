"""
Run the contact API with uvicorn.
Run: python -m api (from repo root, with .env or env vars set: PORT, HOST).
"""

import logging
import os

import uvicorn

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4000


def main() -> None:
    from api.main import app, load_env

    # api.main may have been imported before a .env existed (or from another cwd).
    load_env()
    host = os.environ.get("HOST", DEFAULT_HOST).strip() or DEFAULT_HOST
    try:
        port = int(os.environ.get("PORT", str(DEFAULT_PORT)))
    except ValueError:
        logger.warning("Ignoring non-integer PORT, using %d", DEFAULT_PORT)
        port = DEFAULT_PORT

    logger.info("Contact API Server running at http://localhost:%d", port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
