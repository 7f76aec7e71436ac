"""
FastAPI backend: REST API for the in-memory contact book.
Run with uvicorn: uvicorn api.main:app --reload  (or: python -m api)
"""

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv


def load_env() -> Path | None:
    """Load .env from repo root or cwd (first one found). Existing env vars win."""
    for path in (
        Path(__file__).resolve().parent.parent.parent / ".env",
        Path.cwd() / ".env",
    ):
        if path.exists():
            load_dotenv(path)
            return path
    return None


load_env()

import asyncio
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from contactbook.application import (
    ContactQuery,
    ContactService,
    NotFoundError,
    ValidationError,
)
from contactbook.domain import Contact
from contactbook.infrastructure import (
    DEFAULT_SEED_COUNT,
    InMemoryContactRepository,
    seed_repository,
    start_keep_alive,
)
from contactbook.infrastructure.keep_alive import DEFAULT_INTERVAL_SECONDS

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %s", name, raw, default)
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        value = 0
    if value <= 0:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default
    return value


def build_default_service() -> ContactService:
    """In-memory store seeded with synthetic contacts (SEED_CONTACTS, SEED_RANDOM)."""
    repo = InMemoryContactRepository()
    count = _env_int("SEED_CONTACTS", DEFAULT_SEED_COUNT)
    if count and count > 0:
        seed_repository(repo, count=count, seed=_env_int("SEED_RANDOM", None))
    return ContactService(repo)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.keep_alive = None
    external_url = os.environ.get("RENDER_EXTERNAL_URL", "").strip()
    if external_url:
        interval = _env_float("KEEP_ALIVE_INTERVAL", DEFAULT_INTERVAL_SECONDS)
        app.state.keep_alive = start_keep_alive(external_url, interval)
    logger.info("Contact API ready with %d contacts", app.state.service.count())
    try:
        yield
    finally:
        task = app.state.keep_alive
        if task is not None:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass


# --- Request bodies ---
# Fields accept any JSON value; ContactService decides what is valid or ignored.


class CreateContactBody(BaseModel):
    name: Any = None
    phone: Any = None
    email: Any = None
    imageUrl: Any = None
    tags: Any = None


class UpdateContactBody(BaseModel):
    isFavorite: Any = None
    tags: Any = None


class CreateTagBody(BaseModel):
    tagName: Any = None


# --- Responses ---


class ContactItem(BaseModel):
    id: str
    name: str
    phone: str
    email: str | None = None
    imageUrl: str | None = None
    isFavorite: bool = False
    tags: list[str] = []


class ContactListResponse(BaseModel):
    contacts: list[ContactItem]
    totalCount: int
    page: int
    hasNextPage: bool


def _item(contact: Contact) -> ContactItem:
    return ContactItem(**contact.to_dict())


def get_service(request: Request) -> ContactService:
    return request.app.state.service


def create_app(service: ContactService | None = None) -> FastAPI:
    """Build the API around service (a seeded in-memory one by default)."""
    app = FastAPI(title="Contact Book API", lifespan=lifespan)
    app.state.service = service if service is not None else build_default_service()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_shape_error(request: Request, exc: RequestValidationError):
        # Body shape errors answer 400, same as missing fields.
        return JSONResponse(
            status_code=400, content={"detail": jsonable_encoder(exc.errors())}
        )

    # --- REST: health ---

    @app.get("/health")
    def health():
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    # --- REST: tags ---

    @app.get("/api/tags")
    def list_tags(service: ContactService = Depends(get_service)) -> list[str]:
        return service.list_tags()

    @app.post("/api/tags")
    def create_tag(
        body: CreateTagBody | None = None,
        service: ContactService = Depends(get_service),
    ):
        if body is None:
            body = CreateTagBody()
        try:
            result = service.create_tag(body.tagName)
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
        if result.created:
            logger.info("POST /api/tags - Added: %s", body.tagName.strip())
        return JSONResponse(content=result.tags, status_code=201 if result.created else 200)

    # --- REST: contacts ---

    @app.get("/api/contacts")
    def list_contacts(
        page: str | None = None,
        limit: str | None = None,
        search: str | None = None,
        tag: str | None = None,
        service: ContactService = Depends(get_service),
    ) -> ContactListResponse:
        query = ContactQuery.from_params(page=page, limit=limit, search=search, tag=tag)
        result = service.list_contacts(query)
        logger.info(
            "GET /api/contacts?page=%d&limit=%d&search=%s&tag=%s - Sent %d of %d results",
            query.page,
            query.limit,
            query.search,
            tag,
            len(result.items),
            result.total_count,
        )
        return ContactListResponse(
            contacts=[_item(c) for c in result.items],
            totalCount=result.total_count,
            page=result.page,
            hasNextPage=result.has_next_page,
        )

    @app.post("/api/contacts")
    def create_contact(
        body: CreateContactBody | None = None,
        service: ContactService = Depends(get_service),
    ):
        if body is None:
            body = CreateContactBody()
        try:
            contact = service.create_contact(
                name=body.name,
                phone=body.phone,
                email=body.email,
                image_url=body.imageUrl,
                tags=body.tags,
            )
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
        logger.info("POST /api/contacts - Added: %s", contact.name)
        return JSONResponse(content=_item(contact).model_dump(), status_code=201)

    @app.put("/api/contacts/{contact_id}")
    def update_contact(
        contact_id: str,
        body: UpdateContactBody | None = None,
        service: ContactService = Depends(get_service),
    ) -> ContactItem:
        if body is None:
            body = UpdateContactBody()
        changes = {}
        if "isFavorite" in body.model_fields_set:
            changes["is_favorite"] = body.isFavorite
        if "tags" in body.model_fields_set:
            changes["tags"] = body.tags
        try:
            contact = service.update_contact(contact_id, **changes)
        except NotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e)) from e
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
        logger.info("PUT /api/contacts/%s - Updated contact", contact_id)
        return _item(contact)

    @app.delete("/api/contacts/{contact_id}")
    def delete_contact(
        contact_id: str, service: ContactService = Depends(get_service)
    ) -> ContactItem:
        try:
            contact = service.delete_contact(contact_id)
        except NotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e)) from e
        logger.info("DELETE /api/contacts/%s - Removed: %s", contact_id, contact.name)
        return _item(contact)

    return app


app = create_app()
