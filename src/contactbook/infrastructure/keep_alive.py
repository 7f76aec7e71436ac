"""Periodic self-ping of /health so hosted free-tier instances are not idled out."""

import asyncio
import logging
from datetime import datetime, timezone

import httpx

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 300.0


def health_url(base_url: str) -> str:
    return base_url.rstrip("/") + "/health"


async def ping_once(client: httpx.AsyncClient, url: str) -> bool:
    """GET url once. Returns True on a 2xx response; logs and returns False otherwise."""
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.warning("Keep-alive failed: %s", e)
        return False
    logger.info(
        "Keep-alive ping: %s %s",
        response.status_code,
        datetime.now(timezone.utc).isoformat(),
    )
    return True


async def run_keep_alive(
    base_url: str,
    interval: float = DEFAULT_INTERVAL_SECONDS,
    *,
    client: httpx.AsyncClient | None = None,
    max_pings: int | None = None,
) -> None:
    """Ping <base_url>/health every interval seconds until cancelled.

    The first ping happens after one interval. max_pings bounds the loop (tests).
    """
    url = health_url(base_url)
    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=10)
    sent = 0
    try:
        while max_pings is None or sent < max_pings:
            await asyncio.sleep(interval)
            await ping_once(client, url)
            sent += 1
    finally:
        if owns_client:
            await client.aclose()


def start_keep_alive(base_url: str, interval: float = DEFAULT_INTERVAL_SECONDS) -> asyncio.Task:
    """Schedule run_keep_alive on the running loop and return the task."""
    logger.info("Keep-alive enabled: %s every %.0fs", health_url(base_url), interval)
    return asyncio.create_task(run_keep_alive(base_url, interval))
