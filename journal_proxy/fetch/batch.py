import asyncio
import logging
from collections.abc import Sequence
from typing import List, Optional

import httpx

from journal_proxy.core.config import settings
from journal_proxy.fetch.base import BatchResult, FetchMode, FetchOutcome
from journal_proxy.fetch.client import build_client
from journal_proxy.fetch.errors import ProxyError, RemoteHttpError, TransportError, ValidationError

logger = logging.getLogger(__name__)

def default_timeout_ms(mode: FetchMode) -> int:
    if mode is FetchMode.REACHABILITY_CHECK:
        return settings.CHECK_TIMEOUT_MS
    return settings.FETCH_TIMEOUT_MS

def validate_items(items) -> List[str]:
    """Check batch input shape. Nothing is fetched unless this passes."""
    if items is None or isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
        raise ValidationError("URLs array is required in request body")
    if len(items) == 0:
        raise ValidationError("URLs array must not be empty")
    for i, url in enumerate(items):
        if not isinstance(url, str):
            raise ValidationError(f"URL at index {i} must be a string")
    return list(items)

def validate_delay(delay_ms) -> int:
    if isinstance(delay_ms, bool) or not isinstance(delay_ms, int) or delay_ms < 0:
        raise ValidationError("delay must be a non-negative integer (milliseconds)")
    return delay_ms

async def pace(delay_ms: int) -> None:
    """Wait between two consecutive requests of a batch."""
    if delay_ms > 0:
        await asyncio.sleep(delay_ms / 1000)

def _reason(response: httpx.Response) -> str:
    # HTTP/2 responses carry no reason phrase
    return response.reason_phrase or httpx.codes.get_reason_phrase(response.status_code)

def _describe(exc: Exception) -> str:
    message = str(exc).strip()
    return message or exc.__class__.__name__

async def _request(client: httpx.AsyncClient, url: str, index: int, mode: FetchMode,
                   timeout_s: float) -> FetchOutcome:
    async with client.stream("GET", url, timeout=timeout_s) as response:
        if mode is FetchMode.REACHABILITY_CHECK:
            return FetchOutcome(
                url=url,
                index=index,
                success=True,
                status=response.status_code,
                status_text=_reason(response),
                accessible=response.is_success,
            )

        if not response.is_success:
            raise RemoteHttpError(response.status_code, _reason(response))

        await response.aread()
        return FetchOutcome(
            url=url,
            index=index,
            success=True,
            status=response.status_code,
            status_text=_reason(response),
            body=response.text,
            content_type=response.headers.get("content-type"),
        )

async def _get(client: httpx.AsyncClient, url: str, index: int, mode: FetchMode,
               timeout_s: float) -> FetchOutcome:
    # httpx times each phase separately; wait_for bounds the whole request, body included
    try:
        return await asyncio.wait_for(_request(client, url, index, mode, timeout_s), timeout_s)
    except (asyncio.TimeoutError, httpx.TimeoutException) as e:
        raise TransportError(f"Timeout after {timeout_s:g}s while fetching {url}") from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise TransportError(f"Failed to fetch {url}: {_describe(e)}") from e

async def fetch_one(client: httpx.AsyncClient, url: str, index: int, mode: FetchMode,
                    timeout_ms: int) -> FetchOutcome:
    """
    Fetch a single batch item. Never raises for per-item problems:
    every failure is turned into an unsuccessful outcome.
    """
    try:
        return await _get(client, url, index, mode, timeout_ms / 1000)
    except ProxyError as e:
        logger.warning("Fetch failed for %s: %s", url, e)
        error = str(e)
    except Exception as e:
        logger.exception("Unexpected error while fetching %s", url)
        error = _describe(e)

    return FetchOutcome(
        url=url,
        index=index,
        success=False,
        error=error,
        accessible=False if mode is FetchMode.REACHABILITY_CHECK else None,
    )

async def _run(client: httpx.AsyncClient, urls: List[str], mode: FetchMode,
               delay_ms: int, timeout_ms: int) -> BatchResult:
    result = BatchResult(mode=mode)
    total = len(urls)

    for i, url in enumerate(urls):
        logger.info("[%d/%d] Fetching: %s", i + 1, total, url)
        outcome = await fetch_one(client, url, i, mode, timeout_ms)
        result.outcomes.append(outcome)

        ok = outcome.accessible if mode is FetchMode.REACHABILITY_CHECK else outcome.success
        detail = f"HTTP {outcome.status}" if outcome.status is not None else outcome.error
        logger.info("[%d/%d] %s %s (%s)", i + 1, total, "OK" if ok else "FAILED", url, detail)

        if i < total - 1:
            await pace(delay_ms)

    return result

async def run_batch(
    items,
    mode: FetchMode = FetchMode.FULL_FETCH,
    delay_ms: int = 1000,
    timeout_ms: Optional[int] = None,
    client: Optional[httpx.AsyncClient] = None
) -> BatchResult:
    """
    Fetch every URL in `items` one after another, pausing `delay_ms`
    between requests, and collect one outcome per URL in input order.

    Only invalid input aborts the batch (ValidationError, raised before
    any request). Per-URL failures are recorded in the result.
    An injected `client` is left open; otherwise a client is created
    for this batch and closed when it finishes.
    """
    urls = validate_items(items)
    delay_ms = validate_delay(delay_ms)
    if timeout_ms is None:
        timeout_ms = default_timeout_ms(mode)

    logger.info("Processing batch of %d URLs (%s, delay %dms)", len(urls), mode.value, delay_ms)

    if client is not None:
        return await _run(client, urls, mode, delay_ms, timeout_ms)

    async with build_client(timeout_ms) as owned_client:
        return await _run(owned_client, urls, mode, delay_ms, timeout_ms)

async def run_one(
    url: str,
    mode: FetchMode = FetchMode.FULL_FETCH,
    timeout_ms: Optional[int] = None,
    client: Optional[httpx.AsyncClient] = None
) -> FetchOutcome:
    """Single-URL reduction of run_batch."""
    result = await run_batch([url], mode, delay_ms=0, timeout_ms=timeout_ms, client=client)
    return result.outcomes[0]
