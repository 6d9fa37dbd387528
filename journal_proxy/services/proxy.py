import logging
from datetime import datetime, timezone
from typing import Optional

from journal_proxy.core.config import settings
from journal_proxy.fetch.base import FetchMode, FetchOutcome
from journal_proxy.fetch.batch import run_batch, run_one
from journal_proxy.schemas import (
    BulkCheckResponse,
    BulkProxyResponse,
    CheckOutcomeOut,
    FetchOutcomeOut,
    WebsiteCheckResponse,
)

logger = logging.getLogger(__name__)

def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def _batch_delay(delay: Optional[int]) -> int:
    return settings.BATCH_DELAY_MS if delay is None else delay

async def proxy_url(url: str) -> FetchOutcome:
    """Fetch one URL in full. The caller decides how to render the outcome."""
    logger.info("Proxying: %s", url)
    outcome = await run_one(url, FetchMode.FULL_FETCH)
    if outcome.success:
        logger.info("Success: %s (%d chars)", url, len(outcome.body or ""))
    else:
        logger.error("Proxy error for %s: %s", url, outcome.error)
    return outcome

async def check_website(url: str) -> WebsiteCheckResponse:
    """
    Probe one URL without keeping its body.

    Failures are reported in-band through `accessible` and `error`,
    so this always produces a response.
    """
    logger.info("Checking website: %s", url)
    outcome = await run_one(url, FetchMode.REACHABILITY_CHECK)

    if outcome.success:
        logger.info("Website check: %s - HTTP %s", url, outcome.status)
        return WebsiteCheckResponse(
            url=url,
            status=outcome.status,
            status_text=outcome.status_text,
            accessible=bool(outcome.accessible),
            timestamp=utc_timestamp()
        )

    logger.error("Website check failed for %s: %s", url, outcome.error)
    return WebsiteCheckResponse(
        url=url,
        accessible=False,
        error=outcome.error,
        timestamp=utc_timestamp()
    )

async def bulk_proxy(urls, delay: Optional[int] = None) -> BulkProxyResponse:
    result = await run_batch(urls, FetchMode.FULL_FETCH, delay_ms=_batch_delay(delay))
    logger.info("Bulk proxy done: %d/%d succeeded", result.success_count, result.total)

    return BulkProxyResponse(
        total=result.total,
        success=result.success_count,
        failed=result.failure_count,
        results=[
            FetchOutcomeOut(
                url=o.url,
                index=o.index,
                success=o.success,
                status=o.status,
                status_text=o.status_text,
                html=o.body,
                error=o.error
            )
            for o in result.outcomes
        ]
    )

async def bulk_check(urls, delay: Optional[int] = None) -> BulkCheckResponse:
    result = await run_batch(urls, FetchMode.REACHABILITY_CHECK, delay_ms=_batch_delay(delay))
    logger.info("Bulk check done: %d/%d accessible", result.success_count, result.total)

    return BulkCheckResponse(
        total=result.total,
        accessible=result.success_count,
        inaccessible=result.failure_count,
        results=[
            CheckOutcomeOut(
                url=o.url,
                index=o.index,
                success=o.success,
                accessible=bool(o.accessible),
                status=o.status,
                status_text=o.status_text,
                error=o.error
            )
            for o in result.outcomes
        ]
    )
