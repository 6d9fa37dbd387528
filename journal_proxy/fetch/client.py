from typing import Optional
import httpx
from journal_proxy.core.config import settings

def build_client(timeout_ms: int, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Create the outbound HTTP client used for one batch."""
    headers = {"User-Agent": settings.USER_AGENT}
    return httpx.AsyncClient(
        timeout=timeout_ms / 1000,
        headers=headers,
        follow_redirects=True,
        transport=transport
    )
