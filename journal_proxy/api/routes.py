from typing import Any, Optional
from fastapi import APIRouter, Body, Response, status
from fastapi.responses import JSONResponse
from journal_proxy.schemas import BulkCheckResponse, BulkProxyResponse, BulkRequest, WebsiteCheckResponse
from journal_proxy.services import proxy as proxy_service

router = APIRouter()

def _missing_url(usage: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "URL parameter is required", "usage": usage}
    )

@router.get("/proxy")
async def proxy(url: Optional[str] = None):
    """
    Fetch a single URL and return its body as-is.

    A failed fetch (network error or non-2xx status) returns a 500
    with the URL and the failure detail.
    """
    if not url:
        return _missing_url("/proxy?url=ENCODED_URL")

    outcome = await proxy_service.proxy_url(url)
    if not outcome.success:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to fetch URL", "details": outcome.error, "url": url}
        )

    media_type = (outcome.content_type or "text/html").split(";")[0].strip()
    return Response(content=outcome.body or "", media_type=media_type)

@router.post("/bulk-proxy", response_model=BulkProxyResponse)
async def bulk_proxy(body: Any = Body(None)):
    """Fetch several URLs one by one, pausing `delay` ms between them."""
    request = BulkRequest.from_body(body)
    return await proxy_service.bulk_proxy(request.urls, request.delay)

@router.get("/check-website", response_model=WebsiteCheckResponse, response_model_exclude_none=True)
async def check_website(url: Optional[str] = None):
    """Report whether a URL answers and with which status. Always 200."""
    if not url:
        return _missing_url("/check-website?url=ENCODED_URL")
    return await proxy_service.check_website(url)

@router.post("/bulk-check-websites", response_model=BulkCheckResponse)
async def bulk_check_websites(body: Any = Body(None)):
    """Check several URLs one by one without downloading their bodies."""
    request = BulkRequest.from_body(body)
    return await proxy_service.bulk_check(request.urls, request.delay)

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "OK", "timestamp": proxy_service.utc_timestamp()}
