import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from journal_proxy.api.routes import router
from journal_proxy.core.config import settings
from journal_proxy.core.logging_config import configure_logging
from journal_proxy.fetch.errors import ValidationError

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = [
    "GET /proxy",
    "POST /bulk-proxy",
    "GET /check-website",
    "POST /bulk-check-websites",
    "GET /health"
]

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Configure logging on startup.
    """
    configure_logging(settings.LOG_LEVEL)
    logger.info("Journal Scraper Proxy Server starting on port %d", settings.PORT)
    for endpoint in AVAILABLE_ENDPOINTS:
        logger.info("  %s", endpoint)

    yield

    logger.info("Shutting down Journal Scraper Proxy Server...")

app = FastAPI(
    title="Journal Scraper Proxy",
    description="Forwarding proxy that fetches remote pages for a browser-based journal scraper",
    version="1.0.0",
    lifespan=lifespan
)

# The browser client calls from arbitrary origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"]
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("%s %s", request.method, request.url.path)
    return await call_next(request)

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": str(exc)}
    )

@app.exception_handler(status.HTTP_405_METHOD_NOT_ALLOWED)
@app.exception_handler(status.HTTP_404_NOT_FOUND)
async def not_found_handler(request: Request, exc: Exception):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "Endpoint not found", "availableEndpoints": AVAILABLE_ENDPOINTS}
    )

@app.exception_handler(Exception)
async def server_error_handler(request: Request, exc: Exception):
    logger.error("Server Error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal Server Error", "message": str(exc)}
    )

# Include API routes
app.include_router(router)

@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "message": "Journal Scraper Proxy Server is running!",
        "endpoints": {
            "proxy": "GET /proxy?url=URL",
            "bulkProxy": "POST /bulk-proxy",
            "checkWebsite": "GET /check-website?url=URL",
            "bulkCheckWebsites": "POST /bulk-check-websites",
            "health": "GET /health"
        }
    }

def run():
    """Console entry point."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
