"""
Rate limiting for the payroll API.
Uses SlowAPI; storage is Redis when REDIS_URL is set, in-memory otherwise.
"""

import logging

from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from app.core.config import settings

logger = logging.getLogger("payroll.rate_limiter")


def get_real_client_ip(request: Request) -> str:
    """
    Get the real client IP, accounting for reverse proxies.
    Checks X-Forwarded-For header first, then X-Real-IP, then the direct peer.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # First IP in the chain is the original client
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return get_remote_address(request)


def get_client_identifier(request: Request) -> str:
    return f"ip:{get_real_client_ip(request)}"


def _storage_uri() -> str:
    if settings.REDIS_URL:
        # Mask credentials in logs
        logged_url = settings.REDIS_URL.split("@")[-1]
        logger.info(f"Rate limiter using Redis backend: {logged_url}")
        return settings.REDIS_URL

    if settings.ENVIRONMENT.lower() == "production":
        logger.warning(
            "Rate limiting is using in-memory storage; limits will not be shared "
            "across instances. Configure REDIS_URL for distributed rate limiting."
        )
    return "memory://"


limiter = Limiter(
    key_func=get_client_identifier,
    default_limits=["1000/hour", "200/minute"],
    storage_uri=_storage_uri(),
    strategy="fixed-window",
    headers_enabled=False,
)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Return a JSON 429 with retry information."""
    logger.warning(
        f"Rate limit exceeded for {get_client_identifier(request)} "
        f"on {request.method} {request.url.path}"
    )

    retry_after = getattr(exc, "retry_after", 60)

    return JSONResponse(
        status_code=429,
        content={
            "error": "Rate limit exceeded",
            "detail": f"Too many requests. Please retry after {retry_after} seconds.",
            "retry_after": retry_after,
        },
        headers={"Retry-After": str(retry_after)},
    )


class RateLimits:
    """Per-endpoint limits."""

    API_READ = "120/minute"
    API_SEARCH = "60/minute"
    API_WRITE = "30/minute"
