"""Logging middleware with sensitive data redaction."""

import re
import time

from fastapi import Request

from hybrid_pages.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

# Sensitive parameters to redact from URLs
SENSITIVE_PARAMS = [
    "appid",
    "api_key",
    "token",
    "password",
    "secret",
    "key",
    "refresh_token",
    "access_token",
    "client_secret",
    "auth_token",
    "authorization",
    "bearer",
]


def redact_sensitive_data(url: str) -> str:
    """Redact sensitive query parameters from URL."""
    redacted = url
    for param in SENSITIVE_PARAMS:
        pattern = rf"{param}=([^&\s\"]+)"
        redacted = re.sub(pattern, f"{param}=***REDACTED***", redacted)
    return redacted


async def log_requests(request: Request, call_next):
    """Log each incoming request with status and duration."""
    started = time.perf_counter()
    response = await call_next(request)
    log_with_context(
        logger,
        "info",
        "Request handled",
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 2),
        event_type="http_access",
    )
    return response
