import hashlib
from datetime import datetime, timezone

from fastapi import Header, HTTPException, Request
from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_429_TOO_MANY_REQUESTS

from .config import settings
from .cache import cache


def require_api_key(x_api_key: str | None = Header(default=None, alias="x-api-key")):
    """The form is public unless API_KEY is configured."""
    if settings.API_KEY and x_api_key != settings.API_KEY:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Invalid API key")


def _submitter(request: Request) -> str:
    """
    Who is submitting the form: client IP plus a short digest of the API key,
    so raw keys never end up in cache keys.
    """
    client_ip = request.client.host if request.client else "unknown"
    api_key = request.headers.get("x-api-key")
    key_tag = hashlib.sha256(api_key.encode("utf-8")).hexdigest()[:12] if api_key else "anon"
    return f"{key_tag}@{client_ip}"


def rate_limit(request: Request):
    """
    Caps predictions per submitter per wall-clock minute (RATE_LIMIT_RPM).
    Counters live in the in-process TTL cache and expire on their own.
    """
    limit = max(1, settings.RATE_LIMIT_RPM)
    minute = datetime.now(timezone.utc).strftime("%Y%m%d%H%M")
    key = f"predict-rate:{_submitter(request)}:{minute}"

    count = int(cache.get(key) or 0) + 1
    if count > limit:
        raise HTTPException(
            status_code=HTTP_429_TOO_MANY_REQUESTS,
            detail=f"Too many predictions; limit is {limit} per minute",
        )
    cache.set(key, str(count))
