"""
API key authentication for the analysis endpoints.
"""
import logging
import secrets
from typing import Optional

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from app.core.config import settings

logger = logging.getLogger(__name__)

# Define the API key header
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


class APIClient:
    """Simple object representing an authenticated API client."""
    def __init__(self, source: str):
        self.source = source  # "static" or "anonymous"


def get_current_api_client(
    api_key: Optional[str] = Security(api_key_header),
) -> APIClient:
    """
    Dependency to verify the X-API-Key header.

    If settings.API_KEY is not set, authentication is disabled (for testing/dev).

    Args:
        api_key: API key from X-API-Key header

    Returns:
        APIClient describing how the caller was authenticated

    Raises:
        HTTPException: If API key is missing or invalid
    """
    if not settings.is_auth_enabled():
        logger.debug("API_KEY not configured - authentication is disabled")
        return APIClient(source="anonymous")

    if not api_key:
        logger.warning("API key missing from request")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key",
            headers={"WWW-Authenticate": "ApiKey"},
        )

    if secrets.compare_digest(api_key.encode("utf-8"), settings.API_KEY.encode("utf-8")):
        logger.debug("Authenticated with static API key")
        return APIClient(source="static")

    logger.warning(f"Invalid API key attempted: {api_key[:4]}...")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid API key",
        headers={"WWW-Authenticate": "ApiKey"},
    )
