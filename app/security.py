import logging
import secrets
from typing import Optional

from fastapi import Depends, HTTPException, Security
from fastapi.security.api_key import APIKeyHeader
from starlette.status import HTTP_403_FORBIDDEN, HTTP_503_SERVICE_UNAVAILABLE

from app.settings import Settings, settings

logger = logging.getLogger(__name__)

API_KEY_NAME = "X-Site-Key"
api_key_header = APIKeyHeader(name=API_KEY_NAME, auto_error=False)


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_api_key(
    api_key_header: Optional[str] = Security(api_key_header),
    current_settings: Settings = Depends(get_settings),
):
    """Only the site's rendering layer, holding SITE_API_KEY, may read content.

    An unset key refuses every request with 503.
    """
    expected = current_settings.SITE_API_KEY
    if not expected:
        logger.error("SITE_API_KEY is not set; refusing content request")
        raise HTTPException(
            status_code=HTTP_503_SERVICE_UNAVAILABLE,
            detail="Content API key is not configured",
        )

    if api_key_header and secrets.compare_digest(
        api_key_header.encode("utf-8"), expected.encode("utf-8")
    ):
        return api_key_header

    logger.warning("Rejected content request with a missing or invalid API key")
    raise HTTPException(
        status_code=HTTP_403_FORBIDDEN,
        detail="Could not validate API key",
    )
