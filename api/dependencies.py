"""
Shared FastAPI dependencies for the Image Gateway.
Centralizes access to app state and services.
"""

import logging
from typing import Any, Dict

from fastapi import HTTPException, Request

from services.metadata_service import MetadataService

logger = logging.getLogger(__name__)


def get_metadata_service(request: Request) -> MetadataService:
    """
    Get MetadataService instance from app state.

    Args:
        request: FastAPI request object

    Returns:
        MetadataService instance

    Raises:
        HTTPException: If the service was not initialized
    """
    try:
        return request.app.state.metadata_service
    except AttributeError as e:
        logger.error(f"Metadata service not initialized in app state: {e}")
        raise HTTPException(
            status_code=500, detail="Internal server error: Metadata service not initialized"
        )


def get_config(request: Request) -> Dict[str, Any]:
    """
    Get application configuration.

    Args:
        request: FastAPI request object

    Returns:
        Configuration dictionary
    """
    try:
        return request.app.state.config
    except AttributeError:
        logger.warning("Config not found in app state, using defaults")
        return {}
