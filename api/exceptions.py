"""
API exceptions and exception handlers for the Image Gateway.
"""

import functools
import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ImageGatewayException(Exception):
    """Base exception carrying an HTTP status code"""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class EmptyBodyException(ImageGatewayException):
    """Raised when the request carries no image data"""

    def __init__(self, message: str = "Empty or unreadable image"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)


class PayloadTooLargeException(ImageGatewayException):
    """Raised when an uploaded image exceeds the configured limit"""

    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Image of {size} bytes exceeds the {limit} bytes limit",
            413,
        )


class UnsupportedMediaException(ImageGatewayException):
    """Raised when the uploaded data is not a decodable image"""

    def __init__(self, message: str = "Unsupported media type"):
        super().__init__(message, status.HTTP_415_UNSUPPORTED_MEDIA_TYPE)


def _error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message, "status": status_code})


def safe_endpoint(func):
    """
    Decorator for route handlers.

    Gateway exceptions and HTTPException propagate to their handlers,
    ValueError becomes 400 and anything else a logged 500.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except (ImageGatewayException, HTTPException):
            raise
        except ValueError as e:
            logger.warning(f"{func.__name__}: invalid request: {e}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        except Exception as e:
            logger.error(f"{func.__name__} failed: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Internal server error: {e}",
            )

    return wrapper


def register_exception_handlers(app: FastAPI) -> None:
    """Register JSON handlers for gateway and unexpected exceptions"""

    @app.exception_handler(ImageGatewayException)
    async def gateway_exception_handler(request: Request, exc: ImageGatewayException):
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return _error_response(exc.message, exc.status_code)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Global exception: {exc}", exc_info=True)
        return _error_response(
            f"Internal server error: {exc}", status.HTTP_500_INTERNAL_SERVER_ERROR
        )
