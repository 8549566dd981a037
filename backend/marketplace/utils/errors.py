"""Application exceptions and their HTTP handlers"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .logging import get_logger

logger = get_logger(__name__)


class MarketplaceError(Exception):
    """Base class for service errors"""


class StorageError(MarketplaceError):
    """A file system, JSON or SQL operation failed"""


class InvalidImageName(MarketplaceError):
    """Requested image name is not a .jpg inside the image directory"""


class ImageNotFound(MarketplaceError):
    """Neither the requested image nor the default image exists"""


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure", url=str(request.url), error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


async def invalid_image_name_handler(request: Request, exc: InvalidImageName) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


async def image_not_found_handler(request: Request, exc: ImageNotFound) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler so a failing request never takes the server down"""
    logger.exception("Unhandled error", method=request.method, url=str(request.url))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the service's exception handlers to the app"""
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(InvalidImageName, invalid_image_name_handler)
    app.add_exception_handler(ImageNotFound, image_not_found_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
