"""Custom exception handlers"""
# pylint: disable=unused-argument
import logging

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR, HTTP_503_SERVICE_UNAVAILABLE

from catalog.exceptions import DataAccessError

logger = logging.getLogger(__name__)


async def data_access_exception_handler(request: Request, exc: DataAccessError) -> JSONResponse:
    logger.error("Catalog data unavailable for %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=HTTP_503_SERVICE_UNAVAILABLE,
        content={"message": str(exc)},
    )


async def default_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """overriding default_exception_handler"""
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": str(exc)},
    )
