"""
Application level exception handlers.

Storage failures are not retried.  Any ``PyMongoError`` that escapes a
handler is logged with its traceback and returned to the client as a
500 response carrying the driver's message.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


async def storage_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.exception("Storage error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the storage error handler to ``app``."""
    app.add_exception_handler(PyMongoError, storage_error_handler)
