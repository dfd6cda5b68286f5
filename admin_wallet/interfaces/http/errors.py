"""Map domain and routing errors to JSON error bodies."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from admin_wallet.domain.ledger import WalletError

logger = logging.getLogger(__name__)

HTTP_ERROR_KINDS = {
    status.HTTP_404_NOT_FOUND: ("Not found", "not_found"),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("Method not allowed", "method_not_allowed"),
}


async def wallet_error_handler(request: Request, exc: WalletError) -> JSONResponse:
    if exc.status_code < 500:
        logger.warning("%s %s rejected (%s): %s", request.method, request.url.path, exc.kind, exc.message)
    else:
        logger.error("%s %s failed (%s): %s", request.method, request.url.path, exc.kind, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message, kind = HTTP_ERROR_KINDS.get(exc.status_code, (str(exc.detail), "http"))
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message, "kind": kind},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WalletError, wallet_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)


__all__ = ["register_exception_handlers"]
