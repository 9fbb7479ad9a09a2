# app/errors.py
# Role: Ledger error taxonomy and the FastAPI handlers that translate
#       each error into its HTTP status / JSON body.

"""
Error types raised by the store and services.

Routes never catch these themselves; the handlers registered in
register_exception_handlers() turn them into responses.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class LedgerError(Exception):
    """Base class for all ledger errors."""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(LedgerError):
    """Malformed input for a new transaction."""

    status_code = 400


class NotFoundError(LedgerError):
    """No transaction with the requested id."""

    status_code = 404

    def __init__(self, message: str = "Transaction not found"):
        super().__init__(message)


class StoreError(LedgerError):
    """The underlying database operation failed."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


# -------------------------------------------------------------------
# HTTP translation
# -------------------------------------------------------------------

async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": "Transaction not found"})


async def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Unparseable bodies / bad query params: report as 400 like other input errors
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return JSONResponse(status_code=400, content={"error": "; ".join(parts) or "Invalid request"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, _validation_error_handler)
    app.add_exception_handler(NotFoundError, _not_found_handler)
    app.add_exception_handler(StoreError, _store_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
