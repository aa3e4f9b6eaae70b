"""Error Handlers - global exception handlers for the JSON API.

Invariants:
    - Every handler goes through core.error_translation.translate(); no status
      table lives here
    - RequestValidationError -> ValidationError for the first failing field,
      with every Pydantic failure attached under "details"
    - Exception (catch-all) -> opaque 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (MasterDataError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep its import fan-out small
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from masterdata.core.error_translation import ErrorOutcome, translate
from masterdata.core.errors import MasterDataError, ValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_masterdata_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def log_outcome(request: Request, exc: BaseException, outcome: ErrorOutcome) -> None:
    """Taxonomy errors at WARNING, anything unexpected at ERROR with traceback."""
    extra = {
        "error_code": outcome.code,
        "status": outcome.status,
        "path": request.url.path,
        "entity_type": getattr(getattr(exc, "entity_type", None), "value", None),
        "field": getattr(exc, "field", None),
        "operation": getattr(getattr(exc, "operation", None), "value", None),
    }
    if outcome.expected:
        logger.warning(f"{type(exc).__name__}: {exc}", extra=extra)
    else:
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc, extra=extra,
        )


def _register_masterdata_error_handler(app: FastAPI) -> None:

    @app.exception_handler(MasterDataError)
    async def masterdata_error_handler(request: Request, exc: MasterDataError):
        outcome = translate(exc)
        log_outcome(request, exc, outcome)
        return JSONResponse(status_code=outcome.status, content=outcome.to_response())


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle Pydantic shape errors like any other validation failure."""
        error = validation_error_from_request(exc)
        outcome = translate(error)
        log_outcome(request, error, outcome)
        content = outcome.to_response()
        content["error"]["details"] = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ]
        return JSONResponse(status_code=outcome.status, content=content)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        outcome = translate(exc)
        log_outcome(request, exc, outcome)
        return JSONResponse(status_code=outcome.status, content=outcome.to_response())


def validation_error_from_request(exc: RequestValidationError) -> ValidationError:
    errors = exc.errors()
    if not errors:
        return ValidationError("body", "Invalid request data")
    first = errors[0]
    names = [str(loc) for loc in first["loc"] if loc not in ("body", "path", "query")]
    field = names[-1] if names else "body"
    return ValidationError(field, f"{field}: {first['msg']}")
