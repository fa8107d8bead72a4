from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class DatasetLoadError(RuntimeError):
    """The airports dataset could not be loaded. Fatal at startup."""


def _param_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for err in exc.errors():
        loc = err.get("loc") or ()
        # loc is ("query", "<name>") for query params
        param = str(loc[-1]) if loc else "request"
        out.append({"param": param, "message": err.get("msg", "invalid value")})
    return out


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request parameters", "detail": _param_errors(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
