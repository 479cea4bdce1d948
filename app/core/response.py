"""Response envelope applied to every route.

Successful results are rewritten by :class:`EnvelopeRoute` into
``{statusCode, message, data?, meta?}``. Failures are converted exactly once,
by the exception handlers from :func:`install_response_envelope`, into
``{statusCode, message, error, data: null}``.
"""

import json
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from app.core.exceptions import MalformedError
from app.logger import get_logger
from app.schemas.common import ErrorEnvelope, SuccessEnvelope

logger = get_logger(__name__)

DEFAULT_MESSAGE = "Success"
DEFAULT_ERROR_MESSAGE = "Internal server error"


def _phrase(status_code: int) -> str | None:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return None


def success_envelope(result: Any, status_code: int | None = None) -> dict:
    """Wrap a handler result.

    ``data`` precedence: an explicit non-null ``data`` field, otherwise nothing
    when the result only carries a ``message``, otherwise the whole result.
    """
    fields: dict[str, Any] = {
        "statusCode": status_code or HTTPStatus.OK.value,
        "message": DEFAULT_MESSAGE,
    }
    if isinstance(result, dict):
        if result.get("message"):
            fields["message"] = result["message"]
        if result.get("data") is not None:
            fields["data"] = result["data"]
        elif not result.get("message"):
            fields["data"] = result
        if result.get("meta") is not None:
            fields["meta"] = result["meta"]
    else:
        fields["data"] = result
    return SuccessEnvelope(**fields).model_dump(exclude_unset=True)


def error_envelope(exc: Exception) -> dict:
    status_code = getattr(exc, "status_code", None) or HTTPStatus.INTERNAL_SERVER_ERROR.value
    detail = getattr(exc, "detail", None)
    nested = detail if isinstance(detail, dict) else {}

    if isinstance(exc, StarletteHTTPException):
        message = nested.get("message") or (detail if isinstance(detail, str) else None)
        error = nested.get("error") or _phrase(status_code)
    else:
        message = str(exc) or None
        error = type(exc).__name__

    return ErrorEnvelope(
        statusCode=status_code,
        message=message or DEFAULT_ERROR_MESSAGE,
        error=error or "Error",
        data=None,
    ).model_dump()


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Validation failed"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await http_exception_handler(request, MalformedError(_validation_message(exc)))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
    body = error_envelope(exc)
    return JSONResponse(status_code=body["statusCode"], content=body)


def _is_json(response: Response) -> bool:
    # streaming responses carry no rendered body
    if not hasattr(response, "body"):
        return False
    content_type = response.headers.get("content-type") or response.media_type or ""
    return content_type.split(";")[0].strip().lower() == "application/json"


class EnvelopeRoute(APIRoute):
    def get_route_handler(self):
        handler = super().get_route_handler()

        async def envelope_handler(request: Request) -> Response:
            response = await handler(request)
            if not _is_json(response) or response.status_code == HTTPStatus.NO_CONTENT:
                return response
            result = json.loads(response.body) if response.body else None
            enveloped = JSONResponse(
                content=success_envelope(result, response.status_code),
                status_code=response.status_code,
                background=response.background,
            )
            enveloped.raw_headers.extend(
                (key, value)
                for key, value in response.raw_headers
                if key.lower() not in (b"content-length", b"content-type")
            )
            return enveloped

        return envelope_handler


def install_response_envelope(app: FastAPI) -> None:
    app.router.route_class = EnvelopeRoute
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
