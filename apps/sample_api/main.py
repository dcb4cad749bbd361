"""HTTP entry point for the sample API.

Routes are declared in the :data:`ROUTES` table and registered on a fresh
:class:`fastapi.FastAPI` instance by :func:`create_app`.  Endpoint functions
only bind request data (path variables, JSON body) and hand it to
:class:`apps.sample_api.SampleController`; the results are written back as
JSON for :class:`lib.contracts.sample.Sample` and as a raw ``text/plain``
body for strings and integers.

Binding failures never reach the controller.  FastAPI raises them and the
exception handlers installed here render them as
:class:`lib.contracts.error.ErrorBody` with a 4xx status.
"""

from http import HTTPStatus
from typing import Any, Callable, List, NamedTuple, Optional, Sequence

import uvicorn
from fastapi import Body, Depends, FastAPI, HTTPException, Path, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from apps.sample_api import SampleController
from lib.config.server_loader import ServerConfig, load_server_config
from lib.contracts.error import ErrorBody
from lib.contracts.sample import Sample
from lib.telemetry.logger import configure_logging, get_logger
from lib.utils.validation import INT64_MAX, INT64_MIN


logger = get_logger(__name__)
controller = SampleController()


def get_sample() -> JSONResponse:
    return JSONResponse(controller.get_sample().to_json())


def get_string(text: str) -> PlainTextResponse:
    return PlainTextResponse(controller.echo_text(text))


LONG_PATTERN = r"^[+-]?[0-9]+$"


def _parse_long(text: str) -> int:
    """Convert a decimal string that already matched :data:`LONG_PATTERN`."""

    significant = text.lstrip("+-").lstrip("0")
    value = int(text) if len(significant) <= len(str(INT64_MAX)) else None
    if value is None or not INT64_MIN <= value <= INT64_MAX:
        raise RequestValidationError(
            [
                {
                    "loc": ("path", "id"),
                    "msg": f"Value must be between {INT64_MIN} and {INT64_MAX}",
                    "type": "value_error",
                }
            ]
        )
    return value


def get_long(id: str = Path(pattern=LONG_PATTERN)) -> PlainTextResponse:
    return PlainTextResponse(str(controller.echo_long(_parse_long(id))))


def post_sample(sample: Sample = Body(...)) -> JSONResponse:
    return JSONResponse(controller.echo_sample(sample).to_json())


def require_json(request: Request) -> None:
    """Reject bodies that are not declared as JSON."""

    content_type = request.headers.get("content-type")
    if content_type is None:
        raise HTTPException(
            status_code=HTTPStatus.UNSUPPORTED_MEDIA_TYPE,
            detail="Content-Type is required",
        )
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type != "application/json" and not media_type.endswith("+json"):
        raise HTTPException(
            status_code=HTTPStatus.UNSUPPORTED_MEDIA_TYPE,
            detail=f"Content-Type '{content_type}' is not supported",
        )


class Route(NamedTuple):
    method: str
    path: str
    endpoint: Callable[..., Any]
    dependencies: Sequence[Any] = ()


ROUTES: List[Route] = [
    Route("GET", "/sample/", get_sample),
    Route("GET", "/string/{text}", get_string),
    Route("GET", "/long/{id}", get_long),
    Route("POST", "/requestbody", post_sample, (Depends(require_json),)),
]


def _error_response(
    request: Request, status_code: int, message: str, headers: Optional[dict] = None
) -> JSONResponse:
    body = ErrorBody(
        status=int(status_code),
        error=HTTPStatus(status_code).phrase,
        message=message,
        path=request.url.path,
    )
    logger.warning(
        "%s %s rejected with %d: %s",
        request.method,
        request.url.path,
        status_code,
        message,
    )
    return JSONResponse(body.model_dump(), status_code=status_code, headers=headers)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors (404, 405) and explicit HTTP errors (415)."""

    return _error_response(request, exc.status_code, str(exc.detail), exc.headers)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render path-variable and request-body binding failures as 400."""

    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first.get('msg', 'invalid value')}"
    else:
        message = "invalid request"
    return _error_response(request, HTTPStatus.BAD_REQUEST, message)


async def access_log(request: Request, call_next):
    response = await call_next(request)
    logger.info("%s %s -> %d", request.method, request.url.path, response.status_code)
    return response


def create_app(config: Optional[ServerConfig] = None) -> FastAPI:
    """Build the FastAPI application from :data:`ROUTES`."""

    config = config or ServerConfig()
    configure_logging(config.log_level, config.log_format)

    app = FastAPI(title="Sample API")
    for route in ROUTES:
        app.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            dependencies=list(route.dependencies),
        )
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.middleware("http")(access_log)
    return app


settings = load_server_config()
app = create_app(settings)


def run(config: Optional[ServerConfig] = None) -> None:
    """Serve the sample API with uvicorn on the configured host and port.

    Without an explicit ``config`` the module-level :data:`app` is served.
    """

    application = app if config is None else create_app(config)
    config = config or settings
    logger.info("sample api listening on %s:%d", config.host, config.port)
    uvicorn.run(
        application,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    run()
