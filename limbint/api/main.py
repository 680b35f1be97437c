"""FastAPI application for the limbint evaluation service.

Note: Rate limiting is intentionally not implemented at the application level.
It should be handled at the infrastructure layer (reverse proxy / load balancer).
"""

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from limbint import __version__
from limbint.api.endpoints import get_config, router
from limbint.config import DEFAULT_CONFIG
from limbint.errors import DivisionByZero, InvalidFormat, InvalidOperand

logger = structlog.get_logger()

app = FastAPI(
    title="limbint",
    description="Arbitrary-precision integer arithmetic over HTTP",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than the configured maximum.

    The limit comes from the same get_config provider the endpoints use, so
    dependency overrides apply here too.
    """
    config = request.app.dependency_overrides.get(get_config, get_config)()
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > config.max_request_size:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


@app.exception_handler(DivisionByZero)
async def division_by_zero_handler(request: Request, exc: DivisionByZero) -> JSONResponse:
    logger.warning("evaluate_rejected", path=request.url.path, reason=str(exc))
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(InvalidFormat)
@app.exception_handler(InvalidOperand)
async def invalid_operand_handler(request: Request, exc: ValueError) -> JSONResponse:
    logger.warning("evaluate_rejected", path=request.url.path, reason=str(exc))
    return JSONResponse(status_code=422, content={"detail": str(exc)})


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the evaluation API server.

    Configuration via environment variables:
    - LIMBINT_HOST: Host to bind to (default: 0.0.0.0)
    - LIMBINT_PORT: Port to bind to (default: 8000)
    - LIMBINT_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "limbint.api.main:app",
        host=DEFAULT_CONFIG.host,
        port=DEFAULT_CONFIG.port,
        reload=DEFAULT_CONFIG.debug,
    )


if __name__ == "__main__":
    run()
