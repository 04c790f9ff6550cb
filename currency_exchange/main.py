"""FastAPI application entrypoint."""
from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api import failure, router
from .clients import UpstreamError, frankfurter_client
from .models import ErrorCode
from .settings import settings


logger = logging.getLogger(settings.APP_NAME)


app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)
app.include_router(router)


@app.on_event("startup")
async def startup() -> None:
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    logger.info(f"Currency Exchange Agent running on port {settings.PORT}")


@app.on_event("shutdown")
async def shutdown() -> None:
    await frankfurter_client.close()


@app.exception_handler(RequestValidationError)
async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    # rejected values are not echoed back; they may not be JSON-encodable (inf, nan)
    errors = [{"type": e["type"], "loc": e["loc"], "msg": e["msg"]} for e in exc.errors()]
    return failure(
        ErrorCode.BAD_INPUT,
        "invalid input",
        details={"errors": jsonable_encoder(errors)},
    )


@app.exception_handler(UpstreamError)
async def upstream_error_handler(_: Request, exc: UpstreamError) -> JSONResponse:
    return failure(
        ErrorCode.UPSTREAM_ERROR,
        exc.message,
        source="frankfurter",
        retriable=True,
        details={"status": exc.status_code} if exc.status_code is not None else None,
        status_code=502,
    )


@app.get("/health")
async def health() -> dict[str, str | bool]:
    return {"ok": True, "status": "healthy"}


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()


__all__ = ["app", "run"]
