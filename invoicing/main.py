"""Application entrypoint for the invoicing API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from invoicing.api.v1 import get_api_router
from invoicing.api.v1._errors import INVALID_INPUT_MESSAGE, message_response
from invoicing.core.config import get_config
from invoicing.core.startup import bootstrap

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    bootstrap()
    yield


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    cfg = get_config()
    app = FastAPI(title=cfg.APP_NAME, version=cfg.APP_VERSION, lifespan=lifespan)
    app.include_router(get_api_router(cfg.API_PREFIX))

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        logger.info(
            "api.request.invalid",
            extra={"event": "api.request.invalid", "path": request.url.path, "errors": exc.errors()},
        )
        return message_response(status.HTTP_400_BAD_REQUEST, INVALID_INPUT_MESSAGE)

    @app.get("/")
    def root() -> dict:
        return {"service": cfg.APP_NAME, "version": cfg.APP_VERSION, "api_prefix": cfg.API_PREFIX}

    return app


# Expose ASGI app for `uvicorn invoicing.main:app`.
app = create_app()


def run() -> None:
    cfg = get_config()
    uvicorn.run("invoicing.main:app", host=cfg.API_HOST, port=cfg.API_PORT, reload=cfg.DEBUG)


if __name__ == "__main__":
    run()
