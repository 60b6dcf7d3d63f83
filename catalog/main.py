# catalog/main.py
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import AuthMode, Settings
from .errors import http_exception_handler, request_validation_handler
from .logging_config import setup_logging
from .middleware import authenticate, catch_unexpected_errors, log_requests
from .routes import index_router, router
from .store import SAMPLE_PRODUCTS, ProductStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="product-catalog (in-memory)")
    app.state.settings = settings
    app.state.store = ProductStore()
    if settings.seed_sample_data:
        app.state.store.seed(SAMPLE_PRODUCTS)

    if settings.auth_mode is AuthMode.API_KEY and not settings.api_key:
        logger.warning("AUTH_MODE=api_key but API_KEY is not set; every product request will be rejected")

    # last registered runs first: log -> catch errors -> auth gate -> router
    app.middleware("http")(authenticate)
    app.middleware("http")(catch_unexpected_errors)
    app.middleware("http")(log_requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(index_router)
    app.include_router(router)

    logger.info(
        "Product API ready (auth=%s, %d products loaded)",
        settings.auth_mode.value,
        len(app.state.store),
    )
    return app


app = create_app()


def run() -> None:
    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
