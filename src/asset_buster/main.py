from __future__ import annotations

from contextlib import asynccontextmanager
import json
import logging
from fastapi import FastAPI

from asset_buster.api.deps import get_resolver
from asset_buster.api.exception_handlers import register_exception_handlers
from asset_buster.api.middleware import setup_middlewares
from asset_buster.api.routes import router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):  # noqa: ARG001
    # Build the rule set once at startup to fail fast on bad config.
    resolver = get_resolver()
    logging.info(
        json.dumps(
            {
                "event": "startup",
                "message": "Asset rules loaded",
                "rules": len(resolver.rules),
                "root_dir": str(resolver.root_dir),
            },
            ensure_ascii=False,
        )
    )
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="asset-buster",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    setup_middlewares(app)
    register_exception_handlers(app)
    app.include_router(router)
    return app


app = create_app()
