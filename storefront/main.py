"""Storefront API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StorefrontError → structured JSON responses
    - CORS configured from settings, credentials allowed (cookie-based session)
    - MongoDB client created on startup and closed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Access log middleware registered before routers so every request is timed
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.error_handlers import register_error_handlers
from storefront.api.routes import auth, health, orders, products, users
from storefront.config import get_settings
from storefront.infrastructure.database import close_db, init_db
from storefront.infrastructure.observability import log_requests, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(settings.mongodb_uri, settings.mongodb_database)
    if await manager.ping():
        logger.info("Successfully connected to MongoDB deployment")
    else:
        logger.warning("MongoDB not reachable at startup; readiness probe will fail")
    logger.info(f"Storefront API started on port {settings.port}")
    yield
    logger.info("Storefront API shutting down")
    await close_db()


app = FastAPI(title="Storefront API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(products.router)
app.include_router(orders.router)

register_error_handlers(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("storefront.main:app", host="0.0.0.0", port=settings.port)
