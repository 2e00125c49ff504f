"""
FastAPI Application Entry Point

Restaurant Ordering API - in-memory dishes and orders.

Endpoints:
    - GET/POST /dishes, GET/PUT /dishes/{dishId}
    - GET/POST /orders, GET/PUT/DELETE /orders/{orderId}
    - GET /health: System health check

Run with a single worker: the store lives in process memory and requests
are expected to mutate it one at a time.

Author: Khalil Bannouri
Version: 3.0.0
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, get_settings, setup_logging
from app.errors import register_exception_handlers
from app.handlers import DishHandlers, OrderHandlers
from app.routers import dishes_router, orders_router
from app.schemas import HealthResponse
from app.store import Store, get_store

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[Store] = None,
) -> FastAPI:
    """
    Build the application around one Store.

    Args:
        settings: Configuration (defaults to get_settings())
        store: Store to serve; when omitted it is seeded or empty
            according to settings.seed_data
    """
    settings = settings or get_settings()
    if store is None:
        store = Store.seeded() if settings.seed_data else Store()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Manage application startup and shutdown events.
        """
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {settings.app_name}")
        logger.info(f"   Version: {settings.app_version}")
        logger.info(f"   Environment: {settings.env_mode.value}")
        logger.info(f"   Debug: {settings.debug}")
        logger.info(f"   Dishes: {len(store.dishes)} | Orders: {len(store.orders)}")
        logger.info(f"   Lock delivered orders: {settings.lock_delivered_orders}")
        logger.info("=" * 60)

        yield  # Application runs

        logger.info("Shutting down... in-memory data is discarded")

    app = FastAPI(
        title=settings.app_name,
        description="Dishes and orders over a JSON API, kept in memory.",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = settings
    app.state.store = store
    app.state.dish_handlers = DishHandlers(store)
    app.state.order_handlers = OrderHandlers(
        store, lock_delivered_orders=settings.lock_delivered_orders
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, settings)

    # =========================================================================
    # ROOT & HEALTH ENDPOINTS
    # =========================================================================

    @app.get("/", tags=["Root"])
    async def root() -> dict[str, str]:
        """API root with navigation links."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "environment": settings.env_mode.value,
            "documentation": "/docs",
            "health": "/health",
        }

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="System Health Check",
    )
    async def health_check(store: Store = Depends(get_store)) -> HealthResponse:
        """Report record counts of the in-memory store."""
        return HealthResponse(
            status="operational",
            environment=settings.env_mode.value,
            dishes=len(store.dishes),
            orders=len(store.orders),
            timestamp=datetime.now(),
        )

    app.include_router(dishes_router)
    app.include_router(orders_router)

    return app


# =============================================================================
# APPLICATION INSTANCE
# =============================================================================

setup_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        workers=1,
    )
