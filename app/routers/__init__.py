"""
HTTP Routers

Thin translation from HTTP requests to handler pipelines.
"""

from app.routers.dishes import router as dishes_router
from app.routers.orders import router as orders_router

__all__ = ["dishes_router", "orders_router"]
