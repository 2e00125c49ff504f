"""
Handlers Module

Operation pipelines for each resource. Handlers receive the Store they
operate on; routers only translate HTTP requests into RequestContexts.
"""

from app.handlers.dishes import DishHandlers
from app.handlers.orders import OrderHandlers

__all__ = ["DishHandlers", "OrderHandlers"]
