"""
Router Helpers

Shared request decoding and result rendering for the resource routers.
"""

import json
from typing import Any

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from app.errors import APIError
from app.handlers import DishHandlers, OrderHandlers
from app.pipeline import Failure, Pipeline, RequestContext


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite number {name} is not valid JSON")


async def read_json_body(request: Request) -> Any:
    """Decode the request body; an empty body decodes to {}."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        raise APIError(400, "Request body must be valid JSON")


def respond(pipeline: Pipeline, ctx: RequestContext) -> Response:
    """Run ``pipeline`` and turn its result into an HTTP response."""
    result = pipeline.run(ctx)
    if isinstance(result, Failure):
        raise APIError.from_failure(result)
    if result.data is None:
        return Response(status_code=result.status)
    return JSONResponse(status_code=result.status, content={"data": result.data})


def get_dish_handlers(request: Request) -> DishHandlers:
    """Dependency injection for FastAPI routes."""
    return request.app.state.dish_handlers


def get_order_handlers(request: Request) -> OrderHandlers:
    """Dependency injection for FastAPI routes."""
    return request.app.state.order_handlers
