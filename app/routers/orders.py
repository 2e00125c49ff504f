"""
Order Routes

GET/POST /orders, GET/PUT/DELETE /orders/{orderId}
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response

from app.handlers import OrderHandlers
from app.pipeline import RequestContext
from app.routers.common import get_order_handlers, read_json_body, respond
from app.schemas import ErrorResponse, OrderEnvelope, OrderListEnvelope

router = APIRouter(prefix="/orders", tags=["Orders"])

ERRORS = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


@router.get(
    "",
    responses={200: {"model": OrderListEnvelope}, 400: {"model": ErrorResponse}},
    summary="List Orders",
)
async def list_orders(
    status: Optional[str] = Query(None, description="Only orders with this status"),
    handlers: OrderHandlers = Depends(get_order_handlers),
) -> Response:
    query = {"status": status} if status is not None else {}
    return respond(handlers.list, RequestContext(query=query))


@router.post(
    "",
    status_code=201,
    responses={201: {"model": OrderEnvelope}, **ERRORS},
    summary="Create Order",
)
async def create_order(
    request: Request,
    handlers: OrderHandlers = Depends(get_order_handlers),
) -> Response:
    """Body: {"data": {"deliverTo", "mobileNumber", "dishes", "status"?}}"""
    body = await read_json_body(request)
    return respond(handlers.create, RequestContext.from_body(body))


@router.get(
    "/{orderId}",
    responses={200: {"model": OrderEnvelope}, **ERRORS},
    summary="Read Order",
)
async def read_order(
    orderId: str,
    handlers: OrderHandlers = Depends(get_order_handlers),
) -> Response:
    return respond(handlers.read, RequestContext(params={"orderId": orderId}))


@router.put(
    "/{orderId}",
    responses={200: {"model": OrderEnvelope}, **ERRORS},
    summary="Update Order",
)
async def update_order(
    orderId: str,
    request: Request,
    handlers: OrderHandlers = Depends(get_order_handlers),
) -> Response:
    """Replaces every field of the order. Status is required."""
    body = await read_json_body(request)
    return respond(
        handlers.update, RequestContext.from_body(body, params={"orderId": orderId})
    )


@router.delete(
    "/{orderId}",
    status_code=204,
    responses=ERRORS,
    summary="Delete Order",
)
async def delete_order(
    orderId: str,
    handlers: OrderHandlers = Depends(get_order_handlers),
) -> Response:
    """Only pending orders can be deleted."""
    return respond(handlers.delete, RequestContext(params={"orderId": orderId}))
