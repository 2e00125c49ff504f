"""
Order Handlers

list, create, read, update and delete for orders, plus the status rules.

Status workflow (communicated to clients, not enforced step by step):
    pending -> preparing -> out-for-delivery -> delivered

Enforced rules:
    - update requires a non-blank status
    - update rejects the "invalid" status sentinel
    - delete is only allowed while the order is pending
    - with lock_delivered_orders, delivered orders cannot be updated

Author: Khalil Bannouri
Version: 3.0.0
"""

import logging
from typing import Optional

from app.models import Order, OrderStatus
from app.pipeline import Failure, Pipeline, RequestContext, Step, Success
from app.store import Store
from app.validators import (
    body_data_has,
    body_id_matches_route,
    field_is_present,
    field_not_blank,
    is_blank,
    is_list,
    line_items_have_quantity,
    line_items_quantity_is_number,
    line_items_quantity_positive,
    list_not_empty,
    named_step,
    record_exists,
)

logger = logging.getLogger(__name__)

STATUS_REQUIRED_MESSAGE = (
    "Order must have a status of pending, preparing, out-for-delivery, delivered"
)
DELIVERED_MESSAGE = "Delivery status invalid: a delivered order cannot be changed"
DISHES_MESSAGE = "Order must include at least one dish"


def _order_fields_are_valid() -> list[Step]:
    """Field and line item checks shared by create and update, in order."""
    return [
        body_data_has("deliverTo", "Order must include a deliverTo"),
        body_data_has("mobileNumber", "Order must include a mobileNumber"),
        body_data_has("dishes", "Order must include a dish"),
        is_list("dishes", DISHES_MESSAGE),
        list_not_empty("dishes", DISHES_MESSAGE),
        line_items_have_quantity("dishes"),
        line_items_quantity_positive("dishes"),
        line_items_quantity_is_number("dishes"),
    ]


def status_not_terminal(lock_delivered: bool = False) -> Step:
    """
    Reject the "invalid" status sentinel. With ``lock_delivered`` also
    reject any change to an order that is already delivered.
    """

    @named_step("status_not_terminal")
    def step(ctx: RequestContext) -> Optional[Failure]:
        if ctx.locals["status"] == OrderStatus.INVALID.value:
            return Failure(400, DELIVERED_MESSAGE)
        if lock_delivered and ctx.locals["order"].is_delivered:
            return Failure(400, DELIVERED_MESSAGE)
        return None

    return step


@named_step("order_is_pending")
def order_is_pending(ctx: RequestContext) -> Optional[Failure]:
    if ctx.locals["order"].is_pending:
        return None
    return Failure(400, "An order cannot be deleted unless it is pending")


@named_step("status_filter_is_valid")
def status_filter_is_valid(ctx: RequestContext) -> Optional[Failure]:
    """Optional ?status= filter on list must name one of the workflow statuses."""
    status = ctx.query.get("status")
    if status is None:
        return None
    if status in {s.value for s in OrderStatus.workflow()}:
        ctx.locals["status_filter"] = status
        return None
    return Failure(
        400,
        f"Invalid status. Options: {[s.value for s in OrderStatus.workflow()]}",
    )


class OrderHandlers:
    """Operations on the order collection of one Store."""

    def __init__(self, store: Store, lock_delivered_orders: bool = False) -> None:
        self.store = store
        self.orders = store.orders

        order_exists = record_exists(
            self.orders, "orderId", "order", "{id} doesn't exist."
        )

        self.list = Pipeline("orders.list", [status_filter_is_valid], self._list)
        self.create = Pipeline("orders.create", _order_fields_are_valid(), self._create)
        self.read = Pipeline("orders.read", [order_exists], self._read)
        self.update = Pipeline(
            "orders.update",
            [
                order_exists,
                *_order_fields_are_valid(),
                field_is_present("status", STATUS_REQUIRED_MESSAGE),
                field_not_blank("status", STATUS_REQUIRED_MESSAGE),
                status_not_terminal(lock_delivered_orders),
                body_id_matches_route(
                    "orderId",
                    "Order id does not match route id. Order: {body_id}, Route: {route_id}.",
                ),
            ],
            self._update,
        )
        self.delete = Pipeline(
            "orders.delete", [order_exists, order_is_pending], self._delete
        )

    def _list(self, ctx: RequestContext) -> Success:
        status = ctx.locals.get("status_filter")
        orders = self.orders.list()
        if status is not None:
            orders = [order for order in orders if order.status == status]
        return Success(200, [order.to_dict() for order in orders])

    def _create(self, ctx: RequestContext) -> Success:
        data = ctx.locals["data"]
        status = data.get("status")
        order = Order(
            id=self.store.ids.next(),
            deliverTo=data["deliverTo"],
            mobileNumber=data["mobileNumber"],
            status=OrderStatus.PENDING.value if is_blank(status) else status,
            dishes=data["dishes"],
        )
        self.orders.insert(order)
        logger.info(f"Order {order.id} created with {len(order.dishes)} line items")
        return Success(201, order.to_dict())

    def _read(self, ctx: RequestContext) -> Success:
        return Success(200, ctx.locals["order"].to_dict())

    def _update(self, ctx: RequestContext) -> Success:
        data = ctx.locals["data"]
        order: Order = ctx.locals["order"]

        # Full replacement of every mutable field; the id never changes
        order.deliverTo = data["deliverTo"]
        order.mobileNumber = data["mobileNumber"]
        order.status = data["status"]
        order.dishes = data["dishes"]

        logger.info(f"Order {order.id} updated (status: {order.status})")
        return Success(200, order.to_dict())

    def _delete(self, ctx: RequestContext) -> Success:
        order: Order = ctx.locals["order"]
        self.orders.remove(order.id)
        logger.info(f"Order {order.id} deleted")
        return Success(204)
