"""
Reusable Pipeline Steps

Factories for the validation steps the dish and order pipelines are built
from. Each factory is parameterized by field name (and message) and
returns a step: a callable taking the RequestContext and returning None
to continue or a Failure to abort.

Steps that prove something attach it to ``ctx.locals`` for later steps:
    - body_data_has  -> locals["data"]
    - is_list        -> locals[field]
    - record_exists  -> locals[key]
"""

import math
from typing import Any, Callable, Optional

from app.pipeline import Failure, RequestContext, Step
from app.store import ResourceCollection

QUANTITY_MESSAGE = (
    "Dish {index} must have a quantity that is an integer greater than 0. "
    "The quantity ordered was: {total}"
)


def named_step(name: str) -> Callable[[Step], Step]:
    """Give a step a readable name for pipeline logs."""
    def decorate(step: Step) -> Step:
        step.__name__ = name
        return step
    return decorate


def is_blank(value: Any) -> bool:
    """A value counts as missing when it is None, False or an empty string."""
    return value is None or value is False or value == ""


def is_number(value: Any) -> bool:
    """int or float, excluding bool and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


# =============================================================================
# BODY FIELDS
# =============================================================================

def body_data_has(field: str, message: str) -> Step:
    """Require ``data[field]`` to be present and not blank."""

    @named_step(f"body_data_has({field})")
    def step(ctx: RequestContext) -> Optional[Failure]:
        if not is_blank(ctx.data.get(field)):
            ctx.locals["data"] = ctx.data
            return None
        return Failure(400, message)

    return step


def field_is_present(field: str, message: str) -> Step:
    """Require the key to exist in the body, whatever its value."""

    @named_step(f"field_is_present({field})")
    def step(ctx: RequestContext) -> Optional[Failure]:
        if field in ctx.data:
            ctx.locals[field] = ctx.data[field]
            return None
        return Failure(400, message)

    return step


def field_not_blank(field: str, message: str) -> Step:
    """Require a value previously attached by field_is_present to be non-blank."""

    @named_step(f"field_not_blank({field})")
    def step(ctx: RequestContext) -> Optional[Failure]:
        if is_blank(ctx.locals.get(field)):
            return Failure(400, message)
        return None

    return step


def field_is_number(field: str) -> Step:

    @named_step(f"field_is_number({field})")
    def step(ctx: RequestContext) -> Optional[Failure]:
        if is_number(ctx.data.get(field)):
            return None
        return Failure(400, f'{field} is not of type "number".')

    return step


def field_at_least(field: str, minimum: float, message: str) -> Step:
    """Require a numeric field to be >= minimum. Run after field_is_number."""

    @named_step(f"field_at_least({field}, {minimum})")
    def step(ctx: RequestContext) -> Optional[Failure]:
        if ctx.data[field] >= minimum:
            return None
        return Failure(400, message)

    return step


def is_list(field: str, message: str) -> Step:

    @named_step(f"is_list({field})")
    def step(ctx: RequestContext) -> Optional[Failure]:
        value = ctx.data.get(field)
        if isinstance(value, list):
            ctx.locals[field] = value
            return None
        return Failure(400, message)

    return step


def list_not_empty(field: str, message: str) -> Step:
    """Require the list attached by is_list to hold at least one element."""

    @named_step(f"list_not_empty({field})")
    def step(ctx: RequestContext) -> Optional[Failure]:
        if len(ctx.locals[field]) > 0:
            return None
        return Failure(400, message)

    return step


# =============================================================================
# LINE ITEMS
# =============================================================================

def _check_line_items(
    items: list[Any],
    is_bad: Callable[[Any], bool],
) -> Optional[Failure]:
    """
    Evaluate every line item, collecting the indexes that fail ``is_bad``.

    The failure names the first bad index and the total quantity of the
    items that passed.
    """
    total: float = 0
    bad_indexes: list[int] = []

    for index, item in enumerate(items):
        quantity = item.get("quantity") if isinstance(item, dict) else None
        if is_bad(item):
            bad_indexes.append(index)
        elif is_number(quantity):
            total += quantity

    if not bad_indexes:
        return None
    return Failure(400, QUANTITY_MESSAGE.format(index=bad_indexes[0], total=total))


def line_items_have_quantity(field: str = "dishes") -> Step:

    @named_step(f"line_items_have_quantity({field})")
    def step(ctx: RequestContext) -> Optional[Failure]:
        return _check_line_items(
            ctx.locals[field],
            lambda item: not isinstance(item, dict) or "quantity" not in item,
        )

    return step


def line_items_quantity_positive(field: str = "dishes") -> Step:
    """Numeric quantities must be > 0; other types are left to the number check."""

    @named_step(f"line_items_quantity_positive({field})")
    def step(ctx: RequestContext) -> Optional[Failure]:
        def is_bad(item: dict[str, Any]) -> bool:
            quantity = item["quantity"]
            return is_number(quantity) and quantity <= 0

        return _check_line_items(ctx.locals[field], is_bad)

    return step


def line_items_quantity_is_number(field: str = "dishes") -> Step:

    @named_step(f"line_items_quantity_is_number({field})")
    def step(ctx: RequestContext) -> Optional[Failure]:
        return _check_line_items(
            ctx.locals[field],
            lambda item: not is_number(item["quantity"]),
        )

    return step


# =============================================================================
# ROUTE PARAMETERS
# =============================================================================

def record_exists(
    collection: ResourceCollection,
    param: str,
    key: str,
    message: str,
) -> Step:
    """
    Look up ``params[param]`` in the collection and attach the record as
    ``locals[key]``. ``message`` may reference the id as ``{id}``.
    """

    @named_step(f"record_exists({collection.name}, {param})")
    def step(ctx: RequestContext) -> Optional[Failure]:
        record_id = ctx.params.get(param)
        record = collection.find(record_id)
        if record is not None:
            ctx.locals[key] = record
            return None
        return Failure(404, message.format(id=record_id))

    return step


def body_id_matches_route(param: str, message: str) -> Step:
    """
    Reject a body id that differs from the route id. A missing or blank
    body id is accepted. ``message`` may use ``{body_id}`` and ``{route_id}``.
    """

    @named_step(f"body_id_matches_route({param})")
    def step(ctx: RequestContext) -> Optional[Failure]:
        body_id = ctx.data.get("id")
        route_id = ctx.params.get(param)
        if not is_blank(body_id) and body_id != route_id:
            return Failure(400, message.format(body_id=body_id, route_id=route_id))
        return None

    return step
