"""
Dish Handlers

list, create, read and update for the menu. Dishes are never deleted.
"""

import logging

from app.models import Dish
from app.pipeline import Pipeline, RequestContext, Success
from app.store import Store
from app.validators import (
    body_data_has,
    body_id_matches_route,
    field_at_least,
    field_is_number,
    record_exists,
)

logger = logging.getLogger(__name__)


def _dish_fields_are_valid() -> list:
    """Field checks shared by create and update, in evaluation order."""
    return [
        body_data_has("name", "Must include a name"),
        body_data_has("description", "Must include a description"),
        body_data_has("price", "Must include a price"),
        field_is_number("price"),
        field_at_least("price", 0, "Price can not be negative... price."),
        body_data_has("image_url", "Must include a image_url"),
    ]


class DishHandlers:
    """Operations on the dish collection of one Store."""

    def __init__(self, store: Store) -> None:
        self.store = store
        self.dishes = store.dishes

        dish_exists = record_exists(
            self.dishes, "dishId", "dish", "Dish does not exist: {id}."
        )

        self.list = Pipeline("dishes.list", [], self._list)
        self.create = Pipeline("dishes.create", _dish_fields_are_valid(), self._create)
        self.read = Pipeline("dishes.read", [dish_exists], self._read)
        self.update = Pipeline(
            "dishes.update",
            [
                dish_exists,
                body_id_matches_route(
                    "dishId",
                    "Dish id does not match route id. Dish: {body_id}, Route: {route_id}",
                ),
                *_dish_fields_are_valid(),
            ],
            self._update,
        )

    def _list(self, ctx: RequestContext) -> Success:
        return Success(200, [dish.to_dict() for dish in self.dishes.list()])

    def _create(self, ctx: RequestContext) -> Success:
        data = ctx.locals["data"]
        dish = Dish(
            id=self.store.ids.next(),
            name=data["name"],
            description=data["description"],
            price=data["price"],
            image_url=data["image_url"],
        )
        self.dishes.insert(dish)
        logger.info(f"Dish {dish.id} created: {dish.name}")
        return Success(201, dish.to_dict())

    def _read(self, ctx: RequestContext) -> Success:
        return Success(200, ctx.locals["dish"].to_dict())

    def _update(self, ctx: RequestContext) -> Success:
        data = ctx.locals["data"]
        dish: Dish = ctx.locals["dish"]

        # Full replacement of every mutable field; the id never changes
        dish.name = data["name"]
        dish.description = data["description"]
        dish.price = data["price"]
        dish.image_url = data["image_url"]

        logger.info(f"Dish {dish.id} updated")
        return Success(200, dish.to_dict())
