"""
Dish Routes

GET/POST /dishes, GET/PUT /dishes/{dishId}
"""

from fastapi import APIRouter, Depends, Request, Response

from app.handlers import DishHandlers
from app.pipeline import RequestContext
from app.routers.common import get_dish_handlers, read_json_body, respond
from app.schemas import DishEnvelope, DishListEnvelope, ErrorResponse

router = APIRouter(prefix="/dishes", tags=["Dishes"])

ERRORS = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


@router.get("", responses={200: {"model": DishListEnvelope}}, summary="List Dishes")
async def list_dishes(handlers: DishHandlers = Depends(get_dish_handlers)) -> Response:
    return respond(handlers.list, RequestContext())


@router.post(
    "",
    status_code=201,
    responses={201: {"model": DishEnvelope}, **ERRORS},
    summary="Create Dish",
)
async def create_dish(
    request: Request,
    handlers: DishHandlers = Depends(get_dish_handlers),
) -> Response:
    """Body: {"data": {"name", "description", "price", "image_url"}}"""
    body = await read_json_body(request)
    return respond(handlers.create, RequestContext.from_body(body))


@router.get(
    "/{dishId}",
    responses={200: {"model": DishEnvelope}, **ERRORS},
    summary="Read Dish",
)
async def read_dish(
    dishId: str,
    handlers: DishHandlers = Depends(get_dish_handlers),
) -> Response:
    return respond(handlers.read, RequestContext(params={"dishId": dishId}))


@router.put(
    "/{dishId}",
    responses={200: {"model": DishEnvelope}, **ERRORS},
    summary="Update Dish",
)
async def update_dish(
    dishId: str,
    request: Request,
    handlers: DishHandlers = Depends(get_dish_handlers),
) -> Response:
    """Replaces every field of the dish. A body id must match the route id."""
    body = await read_json_body(request)
    return respond(
        handlers.update, RequestContext.from_body(body, params={"dishId": dishId})
    )
