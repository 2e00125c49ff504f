"""
Pydantic Schemas for the HTTP Surface

Request bodies are validated by the handler pipelines, not by Pydantic:
the step order and the exact error messages are part of the API. These
schemas describe the wire format for the OpenAPI docs and render the
service's own responses (errors, health).

Author: Khalil Bannouri
Version: 3.0.0
"""

from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.models import OrderStatus


# =============================================================================
# RECORDS
# =============================================================================

class DishSchema(BaseModel):
    """A menu item as sent and returned by the API."""
    id: Optional[str] = Field(None, examples=["3c637d011d844ebab1205fef8a7e36ea"])
    name: str = Field(..., min_length=1, examples=["Pasta"])
    description: str = Field(..., min_length=1, examples=["Fresh pasta with basil"])
    price: Union[int, float] = Field(..., ge=0, examples=[12])
    image_url: str = Field(..., min_length=1, examples=["https://example.com/pasta.jpg"])


class OrderLineItemSchema(BaseModel):
    """Single dish in an order. Extra keys sent by clients are kept."""
    model_config = ConfigDict(extra="allow")

    dishId: str = Field(..., examples=["3c637d011d844ebab1205fef8a7e36ea"])
    quantity: Union[int, float] = Field(..., gt=0, examples=[2])


class OrderSchema(BaseModel):
    """An order as sent and returned by the API."""
    id: Optional[str] = None
    deliverTo: str = Field(..., min_length=1, examples=["308 Negra Arroyo Lane"])
    mobileNumber: str = Field(..., min_length=1, examples=["(505) 143-3369"])
    status: Optional[OrderStatus] = Field(None, examples=["pending"])
    dishes: List[OrderLineItemSchema] = Field(..., min_length=1)


# =============================================================================
# ENVELOPES
# =============================================================================

class DishEnvelope(BaseModel):
    data: DishSchema


class DishListEnvelope(BaseModel):
    data: List[DishSchema]


class OrderEnvelope(BaseModel):
    data: OrderSchema


class OrderListEnvelope(BaseModel):
    data: List[OrderSchema]


# =============================================================================
# SERVICE RESPONSES
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None

    def to_content(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    environment: str
    dishes: int
    orders: int
    timestamp: datetime
