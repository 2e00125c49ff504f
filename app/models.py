"""
In-Memory Record Models

Dishes and orders are plain dataclasses held by the in-memory store.
Field names match the JSON wire names so records serialize directly.

Author: Khalil Bannouri
Version: 3.0.0
"""

import enum
from dataclasses import asdict, dataclass, field
from typing import Any, Optional, Union


class OrderStatus(str, enum.Enum):
    """Order status workflow: pending -> preparing -> out-for-delivery -> delivered."""
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"

    # Sentinel rejected as a requested status on update only
    INVALID = "invalid"

    @classmethod
    def workflow(cls) -> list["OrderStatus"]:
        """The four workflow statuses, in order."""
        return [cls.PENDING, cls.PREPARING, cls.OUT_FOR_DELIVERY, cls.DELIVERED]


@dataclass
class Dish:
    """A menu item."""
    id: str
    name: str
    description: str
    price: Union[int, float]
    image_url: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


@dataclass
class Order:
    """
    A delivery order.

    ``dishes`` holds the line items exactly as the client sent them; each
    has at least a ``dishId`` and a positive ``quantity``.
    """
    id: str
    deliverTo: str
    mobileNumber: str
    status: Optional[str] = OrderStatus.PENDING.value
    dishes: list[dict[str, Any]] = field(default_factory=list)

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING.value

    @property
    def is_delivered(self) -> bool:
        return self.status == OrderStatus.DELIVERED.value

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "deliverTo": self.deliverTo,
            "mobileNumber": self.mobileNumber,
            "status": self.status,
            "dishes": self.dishes,
        }

    def __repr__(self):
        return f"<Order #{self.id} - {self.deliverTo} - {self.status}>"
