"""
In-Memory Store Module

Replaces a database for this service: each resource lives in an ordered,
mutable collection owned by a single Store created at application startup.
Nothing survives a process restart.
"""

import logging
from typing import Generic, Iterator, Optional, Protocol, TypeVar

from fastapi import Request

from app.data.seed import seed_dishes, seed_orders
from app.ids import IdGenerator
from app.models import Dish, Order

logger = logging.getLogger(__name__)


class HasId(Protocol):
    id: str


T = TypeVar("T", bound=HasId)


class DuplicateIdError(ValueError):
    """Raised when a record is inserted with an id already in the collection."""


class ResourceCollection(Generic[T]):
    """
    Ordered collection of records of one type.

    Lookup and removal are linear scans, which is fine for the handful of
    records an in-memory service holds.
    """

    def __init__(self, name: str, records: Optional[list[T]] = None) -> None:
        self.name = name
        self._records: list[T] = list(records or [])

    def list(self) -> list[T]:
        """All records in insertion order. This is the live list, not a copy."""
        return self._records

    def find(self, record_id: str) -> Optional[T]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def insert(self, record: T) -> T:
        if self.find(record.id) is not None:
            raise DuplicateIdError(f"{self.name}: id {record.id} already exists")
        self._records.append(record)
        return record

    def remove(self, record_id: str) -> bool:
        """Delete the first record with ``record_id``. Returns False if none matched."""
        for index, record in enumerate(self._records):
            if record.id == record_id:
                del self._records[index]
                return True
        return False

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(self._records)

    def __contains__(self, record_id: object) -> bool:
        return any(record.id == record_id for record in self._records)


class Store:
    """
    Owner of every collection and of the id generator.

    Built once per application and handed to the handlers; nothing
    reaches it through module globals.
    """

    def __init__(
        self,
        dishes: Optional[list[Dish]] = None,
        orders: Optional[list[Order]] = None,
    ) -> None:
        self.dishes: ResourceCollection[Dish] = ResourceCollection("dishes", dishes)
        self.orders: ResourceCollection[Order] = ResourceCollection("orders", orders)
        self.ids = IdGenerator()
        self.ids.reserve(record.id for record in self.dishes)
        self.ids.reserve(record.id for record in self.orders)

    @classmethod
    def seeded(cls) -> "Store":
        """Create a store populated with the sample menu and orders."""
        store = cls(dishes=seed_dishes(), orders=seed_orders())
        logger.info(
            f"Seeded store with {len(store.dishes)} dishes "
            f"and {len(store.orders)} orders"
        )
        return store


def get_store(request: Request) -> Store:
    """
    Dependency injection for FastAPI routes.
    Returns the store owned by the running application.
    """
    return request.app.state.store
