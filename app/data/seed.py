"""
Seed Data

Sample menu and orders loaded when SEED_DATA is enabled. Each call builds
fresh objects so separate stores never share records.
"""

from app.models import Dish, Order, OrderStatus


def seed_dishes() -> list[Dish]:
    return [
        Dish(
            id="3c637d011d844ebab1205fef8a7e36ea",
            name="Broccoli and beetroot stir fry",
            description="Crunchy stir fry featuring fresh broccoli and beetroot",
            price=15,
            image_url="https://images.pexels.com/photos/4144234/pexels-photo-4144234.jpeg?h=530&w=350",
        ),
        Dish(
            id="90c3d873684bf381dfab29034b5bba73",
            name="Falafel and tahini bagel",
            description="A warm bagel filled with falafel and tahini",
            price=6,
            image_url="https://images.pexels.com/photos/4560606/pexels-photo-4560606.jpeg?h=530&w=350",
        ),
        Dish(
            id="d351db2b49b69679504652ea1cf38241",
            name="Dolcelatte and chickpea spaghetti",
            description="Spaghetti topped with a blend of dolcelatte and fresh chickpeas",
            price=19,
            image_url="https://images.pexels.com/photos/1279330/pexels-photo-1279330.jpeg?h=530&w=350",
        ),
    ]


def seed_orders() -> list[Order]:
    return [
        Order(
            id="f6069a542257054114138301947672ba",
            deliverTo="1600 Pennsylvania Avenue NW, Washington, DC 20500",
            mobileNumber="(202) 456-1111",
            status=OrderStatus.OUT_FOR_DELIVERY.value,
            dishes=[
                {
                    "dishId": "90c3d873684bf381dfab29034b5bba73",
                    "name": "Falafel and tahini bagel",
                    "price": 6,
                    "quantity": 1,
                }
            ],
        ),
        Order(
            id="5a887d326e83d3c5bdcbee398ea32aff",
            deliverTo="308 Negra Arroyo Lane, Albuquerque, NM",
            mobileNumber="(505) 143-3369",
            status=OrderStatus.DELIVERED.value,
            dishes=[
                {
                    "dishId": "d351db2b49b69679504652ea1cf38241",
                    "name": "Dolcelatte and chickpea spaghetti",
                    "price": 19,
                    "quantity": 2,
                }
            ],
        ),
        Order(
            id="8d5a1b7c2e4f4a0b9c6d3e2f1a0b9c8d",
            deliverTo="221B Baker Street, London",
            mobileNumber="(555) 221-2210",
            status=OrderStatus.PENDING.value,
            dishes=[
                {
                    "dishId": "3c637d011d844ebab1205fef8a7e36ea",
                    "name": "Broccoli and beetroot stir fry",
                    "price": 15,
                    "quantity": 3,
                }
            ],
        ),
    ]
