"""
Order Lifecycle Simulation Script

Drives a running server through the dish and order lifecycle, including
requests the validation pipelines must reject, and prints a report.
Run from project root: python scripts/simulate.py --orders 20

Author: Khalil_Bannouri
Version: 3.0.0
"""

import argparse
import random
import sys
from datetime import datetime
from typing import Any

import httpx

# Configuration
API_BASE_URL = "http://localhost:5000"
TOTAL_ORDERS = 20

# Sample data for random orders
STREETS = ["Main St", "Broadway", "5th Avenue", "Park Ave", "Madison Ave", "Lexington Ave"]
MENU_ITEMS = [
    {"name": "Pizza Margherita", "price": 14},
    {"name": "Caesar Salad", "price": 9},
    {"name": "Pasta Carbonara", "price": 13},
    {"name": "Tiramisu", "price": 8},
]
STATUS_FLOW = ["pending", "preparing", "out-for-delivery", "delivered"]


def generate_dish_payload(item: dict[str, Any]) -> dict[str, Any]:
    return {
        "data": {
            "name": item["name"],
            "description": f"House {item['name'].lower()}",
            "price": item["price"],
            "image_url": f"https://example.com/{item['name'].lower().replace(' ', '-')}.jpg",
        }
    }


def generate_order_payload(dishes: list[dict[str, Any]]) -> dict[str, Any]:
    """Generate payload for POST /orders."""
    line_items = [
        {"dishId": dish["id"], "name": dish["name"], "price": dish["price"],
         "quantity": random.randint(1, 3)}
        for dish in random.sample(dishes, k=random.randint(1, len(dishes)))
    ]
    return {
        "data": {
            "deliverTo": f"{random.randint(1, 999)} {random.choice(STREETS)}",
            "mobileNumber": f"555-{random.randint(100, 999)}-{random.randint(1000, 9999)}",
            "dishes": line_items,
        }
    }


class Report:
    def __init__(self) -> None:
        self.passed = 0
        self.failed: list[str] = []

    def check(self, label: str, response: httpx.Response, expected: int) -> bool:
        if response.status_code == expected:
            self.passed += 1
            return True
        self.failed.append(
            f"{label}: expected {expected}, got {response.status_code} {response.text}"
        )
        return False


def simulate(base_url: str, total_orders: int) -> Report:
    report = Report()

    with httpx.Client(base_url=base_url, timeout=10.0) as client:
        # Menu
        dishes = []
        for item in MENU_ITEMS:
            r = client.post("/dishes", json=generate_dish_payload(item))
            if report.check("create dish", r, 201):
                dishes.append(r.json()["data"])

        bad_dish = generate_dish_payload(MENU_ITEMS[0])
        bad_dish["data"]["price"] = -5
        report.check("reject negative price", client.post("/dishes", json=bad_dish), 400)

        if not dishes:
            return report

        # Orders
        for _ in range(total_orders):
            r = client.post("/orders", json=generate_order_payload(dishes))
            if not report.check("create order", r, 201):
                continue
            order = r.json()["data"]

            # Walk part of the status flow, then try to delete
            steps = random.randint(0, len(STATUS_FLOW) - 1)
            for status in STATUS_FLOW[1:steps + 1]:
                order["status"] = status
                r = client.put(f"/orders/{order['id']}", json={"data": order})
                report.check(f"move order to {status}", r, 200)

            r = client.delete(f"/orders/{order['id']}")
            report.check("delete order", r, 204 if steps == 0 else 400)

        empty = generate_order_payload(dishes)
        empty["data"]["dishes"] = []
        report.check("reject empty order", client.post("/orders", json=empty), 400)
        report.check("unknown order", client.get("/orders/does-not-exist"), 404)

    return report


def main() -> int:
    parser = argparse.ArgumentParser(description="Simulate restaurant order traffic")
    parser.add_argument("--url", default=API_BASE_URL, help="API base URL")
    parser.add_argument("--orders", type=int, default=TOTAL_ORDERS, help="Orders to create")
    args = parser.parse_args()

    print("=" * 60)
    print("🍽️  ORDER LIFECYCLE SIMULATION")
    print("=" * 60)
    print(f"⏰ Timestamp: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"🌐 Target: {args.url}")
    print("=" * 60)

    try:
        report = simulate(args.url, args.orders)
    except httpx.ConnectError:
        print(f"\n❌ Could not connect to {args.url}. Is the server running?")
        return 1

    print(f"\n✅ Passed checks: {report.passed}")
    if report.failed:
        print(f"❌ Failed checks: {len(report.failed)}")
        for line in report.failed:
            print(f"   - {line}")
    print("=" * 60)
    return 1 if report.failed else 0


if __name__ == "__main__":
    sys.exit(main())
