"""
Manual smoke test for POST /api/auth/register against a running instance.

Sends the restaurant signup format and the legacy format, and prints what
came back. Nothing is asserted.

Usage:
    API_BASE_URL=http://localhost:3001 python scripts/smoke_registration.py
"""

import sys
import time
from pathlib import Path

import httpx

sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import settings


def restaurant_payload(stamp: int) -> dict:
    return {
        "restaurantName": "Test Restaurant",
        "restaurantType": "Italian",
        "location": {
            "address": "123 Test St",
            "city": "Test City",
            "state": "Test State",
            "zipCode": "12345",
        },
        "headChefName": "Test Chef",
        "headChefEmail": f"test-chef-{stamp}@example.com",
        "headChefPassword": "password123",
    }


def legacy_payload(stamp: int) -> dict:
    return {
        "email": f"test-old-{stamp}@example.com",
        "password": "password123",
        "name": "Old Format Chef",
        "role": "head-chef",
    }


def post_register(client: httpx.Client, title: str, payload: dict) -> None:
    print(f"Test: {title}")
    try:
        response = client.post("/api/auth/register", json=payload)
    except httpx.HTTPError as exc:
        print(f"  request failed: {exc}")
        return

    try:
        body = response.json()
    except ValueError:
        body = {"raw": response.text}
    if response.is_success:
        restaurant = body.get("restaurant") or {}
        print(f"  success: status={response.status_code}")
        print(f"  has user: {bool(body.get('user'))}")
        print(f"  has restaurant: {bool(body.get('restaurant'))}")
        if restaurant:
            print(f"  restaurant name: {restaurant.get('restaurantName')}")
    else:
        print(f"  failed: status={response.status_code} body={body}")


def main() -> int:
    stamp = int(time.time() * 1000)
    with httpx.Client(base_url=settings.api_base_url, timeout=settings.http_timeout_sec) as client:
        post_register(client, "restaurant format", restaurant_payload(stamp))
        print("=" * 50)
        post_register(client, "legacy format", legacy_payload(stamp))
    print("Registration smoke test complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
