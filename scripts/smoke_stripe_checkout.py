"""
Manual smoke test for POST /api/stripe/create-checkout-session.

Prints the response and calls out the error codes worth knowing about.
Nothing is asserted.

Usage:
    API_BASE_URL=https://chef-app-backend.vercel.app python scripts/smoke_stripe_checkout.py
"""

import json
import sys
import time
from pathlib import Path

import httpx

sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import settings
from api.responses import SIGNUP_ERROR_CODES


def checkout_payload(stamp: int) -> dict:
    return {
        "planType": "pro",
        "billingCycle": "monthly",
        "restaurantName": "Test Restaurant",
        "headChefEmail": f"testfix{stamp}@example.com",
        "headChefName": "John Smith",
        "headChefPassword": "testpassword123",
        "restaurantType": "restaurant",
        "location": {
            "address": "123 Test St",
            "city": "Test City",
            "state": "CA",
            "zipCode": "12345",
            "country": "US",
        },
        "success_url": f"{settings.frontend_url}/payment-success?session_id={{CHECKOUT_SESSION_ID}}",
        "cancel_url": f"{settings.frontend_url}/register",
    }


def describe_error(body: dict) -> str:
    code = body.get("code")
    if code == SIGNUP_ERROR_CODES.EMAIL_EXISTS:
        return "email already registered; run again for a fresh address"
    if code == SIGNUP_ERROR_CODES.CREATION_ERROR:
        return "server failed to create the account"
    return f"error code: {code}"


def main() -> int:
    payload = checkout_payload(int(time.time() * 1000))
    print("Test data:", json.dumps(payload, indent=2))

    url = "/api/stripe/create-checkout-session"
    with httpx.Client(base_url=settings.api_base_url, timeout=settings.http_timeout_sec) as client:
        started = time.monotonic()
        try:
            response = client.post(url, json=payload)
        except httpx.HTTPError as exc:
            print(f"Network error: {exc}")
            return 1
        elapsed_ms = (time.monotonic() - started) * 1000

    print(f"Response time: {elapsed_ms:.0f} ms")
    print(f"Response status: {response.status_code}")
    try:
        body = response.json()
    except ValueError:
        body = {"raw": response.text}
    print("Response:", json.dumps(body, indent=2))

    if response.is_success:
        if body.get("url"):
            print(f"Checkout URL: {body['url']}")
        if body.get("sessionId"):
            print(f"Session ID: {body['sessionId']}")
    else:
        print(describe_error(body))
        if body.get("details"):
            print(f"Details: {body['details']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
