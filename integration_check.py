#!/usr/bin/env python3
"""
Smoke check for a running Marketplace Chat server.

Joins a seller and a customer over Socket.IO, exchanges an inquiry and a
reply, and checks the HTTP snapshot endpoints along the way.

Usage:
    python integration_check.py [http://localhost:5000]
"""

import sys
import threading

import requests
import socketio

# Configuration
BACKEND_URL = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:5000"
WAIT_SECONDS = 5

# Colors for terminal output
GREEN = '\033[92m'
RED = '\033[91m'
BLUE = '\033[94m'
RESET = '\033[0m'


def print_status(status, message):
    """Print colored status message."""
    if status == "success":
        print(f"{GREEN}✓ {message}{RESET}")
    elif status == "error":
        print(f"{RED}✗ {message}{RESET}")
    else:
        print(f"{BLUE}ℹ {message}{RESET}")


def print_header(text):
    """Print section header."""
    print(f"\n{BLUE}{'='*60}")
    print(f"  {text}")
    print(f"{'='*60}{RESET}\n")


class RecordingClient:
    """Socket.IO client that remembers every event it receives."""

    def __init__(self):
        self.sio = socketio.Client()
        self.received = {}
        self._signals = {}
        self.sio.on("*", self._record)

    def _record(self, event, data=None):
        self.received.setdefault(event, []).append(data)
        self._signal(event).set()

    def _signal(self, event):
        return self._signals.setdefault(event, threading.Event())

    def wait_for(self, event):
        return self._signal(event).wait(WAIT_SECONDS)


def check_backend_health():
    """Check the HTTP API answers."""
    print_header("Testing Backend Health")
    try:
        response = requests.get(f"{BACKEND_URL}/api/health", timeout=5)
    except requests.RequestException as e:
        print_status("error", f"Cannot reach backend: {e}")
        return False

    if response.status_code != 200:
        print_status("error", f"Health check returned {response.status_code}")
        return False

    data = response.json()
    print_status("success", f"{data['app_name']} v{data['version']} is {data['status']}")
    return True


def check_inquiry_flow():
    """Seller joins, customer asks about product 1, seller replies."""
    print_header("Testing Inquiry Flow")
    seller = RecordingClient()
    customer = RecordingClient()

    try:
        seller.sio.connect(BACKEND_URL)
        seller.sio.emit("user_join", {"username": "check-seller", "role": "seller"})
        if not seller.wait_for("products_update"):
            print_status("error", "Seller never received products_update")
            return False

        products = requests.get(f"{BACKEND_URL}/api/products", timeout=5).json()
        owned = [p for p in products if p["sellerId"] == seller.sio.get_sid()]
        print_status("info", f"Seller owns {len(owned)} of {len(products)} products")
        if not owned:
            print_status("error", "Another seller already owns the catalog; run against a fresh server")
            return False

        customer.sio.connect(BACKEND_URL)
        customer.sio.emit("user_join", {"username": "check-customer", "role": "customer"})
        customer.wait_for("user_list")

        product_id = owned[0]["id"]
        customer.sio.emit("product_inquiry", {"productId": product_id, "message": "is this available?"})
        if not (seller.wait_for("product_inquiry") and customer.wait_for("product_inquiry")):
            print_status("error", "Inquiry did not reach both parties")
            return False
        inquiry = seller.received["product_inquiry"][-1]
        print_status("success", f"Inquiry delivered from {inquiry['customerName']}")

        seller.sio.emit("seller_response", {
            "customerId": inquiry["customerId"],
            "productId": product_id,
            "message": "yes",
        })
        if not (customer.wait_for("seller_response") and seller.wait_for("seller_response")):
            print_status("error", "Response did not reach both parties")
            return False
        print_status("success", "Seller response delivered")

        customer.sio.emit("send_message", {"message": "thanks!"})
        customer.wait_for("receive_message")
        history = requests.get(f"{BACKEND_URL}/api/messages", timeout=5).json()
        print_status("success", f"Chat history holds {len(history)} message(s)")
        return True
    finally:
        for client in (customer, seller):
            if client.sio.connected:
                client.sio.disconnect()


def main():
    """Run all checks."""
    results = {
        "backend": check_backend_health(),
    }
    if results["backend"]:
        results["inquiry_flow"] = check_inquiry_flow()

    print_header("Summary")
    for name, ok in results.items():
        print_status("success" if ok else "error", name)
    return 0 if all(results.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
