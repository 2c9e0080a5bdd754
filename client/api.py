import logging
from typing import Optional

import requests

from .cart import Cart
from .session import AuthSession

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000/api"


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class StorefrontClient:
    """HTTP client for the store API.

    ``http`` is anything with a requests-style ``request(method, url, ...)``;
    defaults to a ``requests.Session``.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, session: Optional[AuthSession] = None, http=None):
        self.base_url = base_url.rstrip("/")
        self.session = session or AuthSession()
        self.http = http or requests.Session()

    def _get_headers(self) -> dict:
        return self.session.auth_header()

    def _request(self, method: str, endpoint: str, **kwargs) -> dict:
        response = self.http.request(
            method,
            f"{self.base_url}{endpoint}",
            headers=self._get_headers(),
            **kwargs
        )
        try:
            data = response.json()
        except ValueError:
            raise ApiError(response.status_code, "Invalid JSON response")

        if response.status_code >= 400 or not data.get("success", False):
            message = data.get("message", "Request failed")
            logger.debug("%s %s failed: %s %s", method, endpoint, response.status_code, message)
            raise ApiError(response.status_code, message)
        return data

    def get(self, endpoint: str, params: Optional[dict] = None) -> dict:
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        return self._request("GET", endpoint, params=params or None)

    def post(self, endpoint: str, data: Optional[dict] = None) -> dict:
        return self._request("POST", endpoint, json=data)

    def put(self, endpoint: str, data: Optional[dict] = None) -> dict:
        return self._request("PUT", endpoint, json=data)

    def delete(self, endpoint: str) -> dict:
        return self._request("DELETE", endpoint)

    def upload_file(self, endpoint: str, filename: str, content: bytes, content_type: str,
                    extra: Optional[dict] = None) -> dict:
        files = {"image": (filename, content, content_type)}
        data = {key: value for key, value in (extra or {}).items() if value is not None}
        return self._request("POST", endpoint, files=files, data=data)

    # Auth

    def register(self, email: str, password: str, name: str) -> dict:
        data = self.post("/auth/register", {"email": email, "password": password, "name": name})
        self.session.login(data["token"], data["user"])
        return data["user"]

    def login(self, email: str, password: str) -> dict:
        self.session.set_loading(True)
        try:
            data = self.post("/auth/login", {"email": email, "password": password})
        finally:
            self.session.set_loading(False)
        self.session.login(data["token"], data["user"])
        return data["user"]

    def logout(self):
        self.session.logout()

    def get_profile(self) -> dict:
        return self.get("/auth/profile")["user"]

    # Products

    def get_products(self, type: Optional[str] = None, search: Optional[str] = None) -> list:
        return self.get("/products", {"type": type, "search": search})["products"]

    def get_product(self, product_id: int) -> dict:
        return self.get(f"/products/{product_id}")["product"]

    def create_product(self, data: dict) -> dict:
        return self.post("/products", data)["product"]

    def update_product(self, product_id: int, data: dict) -> dict:
        return self.put(f"/products/{product_id}", data)["product"]

    def delete_product(self, product_id: int) -> dict:
        return self.delete(f"/products/{product_id}")

    # Orders

    def get_orders(self) -> list:
        return self.get("/orders")["orders"]

    def get_order(self, order_id: int) -> dict:
        return self.get(f"/orders/{order_id}")["order"]

    def create_order(self, data: dict) -> dict:
        return self.post("/orders", data)["order"]

    def update_order_status(self, order_id: int, status: str) -> dict:
        return self.put(f"/orders/{order_id}/status", {"status": status})["order"]

    def get_my_orders(self) -> list:
        return self.get("/orders/user/my-orders")["orders"]

    def get_shipping_fees(self) -> dict:
        return self.get("/orders/shipping-fees")["shipping_fees"]

    def checkout(self, cart: Cart, shipping_method: str = "standard", customer_phone: Optional[str] = None,
                 customer_name: Optional[str] = None, customer_email: Optional[str] = None,
                 notes: str = "") -> dict:
        """Turn the cart into an order. The cart is cleared only when the order is accepted."""
        if cart.is_empty():
            raise ValueError("Your cart is empty")

        cart.shipping_fees = self.get_shipping_fees()
        order = self.create_order({
            "customer_name": customer_name,
            "customer_phone": customer_phone,
            "customer_email": customer_email,
            "items": cart.to_order_items(),
            "total_amount": cart.grand_total(shipping_method),
            "shipping_method": shipping_method,
            "notes": notes,
        })
        cart.clear()
        return order

    # Finance

    def get_finance_records(self, type: Optional[str] = None, start_date: Optional[str] = None,
                            end_date: Optional[str] = None) -> dict:
        return self.get("/finance", {"type": type, "start_date": start_date, "end_date": end_date})

    def create_finance_record(self, type: str, amount: float, description: Optional[str] = None) -> dict:
        return self.post("/finance", {"type": type, "amount": amount, "description": description})["record"]

    def get_finance_summary(self, start_date: Optional[str] = None, end_date: Optional[str] = None) -> dict:
        return self.get("/finance/summary", {"start_date": start_date, "end_date": end_date})["summary"]

    def delete_finance_record(self, record_id: int) -> dict:
        return self.delete(f"/finance/{record_id}")

    # Unboxing gallery

    def get_unboxing_photos(self) -> list:
        return self.get("/unboxing")["photos"]

    def upload_unboxing_photo(self, filename: str, content: bytes, content_type: str,
                              caption: Optional[str] = None) -> dict:
        data = self.upload_file("/unboxing/upload", filename, content, content_type, {"caption": caption})
        return data["photo"]

    def delete_unboxing_photo(self, photo_id: int) -> dict:
        return self.delete(f"/unboxing/{photo_id}")

    # Invoices

    def get_invoices(self) -> list:
        return self.get("/invoices")["invoices"]

    def get_invoice(self, invoice_id: int) -> dict:
        return self.get(f"/invoices/{invoice_id}")["invoice"]

    def generate_invoice(self, order_id: int, customer_phone: str) -> dict:
        return self.post("/invoices/generate", {"order_id": order_id, "customer_phone": customer_phone})

    def update_whatsapp_link(self, invoice_id: int, customer_phone: str) -> str:
        data = self.put(f"/invoices/{invoice_id}/whatsapp-link", {"customer_phone": customer_phone})
        return data["whatsapp_link"]
