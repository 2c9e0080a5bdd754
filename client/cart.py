from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

from .storage import JsonFileStore

STORAGE_KEY = "cart-storage"

# Server defaults; StorefrontClient.checkout replaces them with the live table
SHIPPING_FEES = {"standard": 0, "express": 50000}


@dataclass
class CartItem:
    id: int
    name: str
    price: float
    quantity: int = 1
    image_url: Optional[str] = None


class Cart:
    """Shopping cart keyed by product id. The price is the one seen when the item was added."""

    def __init__(self, store: Optional[JsonFileStore] = None, shipping_fees: Optional[Dict[str, float]] = None):
        self.store = store
        self.shipping_fees = dict(shipping_fees or SHIPPING_FEES)
        self.items: List[CartItem] = []

    def _find(self, product_id: int) -> Optional[CartItem]:
        return next((item for item in self.items if item.id == product_id), None)

    def add_item(self, product: dict, quantity: int = 1):
        if quantity <= 0:
            raise ValueError("quantity must be positive")

        existing = self._find(product["id"])
        if existing:
            existing.quantity += quantity
        else:
            self.items.append(CartItem(
                id=product["id"],
                name=product["name"],
                price=product["price"],
                quantity=quantity,
                image_url=product.get("image_url"),
            ))

    def remove_item(self, product_id: int):
        self.items = [item for item in self.items if item.id != product_id]

    def update_quantity(self, product_id: int, quantity: int):
        if quantity <= 0:
            self.remove_item(product_id)
            return
        item = self._find(product_id)
        if item:
            item.quantity = quantity

    def clear(self):
        self.items = []

    def total(self) -> float:
        return sum(item.price * item.quantity for item in self.items)

    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    def shipping_fee(self, method: str = "standard") -> float:
        if method not in self.shipping_fees:
            raise ValueError(f"unknown shipping method: {method}")
        return self.shipping_fees[method]

    def grand_total(self, method: str = "standard") -> float:
        return self.total() + self.shipping_fee(method)

    def to_order_items(self) -> List[dict]:
        return [{"product_id": item.id, "quantity": item.quantity} for item in self.items]

    def is_empty(self) -> bool:
        return not self.items

    def load(self) -> "Cart":
        if self.store is None:
            return self
        state = self.store.load(STORAGE_KEY) or {}
        self.items = [CartItem(**item) for item in state.get("items", [])]
        return self

    def save(self):
        if self.store is None:
            return
        self.store.save(STORAGE_KEY, {"items": [asdict(item) for item in self.items]})
