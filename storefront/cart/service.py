"""Cart store: the authoritative product-id -> quantity mapping."""
from decimal import Decimal
from typing import Any, Callable, Mapping, Optional

from storefront.catalog.service import Catalog
from storefront.db import RedisKeys
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.money import to_float

from .models import CartEvent, LineItem
from .storage import PersistenceAdapter, get_persistence_adapter

logger = get_logger(__name__)

Subscriber = Callable[[CartEvent, dict[str, int]], None]


def normalize_cart(raw: Any) -> dict[str, int]:
    """
    Turn a loaded payload into a valid cart mapping.

    Anything that is not a JSON object counts as corrupt and yields an
    empty cart. Entries with a non-string key or a non-positive or
    non-integer quantity are dropped.
    """
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        logger.warning(f"Stored cart is not an object ({type(raw).__name__}), starting empty")
        return {}

    items: dict[str, int] = {}
    for product_id, qty in raw.items():
        if not isinstance(product_id, str) or isinstance(qty, bool) or not isinstance(qty, int) or qty <= 0:
            logger.warning(
                f"Dropping invalid stored cart entry {sanitize_id_for_logging(product_id)}="
                f"{sanitize_id_for_logging(qty)}"
            )
            continue
        items[product_id] = qty
    return items


def persistence_subscriber(adapter: PersistenceAdapter, key: str = RedisKeys.CART) -> Subscriber:
    """Subscriber that saves every new cart state through the adapter."""
    def _save(event: CartEvent, snapshot: dict[str, int]) -> None:
        adapter.save(key, snapshot)
    return _save


class CartStore:
    """
    Shopping cart state.

    Features:
    - Quantities are always positive; update(id, qty <= 0) removes the entry
    - Line items and totals are recomputed from the catalog on every query
    - Subscribers (persistence, views) are notified after each mutation
    """

    def __init__(self, items: Optional[Mapping[str, int]] = None):
        self._items: dict[str, int] = normalize_cart(items)
        self._subscribers: list[Subscriber] = []

    @classmethod
    def load(cls, adapter: PersistenceAdapter, key: str = RedisKeys.CART) -> "CartStore":
        """
        Restore the cart saved under key and keep it persisted.

        Never raises: a missing or corrupt value gives an empty cart.
        """
        store = cls(normalize_cart(adapter.load(key)))
        store.subscribe(persistence_subscriber(adapter, key))
        logger.info(f"Cart loaded with {len(store)} entries")
        return store

    # -------------------------------------------------------------------
    # Observation
    # -------------------------------------------------------------------
    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Call callback(event, snapshot) after every mutation.

        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, event: CartEvent) -> None:
        for callback in list(self._subscribers):
            try:
                callback(event, self.snapshot())
            except Exception:
                logger.exception(f"Cart subscriber failed on {event.value}")

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add(self, product_id: str, qty: int = 1) -> None:
        """
        Increase the quantity of product_id by qty, inserting it if absent.

        A non-positive qty is ignored: nothing changes and nobody is
        notified.
        """
        if qty <= 0:
            logger.debug(f"Ignoring add of {qty} for {sanitize_id_for_logging(product_id)}")
            return
        self._items[product_id] = self._items.get(product_id, 0) + qty
        self._notify(CartEvent.ADDED)

    def remove(self, product_id: str) -> None:
        """Delete the entry for product_id. Absent ids leave the cart as is."""
        self._items.pop(product_id, None)
        self._notify(CartEvent.REMOVED)

    def update(self, product_id: str, qty: int) -> None:
        """Set the quantity of product_id to exactly qty; qty <= 0 removes it."""
        if qty <= 0:
            self.remove(product_id)
            return
        self._items[product_id] = qty
        self._notify(CartEvent.UPDATED)

    def clear(self) -> None:
        """Empty the cart."""
        self._items.clear()
        self._notify(CartEvent.CLEARED)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def snapshot(self) -> dict[str, int]:
        """Copy of the current mapping."""
        return dict(self._items)

    def quantity(self, product_id: str) -> int:
        return self._items.get(product_id, 0)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def line_items(self, catalog: Catalog) -> list[LineItem]:
        """Cart entries resolved against catalog; unknown ids are skipped."""
        items = []
        for product_id, qty in self._items.items():
            product = catalog.find_by_id(product_id)
            if product is None:
                logger.debug(f"Product {sanitize_id_for_logging(product_id)} not in catalog, skipped")
                continue
            items.append(LineItem.from_product(product, qty))
        return items

    def total(self, catalog: Catalog) -> Decimal:
        """Sum of line item subtotals."""
        return sum((item.subtotal for item in self.line_items(catalog)), Decimal("0"))

    def item_count(self) -> int:
        """Total units in the cart, including ids the catalog no longer has."""
        return sum(self._items.values())

    def summary(self, catalog: Catalog) -> dict:
        """JSON-friendly view of the cart for rendering."""
        items = self.line_items(catalog)
        if not items:
            return {
                "is_empty": True,
                "total_items": self.item_count(),
                "items": [],
                "total": 0.0,
            }
        return {
            "is_empty": False,
            "total_items": self.item_count(),
            "items": [item.to_dict() for item in items],
            "total": to_float(sum((item.subtotal for item in items), Decimal("0"))),
        }

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._items


# Singleton instance
_cart_store: Optional[CartStore] = None


def get_cart_store() -> CartStore:
    """Get CartStore singleton backed by the configured storage."""
    global _cart_store
    if _cart_store is None:
        _cart_store = CartStore.load(get_persistence_adapter())
    return _cart_store
