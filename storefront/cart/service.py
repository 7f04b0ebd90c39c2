"""Cart store: sole owner of cart state and its persisted representation."""
import json
from dataclasses import replace
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from storefront.errors import (
    MalformedPersistedState,
    PersistenceError,
    InvalidOperationInput,
)
from storefront.logging import get_logger, sanitize_string_for_logging
from .models import Cart, LineItem
from .storage import CartStorage

logger = get_logger(__name__)

CartObserver = Callable[[Cart], None]


class CartStore:
    """
    Holds the cart in memory and mirrors it into a durable slot.

    Features:
    - Quantity aggregation per (product_id, variant)
    - Whole-list write after every mutation
    - Synchronous change notifications, fired after the write

    A failed write is logged and the in-memory cart stays authoritative
    for the rest of the session.
    """

    def __init__(self, storage: CartStorage, autoload: bool = True):
        self._storage = storage
        self._cart = Cart()
        self._observers: List[CartObserver] = []
        self.last_persistence_error: Optional[PersistenceError] = None
        if autoload:
            self.load()

    # ==================== READ ====================

    @property
    def cart(self) -> Cart:
        """Snapshot of the current cart."""
        return Cart(items=[replace(item) for item in self._cart.items])

    @property
    def items(self) -> Tuple[LineItem, ...]:
        return tuple(self.cart.items)

    @property
    def is_empty(self) -> bool:
        return self._cart.is_empty

    @property
    def item_count(self) -> int:
        """Number of distinct lines."""
        return len(self._cart)

    @property
    def total_quantity(self) -> int:
        return self._cart.total_quantity

    def load(self) -> Cart:
        """Replace in-memory state with the persisted cart.

        Absent, unreadable or malformed slots all yield an empty cart.
        """
        try:
            raw = self._storage.load_raw()
        except PersistenceError as e:
            logger.error(f"Cart storage unreadable, starting empty: {e}")
            raw = None

        cart = Cart()
        if raw:
            try:
                cart = Cart.from_list(json.loads(raw))
            except (ValueError, RecursionError, MalformedPersistedState) as e:
                # Corrupted data - start over with an empty cart
                logger.warning(f"Discarding malformed persisted cart: {e}")

        self._cart = cart
        logger.debug(f"Cart loaded with {len(cart)} line(s)")
        return self.cart

    # ==================== MUTATIONS ====================

    def add_item(self, item: Union[LineItem, Mapping[str, Any], None] = None, **fields: Any) -> LineItem:
        """
        Add an item, merging into an existing line with the same
        (product_id, variant).

        Accepts a LineItem, a descriptor mapping, or keyword fields.

        Raises:
            InvalidOperationInput: If the descriptor is incomplete or invalid
        """
        line = self._coerce(item, fields)

        existing = self._cart.find(line.product_id, line.variant)
        if existing:
            existing.quantity += line.quantity
            result = existing
        else:
            self._cart.items.append(line)
            result = line

        logger.debug(
            f"Added {line.quantity} x {sanitize_string_for_logging(line.product_id)} "
            f"({sanitize_string_for_logging(line.variant)})"
        )
        self._commit()
        return replace(result)

    def remove_item(self, index: int) -> bool:
        """
        Remove the whole line at index.

        Out-of-range indices are ignored: nothing is written or notified and
        False is returned.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        if not 0 <= index < len(self._cart.items):
            logger.debug(f"Ignoring removal of out-of-range index {index}")
            return False

        removed = self._cart.items.pop(index)
        logger.debug(f"Removed line {index} ({sanitize_string_for_logging(removed.product_id)})")
        self._commit()
        return True

    def clear(self) -> None:
        """Empty the cart. Used by checkout."""
        self._cart.items = []
        logger.debug("Cart cleared")
        self._commit()

    # ==================== OBSERVERS ====================

    def subscribe(self, observer: CartObserver) -> Callable[[], None]:
        """
        Register a change callback; returns a function that unregisters it.

        Observers run in subscription order after the write. An observer that
        raises is logged and skipped; the mutation still succeeds.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    # ==================== INTERNALS ====================

    def _coerce(self, item: Union[LineItem, Mapping[str, Any], None], fields: Mapping[str, Any]) -> LineItem:
        if isinstance(item, LineItem):
            return replace(item)
        descriptor = dict(item) if item is not None else {}
        descriptor.update(fields)
        try:
            return LineItem.from_dict(descriptor)
        except KeyError as e:
            raise InvalidOperationInput(f"item is missing required field {e.args[0]!r}") from e

    def _commit(self) -> bool:
        """Persist the whole cart, then notify observers."""
        persisted = self._persist()
        for observer in list(self._observers):
            try:
                observer(self.cart)
            except Exception as e:
                # State is already committed at this point
                logger.error(f"Cart observer {observer!r} failed: {e}", exc_info=True)
        return persisted

    def _persist(self) -> bool:
        payload = json.dumps(self._cart.to_list())
        try:
            self._storage.save_raw(payload)
        except PersistenceError as e:
            self.last_persistence_error = e
            logger.error(f"Failed to persist cart, keeping in-memory state: {e}")
            return False
        self.last_persistence_error = None
        return True
