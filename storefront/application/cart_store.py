"""
Cart store.

Holds the current ``CartState``, applies actions through the pure reducer
and hands the resulting line set to the injected storage after every
transition.
"""
import logging
from typing import Iterable, Optional, Tuple

from ..domain.cart import (
    AddItem,
    CartLine,
    CartState,
    ClearCart,
    LoadCart,
    RemoveItem,
    SetQuantity,
    reduce,
)
from ..domain.repositories.cart_storage import CartStorage

logger = logging.getLogger(__name__)


class CartStore:
    """The customer's cart for one client session."""

    def __init__(self, storage: CartStorage):
        self._storage = storage
        self._state = CartState.empty()

    def boot(self) -> CartState:
        """
        Restore the persisted cart.

        A missing or corrupt payload leaves the cart empty; the problem is
        logged and never raised.
        """
        try:
            payload = self._storage.load()
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read saved cart, starting empty: {e}")
            payload = None

        lines: Tuple[CartLine, ...] = ()
        if payload is not None:
            try:
                if not isinstance(payload, list):
                    raise TypeError(f"Expected a list of cart lines, got {type(payload).__name__}")
                lines = tuple(CartLine.from_dict(item) for item in payload)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning(f"Discarding corrupt saved cart: {e}")
                lines = ()

        return self._dispatch(LoadCart(lines))

    # Mutations

    def add(self, line: CartLine, quantity: int = 1) -> CartState:
        return self._dispatch(AddItem(line=line, quantity=quantity))

    def remove(self, product_id: str) -> CartState:
        return self._dispatch(RemoveItem(product_id=product_id))

    def set_quantity(self, product_id: str, quantity: int) -> CartState:
        return self._dispatch(SetQuantity(product_id=product_id, quantity=quantity))

    def clear(self) -> CartState:
        return self._dispatch(ClearCart())

    def load(self, lines: Iterable[CartLine]) -> CartState:
        return self._dispatch(LoadCart(tuple(lines)))

    def _dispatch(self, action) -> CartState:
        self._state = reduce(self._state, action)
        try:
            self._storage.save(self._state.lines)
        except OSError as e:
            logger.warning(f"Could not save cart: {e}")
        return self._state

    # Queries

    @property
    def state(self) -> CartState:
        return self._state

    @property
    def lines(self) -> Tuple[CartLine, ...]:
        return self._state.lines

    @property
    def total(self):
        return self._state.total

    @property
    def item_count(self) -> int:
        return self._state.item_count

    @property
    def is_empty(self) -> bool:
        return not self._state.lines

    def contains(self, product_id: str) -> bool:
        return self._state.find(product_id) is not None

    def get_line(self, product_id: str) -> Optional[CartLine]:
        return self._state.find(product_id)
