"""
Cart state and its pure transition function.

The cart is modelled as an immutable ``CartState`` plus a set of actions.
``reduce(state, action)`` computes the next state and never touches storage;
persisting the result is the caller's job (see ``CartStore``).
"""
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, List, Optional, Tuple

ZERO = Decimal('0.00')


def clamp_quantity(quantity: int, max_quantity: int) -> int:
    """Clamp into ``[1, max_quantity]``."""
    return max(1, min(quantity, max_quantity))


@dataclass(frozen=True)
class CartLine:
    """
    One product held in the cart.

    ``unit_price`` is the price shown when the product was added. It is only
    used for display; the server prices the order on its own.
    """
    product_id: str
    name: str
    unit_price: Decimal
    unit: str
    max_quantity: int
    quantity: int = 1
    producer_name: str = ''
    is_organic: bool = False
    image: Optional[str] = None

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity

    def with_quantity(self, quantity: int) -> 'CartLine':
        return replace(self, quantity=quantity)

    def to_dict(self) -> dict:
        return {
            'productId': self.product_id,
            'name': self.name,
            'unitPrice': str(self.unit_price),
            'unit': self.unit,
            'quantity': self.quantity,
            'maxQuantity': self.max_quantity,
            'producerName': self.producer_name,
            'isOrganic': self.is_organic,
            'image': self.image,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'CartLine':
        """
        Rebuild a line from its persisted form.

        Raises KeyError, TypeError or ValueError when the payload is malformed.
        """
        try:
            unit_price = Decimal(str(data['unitPrice']))
        except InvalidOperation:
            raise ValueError(f"Invalid unit price: {data['unitPrice']!r}")
        if not unit_price.is_finite() or unit_price < 0:
            raise ValueError(f"Invalid unit price: {data['unitPrice']!r}")

        quantity = data['quantity']
        max_quantity = data['maxQuantity']
        for value in (quantity, max_quantity):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Quantities must be integers, got {value!r}")

        return cls(
            product_id=str(data['productId']),
            name=str(data['name']),
            unit_price=unit_price,
            unit=str(data.get('unit', '')),
            quantity=quantity,
            max_quantity=max_quantity,
            producer_name=str(data.get('producerName') or ''),
            is_organic=bool(data.get('isOrganic', False)),
            image=data.get('image'),
        )


@dataclass(frozen=True)
class CartState:
    """Cart lines plus totals derived from them."""
    lines: Tuple[CartLine, ...] = ()
    total: Decimal = ZERO
    item_count: int = 0

    @classmethod
    def of(cls, lines: Iterable[CartLine]) -> 'CartState':
        """Build a state whose totals match ``lines``."""
        lines = tuple(lines)
        return cls(
            lines=lines,
            total=sum((line.line_total for line in lines), ZERO),
            item_count=sum(line.quantity for line in lines),
        )

    @classmethod
    def empty(cls) -> 'CartState':
        return cls.of(())

    def find(self, product_id: str) -> Optional[CartLine]:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None


# Actions

@dataclass(frozen=True)
class AddItem:
    line: CartLine
    quantity: int = 1


@dataclass(frozen=True)
class RemoveItem:
    product_id: str


@dataclass(frozen=True)
class SetQuantity:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class ClearCart:
    pass


@dataclass(frozen=True)
class LoadCart:
    lines: Tuple[CartLine, ...]


def _add(state: CartState, action: AddItem) -> CartState:
    quantity = max(action.quantity, 1)
    existing = state.find(action.line.product_id)
    if existing is not None:
        merged = min(existing.quantity + quantity, existing.max_quantity)
        return CartState.of(
            line.with_quantity(merged) if line is existing else line
            for line in state.lines
        )
    if action.line.max_quantity < 1:
        return state
    added = action.line.with_quantity(clamp_quantity(quantity, action.line.max_quantity))
    return CartState.of(state.lines + (added,))


def _remove(state: CartState, action: RemoveItem) -> CartState:
    if state.find(action.product_id) is None:
        return state
    return CartState.of(line for line in state.lines if line.product_id != action.product_id)


def _set_quantity(state: CartState, action: SetQuantity) -> CartState:
    if action.quantity <= 0:
        return _remove(state, RemoveItem(action.product_id))
    return CartState.of(
        line.with_quantity(clamp_quantity(action.quantity, line.max_quantity))
        if line.product_id == action.product_id else line
        for line in state.lines
    )


def _load(action: LoadCart) -> CartState:
    merged: Dict[str, CartLine] = {}
    order: List[str] = []
    for line in action.lines:
        if line.max_quantity < 1:
            continue
        existing = merged.get(line.product_id)
        if existing is None:
            order.append(line.product_id)
            merged[line.product_id] = line.with_quantity(
                clamp_quantity(line.quantity, line.max_quantity)
            )
        else:
            merged[line.product_id] = existing.with_quantity(
                clamp_quantity(existing.quantity + line.quantity, existing.max_quantity)
            )
    return CartState.of(merged[product_id] for product_id in order)


def reduce(state: CartState, action) -> CartState:
    """Apply ``action`` to ``state`` and return the new state."""
    if isinstance(action, AddItem):
        return _add(state, action)
    if isinstance(action, RemoveItem):
        return _remove(state, action)
    if isinstance(action, SetQuantity):
        return _set_quantity(state, action)
    if isinstance(action, ClearCart):
        return CartState.empty()
    if isinstance(action, LoadCart):
        return _load(action)
    raise TypeError(f"Unknown cart action: {action!r}")
