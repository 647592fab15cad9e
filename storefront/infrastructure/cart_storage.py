"""
Cart storage backends.
"""
import json
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..domain.cart import CartLine
from ..domain.repositories.cart_storage import CartStorage

DEFAULT_CART_FILE = 'freshmarket-cart.json'


class JsonFileCartStorage(CartStorage):
    """Keeps the cart as a JSON list in a single file."""

    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path) if path is not None else Path.home() / DEFAULT_CART_FILE

    def load(self) -> Optional[List[dict]]:
        if not self.path.exists():
            return None
        with self.path.open('r', encoding='utf-8') as f:
            return json.load(f)

    def save(self, lines: Sequence[CartLine]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix='.cart-', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump([line.to_dict() for line in lines], f)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise


class InMemoryCartStorage(CartStorage):
    """Storage for tests and throwaway sessions."""

    def __init__(self, payload: Optional[list] = None):
        self.payload = payload
        self.saves = 0

    def load(self) -> Optional[List[dict]]:
        return self.payload

    def save(self, lines: Sequence[CartLine]) -> None:
        self.payload = [line.to_dict() for line in lines]
        self.saves += 1
