"""Product entity.

Business rules (enforced at the service layer, not here):
- Name must not be blank.
- Price must be greater than zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Product:
    """Product aggregate root.

    ``id`` stays ``None`` until the store persists the entity for the
    first time.
    """

    name: str
    price: Decimal
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
