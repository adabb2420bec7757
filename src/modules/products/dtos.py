"""Product DTO for the Service Layer.

Framework-agnostic data transfer object using Pydantic v2.  It is the
contract between callers and the Service layer and is immutable
(``frozen=True``).

Field rules (blank name, non-positive price) live in
``modules.products.validation.validate_product``; an incomplete record
parses here and is rejected there as ``InvalidData``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from modules.products.models import Product


class ProductDTO(BaseModel):
    """Immutable record used for product input and output."""

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    name: Optional[str] = None
    price: Optional[Decimal] = None

    @classmethod
    def from_entity(cls, product: Product) -> ProductDTO:
        """Build a DTO from a Product entity."""
        return cls(id=product.id, name=product.name, price=product.price)

    def to_entity(self) -> Product:
        """Build a Product entity carrying this record's fields."""
        return Product(id=self.id, name=self.name, price=self.price)
