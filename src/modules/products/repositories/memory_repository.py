"""In-memory implementation of the Product repository.

Satisfies ``IProductRepository`` with a plain dict.  Entities are copied
on the way in and on the way out, so a caller mutating a returned
product changes nothing until it calls ``save``.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Optional

import structlog

from config import settings
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class InMemoryProductRepository(IProductRepository):
    """Concrete Product repository backed by a dict keyed by ID."""

    def __init__(self, id_start: Optional[int] = None) -> None:
        self._rows: Dict[int, Product] = {}
        self._next_id = settings.PRODUCT_ID_START if id_start is None else id_start

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key, or ``None``."""
        product = self._rows.get(id)
        if product is None:
            return None
        return replace(product)

    def lookup(self, id: int) -> Product:
        product = self.get_by_id(id)
        if product is None:
            raise ProductNotFound(id)
        return product

    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product.

        New entities (``id is None``) get the next ID from the sequence.
        Explicit IDs are upserted and push the sequence past them.
        """
        if entity.id is None:
            stored = replace(entity, id=self._next_id)
        else:
            stored = replace(entity)
        self._next_id = max(self._next_id, stored.id + 1)
        self._rows[stored.id] = stored
        logger.info("product.saved", product_id=stored.id, name=stored.name)
        return replace(stored)

    def __len__(self) -> int:
        return len(self._rows)
