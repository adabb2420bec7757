"""Product repository interface.

Extends ``IRepository[Product]`` with the failing look-up the update
use-case relies on.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def lookup(self, id: int) -> "Product":
        """Retrieve a product by ID.

        Raises:
            ProductNotFound: if no product is stored under ``id``.
        """
