"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here, before anything reaches the store:
- Name must not be blank.
- Price must be greater than zero.

Validation always runs before the ID look-up, so an invalid record
aimed at a missing product fails with ``InvalidData``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import structlog

from modules.products.dtos import ProductDTO
from modules.products.exceptions import InvalidData, ProductNotFound, ResourceNotFound
from modules.products.models import Product
from modules.products.validation import validate_product

if TYPE_CHECKING:
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    ``validator`` defaults to ``validate_product``; pass a no-op to test
    persistence paths in isolation.
    """

    def __init__(
        self,
        repository: IProductRepository,
        validator: Callable[[ProductDTO], None] = validate_product,
    ) -> None:
        self._repo = repository
        self._validator = validator

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, dto: ProductDTO) -> None:
        """Run the field rules against ``dto``.

        Raises:
            InvalidData: if the name is blank or the price is not positive.
        """
        try:
            self._validator(dto)
        except InvalidData as exc:
            logger.warning("product.invalid", errors=exc.errors)
            raise

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def insert(self, dto: ProductDTO) -> ProductDTO:
        """Create a new product; the store assigns its ID.

        Raises:
            InvalidData: if the record breaks a field rule.
        """
        self.validate(dto)

        product = Product(name=dto.name, price=dto.price)
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id)
        return ProductDTO.from_entity(product)

    def update(self, id: int, dto: ProductDTO) -> ProductDTO:
        """Overwrite name and price of an existing product.

        Raises:
            InvalidData: if the record breaks a field rule.
            ResourceNotFound: if no product exists under ``id``.
        """
        self.validate(dto)

        log = logger.bind(product_id=id)
        try:
            product = self._repo.lookup(id)
        except ProductNotFound as exc:
            log.warning("product.not_found")
            raise ResourceNotFound(id) from exc

        product.name = dto.name
        product.price = dto.price

        product = self._repo.save(product)
        log.info("product.updated")
        return ProductDTO.from_entity(product)
