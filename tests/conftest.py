from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from config.settings import configure_logging
from modules.products.dtos import ProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository
from modules.products.services import ProductService

EXISTING_ID = 1
NON_EXISTING_ID = 2


@pytest.fixture(autouse=True, scope="session")
def _configure_logging():
    """Route structlog through stdlib logging so caplog sees every event."""
    configure_logging()


@pytest.fixture()
def product():
    return Product(id=EXISTING_ID, name="Playstation", price=Decimal("2500.0"))


@pytest.fixture()
def product_dto(product):
    return ProductDTO.from_entity(product)


@pytest.fixture()
def mock_repo(product):
    """Repository double: ``save`` echoes the stored product, ``lookup`` knows only ID 1."""

    def _lookup(id):
        if id == EXISTING_ID:
            return product
        raise ProductNotFound(id)

    repo = MagicMock(spec=IProductRepository)
    repo.save.return_value = product
    repo.lookup.side_effect = _lookup
    return repo


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


@pytest.fixture()
def unvalidated_service(mock_repo):
    """Service whose validation is a no-op, isolating the persistence path."""
    return ProductService(repository=mock_repo, validator=lambda dto: None)
