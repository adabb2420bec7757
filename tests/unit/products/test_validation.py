"""Unit tests for validate_product."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.dtos import ProductDTO
from modules.products.exceptions import InvalidData
from modules.products.validation import validate_product

pytestmark = pytest.mark.unit


class TestValidateProduct:
    def test_valid_record(self):
        validate_product(ProductDTO(name="Playstation", price=Decimal("2500.00")))

    @pytest.mark.parametrize("name", ["", " ", "\t\n", None])
    def test_blank_name(self, name):
        with pytest.raises(InvalidData) as exc_info:
            validate_product(ProductDTO(name=name, price=Decimal("10.00")))

        assert exc_info.value.errors == {"name": "name is blank"}
        assert str(exc_info.value) == "name is blank"

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-5.0"), -0.01, None])
    def test_non_positive_price(self, price):
        with pytest.raises(InvalidData) as exc_info:
            validate_product(ProductDTO(name="Widget", price=price))

        assert exc_info.value.errors == {"price": "price is non-positive"}

    def test_smallest_positive_price_passes(self):
        validate_product(ProductDTO(name="Widget", price=Decimal("0.01")))

    def test_reports_both_violations(self):
        with pytest.raises(InvalidData) as exc_info:
            validate_product(ProductDTO(name=" ", price=-5.0))

        assert list(exc_info.value.errors) == ["name", "price"]
        assert str(exc_info.value) == "name is blank; price is non-positive"
