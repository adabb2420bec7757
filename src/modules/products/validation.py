"""Field rules for product records.

Kept as a standalone pure function so the service can take any
validator through its constructor and tests can stub it out.
"""

from __future__ import annotations

from typing import Dict

from modules.products.dtos import ProductDTO
from modules.products.exceptions import InvalidData


def validate_product(dto: ProductDTO) -> None:
    """Check every field rule and raise ``InvalidData`` listing all failures."""
    errors: Dict[str, str] = {}

    if dto.name is None or not dto.name.strip():
        errors["name"] = "name is blank"

    if dto.price is None or dto.price <= 0:
        errors["price"] = "price is non-positive"

    if errors:
        raise InvalidData(errors)
