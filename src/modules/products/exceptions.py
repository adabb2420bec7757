"""Product domain exceptions.

Raised by the Service Layer when business rules are violated, and by
repositories when a look-up misses.  Callers translate them into
whatever response their surface needs.
"""

from __future__ import annotations

from typing import Dict


class InvalidData(Exception):
    """A product record breaks a field rule (blank name, price <= 0).

    ``errors`` maps each offending field to its message.
    """

    def __init__(self, errors: Dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__("; ".join(self.errors.values()))


class ResourceNotFound(Exception):
    """The product targeted by an update does not exist."""

    def __init__(self, id: int) -> None:
        self.id = id
        super().__init__(f"Product {id} not found.")


class ProductNotFound(Exception):
    """Raised by the store when no product matches the requested ID."""

    def __init__(self, id: int) -> None:
        self.id = id
        super().__init__(f"No product stored under id {id}.")
