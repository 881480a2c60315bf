"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as displayed to the user."""

    id: str
    name: str
    model: str
    price: str  # formatted, e.g. "8.00"
    energy_cost: str
    age: str  # e.g. "3 years"


@dataclass(frozen=True)
class StockLineDTO:
    product_id: str
    product_name: str
    quantity: int


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: str
    product_name: str
    quantity: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: a settled order session."""

    status: str
    items: list[OrderLineDTO]
    total_units: int
