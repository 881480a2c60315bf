"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Errors tied to a single product carry its ``product_id``.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class _ProductErrorMixin:
    product_id: str

    def _bind(self, product_id: str) -> None:
        self.product_id = product_id


class DuplicateProductError(_ProductErrorMixin, ValidationError):

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product {product_id} is already on the list")
        self._bind(product_id)


class ProductNotFoundError(_ProductErrorMixin, EntityNotFoundError):

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product {product_id} is not on the list")
        self._bind(product_id)


class InvalidQuantityError(ValidationError):
    """Quantities must be positive integers."""


class OutOfStockError(_ProductErrorMixin, ValidationError):

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product {product_id} is out of stock")
        self._bind(product_id)


class InsufficientStockError(_ProductErrorMixin, ValidationError):
    """Requested units exceed what the warehouse holds."""

    def __init__(self, product_id: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for {product_id} "
            f"(need {requested}, have {available} available)"
        )
        self._bind(product_id)
        self.requested = requested
        self.available = available


class ProductUnavailableInShop(_ProductErrorMixin, EntityNotFoundError):

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product {product_id} is not available in this shop")
        self._bind(product_id)


class ProductUnavailableInWarehouse(_ProductErrorMixin, EntityNotFoundError):

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product {product_id} is not available in this warehouse")
        self._bind(product_id)


class SessionAlreadyCommittedError(ValidationError):
    """An order session accepts no further changes once committed."""
