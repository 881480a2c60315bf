"""Product record.

Products are plain data owned by whichever catalog holds them.  They are
kept as a mutable dataclass because the catalog supports a generic field
update; every other consumer works on value copies.
"""

from __future__ import annotations

import dataclasses
import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from stockroom.domain.exceptions import ValidationError
from stockroom.domain.model.value_objects import Money

# Cost of one unit of consumption, applied by ``Product.energy_cost``.
ENERGY_COST_RATE = Decimal("0.21")


def new_product_id() -> str:
    """Generate a product identifier.

    Best-effort unique: a random UUID4 has enough entropy that collisions
    are not a practical concern, but nothing checks for them.
    """
    return uuid.uuid4().hex


@dataclass
class Product:
    """A sellable product.

    Use ``Product.create()`` to build one from loose input; the
    ``__init__`` expects already-validated values.
    """

    id: str
    name: str
    model: str
    release_date: date
    price: Money
    consumption: Decimal

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        name: str,
        model: str,
        price: str | float | int | Decimal | Money,
        consumption: str | float | int | Decimal,
        *,
        product_id: str | None = None,
        release_date: str | date | datetime | None = None,
    ) -> Product:
        """Create a product, coercing and validating every field.

        A missing ``product_id`` is generated; a missing ``release_date``
        defaults to today.
        """
        return Product(
            id=_coerce_id(product_id) if product_id is not None else new_product_id(),
            name=_coerce_text("name", name),
            model=_coerce_text("model", model),
            release_date=(
                _coerce_date(release_date) if release_date is not None else date.today()
            ),
            price=Money.of(price),
            consumption=_coerce_consumption(consumption),
        )

    # --- Behaviour ------------------------------------------------------------

    def cost(self) -> Money:
        return self.price

    def energy_cost(self) -> Decimal:
        return ENERGY_COST_RATE * self.consumption

    def age(self, today: date | None = None) -> int:
        """Age in calendar years, counted from the release year."""
        today = today or date.today()
        return today.year - self.release_date.year

    def age_label(self, today: date | None = None) -> str:
        years = self.age(today)
        unit = "year" if abs(years) == 1 else "years"
        return f"{years} {unit}"

    def copy(self) -> Product:
        """Return an independent value copy.

        Every field holds an immutable value, so a shallow replace is
        enough to detach the copy from this instance.
        """
        return dataclasses.replace(self)

    def update_from(self, source: Mapping[str, Any] | object) -> None:
        """Overwrite fields with the non-callable values found on *source*.

        *source* may be a mapping or any object exposing product-named
        attributes (another Product included).  Fields absent from the
        source are left untouched.  An object source never carries its id
        over; a mapping that names a different id is rejected.
        """
        changes = _extract_fields(source)

        if "id" in changes and changes["id"] != self.id:
            raise ValidationError(
                f"Cannot change product id from {self.id} to {changes['id']}"
            )

        coerced: dict[str, Any] = {}
        for name, value in changes.items():
            if name == "id":
                continue
            coerced[name] = _COERCERS[name](name, value)

        # apply only once everything validated
        for name, value in coerced.items():
            setattr(self, name, value)


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------

def _coerce_id(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Product id must be a non-empty string")
    return value


def _coerce_text(field_name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Product {field_name} is required")
    return value.strip()


def _coerce_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value).date()
        except ValueError as exc:
            raise ValidationError(f"Invalid release date: {value!r}") from exc
    raise ValidationError(f"Invalid release date: {value!r}")


def _coerce_consumption(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid consumption: {value!r}")
    try:
        consumption = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid consumption: {value!r}") from exc
    if not consumption.is_finite() or consumption < 0:
        raise ValidationError(f"Consumption cannot be negative, got {value!r}")
    return consumption


_COERCERS = {
    "name": _coerce_text,
    "model": _coerce_text,
    "release_date": lambda _name, value: _coerce_date(value),
    "price": lambda _name, value: Money.of(value),
    "consumption": lambda _name, value: _coerce_consumption(value),
}

FIELD_NAMES = tuple(f.name for f in dataclasses.fields(Product))


def _extract_fields(source: Mapping[str, Any] | object) -> dict[str, Any]:
    if isinstance(source, Mapping):
        unknown = set(source) - set(FIELD_NAMES)
        if unknown:
            raise ValidationError(
                f"Unknown product field(s): {', '.join(sorted(map(str, unknown)))}"
            )
        items = dict(source)
    else:
        items = {
            name: getattr(source, name)
            for name in FIELD_NAMES
            if name != "id" and hasattr(source, name)
        }
    return {name: value for name, value in items.items() if not callable(value)}
