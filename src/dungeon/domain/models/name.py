from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Name:
    """Singular and plural forms of an entity label.

    Forms are stored exactly as given. Instances should come from
    ``dungeon.application.services.name_factory`` rather than being built
    directly, so the default pluralization stays in one place.
    """

    singular: str
    plural: str

    def __str__(self) -> str:
        return self.singular

    def for_quantity(self, quantity: int) -> str:
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise TypeError(f"Quantity must be an int, got {type(quantity).__name__}")
        if quantity < 0:
            raise ValueError(f"Quantity must not be negative, got {quantity}")
        return self.singular if quantity == 1 else self.plural

    def quantified(self, quantity: int) -> str:
        """Render ``quantity`` followed by the matching form, e.g. ``"3 Wolfs"``."""

        form = self.for_quantity(quantity)
        return f"{quantity} {form}"
