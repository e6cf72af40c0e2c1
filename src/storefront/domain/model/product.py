"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added to and edited in the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because catalog edits (price, name,
    category, image) are legitimate mutations on the aggregate.
    """

    id: int
    name: str
    price: Money
    category: str
    image: str | None = None

    def update(
        self,
        name: str | None = None,
        price: Money | None = None,
        category: str | None = None,
        image: str | None = None,
    ) -> None:
        """Apply a partial edit; ``None`` leaves a field unchanged.

        This does NOT affect any existing orders because order lines
        capture a price snapshot at creation time.
        """
        if name is not None:
            if not name.strip():
                raise ValidationError("Product name is required")
            self.name = name.strip()
        if category is not None:
            if not category.strip():
                raise ValidationError("Product category is required")
            self.category = category.strip()
        if price is not None:
            self.price = price
        if image is not None:
            self.image = image.strip() or None
