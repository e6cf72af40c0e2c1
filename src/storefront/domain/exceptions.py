"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CartEmptyError(ValidationError):
    """An order was submitted without any line items."""


class ProductNotFoundError(EntityNotFoundError):
    """A cart line references a product that is not in the catalog."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class InvalidOrderNumberError(ValidationError):
    """An order number string does not have a recognisable shape."""


class OrderNotFoundError(EntityNotFoundError):
    """No order matches the given id or order number."""


class DateMismatchError(OrderNotFoundError):
    """The order number's date does not match the stored order.

    Reported with the same message as a missing order so that callers
    cannot discover which ids exist.
    """


class PersistenceError(DomainException):
    """The storage layer failed; the unit of work was rolled back."""
