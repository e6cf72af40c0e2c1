"""Application service: Lookup Order by order number (customer-facing query).

The order number carries both the id and the creation date. The id is
used to fetch the order and the date must match what is stored, so a
customer who guesses a valid id with the wrong date learns nothing.
Malformed numbers, unknown ids and date mismatches all surface as the
same "No such order" error.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.domain.exceptions import (
    DateMismatchError,
    InvalidOrderNumberError,
    OrderNotFoundError,
)
from storefront.domain.model.order_number import parse_order_number
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "No such order"


class LookupOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, raw_order_number: str) -> OrderDTO:
        try:
            parsed = parse_order_number(raw_order_number)
        except InvalidOrderNumberError as exc:
            logger.debug("Rejected order number %r: %s", raw_order_number, exc)
            raise OrderNotFoundError(NOT_FOUND_MESSAGE) from exc

        order = self._order_repo.get_by_id(parsed.order_id)
        if order is None:
            raise OrderNotFoundError(NOT_FOUND_MESSAGE)

        if not parsed.matches(order.created_at):
            logger.info(
                "Order number date mismatch for order #%s (given %s)",
                parsed.order_id, parsed.date_digits,
            )
            raise DateMismatchError(NOT_FOUND_MESSAGE)

        return to_order_dto(order)
