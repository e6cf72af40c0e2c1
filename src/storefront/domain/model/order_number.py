"""Order numbers: the customer-facing form of an order id.

An order number is ``YYYYMMDD-NNNN``: the order's creation date followed
by its id, zero-padded to at least four digits. It is always derived from
``(id, created_at)`` and never stored on its own.

Parsing is deliberately forgiving. Customers retype numbers from packing
slips, paste them from chat apps, or enter them with a full-width IME, so
the input goes through one normalization pipeline before it is matched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from storefront.domain.exceptions import InvalidOrderNumberError, ValidationError
from storefront.domain.model.value_objects import MAX_STORED_INTEGER

_FULLWIDTH_DIGITS = {ord("０") + i: str(i) for i in range(10)}

_SEPARATORS = {
    ord("／"): "/",
    **{ord(ch): "-" for ch in "﹣－—–‒―～〜"},
}

_NORMALIZE_TABLE = str.maketrans({**_FULLWIDTH_DIGITS, **_SEPARATORS})

_DISCARDED = re.compile(r"[\s.．]")
_DASHED_DATE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_ORDER_NUMBER = re.compile(r"^([0-9]{8})-?([0-9]+)$")
_MAX_ID_DIGITS = len(str(MAX_STORED_INTEGER))


@dataclass(frozen=True)
class ParsedOrderNumber:
    """Result of parsing: the 8-digit date and the numeric order id."""

    date_digits: str
    order_id: int

    def matches(self, created_at: date) -> bool:
        """True if *created_at* falls on the date encoded in the number."""
        return created_at.strftime("%Y%m%d") == self.date_digits


def encode_order_number(order_id: int, created_at: date) -> str:
    """Format an order number, e.g. ``(7, 2025-08-21) -> "20250821-0007"``.

    Accepts a ``date`` or ``datetime``; only the calendar date is used and
    no timezone conversion is applied. Ids wider than four digits are kept
    in full.
    """
    if isinstance(order_id, bool) or not isinstance(order_id, int) or order_id <= 0:
        raise ValidationError(f"Order id must be a positive integer, got {order_id!r}")
    return f"{created_at:%Y%m%d}-{order_id:04d}"


def normalize_order_number(raw: str) -> str:
    """Canonicalize user input before structural matching.

    Full-width digits become ASCII, dash-like and slash-like punctuation
    become ``-``, whitespace and periods are dropped, and a leading
    ``YYYY-MM-DD`` date collapses to ``YYYYMMDD``.
    """
    text = str(raw).strip().translate(_NORMALIZE_TABLE)
    text = _DISCARDED.sub("", text)
    text = text.replace("/", "-")
    return _DASHED_DATE.sub(r"\1\2\3", text, count=1)


def parse_order_number(raw: str | None) -> ParsedOrderNumber:
    """Decode a user-supplied order number into its date and id.

    Raises InvalidOrderNumberError if the normalized text is not eight
    date digits, an optional ``-`` and a positive id that fits a stored
    integer.
    """
    if raw is None or not str(raw).strip():
        raise InvalidOrderNumberError("Order number is required")

    match = _ORDER_NUMBER.match(normalize_order_number(raw))
    if match is None:
        raise InvalidOrderNumberError(f"Invalid order number format: {raw!r}")

    digits = match.group(2).lstrip("0")
    if len(digits) > _MAX_ID_DIGITS:
        raise InvalidOrderNumberError(f"Invalid order number format: {raw!r}")

    order_id = int(digits or "0")
    if not 0 < order_id <= MAX_STORED_INTEGER:
        raise InvalidOrderNumberError(f"Invalid order number format: {raw!r}")

    return ParsedOrderNumber(date_digits=match.group(1), order_id=order_id)
