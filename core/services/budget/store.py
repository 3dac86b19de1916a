from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Iterable, List, Optional

from core.events.domain_events import domain_events
from core.exceptions import ValidationError
from core.models import LineItem


logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = {f.name for f in fields(LineItem)} - {"id"}
_PRICED_FIELDS = {"quantity", "unit_price"}


class LineItemStore:
    """
    Ordered in-memory collection of budget line items.

    Mutations are synchronous and visible to every reader as soon as the
    call returns. Editing quantity or unit_price keeps
    ``total == quantity * unit_price``; a direct ``total`` edit is a rewrite
    and is left as given.
    """

    def __init__(self, items: Iterable[LineItem] | None = None):
        self._items: List[LineItem] = list(items or [])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

    def items(self) -> List[LineItem]:
        return list(self._items)

    def get(self, item_id: str) -> Optional[LineItem]:
        return next((item for item in self._items if item.id == item_id), None)

    def grand_total(self) -> float:
        return sum(item.total for item in self._items)

    def add(self, item: LineItem) -> LineItem:
        self._items.append(item)
        logger.info("Added line item %s - %s", item.id, item.description)
        domain_events.items_changed.emit("add")
        return item

    def extend(self, items: Iterable[LineItem]) -> List[LineItem]:
        batch = list(items)
        if not batch:
            return []
        self._items.extend(batch)
        logger.info("Added %d line items", len(batch))
        domain_events.items_changed.emit("extend")
        return batch

    def update(self, item_id: str, field: str, value: Any) -> Optional[LineItem]:
        if field == "id":
            raise ValidationError("Line item id cannot be changed.", code="ITEM_ID_IMMUTABLE")
        if field not in _EDITABLE_FIELDS:
            raise ValidationError(f"Unknown line item field '{field}'.", code="ITEM_FIELD_UNKNOWN")
        if field in _PRICED_FIELDS:
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ValidationError(f"Line item {field} must be a number.", code="ITEM_VALUE_INVALID")
            if field == "quantity" and value < 0:
                raise ValidationError("Quantity cannot be negative.", code="ITEM_QUANTITY_NEGATIVE")

        item = self.get(item_id)
        if item is None:
            return None

        if field in _PRICED_FIELDS:
            quantity = value if field == "quantity" else item.quantity
            unit_price = value if field == "unit_price" else item.unit_price
            total = quantity * unit_price
            setattr(item, field, value)
            item.total = total
        else:
            setattr(item, field, value)
        domain_events.items_changed.emit("update")
        return item

    def delete(self, item_id: str) -> bool:
        remaining = [item for item in self._items if item.id != item_id]
        if len(remaining) == len(self._items):
            return False
        self._items = remaining
        logger.info("Deleted line item %s", item_id)
        domain_events.items_changed.emit("delete")
        return True

    def replace_all(self, items: Iterable[LineItem]) -> None:
        self._items = list(items)
        domain_events.items_changed.emit("replace")


__all__ = ["LineItemStore"]
