from __future__ import annotations

import logging
from typing import Any, List, Optional

from core.exceptions import NotFoundError, ValidationError
from core.interfaces import ReferenceCatalog
from core.models import (
    CONSTRUCTION_CATEGORIES,
    ItemKind,
    LineItem,
    PriceSource,
    ReferenceEntry,
)
from core.services.budget.store import LineItemStore


logger = logging.getLogger(__name__)

MIN_SEARCH_LENGTH = 2


class ItemEditingMixin:
    store: LineItemStore
    price_source: PriceSource
    _catalog: ReferenceCatalog

    def add_item(self, item: LineItem) -> LineItem:
        return self.store.add(item)

    def update_item(self, item_id: str, field: str, value: Any) -> Optional[LineItem]:
        return self.store.update(item_id, field, value)

    def delete_item(self, item_id: str) -> bool:
        return self.store.delete(item_id)

    def search_reference(self, query: str) -> List[ReferenceEntry]:
        if len((query or "").strip()) < MIN_SEARCH_LENGTH:
            return []
        return self._catalog.search_by_text(query.strip())

    def add_from_reference(self, entry: ReferenceEntry | str) -> LineItem:
        if isinstance(entry, str):
            found = self._catalog.lookup_by_description(entry)
            if found is None:
                raise NotFoundError("Reference entry not found.", code="REFERENCE_NOT_FOUND")
            entry = found

        price = entry.price_for(self.price_source)
        item = LineItem.create(
            description=entry.description,
            unit=entry.unit,
            quantity=1,
            unit_price=price,
            source=self.price_source,
            kind=entry.kind,
            category=entry.category,
            daily_productivity=entry.daily_productivity,
        )
        return self.store.add(item)

    def add_generic(self, description: str, category: str = CONSTRUCTION_CATEGORIES[0]) -> LineItem:
        text = (description or "").strip()
        if not text:
            raise ValidationError("Item description cannot be empty.", code="DESCRIPTION_EMPTY")
        item = LineItem.create(
            description=text,
            unit="vb",
            quantity=1,
            unit_price=0.0,
            source=PriceSource.ESTIMATED,
            kind=ItemKind.LUMP_SUM,
            category=category,
            daily_productivity=1,
        )
        return self.store.add(item)


__all__ = ["ItemEditingMixin", "MIN_SEARCH_LENGTH"]
