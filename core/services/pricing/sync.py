from __future__ import annotations

import logging
from dataclasses import replace
from typing import List

from core.exceptions import ValidationError
from core.interfaces import ReferenceCatalog
from core.models import REFERENCE_SOURCES, LineItem, PriceSource
from core.services.budget.store import LineItemStore


logger = logging.getLogger(__name__)


def coerce_reference_source(source) -> PriceSource:
    try:
        resolved = PriceSource(source)
    except ValueError:
        resolved = None
    if resolved not in REFERENCE_SOURCES:
        raise ValidationError(
            f"Price source must be one of the reference lists, got {source!r}.",
            code="PRICE_SOURCE_INVALID",
        )
    return resolved


class PriceSynchronizer:
    """
    Re-derives prices from the reference table when the active price source flips.

    Each pass is a full recomputation, so flipping A -> B -> A restores the
    original prices of every item that was backed by source A. Optimized
    items and items with no exact description match are left untouched.
    """

    def __init__(self, catalog: ReferenceCatalog):
        self._catalog: ReferenceCatalog = catalog

    def reprice(self, items: List[LineItem], source: PriceSource) -> tuple[List[LineItem], int]:
        source = coerce_reference_source(source)

        repriced: List[LineItem] = []
        changed = 0
        for item in items:
            entry = None if item.optimized else self._catalog.lookup_by_description(item.description)
            if entry is None:
                repriced.append(item)
                continue
            price = entry.price_for(source)
            repriced.append(
                replace(
                    item,
                    unit_price=price,
                    total=item.quantity * price,
                    source=source,
                    daily_productivity=entry.daily_productivity,
                )
            )
            changed += 1
        return repriced, changed

    def synchronize(self, store: LineItemStore, source: PriceSource) -> int:
        source = coerce_reference_source(source)
        repriced, changed = self.reprice(store.items(), source)
        store.replace_all(repriced)
        logger.info("Repriced %d of %d line items from %s", changed, len(repriced), source.value)
        return changed


__all__ = ["PriceSynchronizer", "coerce_reference_source"]
