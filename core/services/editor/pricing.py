from __future__ import annotations

import logging

from core.events.domain_events import domain_events
from core.models import PriceSource
from core.services.budget.store import LineItemStore
from core.services.pricing.sync import PriceSynchronizer, coerce_reference_source


logger = logging.getLogger(__name__)


class PricingMixin:
    store: LineItemStore
    price_source: PriceSource
    _synchronizer: PriceSynchronizer

    def set_price_source(self, source: PriceSource) -> int:
        """Switch the active reference list; returns how many items were repriced."""
        source = coerce_reference_source(source)
        if source == self.price_source:
            return 0
        self.price_source = source
        changed = self._synchronizer.synchronize(self.store, source)
        domain_events.price_source_changed.emit(source)
        return changed

    def toggle_price_source(self) -> int:
        if self.price_source == PriceSource.REFERENCE_A:
            return self.set_price_source(PriceSource.REFERENCE_B)
        return self.set_price_source(PriceSource.REFERENCE_A)


__all__ = ["PricingMixin"]
