""" Change notifications for line items, schedule, price source and saved budgets"""
from core.events.signal import Signal
from core.models import PriceSource


class DomainEvents:
    def __init__(self) -> None:
        self.items_changed: Signal[str] = Signal()           # operation name
        self.price_source_changed: Signal[PriceSource] = Signal()
        self.schedule_changed: Signal[int] = Signal()        # task count
        self.budgets_changed: Signal[int] = Signal()         # saved budget count


# SINGLE global instance
domain_events = DomainEvents()
