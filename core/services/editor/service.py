from __future__ import annotations

from typing import List, Optional

from core.interfaces import GenerationService, ReferenceCatalog
from core.models import DEFAULT_PAYMENT_TERMS, PriceSource, ScheduleTask
from core.reporting.contexts import CompanyProfile
from core.services.budget.store import LineItemStore
from core.services.editor.export import ExportMixin
from core.services.editor.generation import GenerationMixin
from core.services.editor.items import ItemEditingMixin
from core.services.editor.optimization import OptimizationMixin
from core.services.editor.persistence import PersistenceMixin
from core.services.editor.pricing import PricingMixin
from core.services.editor.schedule import ScheduleMixin
from core.services.history.service import BudgetHistoryService
from core.services.optimization.engine import OptimizationEngine
from core.services.pricing.sync import PriceSynchronizer, coerce_reference_source
from core.services.scheduling.editing import ScheduleEditor
from core.services.scheduling.generator import ScheduleGenerator
from core.services.scheduling.ripple import DelayRippleEngine


class BudgetEditorService(
    ItemEditingMixin,
    GenerationMixin,
    PricingMixin,
    ScheduleMixin,
    OptimizationMixin,
    PersistenceMixin,
    ExportMixin,
):
    """
    The active budget being edited: its line items, price source, schedule
    and payment terms. One user-driven caller at a time; every operation
    runs to completion before returning.
    """

    def __init__(
        self,
        catalog: ReferenceCatalog,
        generator: GenerationService | None = None,
        history: BudgetHistoryService | None = None,
        price_source: PriceSource = PriceSource.REFERENCE_A,
        include_material: bool = True,
        default_payment_terms: str = DEFAULT_PAYMENT_TERMS,
        company: CompanyProfile | None = None,
    ):
        self._catalog: ReferenceCatalog = catalog
        self._generator: GenerationService | None = generator
        self._history: BudgetHistoryService | None = history
        self._synchronizer: PriceSynchronizer = PriceSynchronizer(catalog)
        self._schedule_generator: ScheduleGenerator = ScheduleGenerator(catalog)
        self._ripple: DelayRippleEngine = DelayRippleEngine()
        self._schedule_editor: ScheduleEditor = ScheduleEditor()
        self._optimizer: OptimizationEngine = OptimizationEngine()

        self.store: LineItemStore = LineItemStore()
        self.price_source: PriceSource = coerce_reference_source(price_source)
        self.include_material: bool = include_material
        self.schedule: List[ScheduleTask] = []
        self.default_payment_terms: str = default_payment_terms
        self.payment_terms: str = default_payment_terms
        self.client_name: Optional[str] = None
        self.company: CompanyProfile = company or CompanyProfile()
        self.loading: bool = False

    def new_budget(self) -> None:
        self.store.replace_all([])
        self._set_schedule([])
        self.payment_terms = self.default_payment_terms
        self.client_name = None


__all__ = ["BudgetEditorService", "DEFAULT_PAYMENT_TERMS"]
