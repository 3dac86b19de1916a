from .auth import AuthGate
from .budget import LineItemStore
from .editor import BudgetEditorService, DEFAULT_PAYMENT_TERMS
from .history import BudgetHistoryService
from .optimization import OptimizationEngine, OptimizationPlan
from .pricing import PriceSynchronizer
from .scheduling import DelayImpact, DelayRippleEngine, ScheduleEditor, ScheduleGenerator

__all__ = [
    "AuthGate",
    "LineItemStore",
    "BudgetEditorService",
    "DEFAULT_PAYMENT_TERMS",
    "BudgetHistoryService",
    "OptimizationEngine",
    "OptimizationPlan",
    "PriceSynchronizer",
    "DelayImpact",
    "DelayRippleEngine",
    "ScheduleEditor",
    "ScheduleGenerator",
]
