from .service import BudgetHistoryService

__all__ = ["BudgetHistoryService"]
