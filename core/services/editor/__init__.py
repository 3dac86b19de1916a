from .service import DEFAULT_PAYMENT_TERMS, BudgetEditorService

__all__ = ["BudgetEditorService", "DEFAULT_PAYMENT_TERMS"]
