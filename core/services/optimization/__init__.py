from .engine import DISCOUNT_DESCRIPTION, OptimizationEngine
from .models import OptimizationPlan

__all__ = ["OptimizationEngine", "OptimizationPlan", "DISCOUNT_DESCRIPTION"]
