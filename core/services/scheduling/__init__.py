from .benchmarks import PRODUCTIVITY_BENCHMARKS, benchmark_for, is_hour_unit
from .editing import ScheduleEditor
from .generator import ScheduleGenerator
from .models import DelayImpact
from .ripple import DelayRippleEngine

__all__ = [
    "PRODUCTIVITY_BENCHMARKS",
    "benchmark_for",
    "is_hour_unit",
    "ScheduleEditor",
    "ScheduleGenerator",
    "DelayImpact",
    "DelayRippleEngine",
]
