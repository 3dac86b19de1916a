from __future__ import annotations

from typing import Dict

# Units a standard crew completes per workday, by phase.
PRODUCTIVITY_BENCHMARKS: Dict[str, float] = {
    "SERVIÇOS PRELIMINARES": 50,         # m2/day (cleaning, site layout)
    "INFRAESTRUTURA / FUNDAÇÃO": 3,      # m3/day (concrete)
    "SUPERESTRUTURA": 3,                 # m3/day
    "ALVENARIA E VEDAÇÕES": 8,           # m2/day
    "ESQUADRIAS": 5,                     # un/day
    "COBERTURA": 15,                     # m2/day
    "INSTALAÇÕES ELÉTRICAS": 6,          # points/day
    "INSTALAÇÕES HIDROSSANITÁRIAS": 4,   # points/day
    "REVESTIMENTOS DE PAREDE": 12,       # m2/day
    "REVESTIMENTOS DE PISO": 10,         # m2/day
    "FORROS": 15,                        # m2/day
    "PINTURA": 30,                       # m2/day
    "LOUÇAS E METAIS": 8,                # un/day
    "SERVIÇOS COMPLEMENTARES": 20,
}

DEFAULT_PRODUCTIVITY: float = 10
HOURS_PER_WORKDAY: float = 8.0
HOUR_UNITS = frozenset({"h", "horas"})


def benchmark_for(category: str | None) -> float:
    return PRODUCTIVITY_BENCHMARKS.get(category or "", DEFAULT_PRODUCTIVITY)


def is_hour_unit(unit: str | None) -> bool:
    return (unit or "").strip().lower() in HOUR_UNITS


__all__ = [
    "PRODUCTIVITY_BENCHMARKS",
    "DEFAULT_PRODUCTIVITY",
    "HOURS_PER_WORKDAY",
    "benchmark_for",
    "is_hour_unit",
]
