from __future__ import annotations

from typing import Dict, Tuple


CONSTRUCTION_CATEGORIES: Tuple[str, ...] = (
    "SERVIÇOS PRELIMINARES",
    "INFRAESTRUTURA / FUNDAÇÃO",
    "SUPERESTRUTURA",
    "ALVENARIA E VEDAÇÕES",
    "ESQUADRIAS",
    "COBERTURA",
    "INSTALAÇÕES ELÉTRICAS",
    "INSTALAÇÕES HIDROSSANITÁRIAS",
    "REVESTIMENTOS DE PAREDE",
    "REVESTIMENTOS DE PISO",
    "FORROS",
    "PINTURA",
    "LOUÇAS E METAIS",
    "SERVIÇOS COMPLEMENTARES",
)

OTHER_CATEGORY = "OUTROS"

CATEGORY_RANK: Dict[str, int] = {name: rank for rank, name in enumerate(CONSTRUCTION_CATEGORIES)}

# every unknown category shares this rank so a stable sort keeps insertion order
UNRANKED = len(CONSTRUCTION_CATEGORIES)


def category_rank(category: str | None) -> int:
    return CATEGORY_RANK.get(category or "", UNRANKED)


def normalize_category(category: str | None) -> str:
    """Map a category onto the fixed phase list, falling back to OUTROS."""
    return category if category in CATEGORY_RANK else OTHER_CATEGORY


__all__ = [
    "CONSTRUCTION_CATEGORIES",
    "OTHER_CATEGORY",
    "CATEGORY_RANK",
    "UNRANKED",
    "category_rank",
    "normalize_category",
]
