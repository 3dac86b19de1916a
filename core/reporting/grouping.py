from __future__ import annotations

from typing import Dict, Iterable, List

from core.models import CONSTRUCTION_CATEGORIES, OTHER_CATEGORY, LineItem, normalize_category
from core.reporting.contexts import CategoryGroup


def group_by_category(items: Iterable[LineItem]) -> List[CategoryGroup]:
    """Fixed phase order, OUTROS last, empty groups dropped."""
    groups: Dict[str, CategoryGroup] = {
        name: CategoryGroup(name) for name in (*CONSTRUCTION_CATEGORIES, OTHER_CATEGORY)
    }
    for item in items:
        groups[normalize_category(item.category)].items.append(item)
    return [group for group in groups.values() if group.items]


__all__ = ["group_by_category"]
