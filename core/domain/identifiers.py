from __future__ import annotations

from uuid import uuid4


def generate_id() -> str:
    return str(uuid4())


def task_id_for(item_id: str) -> str:
    """Schedule tasks are keyed by the line item they were derived from."""
    return f"task-{item_id}"


def swap_strategy_id(item_id: str) -> str:
    return f"swap-{item_id}"


__all__ = ["generate_id", "task_id_for", "swap_strategy_id"]
