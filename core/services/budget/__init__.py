from .store import LineItemStore

__all__ = ["LineItemStore"]
