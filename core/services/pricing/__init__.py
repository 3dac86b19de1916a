from .sync import PriceSynchronizer, coerce_reference_source

__all__ = ["PriceSynchronizer", "coerce_reference_source"]
