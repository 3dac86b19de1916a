from infra.catalog.reference_table import StaticReferenceCatalog

__all__ = ["StaticReferenceCatalog"]
