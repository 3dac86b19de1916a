from infra.generation.catalog_generator import CatalogDraftGenerator

__all__ = ["CatalogDraftGenerator"]
