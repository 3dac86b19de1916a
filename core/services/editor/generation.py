from __future__ import annotations

import logging
from typing import List

from core.exceptions import GenerationError, ValidationError
from core.interfaces import GenerationConfig, GenerationService
from core.models import LineItem, PriceSource
from core.services.budget.store import LineItemStore


logger = logging.getLogger(__name__)


class GenerationMixin:
    store: LineItemStore
    price_source: PriceSource
    include_material: bool
    loading: bool
    _generator: GenerationService | None

    @property
    def generation_config(self) -> GenerationConfig:
        use_a = self.price_source == PriceSource.REFERENCE_A
        return GenerationConfig(
            price_source_a=use_a,
            price_source_b=not use_a,
            include_material=self.include_material,
        )

    def generate_from_description(self, description: str) -> List[LineItem]:
        text = (description or "").strip()
        if not text:
            raise ValidationError("Describe the service before generating items.", code="DESCRIPTION_EMPTY")
        if self._generator is None:
            raise GenerationError("No generation service is configured.", code="GENERATOR_MISSING", retryable=False)

        self.loading = True
        try:
            items = list(self._generator.generate(text, self.generation_config))
        except GenerationError:
            raise
        except Exception as exc:
            logger.exception("Item generation failed")
            raise GenerationError(
                "Could not generate the budget. Check the service configuration and try again.",
                code="GENERATION_FAILED",
            ) from exc
        finally:
            self.loading = False

        added = self.store.extend(items)
        logger.info("Generated %d items from description", len(added))
        return added


__all__ = ["GenerationMixin"]
