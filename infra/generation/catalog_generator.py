# infra/generation/catalog_generator.py
from __future__ import annotations

import logging
import re
import unicodedata
from typing import Dict, List, Optional, Tuple

from core.exceptions import GenerationError
from core.interfaces import GenerationConfig, GenerationService, ReferenceCatalog
from core.models import ItemKind, LineItem, PriceSource, ReferenceEntry

logger = logging.getLogger(__name__)


# keyword (accent-free, lower case) -> reference descriptions drafted for it
KEYWORD_MAP: Dict[str, Tuple[str, ...]] = {
    "terreno": ("Limpeza manual do terreno",),
    "fundacao": ("Escavação manual de valas", "Concreto usinado fck 25 MPa"),
    "estrutura": ("Armação de aço CA-50", "Forma de madeira para pilares e vigas"),
    "alvenaria": ("Alvenaria de vedação com bloco cerâmico", "Tijolo cerâmico furado 9x19x19cm"),
    "tijolo": ("Tijolo cerâmico furado 9x19x19cm",),
    "parede": ("Alvenaria de vedação com bloco cerâmico", "Tijolo cerâmico furado 9x19x19cm"),
    "porta": ("Porta de madeira semi-oca 80x210cm",),
    "janela": ("Janela de alumínio de correr 120x120cm",),
    "telhado": ("Telha cerâmica tipo colonial",),
    "cobertura": ("Telha cerâmica tipo colonial",),
    "tomada": ("Ponto de tomada 2P+T", "Cabo flexível 2,5mm²"),
    "eletrica": ("Ponto de tomada 2P+T", "Cabo flexível 2,5mm²"),
    "hidraulica": ("Ponto de água fria PVC 25mm",),
    "reboco": ("Chapisco e reboco de parede",),
    "azulejo": ("Revestimento cerâmico de parede tipo A",),
    "contrapiso": ("Contrapiso em argamassa e=4cm",),
    "piso": ("Contrapiso em argamassa e=4cm", "Porcelanato polido 60x60cm"),
    "porcelanato": ("Porcelanato polido 60x60cm",),
    "forro": ("Forro de gesso acartonado",),
    "pintura": ("Pintura látex acrílica duas demãos", "Tinta acrílica premium 18L"),
    "banheiro": ("Bacia sanitária com caixa acoplada", "Ponto de água fria PVC 25mm"),
    "pedreiro": ("Pedreiro",),
    "servente": ("Servente",),
    "limpeza": ("Limpeza final de obra",),
}

DEFAULT_QUANTITY = 1.0

# "300 m2 de pintura", "40 h de pedreiro", "pintura de 300 m2"
_NUMBER = r"(\d+(?:[.,]\d+)?)"
_UNIT = r"(?:m²|m2|m³|m3|m|un|unid\w*|pts?|h|horas?|kg)?"
_BEFORE = re.compile(_NUMBER + r"\s*" + _UNIT + r"\s*(?:de|do|da)?\s*$")
_AFTER = re.compile(r"^\s*(?:de\s+|com\s+)?" + _NUMBER + r"\s*" + _UNIT)


def _fold(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text or "")
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).lower()


def _to_float(raw: str) -> float:
    return float(raw.replace(",", "."))


def _find_keyword(text: str, keyword: str) -> Optional[re.Match]:
    return re.search(r"\b" + re.escape(keyword), text)


def quantity_near(text: str, keyword: str) -> Optional[float]:
    """Quantity written right before or right after the keyword, if any."""
    match = _find_keyword(text, keyword)
    if match is None:
        return None
    before = _BEFORE.search(text[: match.start()])
    if before:
        return _to_float(before.group(1))
    after = _AFTER.match(text[match.end():])
    if after:
        return _to_float(after.group(1))
    return None


def _source_for(config: GenerationConfig) -> PriceSource:
    if config.price_source_a:
        return PriceSource.REFERENCE_A
    if config.price_source_b:
        return PriceSource.REFERENCE_B
    return PriceSource.ESTIMATED


class CatalogDraftGenerator(GenerationService):
    """
    Offline generation service: drafts line items by matching keywords of
    the free-text description against the reference price table.
    """

    def __init__(self, catalog: ReferenceCatalog, keyword_map: Dict[str, Tuple[str, ...]] | None = None):
        self._catalog = catalog
        self._keyword_map = keyword_map if keyword_map is not None else KEYWORD_MAP

    def generate(self, description: str, config: GenerationConfig) -> List[LineItem]:
        text = _fold(description)
        source = _source_for(config)
        drafted: Dict[str, LineItem] = {}

        for keyword, descriptions in self._keyword_map.items():
            if _find_keyword(text, keyword) is None:
                continue
            quantity = quantity_near(text, keyword)
            for ref_description in descriptions:
                if ref_description in drafted:
                    continue
                entry = self._catalog.lookup_by_description(ref_description)
                if entry is None:
                    raise GenerationError(
                        f"Reference entry '{ref_description}' is not available.",
                        code="REFERENCE_MISSING",
                        retryable=False,
                    )
                if entry.kind == ItemKind.MATERIAL and not config.include_material:
                    continue
                drafted[ref_description] = self._draft(entry, quantity, source)

        items = list(drafted.values())
        logger.info("Drafted %s line items from description (%s chars)", len(items), len(description or ""))
        return items

    @staticmethod
    def _draft(entry: ReferenceEntry, quantity: Optional[float], source: PriceSource) -> LineItem:
        if source == PriceSource.ESTIMATED:
            unit_price = entry.price_a
        else:
            unit_price = entry.price_for(source)
        return LineItem.create(
            description=entry.description,
            unit=entry.unit,
            quantity=quantity if quantity is not None else DEFAULT_QUANTITY,
            unit_price=unit_price,
            source=source,
            kind=entry.kind,
            category=entry.category,
            daily_productivity=entry.daily_productivity,
        )


__all__ = ["CatalogDraftGenerator", "KEYWORD_MAP", "quantity_near"]
