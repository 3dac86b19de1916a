# infra/catalog/reference_table.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from core.interfaces import ReferenceCatalog
from core.models import ItemKind, ReferenceEntry


MATERIAL = ItemKind.MATERIAL
LABOR = ItemKind.LABOR
LUMP_SUM = ItemKind.LUMP_SUM

# (id, description, unit, price A, price B, kind, category, units per day)
_REFERENCE_ROWS = [
    ("ref-001", "Limpeza manual do terreno", "m²", 3.10, 2.80, LABOR, "SERVIÇOS PRELIMINARES", 50),
    ("ref-002", "Locação de obra com gabarito de madeira", "m²", 12.40, 11.00, LABOR, "SERVIÇOS PRELIMINARES", 40),
    ("ref-003", "Escavação manual de valas", "m³", 48.90, 45.00, LABOR, "INFRAESTRUTURA / FUNDAÇÃO", 3),
    ("ref-004", "Concreto usinado fck 25 MPa", "m³", 520.00, 495.00, MATERIAL, "INFRAESTRUTURA / FUNDAÇÃO", 3),
    ("ref-005", "Armação de aço CA-50", "kg", 11.80, 10.90, MATERIAL, "SUPERESTRUTURA", 120),
    ("ref-006", "Forma de madeira para pilares e vigas", "m²", 84.30, 79.00, LABOR, "SUPERESTRUTURA", 10),
    ("ref-007", "Tijolo cerâmico furado 9x19x19cm", "un", 0.68, 0.62, MATERIAL, "ALVENARIA E VEDAÇÕES", 600),
    ("ref-008", "Alvenaria de vedação com bloco cerâmico", "m²", 68.50, 62.00, LABOR, "ALVENARIA E VEDAÇÕES", 8),
    ("ref-009", "Porta de madeira semi-oca 80x210cm", "un", 420.00, 380.00, MATERIAL, "ESQUADRIAS", 4),
    ("ref-010", "Janela de alumínio de correr 120x120cm", "un", 690.00, 640.00, MATERIAL, "ESQUADRIAS", 5),
    ("ref-011", "Telha cerâmica tipo colonial", "m²", 58.00, 52.00, MATERIAL, "COBERTURA", 15),
    ("ref-012", "Ponto de tomada 2P+T", "pt", 95.00, 88.00, LABOR, "INSTALAÇÕES ELÉTRICAS", 6),
    ("ref-013", "Cabo flexível 2,5mm²", "m", 3.90, 3.40, MATERIAL, "INSTALAÇÕES ELÉTRICAS", 150),
    ("ref-014", "Ponto de água fria PVC 25mm", "pt", 110.00, 102.00, LABOR, "INSTALAÇÕES HIDROSSANITÁRIAS", 4),
    ("ref-015", "Chapisco e reboco de parede", "m²", 32.50, 29.00, LABOR, "REVESTIMENTOS DE PAREDE", 12),
    ("ref-016", "Revestimento cerâmico de parede tipo A", "m²", 64.00, 58.00, MATERIAL, "REVESTIMENTOS DE PAREDE", 10),
    ("ref-017", "Contrapiso em argamassa e=4cm", "m²", 38.00, 35.00, LABOR, "REVESTIMENTOS DE PISO", 20),
    ("ref-018", "Porcelanato polido 60x60cm", "m²", 89.90, 82.00, MATERIAL, "REVESTIMENTOS DE PISO", 10),
    ("ref-019", "Forro de gesso acartonado", "m²", 72.00, 66.00, LABOR, "FORROS", 15),
    ("ref-020", "Pintura látex acrílica duas demãos", "m²", 18.50, 16.90, LABOR, "PINTURA", 30),
    ("ref-021", "Tinta acrílica premium 18L", "gl", 389.00, 355.00, MATERIAL, "PINTURA", 12),
    ("ref-022", "Bacia sanitária com caixa acoplada", "un", 610.00, 560.00, MATERIAL, "LOUÇAS E METAIS", 4),
    ("ref-023", "Pedreiro", "h", 27.40, 25.00, LABOR, "SERVIÇOS COMPLEMENTARES", None),
    ("ref-024", "Servente", "h", 19.80, 18.00, LABOR, "SERVIÇOS COMPLEMENTARES", None),
    ("ref-025", "Limpeza final de obra", "m²", 6.20, 5.50, LABOR, "SERVIÇOS COMPLEMENTARES", 60),
]


def _build_entries(rows: Iterable[tuple]) -> List[ReferenceEntry]:
    return [
        ReferenceEntry(
            id=row_id,
            description=description,
            unit=unit,
            price_a=price_a,
            price_b=price_b,
            kind=kind,
            category=category,
            daily_productivity=productivity,
        )
        for row_id, description, unit, price_a, price_b, kind, category, productivity in rows
    ]


class StaticReferenceCatalog(ReferenceCatalog):
    """Read-only reference price table kept in memory."""

    def __init__(self, entries: Iterable[ReferenceEntry] | None = None):
        self._entries: List[ReferenceEntry] = (
            list(entries) if entries is not None else _build_entries(_REFERENCE_ROWS)
        )
        self._by_description: Dict[str, ReferenceEntry] = {e.description: e for e in self._entries}

    def lookup_by_description(self, description: str) -> Optional[ReferenceEntry]:
        return self._by_description.get(description)

    def search_by_text(self, query: str) -> List[ReferenceEntry]:
        normalized = (query or "").strip().lower()
        if not normalized:
            return []
        return [e for e in self._entries if normalized in e.description.lower()]

    def list_all(self) -> List[ReferenceEntry]:
        return list(self._entries)


__all__ = ["StaticReferenceCatalog"]
