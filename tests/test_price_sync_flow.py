import pytest

from core.exceptions import ValidationError
from core.models import LineItem, PriceSource
from core.services.budget import LineItemStore
from core.services.pricing import PriceSynchronizer

TIJOLO = "Tijolo cerâmico furado 9x19x19cm"


def test_switching_to_market_prices_reprices_matching_items(services):
    editor = services["editor"]
    editor.add_from_reference(TIJOLO)
    item = editor.store.items()[0]
    editor.update_item(item.id, "quantity", 1000)

    assert editor.store.get(item.id).total == pytest.approx(680.0)

    changed = editor.set_price_source(PriceSource.REFERENCE_B)

    repriced = editor.store.get(item.id)
    assert changed == 1
    assert repriced.unit_price == pytest.approx(0.62)
    assert repriced.total == pytest.approx(620.0)
    assert repriced.source == PriceSource.REFERENCE_B
    assert repriced.quantity == 1000


def test_flipping_back_restores_original_prices(services):
    editor = services["editor"]
    editor.add_from_reference(TIJOLO)
    editor.add_from_reference("Pintura látex acrílica duas demãos")
    before = [(i.unit_price, i.total, i.source) for i in editor.store]

    editor.toggle_price_source()
    editor.toggle_price_source()

    after = [(i.unit_price, i.total, i.source) for i in editor.store]
    assert editor.price_source == PriceSource.REFERENCE_A
    assert after == before


def test_optimized_labor_keeps_its_price_across_source_flips(services):
    editor = services["editor"]
    editor.add_from_reference("Pintura látex acrílica duas demãos")
    item = editor.store.items()[0]
    editor.update_item(item.id, "quantity", 100)
    labor = [s for s in editor.scan_optimizations().strategies if s.id == "labor-bdi"]
    editor.apply_optimizations(labor)
    optimized = editor.store.get(item.id)
    assert optimized.optimized
    assert optimized.total == pytest.approx(1850.0 * 0.95)
    before = [(i.unit_price, i.total, i.source, i.optimized) for i in editor.store]

    editor.toggle_price_source()
    assert [(i.unit_price, i.total, i.source, i.optimized) for i in editor.store] == before
    editor.toggle_price_source()
    assert [(i.unit_price, i.total, i.source, i.optimized) for i in editor.store] == before


def test_same_source_is_a_noop(services):
    editor = services["editor"]
    editor.add_from_reference(TIJOLO)

    assert editor.set_price_source(PriceSource.REFERENCE_A) == 0


def test_optimized_and_unmatched_items_are_not_repriced(catalog):
    optimized = LineItem.create(TIJOLO, "un", 100, 0.50, optimized=True)
    custom = LineItem.create("Serviço sob medida", "vb", 1, 1234.0)
    store = LineItemStore([optimized, custom])

    changed = PriceSynchronizer(catalog).synchronize(store, PriceSource.REFERENCE_B)

    assert changed == 0
    assert store.get(optimized.id).unit_price == pytest.approx(0.50)
    assert store.get(custom.id).total == pytest.approx(1234.0)
    assert store.get(custom.id).source == PriceSource.ESTIMATED


def test_estimated_is_not_a_valid_target_source(catalog):
    with pytest.raises(ValidationError) as exc:
        PriceSynchronizer(catalog).reprice([], PriceSource.ESTIMATED)
    assert exc.value.code == "PRICE_SOURCE_INVALID"
