import pytest

from core.exceptions import ValidationError
from core.models import ItemKind, LineItem, StrategyKind
from core.services.optimization import DISCOUNT_DESCRIPTION, OptimizationEngine


def _material(description, quantity, price):
    return LineItem.create(description, "m²", quantity, price, kind=ItemKind.MATERIAL, category="REVESTIMENTOS DE PISO")


def _labor(description, quantity, price):
    return LineItem.create(description, "m²", quantity, price, kind=ItemKind.LABOR, category="PINTURA")


def test_premium_material_swap_saves_fifteen_percent():
    porcelanato = _material("Porcelanato polido 60x60cm", 100, 89.90)
    ceramica = _material("Cerâmica comum", 50, 30.0)
    engine = OptimizationEngine()

    plan = engine.scan([porcelanato, ceramica])
    swaps = [s for s in plan.strategies if s.kind == StrategyKind.MATERIAL_SWAP]

    assert [s.id for s in swaps] == [f"swap-{porcelanato.id}"]
    assert swaps[0].savings == pytest.approx(8990.0 * 0.15)

    result = engine.apply([porcelanato, ceramica], swaps)
    swapped = next(i for i in result if i.id == porcelanato.id)

    assert swapped.total == pytest.approx(8990.0 * 0.85)
    assert swapped.unit_price == pytest.approx(89.90 * 0.85)
    assert swapped.description == "Standard polido 60x60cm"
    assert swapped.optimized
    assert next(i for i in result if i.id == ceramica.id) == ceramica


def test_premium_match_is_case_insensitive_and_material_only():
    engine = OptimizationEngine()
    items = [
        _material("Revestimento cerâmico TIPO A", 10, 64.0),
        _material("Tinta acrílica Premium 18L", 2, 389.0),
        _labor("Assentamento de porcelanato", 10, 40.0),
    ]

    swaps = [s for s in engine.scan(items).strategies if s.kind == StrategyKind.MATERIAL_SWAP]

    assert [s.target_ids for s in swaps] == [(items[0].id,), (items[1].id,)]


def test_labor_discount_is_one_strategy_over_all_labor():
    a = _labor("Pintura", 100, 10.0)
    b = _labor("Reboco", 50, 10.0)
    engine = OptimizationEngine()

    plan = engine.scan([a, b])
    labor = [s for s in plan.strategies if s.kind == StrategyKind.LABOR_DISCOUNT]

    assert len(labor) == 1
    assert labor[0].id == "labor-bdi"
    assert labor[0].savings == pytest.approx(75.0)

    result = engine.apply([a, b], labor)
    assert [i.total for i in result] == pytest.approx([950.0, 475.0])
    assert all(i.optimized for i in result)


def test_rounding_adds_discount_line_to_close_the_hundred():
    item = LineItem.create("Empreitada global", "vb", 1, 1537.40)
    engine = OptimizationEngine()

    plan = engine.scan([item])

    assert [s.id for s in plan.strategies] == ["rounding"]
    assert plan.strategies[0].savings == pytest.approx(37.40)
    assert plan.projected_total == pytest.approx(1500.0)

    result = engine.apply([item], plan.selected())
    discount = result[-1]

    assert discount.description == DISCOUNT_DESCRIPTION
    assert discount.unit == "vb"
    assert discount.quantity == 1
    assert discount.total == pytest.approx(-37.40)
    assert discount.category == "SERVIÇOS COMPLEMENTARES"
    assert sum(i.total for i in result) == pytest.approx(1500.0)
    assert engine.scan(result).strategies == []


@pytest.mark.parametrize("total", [500.0, 480.5, 1500.0])
def test_no_rounding_for_small_or_round_totals(total):
    plan = OptimizationEngine().scan([LineItem.create("Serviço", "vb", 1, total)])
    assert plan.strategies == []


def test_total_a_fraction_under_the_hundred_is_already_round():
    item = LineItem.create("Serviço", "vb", 1, 1599.996)
    engine = OptimizationEngine()

    assert engine.scan([item]).strategies == []


@pytest.mark.parametrize("total", [1599.994, 1537.40, 2100.01, 999.99])
def test_rounding_savings_stay_below_the_hundred(total):
    plan = OptimizationEngine().scan([LineItem.create("Serviço", "vb", 1, total)])
    rounding = [s for s in plan.strategies if s.kind == StrategyKind.ROUNDING]

    assert len(rounding) == 1
    assert 0 < rounding[0].savings < 100
    assert round(plan.current_total - rounding[0].savings, 2) % 100 == 0


def test_reapplying_a_plan_does_not_compound_discounts():
    porcelanato = _material("Porcelanato polido 60x60cm", 10, 100.0)
    pintura = _labor("Pintura", 10, 10.0)
    engine = OptimizationEngine()
    plan = [s for s in engine.scan([porcelanato, pintura]).strategies if s.kind != StrategyKind.ROUNDING]

    once = engine.apply([porcelanato, pintura], plan)
    twice = engine.apply(once, plan)

    assert [i.total for i in once] == pytest.approx([850.0, 95.0])
    assert [i.total for i in twice] == pytest.approx([850.0, 95.0])
    assert twice[0].description == "Standard polido 60x60cm"


def test_deselected_strategies_are_not_applied():
    porcelanato = _material("Porcelanato polido 60x60cm", 10, 100.0)
    pintura = _labor("Pintura", 10, 10.0)
    engine = OptimizationEngine()

    plan = engine.scan([porcelanato, pintura])
    plan.toggle("labor-bdi")

    assert plan.total_savings == pytest.approx(150.0)
    result = engine.apply([porcelanato, pintura], plan.strategies)

    assert next(i for i in result if i.id == pintura.id).total == pytest.approx(100.0)
    assert next(i for i in result if i.id == porcelanato.id).optimized


def test_optimized_items_are_not_proposed_again():
    items = [_material("Porcelanato polido 60x60cm", 10, 100.0), _labor("Pintura", 40, 10.0)]
    engine = OptimizationEngine()

    once = engine.apply(items, engine.scan(items).strategies)
    kinds = {s.kind for s in engine.scan(once).strategies}

    assert StrategyKind.MATERIAL_SWAP not in kinds
    assert StrategyKind.LABOR_DISCOUNT not in kinds


def test_editor_applies_plan_to_store(services):
    editor = services["editor"]
    editor.add_item(LineItem.create("Empreitada global", "vb", 1, 1537.40))

    plan = editor.scan_optimizations()
    editor.apply_optimizations(plan.selected())

    assert editor.store.grand_total() == pytest.approx(1500.0)
    assert len(editor.store) == 2


def test_editor_scan_requires_items(services):
    with pytest.raises(ValidationError) as exc:
        services["editor"].scan_optimizations()
    assert exc.value.code == "NO_ITEMS"
