from datetime import date

import pytest
from sqlalchemy import update
from sqlalchemy.exc import OperationalError

from core.events.domain_events import domain_events
from core.exceptions import BusinessRuleError, NotFoundError, PersistenceError, ValidationError
from core.models import BudgetStatus, LineItem, SavedBudget
from core.services.editor import BudgetEditorService
from infra.db.models import SavedBudgetORM

TODAY = date(2024, 3, 4)


def _budget(client, *totals):
    items = [LineItem.create(f"Serviço {i}", "vb", 1, total) for i, total in enumerate(totals)]
    return SavedBudget.create(client, items, schedule=[], payment_terms="PIX")


def test_save_and_list_newest_first(services):
    history = services["history"]

    first = history.save_budget(_budget("Maria", 100.0, 50.0))
    second = history.save_budget(_budget("João", 900.0))

    budgets = history.list_budgets()
    assert [b.id for b in budgets] == [second.id, first.id]
    assert budgets[1].total_value == pytest.approx(150.0)
    assert budgets[1].status == BudgetStatus.DRAFT
    assert [i.description for i in budgets[1].items] == ["Serviço 0", "Serviço 1"]


def test_save_rejects_empty_budget_and_blank_client(services):
    history = services["history"]

    with pytest.raises(ValidationError) as no_items:
        history.save_budget(SavedBudget.create("Maria", [], []))
    assert no_items.value.code == "NO_ITEMS"

    with pytest.raises(ValidationError) as no_client:
        history.save_budget(_budget("   ", 10.0))
    assert no_client.value.code == "CLIENT_NAME_REQUIRED"
    assert history.list_budgets() == []


def test_delete_budget(services):
    history = services["history"]
    keep = history.save_budget(_budget("Maria", 100.0))
    drop = history.save_budget(_budget("João", 200.0))

    history.delete_budget(drop.id)

    assert [b.id for b in history.list_budgets()] == [keep.id]
    with pytest.raises(NotFoundError):
        history.delete_budget(drop.id)


def test_corrupt_stored_list_reads_as_empty(services):
    history = services["history"]
    session = services["session"]
    history.save_budget(_budget("Maria", 100.0))

    session.execute(update(SavedBudgetORM).values(status="NOT-A-STATUS"))
    session.commit()

    assert history.list_budgets() == []


def test_failed_write_rolls_back_and_raises(services, monkeypatch):
    history = services["history"]
    repo = services["budget_repo"]
    kept = history.save_budget(_budget("Maria", 100.0))

    def _boom(_budgets):
        raise OperationalError("INSERT", {}, Exception("disk full"))

    monkeypatch.setattr(repo, "save_budget_list", _boom)

    with pytest.raises(PersistenceError) as exc:
        history.save_budget(_budget("João", 10.0))
    assert exc.value.code == "SAVE_FAILED"

    monkeypatch.undo()
    assert [b.id for b in history.list_budgets()] == [kept.id]


def test_writes_emit_budgets_changed(services):
    seen: list[int] = []
    domain_events.budgets_changed.connect(seen.append)
    history = services["history"]

    saved = history.save_budget(_budget("Maria", 100.0))
    history.save_budget(_budget("João", 100.0))
    history.delete_budget(saved.id)

    assert seen == [1, 2, 1]


def test_editor_save_and_load_round_trip(services):
    editor = services["editor"]
    editor.add_from_reference("Tijolo cerâmico furado 9x19x19cm")
    editor.add_generic("Mobilização")
    editor.payment_terms = "50% na entrada"

    saved = editor.save_budget("  Maria Souza ", today=TODAY)

    assert saved.client_name == "Maria Souza"
    assert len(saved.schedule) == 2
    assert saved.total_value == pytest.approx(editor.store.grand_total())

    editor.new_budget()
    assert len(editor.store) == 0
    assert editor.schedule == []

    loaded = editor.load_budget(saved.id)

    assert [i.id for i in editor.store] == [i.id for i in saved.items]
    assert editor.schedule == saved.schedule
    assert editor.payment_terms == "50% na entrada"
    assert editor.client_name == "Maria Souza"
    assert loaded.id == saved.id


def test_editor_load_unknown_budget(services):
    with pytest.raises(NotFoundError) as exc:
        services["editor"].load_budget("missing")
    assert exc.value.code == "BUDGET_NOT_FOUND"


def test_editor_without_history(catalog):
    editor = BudgetEditorService(catalog)
    with pytest.raises(BusinessRuleError) as exc:
        editor.list_saved_budgets()
    assert exc.value.code == "HISTORY_MISSING"
