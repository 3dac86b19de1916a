from __future__ import annotations

from datetime import date

import pytest
from matplotlib.axes import Axes

from core.exceptions import ValidationError
from core.models import LineItem
from core.reporting import api as reporting_api
from core.reporting.contexts import CompanyProfile
from core.domain.formatting import fmt_brl, fmt_date_br, fmt_quantity
from core.reporting.grouping import group_by_category
from core.reporting.renderers.gantt import ScheduleGanttRenderer

TODAY = date(2024, 3, 4)


def test_money_and_quantity_formatting():
    assert fmt_brl(1234.56) == "R$ 1.234,56"
    assert fmt_brl(-37.4) == "-R$ 37,40"
    assert fmt_brl(0) == "R$ 0,00"
    assert fmt_quantity(300.0) == "300"
    assert fmt_quantity(120.5) == "120,5"
    assert fmt_date_br(TODAY) == "04/03/2024"


def test_pdf_filename_uses_client_or_date():
    assert reporting_api.budget_pdf_filename("Maria Souza", TODAY) == "Orcamento_Maria_Souza.pdf"
    assert reporting_api.budget_pdf_filename("A/B: obra", TODAY) == "Orcamento_AB_obra.pdf"
    assert reporting_api.budget_pdf_filename(None, TODAY) == "Orcamento_04-03-2024.pdf"
    assert reporting_api.budget_pdf_filename("  ", TODAY) == "Orcamento_04-03-2024.pdf"


def test_grouping_follows_phase_order_with_outros_last():
    items = [
        LineItem.create("Extra", "vb", 1, 10.0, category="CATEGORIA NOVA"),
        LineItem.create("Pintura", "m²", 1, 10.0, category="PINTURA"),
        LineItem.create("Limpeza", "m²", 1, 10.0, category="SERVIÇOS PRELIMINARES"),
        LineItem.create("Tinta", "gl", 2, 10.0, category="PINTURA"),
    ]

    groups = group_by_category(items)

    assert [g.category for g in groups] == ["SERVIÇOS PRELIMINARES", "PINTURA", "OUTROS"]
    assert [i.description for i in groups[1].items] == ["Pintura", "Tinta"]
    assert groups[1].subtotal == pytest.approx(30.0)


def test_export_pdf_writes_file(services, tmp_path):
    editor = services["editor"]
    editor.generate_from_description("300 m2 de pintura e 40 h de pedreiro")
    editor.regenerate_schedule(today=TODAY)
    editor.company = CompanyProfile(name="Construtora Teste", footer="Contato: (85) 0000-0000")

    path = editor.export_pdf(tmp_path, client_name="Maria Souza")

    assert path == tmp_path / "Orcamento_Maria_Souza.pdf"
    assert path.exists()
    assert path.read_bytes()[:4] == b"%PDF"


def test_export_without_schedule_or_gantt(services, tmp_path):
    editor = services["editor"]
    editor.add_generic("Mobilização")

    path = editor.export_pdf(tmp_path / "out", include_gantt=False)

    assert path.parent == tmp_path / "out"
    assert path.exists()


def test_export_requires_items(services, tmp_path):
    with pytest.raises(ValidationError) as exc:
        services["editor"].export_pdf(tmp_path)
    assert exc.value.code == "NO_ITEMS"


def test_gantt_png_bars_match_task_durations(services, tmp_path, monkeypatch):
    editor = services["editor"]
    editor.generate_from_description("300 m2 de pintura")
    tasks = editor.regenerate_schedule(today=TODAY)

    widths = []
    original_barh = Axes.barh

    def _spy_barh(self, *args, **kwargs):
        widths.append(args[1] if len(args) > 1 else kwargs.get("width"))
        return original_barh(self, *args, **kwargs)

    monkeypatch.setattr(Axes, "barh", _spy_barh)

    out = reporting_api.generate_gantt_png(tasks, tmp_path / "charts" / "gantt.png")

    assert out.exists()
    assert widths == [t.duration_days for t in tasks]


def test_gantt_renderer_rejects_empty_schedule(tmp_path):
    with pytest.raises(ValueError):
        ScheduleGanttRenderer().render([], tmp_path / "gantt.png")


def test_export_cleans_temporary_gantt(services, tmp_path, monkeypatch):
    editor = services["editor"]
    editor.add_generic("Mobilização")
    editor.regenerate_schedule(today=TODAY)

    produced = []
    original = reporting_api.generate_gantt_png

    def _track(tasks, output_path):
        produced.append(original(tasks, output_path))
        return produced[-1]

    monkeypatch.setattr(reporting_api, "generate_gantt_png", _track)

    editor.export_pdf(tmp_path)

    assert len(produced) == 1
    assert not produced[0].exists()
