"""Reporting API wrappers around renderer classes."""

import logging
import re
import tempfile
from contextlib import suppress
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import List, Optional

from core.models import ScheduleTask
from core.reporting.contexts import BudgetReportContext
from core.reporting.renderers.gantt import ScheduleGanttRenderer
from core.reporting.renderers.pdf import BudgetPdfRenderer


logger = logging.getLogger(__name__)


def _ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _cleanup_temp_artifact(path: Path | None, temp_dir: Path | None = None) -> None:
    if path:
        with suppress(FileNotFoundError, PermissionError, OSError):
            path.unlink()

    parent = temp_dir if temp_dir is not None else (path.parent if path else None)
    if parent is None:
        return
    if parent.exists():
        with suppress(FileNotFoundError, PermissionError, OSError):
            if not any(parent.iterdir()):
                parent.rmdir()


def budget_pdf_filename(client_name: Optional[str], as_of: date) -> str:
    if client_name and client_name.strip():
        safe = re.sub(r"\s+", "_", client_name.strip())
        safe = re.sub(r"[\\/:*?\"<>|]", "", safe)
        return f"Orcamento_{safe}.pdf"
    return f"Orcamento_{as_of.strftime('%d-%m-%Y')}.pdf"


def generate_gantt_png(tasks: List[ScheduleTask], output_path: str | Path) -> Path:
    return ScheduleGanttRenderer().render(list(tasks), _ensure_parent(Path(output_path)))


def export_budget_pdf(
    ctx: BudgetReportContext,
    output_dir: str | Path,
    *,
    include_gantt: bool = True,
) -> Path:
    output_path = _ensure_parent(Path(output_dir) / budget_pdf_filename(ctx.client_name, ctx.as_of))

    gantt_path: Path | None = None
    temp_dir: Path | None = None
    try:
        if include_gantt and ctx.schedule:
            temp_dir = Path(tempfile.mkdtemp(prefix="budget_gantt_"))
            gantt_path = generate_gantt_png(ctx.schedule, temp_dir / "gantt.png")
            ctx = replace(ctx, gantt_png_path=str(gantt_path))
        BudgetPdfRenderer().render(ctx, output_path)
    finally:
        _cleanup_temp_artifact(gantt_path, temp_dir)

    logger.info("Exported budget PDF to %s", output_path)
    return output_path


__all__ = ["budget_pdf_filename", "generate_gantt_png", "export_budget_pdf"]
