from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import (
    Image,
    PageBreak,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from core.models import ScheduleStatus
from core.reporting.contexts import BudgetReportContext
from core.domain.formatting import fmt_brl, fmt_date_br, fmt_quantity
from core.reporting.grouping import group_by_category


NAVY = colors.HexColor("#0F172A")
GOLD = colors.HexColor("#DAA520")
TABLE_HEAD = colors.Color(0, 0, 128 / 255)

STATUS_LABELS = {
    ScheduleStatus.PLANNED: "PLANEJADO",
    ScheduleStatus.IN_PROGRESS: "EM ANDAMENTO",
    ScheduleStatus.DONE: "CONCLUÍDO",
    ScheduleStatus.DELAYED: "ATRASADO",
}


def _multiline(text: str) -> str:
    return escape(text or "").replace("\n", "<br/>")


class BudgetPdfRenderer:
    def render(self, ctx: BudgetReportContext, output_path: Path) -> Path:
        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=A4,
            leftMargin=40,
            rightMargin=40,
            topMargin=40,
            bottomMargin=50,
            title=f"Orçamento - {ctx.client_name or ctx.company.name}",
        )
        styles = getSampleStyleSheet()
        self._styles = {
            "brand": ParagraphStyle("brand", parent=styles["Title"], alignment=0, textColor=NAVY, fontSize=22),
            "subtitle": ParagraphStyle("subtitle", parent=styles["Normal"], textColor=NAVY),
            "page_title": ParagraphStyle(
                "page_title", parent=styles["Heading2"], alignment=TA_RIGHT, textColor=NAVY
            ),
            "meta": ParagraphStyle("meta", parent=styles["Normal"], alignment=TA_RIGHT),
            "cell": ParagraphStyle("cell", parent=styles["Normal"], fontSize=9, leading=11),
            "total": ParagraphStyle(
                "total", parent=styles["Heading3"], alignment=TA_RIGHT, textColor=NAVY
            ),
            "section": ParagraphStyle("section", parent=styles["Heading4"], textColor=TABLE_HEAD),
            "terms": ParagraphStyle("terms", parent=styles["Normal"], fontSize=9, textColor=colors.HexColor("#3C3C3C")),
            "caption": ParagraphStyle("caption", parent=styles["Normal"], fontSize=8, alignment=TA_CENTER),
            "sign": ParagraphStyle("sign", parent=styles["Normal"], alignment=TA_CENTER),
        }

        story = []

        # ---------------- Budget page ----------------
        story.extend(self._header(ctx, "ORÇAMENTO DE OBRA"))
        story.append(self._items_table(ctx))
        story.append(Spacer(1, 10))
        story.append(Paragraph(f"VALOR TOTAL: {fmt_brl(ctx.total_amount)}", self._styles["total"]))
        story.append(Spacer(1, 14))
        story.extend(self._payment_terms(ctx))

        # ---------------- Schedule page ----------------
        if ctx.schedule:
            story.append(PageBreak())
            story.extend(self._header(ctx, "CRONOGRAMA DE EXECUÇÃO"))
            story.append(self._schedule_table(ctx))
            if ctx.gantt_png_path:
                story.append(Spacer(1, 12))
                img = Image(ctx.gantt_png_path)
                img._restrictSize(515, 260)
                story.append(img)
            story.append(Spacer(1, 48))
            story.append(Paragraph("_" * 54, self._styles["sign"]))
            story.append(Paragraph("De acordo (Cliente)", self._styles["sign"]))

        footer = ctx.company.footer
        doc.build(
            story,
            onFirstPage=lambda canvas, d: self._draw_footer(canvas, d, footer),
            onLaterPages=lambda canvas, d: self._draw_footer(canvas, d, footer),
        )
        return output_path

    def _header(self, ctx: BudgetReportContext, page_title: str) -> list:
        if ctx.logo_path:
            brand = Image(ctx.logo_path)
            brand._restrictSize(70, 70)
        else:
            brand = [
                Paragraph(escape(ctx.company.name.upper()), self._styles["brand"]),
                Paragraph(escape(ctx.company.subtitle), self._styles["subtitle"]),
            ]

        meta = [
            Paragraph(page_title, self._styles["page_title"]),
            Paragraph(f"Data: {fmt_date_br(ctx.as_of)}", self._styles["meta"]),
        ]
        if ctx.client_name:
            meta.append(Paragraph(f"Cliente: {escape(ctx.client_name)}", self._styles["meta"]))

        header = Table([[brand, meta]], colWidths=[255, 260])
        header.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))
        return [header, Spacer(1, 16)]

    def _items_table(self, ctx: BudgetReportContext) -> Table:
        data = [["Item / Descrição", "Und.", "Qtd.", "Preço Unit.", "Total"]]
        style = [
            ("BACKGROUND", (0, 0), (-1, 0), TABLE_HEAD),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), 9),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("ALIGN", (1, 1), (2, -1), "CENTER"),
            ("ALIGN", (3, 1), (4, -1), "RIGHT"),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ]

        for group in group_by_category(ctx.items):
            row = len(data)
            data.append([group.category, "", "", "", ""])
            style.extend([
                ("SPAN", (0, row), (-1, row)),
                ("BACKGROUND", (0, row), (-1, row), colors.Color(240 / 255, 240 / 255, 240 / 255)),
                ("TEXTCOLOR", (0, row), (-1, row), colors.HexColor("#1E293B")),
                ("FONTNAME", (0, row), (-1, row), "Helvetica-Bold"),
                ("ALIGN", (0, row), (-1, row), "LEFT"),
            ])
            for item in group.items:
                data.append([
                    Paragraph(escape(item.description), self._styles["cell"]),
                    item.unit,
                    fmt_quantity(item.quantity),
                    fmt_brl(item.unit_price),
                    fmt_brl(item.total),
                ])

        table = Table(data, colWidths=[250, 40, 50, 80, 95], repeatRows=1)
        table.setStyle(TableStyle(style))
        return table

    def _payment_terms(self, ctx: BudgetReportContext) -> list:
        title = Paragraph("Condições de Pagamento e Dados Bancários", self._styles["section"])
        terms = Paragraph(_multiline(ctx.payment_terms), self._styles["terms"])
        if not ctx.qr_code_path:
            return [title, Spacer(1, 4), terms]

        qr = Image(ctx.qr_code_path)
        qr._restrictSize(100, 100)
        block = Table(
            [[terms, [qr, Paragraph("Escaneie para Pagar (Pix)", self._styles["caption"])]]],
            colWidths=[395, 120],
        )
        block.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))
        return [title, Spacer(1, 4), block]

    def _schedule_table(self, ctx: BudgetReportContext) -> Table:
        data = [["Etapa / Tarefa", "Início", "Fim", "Dias", "Status"]]
        for task in ctx.schedule:
            data.append([
                Paragraph(escape(task.description), self._styles["cell"]),
                fmt_date_br(task.start_date),
                fmt_date_br(task.end_date),
                task.duration_days,
                STATUS_LABELS.get(task.status, str(task.status)),
            ])
        table = Table(data, colWidths=[235, 70, 70, 40, 100], repeatRows=1)
        table.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), GOLD),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), 9),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("ALIGN", (1, 1), (-1, -1), "CENTER"),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ]))
        return table

    @staticmethod
    def _draw_footer(canvas, doc, footer: str) -> None:
        if not footer:
            return
        canvas.saveState()
        canvas.setFont("Helvetica", 9)
        canvas.setFillColor(colors.HexColor("#444444"))
        canvas.drawCentredString(doc.pagesize[0] / 2, 25, footer)
        canvas.restoreState()
