# main.py
from __future__ import annotations

import argparse
import getpass
import logging
import sys
from typing import Dict, Optional

from core.exceptions import DomainError
from core.models import PriceSource
from core.reporting.contexts import CompanyProfile
from core.domain.formatting import fmt_brl, fmt_date_br, fmt_quantity
from core.services.auth import AuthGate
from core.services.editor import BudgetEditorService
from core.services.history import BudgetHistoryService
from infra.catalog import StaticReferenceCatalog
from infra.db.base import create_db_engine, init_schema, make_session_factory
from infra.db.budget import SqlAlchemyBudgetRepository
from infra.generation import CatalogDraftGenerator
from infra.logging_config import setup_logging
from infra.settings import AppSettings, load_settings

logger = logging.getLogger(__name__)


def build_services(settings: AppSettings | None = None, db_url: str | None = None) -> Dict[str, object]:
    settings = settings or load_settings()
    url = db_url or settings.db_url
    if db_url is None:
        settings.db_path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(url)
    init_schema(engine)
    session = make_session_factory(engine)()

    budget_repo = SqlAlchemyBudgetRepository(session)
    history = BudgetHistoryService(session, budget_repo)

    catalog = StaticReferenceCatalog()
    generator = CatalogDraftGenerator(catalog)

    company = CompanyProfile(
        name=settings.company_name,
        subtitle=settings.company_subtitle,
        footer=settings.company_footer,
    )
    editor = BudgetEditorService(
        catalog,
        generator=generator,
        history=history,
        price_source=settings.price_source,
        include_material=settings.include_material,
        default_payment_terms=settings.payment_terms,
        company=company,
    )
    auth_gate = AuthGate.from_plain(settings.admin_email, settings.admin_password)

    return {
        "settings": settings,
        "session": session,
        "catalog": catalog,
        "generator": generator,
        "budget_repo": budget_repo,
        "history": history,
        "editor": editor,
        "auth_gate": auth_gate,
    }


def _login(services: Dict[str, object], email: Optional[str], password: Optional[str]) -> bool:
    gate: AuthGate = services["auth_gate"]
    email = email or input("E-mail: ")
    password = password if password is not None else getpass.getpass("Senha: ")
    if not gate.authenticate(email, password):
        print("Credenciais inválidas.", file=sys.stderr)
        return False
    return True


def _print_budget(editor: BudgetEditorService) -> None:
    for item in editor.store:
        print(
            f"{item.category:<32} {item.description:<45} "
            f"{fmt_quantity(item.quantity):>10} {item.unit:<4} "
            f"{fmt_brl(item.unit_price):>14} {fmt_brl(item.total):>16}"
        )
    print(f"{'TOTAL':<32} {fmt_brl(editor.store.grand_total()):>92}")


def _print_schedule(editor: BudgetEditorService) -> None:
    for task in editor.schedule:
        print(
            f"{fmt_date_br(task.start_date)} - {fmt_date_br(task.end_date)} "
            f"({task.duration_days:>3}d) {task.description}"
        )


def cmd_estimate(services, args) -> int:
    editor: BudgetEditorService = services["editor"]
    if args.no_material:
        editor.include_material = False
    editor.set_price_source(PriceSource.REFERENCE_B if args.source == "B" else PriceSource.REFERENCE_A)

    items = editor.generate_from_description(args.description)
    if not items:
        print("Nenhum item reconhecido na descrição.")
        return 1

    if args.optimize:
        plan = editor.scan_optimizations()
        for strategy in plan.strategies:
            print(f"* {strategy.title}: {strategy.description} ({fmt_brl(strategy.savings)})")
        editor.apply_optimizations(plan.selected())

    _print_budget(editor)
    editor.regenerate_schedule()
    _print_schedule(editor)

    if args.save:
        if not _login(services, args.email, args.password):
            return 2
        budget = editor.save_budget(args.save)
        print(f"Orçamento salvo: {budget.id}")
    return 0


def cmd_search(services, args) -> int:
    editor: BudgetEditorService = services["editor"]
    source = PriceSource.REFERENCE_B if args.source == "B" else PriceSource.REFERENCE_A
    for entry in editor.search_reference(args.query):
        print(f"{entry.description:<45} {entry.unit:<4} {fmt_brl(entry.price_for(source)):>14}  {entry.category}")
    return 0


def cmd_history(services, args) -> int:
    if not _login(services, args.email, args.password):
        return 2
    editor: BudgetEditorService = services["editor"]
    if args.delete:
        editor.delete_saved_budget(args.delete)
        print(f"Orçamento removido: {args.delete}")
        return 0
    for budget in editor.list_saved_budgets():
        print(
            f"{budget.id}  {fmt_date_br(budget.created_on)}  {budget.client_name:<30} "
            f"{fmt_brl(budget.total_value):>16}  {budget.status.value}"
        )
    return 0


def cmd_export(services, args) -> int:
    if not _login(services, args.email, args.password):
        return 2
    editor: BudgetEditorService = services["editor"]
    settings: AppSettings = services["settings"]
    editor.load_budget(args.budget_id)
    path = editor.export_pdf(
        args.out or settings.export_dir,
        logo_path=args.logo,
        qr_code_path=args.qr,
        include_gantt=not args.no_gantt,
    )
    print(f"PDF gerado: {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="budget-planner", description="Orçamentos e cronogramas de obra")
    parser.add_argument("--db-url", help="SQLAlchemy database URL (defaults to the per-user SQLite file)")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_login(p: argparse.ArgumentParser) -> None:
        p.add_argument("--email")
        p.add_argument("--password")

    estimate = sub.add_parser("estimate", help="Draft a budget from a free-text description")
    estimate.add_argument("description")
    estimate.add_argument("--source", choices=["A", "B"], default=None)
    estimate.add_argument("--no-material", action="store_true")
    estimate.add_argument("--optimize", action="store_true")
    estimate.add_argument("--save", metavar="CLIENT")
    add_login(estimate)
    estimate.set_defaults(func=cmd_estimate)

    search = sub.add_parser("search", help="Search the reference price table")
    search.add_argument("query")
    search.add_argument("--source", choices=["A", "B"], default="A")
    search.set_defaults(func=cmd_search)

    history = sub.add_parser("history", help="List or delete saved budgets")
    history.add_argument("--delete", metavar="BUDGET_ID")
    add_login(history)
    history.set_defaults(func=cmd_history)

    export = sub.add_parser("export", help="Export a saved budget to PDF")
    export.add_argument("budget_id")
    export.add_argument("--out")
    export.add_argument("--logo")
    export.add_argument("--qr")
    export.add_argument("--no-gantt", action="store_true")
    add_login(export)
    export.set_defaults(func=cmd_export)

    return parser


def main(argv=None) -> int:
    settings = load_settings()
    setup_logging(settings.log_level)

    args = build_parser().parse_args(argv)
    if getattr(args, "source", "unset") is None:
        args.source = "B" if settings.price_source == PriceSource.REFERENCE_B else "A"

    services = build_services(settings, db_url=args.db_url)
    try:
        return args.func(services, args)
    except DomainError as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(f"Erro: {exc}", file=sys.stderr)
        return 1
    finally:
        services["session"].close()


if __name__ == "__main__":
    sys.exit(main())
