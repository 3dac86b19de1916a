from __future__ import annotations

import ast
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]


def _line_count(path: Path) -> int:
    return len(path.read_text(encoding="utf-8", errors="ignore").splitlines())


def _python_files(root: Path):
    for path in root.rglob("*.py"):
        # Keep architecture checks focused on source/test code, not packaged artifacts.
        if "dist" in path.parts or "build" in path.parts:
            continue
        yield path


def _imported_modules(path: Path):
    tree = ast.parse(path.read_text(encoding="utf-8", errors="ignore"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield alias.name
        elif isinstance(node, ast.ImportFrom) and node.level == 0:
            yield node.module or ""


def test_no_python_module_exceeds_hard_line_limit():
    offenders = []
    for path in _python_files(ROOT):
        lines = _line_count(path)
        if lines > 1200:
            offenders.append((str(path.relative_to(ROOT)), lines))
    assert not offenders, f"Modules exceed hard 1200-line limit: {offenders}"


def test_core_layer_does_not_import_infra_layer():
    violations: list[tuple[str, str]] = []
    for path in _python_files(ROOT / "core"):
        for name in _imported_modules(path):
            if name == "infra" or name.startswith("infra."):
                violations.append((str(path.relative_to(ROOT)), name))

    assert not violations, f"Core layer imports infra layer: {violations}"


def test_domain_models_stay_free_of_orm_and_rendering():
    forbidden = ("sqlalchemy", "reportlab", "matplotlib")
    violations: list[tuple[str, str]] = []
    for path in _python_files(ROOT / "core" / "domain"):
        for name in _imported_modules(path):
            if name.split(".")[0] in forbidden:
                violations.append((str(path.relative_to(ROOT)), name))

    assert not violations, f"Domain models import infrastructure libraries: {violations}"


def test_editor_service_is_composed_from_mixins_only():
    text = (ROOT / "core" / "services" / "editor" / "service.py").read_text(encoding="utf-8")

    assert "class BudgetEditorService(" in text
    for mixin in (
        "ItemEditingMixin",
        "GenerationMixin",
        "PricingMixin",
        "ScheduleMixin",
        "OptimizationMixin",
        "PersistenceMixin",
        "ExportMixin",
    ):
        assert mixin in text
    assert "def generate_from_description" not in text
    assert "def report_delay" not in text


def test_optimization_rules_do_not_depend_on_reporting():
    violations: list[tuple[str, str]] = []
    for path in _python_files(ROOT / "core" / "services" / "optimization"):
        for name in _imported_modules(path):
            if name.startswith("core.reporting"):
                violations.append((str(path.relative_to(ROOT)), name))

    assert not violations, f"Optimization layer imports reporting: {violations}"


def test_settings_load_without_service_layer():
    imported = set(_imported_modules(ROOT / "infra" / "settings.py"))

    assert not any(name.startswith("core.services") for name in imported)
    assert not any(name.startswith("core.reporting") for name in imported)
