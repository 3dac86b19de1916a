# infra/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from core.models import DEFAULT_PAYMENT_TERMS, PriceSource
from infra.path import default_db_path, default_export_dir


_TRUE_VALUES = {"1", "true", "yes", "on", "sim"}


def _env(name: str, default: str) -> str:
    return (os.getenv(name) or "").strip() or default


def _env_bool(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    return raw in _TRUE_VALUES


@dataclass(frozen=True)
class AppSettings:
    db_path: Path
    export_dir: Path
    log_level: str = "INFO"
    price_source: PriceSource = PriceSource.REFERENCE_A
    include_material: bool = True
    company_name: str = "Construtora"
    company_subtitle: str = "Projetos e Construções"
    company_footer: str = ""
    payment_terms: str = DEFAULT_PAYMENT_TERMS
    admin_email: str = "admin@example.com"
    admin_password: str = "ChangeMe123!"

    @property
    def db_url(self) -> str:
        return f"sqlite:///{self.db_path.as_posix()}"


def load_settings() -> AppSettings:
    """Read BP_* environment variables over the built-in defaults."""
    source_raw = _env("BP_PRICE_SOURCE", PriceSource.REFERENCE_A.value).upper()
    price_source = PriceSource.REFERENCE_B if source_raw in {"B", "REFERENCE_B"} else PriceSource.REFERENCE_A

    db_override = (os.getenv("BP_DB_PATH") or "").strip()
    export_override = (os.getenv("BP_EXPORT_DIR") or "").strip()

    return AppSettings(
        db_path=Path(db_override) if db_override else default_db_path(),
        export_dir=Path(export_override) if export_override else default_export_dir(),
        log_level=_env("BP_LOG_LEVEL", "INFO").upper(),
        price_source=price_source,
        include_material=_env_bool("BP_INCLUDE_MATERIAL", True),
        company_name=_env("BP_COMPANY_NAME", "Construtora"),
        company_subtitle=_env("BP_COMPANY_SUBTITLE", "Projetos e Construções"),
        company_footer=_env("BP_COMPANY_FOOTER", ""),
        payment_terms=_env("BP_PAYMENT_TERMS", DEFAULT_PAYMENT_TERMS).replace("\\n", "\n"),
        admin_email=_env("BP_ADMIN_EMAIL", "admin@example.com"),
        admin_password=os.getenv("BP_ADMIN_PASSWORD", "ChangeMe123!"),
    )


__all__ = ["AppSettings", "load_settings"]
