# tests/conftest.py
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from infra.db.base import Base
import infra.db.models  # noqa: F401
from infra.db.budget import SqlAlchemyBudgetRepository
from infra.catalog import StaticReferenceCatalog
from infra.generation import CatalogDraftGenerator

from core.events.domain_events import DomainEvents, domain_events
from core.models import PriceSource
from core.services.editor import BudgetEditorService
from core.services.history import BudgetHistoryService


@pytest.fixture
def session():
    # separate in-memory DB for tests
    engine = create_engine("sqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def fresh_domain_events():
    # subscribers connected by one test must not leak into the next
    fresh = DomainEvents()
    for name, signal in vars(fresh).items():
        setattr(domain_events, name, signal)
    yield domain_events


@pytest.fixture
def catalog():
    return StaticReferenceCatalog()


@pytest.fixture
def services(session, catalog):
    # Recreate what build_services() does, but with the test session
    budget_repo = SqlAlchemyBudgetRepository(session)
    history = BudgetHistoryService(session, budget_repo)
    generator = CatalogDraftGenerator(catalog)
    editor = BudgetEditorService(
        catalog,
        generator=generator,
        history=history,
        price_source=PriceSource.REFERENCE_A,
    )
    return {
        "session": session,
        "catalog": catalog,
        "generator": generator,
        "budget_repo": budget_repo,
        "history": history,
        "editor": editor,
    }
