"""
Web API 테스트 fixture

lifespan 없이 TestClient 생성 (SMTP 설정 / 데이터셋 파일 불필요).
의존성은 dependency_overrides로 Mock 어댑터 주입.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from adapters.dataset.static_repository import StaticPartyRepository
from adapters.mock.mailer import MockMailer
from adapters.storage.local_store import LocalStatementStore
from web.app import app
from web.dependencies import get_ledger_mail_service, get_party_repository
from web.services.ledger_mail_service import LedgerMailService


@pytest.fixture
def mailer() -> MockMailer:
    return MockMailer()


@pytest.fixture
def store(temp_dir: Path) -> LocalStatementStore:
    return LocalStatementStore(temp_dir / "Tally PDF")


@pytest.fixture
def service(
    repository: StaticPartyRepository,
    mailer: MockMailer,
    store: LocalStatementStore,
) -> LedgerMailService:
    return LedgerMailService(
        repository=repository,
        mailer=mailer,
        store=store,
        company_name="Test Traders Pvt Ltd",
        from_email="accounts@test.local",
    )


@pytest.fixture
def client(service: LedgerMailService, repository: StaticPartyRepository) -> TestClient:
    app.dependency_overrides[get_ledger_mail_service] = lambda: service
    app.dependency_overrides[get_party_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()
