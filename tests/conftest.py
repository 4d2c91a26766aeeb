"""
pytest 공통 fixture 정의

원장 명세서 / 설정 / 데이터셋 테스트용 fixture
"""

import tempfile
from datetime import date
from pathlib import Path

import pytest

from adapters.dataset.static_repository import StaticPartyRepository
from core.config.loader import Settings
from core.ledger.types import LedgerParty
from tests.helpers import make_entry


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_settings():
    """Settings 싱글턴 초기화 (테스트 간 격리)"""
    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture
def temp_secrets_file(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성"""
    secrets_content = """# 테스트용 secrets.yaml
company_name: "Test Traders Pvt Ltd"
ledger_output_dir: "/tmp/ledger-test-output"

smtp:
  host: "smtp.test.local"
  port: 2525
  user: "mailer@test.local"
  password: "test_password"
  secure: false
  from_email: "accounts@test.local"
"""
    secrets_path = temp_dir / "secrets.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def abc_party() -> LedgerParty:
    """ABC Company Ltd (FY 2024-25, 의도적으로 순서를 섞어 둠)"""
    entries = (
        make_entry("abc-3", date(2024, 5, 8), credit="41250", reference="INV-2418",
                   particulars="Sales Invoice #INV-2418"),
        make_entry("abc-1", date(2024, 4, 2), credit="28650", reference="INV-2401",
                   particulars="Sales Invoice #INV-2401"),
        make_entry("abc-2", date(2024, 4, 15), debit="28650", reference="RCPT-1460",
                   particulars="Receipt via NEFT"),
        make_entry("abc-4", date(2024, 6, 30), debit="20000", reference="RCPT-1551",
                   particulars="Receipt via RTGS"),
        make_entry("abc-6", date(2024, 9, 5), debit="19800", reference="RCPT-1589",
                   particulars="Receipt via UPI"),
        make_entry("abc-5", date(2024, 8, 3), credit="19800", reference="INV-2452",
                   particulars="Sales Invoice #INV-2452"),
    )
    return LedgerParty(
        party_id="abc-company",
        name="ABC Company Ltd",
        email="accounts@abccompany.test",
        gstin="29ABCDE1234F2Z5",
        address="12, MG Road, Bengaluru, Karnataka - 560001",
        entries=entries,
    )


@pytest.fixture
def empty_party() -> LedgerParty:
    """거래 내역 없는 거래처 (GSTIN/주소 없음)"""
    return LedgerParty(
        party_id="new-party",
        name="New Party & Co.",
        email="hello@newparty.test",
    )


@pytest.fixture
def repository(abc_party: LedgerParty, empty_party: LedgerParty) -> StaticPartyRepository:
    """메모리 거래처 데이터셋"""
    return StaticPartyRepository([abc_party, empty_party])
