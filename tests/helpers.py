"""
테스트 헬퍼

LedgerEntry / LedgerParty 생성 등 여러 테스트 모듈에서 공유하는 함수
"""

from datetime import date, timedelta
from decimal import Decimal

from core.ledger.types import LedgerEntry, LedgerParty


def make_entry(
    entry_id: str,
    entry_date: date,
    debit: str = "0",
    credit: str = "0",
    reference: str = "REF",
    particulars: str = "Test entry",
) -> LedgerEntry:
    """테스트용 LedgerEntry 생성"""
    return LedgerEntry(
        entry_id=entry_id,
        date=entry_date,
        reference=reference,
        particulars=particulars,
        debit=Decimal(debit),
        credit=Decimal(credit),
    )


def make_party(entries: list[LedgerEntry], party_id: str = "test-party", name: str = "Test Party") -> LedgerParty:
    """테스트용 LedgerParty 생성"""
    return LedgerParty(
        party_id=party_id,
        name=name,
        email="test@party.test",
        entries=tuple(entries),
    )


def make_daily_entries(count: int, start: date = date(2024, 4, 1)) -> list[LedgerEntry]:
    """하루 1건씩 credit 100 거래 count건 생성"""
    return [
        make_entry(f"e-{i + 1}", start + timedelta(days=i), credit="100", reference=f"INV-{i + 1:04d}")
        for i in range(count)
    ]
