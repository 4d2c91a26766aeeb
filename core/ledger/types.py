"""
거래처 원장 타입 정의

LedgerEntry / LedgerParty / LedgerStatement 등 원장 명세서에서 사용하는 데이터 구조.
금액은 반드시 Decimal 사용 (float 금지).

부호 규칙: 대변(credit)은 잔액 증가, 차변(debit)은 잔액 감소.
    balance = 누적 credit - 누적 debit
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

ZERO = Decimal("0")


@dataclass(frozen=True)
class LedgerEntry:
    """원장 거래 기록 (불변)

    debit/credit은 독립 필드. 둘 다 0(기초 잔액 표시용)이거나
    둘 다 0이 아닐 수도 있으며, 오류로 취급하지 않음.
    """

    entry_id: str
    date: date
    reference: str
    particulars: str
    debit: Decimal = ZERO
    credit: Decimal = ZERO

    @property
    def net(self) -> Decimal:
        """잔액 변동분 (credit - debit)"""
        return self.credit - self.debit


@dataclass(frozen=True)
class LedgerParty:
    """거래처 (고객/공급처)

    entries 순서는 정렬이 보장되지 않음. 사용하는 쪽에서 날짜순 정렬 필요.
    """

    party_id: str
    name: str
    email: str
    gstin: str | None = None
    address: str | None = None
    entries: tuple[LedgerEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class StatementLine:
    """명세서 행: 원본 거래 + 해당 거래 반영 후 잔액"""

    entry: LedgerEntry
    balance: Decimal


@dataclass(frozen=True)
class LedgerStatement:
    """거래처 원장 명세서 (요청마다 새로 생성, 생성 후 변경 없음)

    closing_balance == opening_balance + sum(line.entry.net for line in lines)
    """

    party: LedgerParty
    lines: tuple[StatementLine, ...]
    opening_balance: Decimal
    closing_balance: Decimal
    from_date: date
    to_date: date

    @property
    def total_debit(self) -> Decimal:
        """기간 내 차변 합계"""
        return sum((line.entry.debit for line in self.lines), ZERO)

    @property
    def total_credit(self) -> Decimal:
        """기간 내 대변 합계"""
        return sum((line.entry.credit for line in self.lines), ZERO)

    @property
    def is_empty(self) -> bool:
        return not self.lines
