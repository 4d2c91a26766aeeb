"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화
금액은 문자열 (Decimal 정밀도 유지)
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from core.ledger.types import LedgerParty, LedgerStatement, StatementLine


class ErrorResponse(BaseModel):
    """오류 응답"""

    error: str = Field(..., description="오류 메시지")


class SendLedgerEmailResponse(BaseModel):
    """원장 메일 발송 응답"""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., description="결과 메시지")
    saved_path: str | None = Field(
        default=None,
        alias="savedPath",
        description="로컬 저장 경로 (저장 실패 시 null)",
    )


class PartySummaryResponse(BaseModel):
    """거래처 목록 항목"""

    id: str = Field(..., description="거래처 ID")
    name: str = Field(..., description="거래처명")
    email: str = Field(..., description="기본 수신 이메일")

    @classmethod
    def from_party(cls, party: LedgerParty) -> "PartySummaryResponse":
        return cls(id=party.party_id, name=party.name, email=party.email)


class StatementLineResponse(BaseModel):
    """명세서 행"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    entry_date: date = Field(..., alias="date")
    reference: str
    particulars: str
    debit: str
    credit: str
    balance: str

    @classmethod
    def from_line(cls, line: StatementLine) -> "StatementLineResponse":
        entry = line.entry
        return cls(
            id=entry.entry_id,
            entry_date=entry.date,
            reference=entry.reference,
            particulars=entry.particulars,
            debit=str(entry.debit),
            credit=str(entry.credit),
            balance=str(line.balance),
        )


class StatementResponse(BaseModel):
    """원장 명세서"""

    model_config = ConfigDict(populate_by_name=True)

    party: PartySummaryResponse
    from_date: date = Field(..., alias="fromDate")
    to_date: date = Field(..., alias="toDate")
    opening_balance: str = Field(..., alias="openingBalance")
    closing_balance: str = Field(..., alias="closingBalance")
    total_debit: str = Field(..., alias="totalDebit", description="기간 내 차변 합계")
    total_credit: str = Field(..., alias="totalCredit", description="기간 내 대변 합계")
    entries: list[StatementLineResponse]

    @classmethod
    def from_statement(cls, statement: LedgerStatement) -> "StatementResponse":
        return cls(
            party=PartySummaryResponse.from_party(statement.party),
            from_date=statement.from_date,
            to_date=statement.to_date,
            opening_balance=str(statement.opening_balance),
            closing_balance=str(statement.closing_balance),
            total_debit=str(statement.total_debit),
            total_credit=str(statement.total_credit),
            entries=[StatementLineResponse.from_line(line) for line in statement.lines],
        )
