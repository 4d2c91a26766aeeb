"""
원장 명세서 생성기

거래처의 거래 내역으로 기간별 기초 잔액 / 누적 잔액 / 기말 잔액 계산.
순수 계산 (데이터셋은 읽기 전용으로 주입받음).
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING

from core.ledger.types import ZERO, LedgerEntry, LedgerParty, LedgerStatement, StatementLine
from core.utils.dates import as_date, financial_year_start, today_ist

if TYPE_CHECKING:
    from adapters.interfaces import IPartyRepository

logger = logging.getLogger(__name__)


class PartyNotFoundError(Exception):
    """존재하지 않는 거래처 ID"""

    def __init__(self, party_id: str):
        self.party_id = party_id
        super().__init__("Party not found")


def sort_entries(entries: tuple[LedgerEntry, ...] | list[LedgerEntry]) -> list[LedgerEntry]:
    """날짜 오름차순 정렬 (같은 날짜는 원래 순서 유지 - sorted는 stable)"""
    return sorted(entries, key=lambda entry: entry.date)


def compute_statement(
    party: LedgerParty,
    from_date: date,
    to_date: date,
) -> LedgerStatement:
    """거래처 원장 명세서 계산

    1. 날짜순 정렬
    2. 기초 잔액 = from_date 이전(당일 제외) 거래의 (credit - debit) 합
    3. from_date <= 거래일 <= to_date 인 거래만 포함 (양끝 포함)
    4. 기초 잔액부터 누적하며 각 거래 반영 후 잔액을 기록
    5. 기말 잔액 = 마지막 누적 잔액 (거래가 없으면 기초 잔액)

    from_date > to_date면 포함되는 거래가 없으므로 기말 잔액 = 기초 잔액.

    Args:
        party: 거래처
        from_date: 시작일 (포함)
        to_date: 종료일 (포함)

    Returns:
        LedgerStatement
    """
    sorted_entries = sort_entries(party.entries)

    opening_balance = sum(
        (entry.net for entry in sorted_entries if entry.date < from_date),
        ZERO,
    )

    running_balance = opening_balance
    lines: list[StatementLine] = []
    for entry in sorted_entries:
        if not (from_date <= entry.date <= to_date):
            continue
        running_balance += entry.net
        lines.append(StatementLine(entry=entry, balance=running_balance))

    return LedgerStatement(
        party=party,
        lines=tuple(lines),
        opening_balance=opening_balance,
        closing_balance=running_balance,
        from_date=from_date,
        to_date=to_date,
    )


def build_statement(
    repository: IPartyRepository,
    party_id: str,
    from_date: date | datetime | None = None,
    to_date: date | datetime | None = None,
    today: date | None = None,
) -> LedgerStatement:
    """거래처 ID로 원장 명세서 생성

    Args:
        repository: 거래처 데이터셋
        party_id: 거래처 ID
        from_date: 시작일 (None이면 당기 회계연도 시작일)
        to_date: 종료일 (None이면 오늘)
        today: 기준일 오버라이드 (None이면 IST 오늘)

    Returns:
        LedgerStatement

    Raises:
        PartyNotFoundError: 거래처가 없는 경우
    """
    party = repository.find_party(party_id)
    if party is None:
        raise PartyNotFoundError(party_id)

    if today is None:
        today = today_ist()

    start = as_date(from_date) if from_date is not None else financial_year_start(today)
    end = as_date(to_date) if to_date is not None else today

    statement = compute_statement(party, start, end)

    if statement.is_empty:
        logger.info(
            f"원장 명세서 생성: party={party.party_id}, "
            f"기간={start.isoformat()}~{end.isoformat()}, 기간 내 거래 없음 "
            f"(기초잔액={statement.opening_balance})"
        )
    else:
        logger.info(
            f"원장 명세서 생성: party={party.party_id}, "
            f"기간={start.isoformat()}~{end.isoformat()}, "
            f"거래={len(statement.lines)}건, 차변={statement.total_debit}, "
            f"대변={statement.total_credit}, 기말잔액={statement.closing_balance}"
        )
    return statement


class StatementBuilder:
    """원장 명세서 생성기

    데이터셋(IPartyRepository)을 주입받아 명세서를 생성.

    사용 예시:
    ```python
    builder = StatementBuilder(repository)
    statement = builder.build("abc-company")
    statement.closing_balance
    ```
    """

    def __init__(self, repository: IPartyRepository):
        """
        Args:
            repository: 거래처 데이터셋 (읽기 전용)
        """
        self.repository = repository

    def build(
        self,
        party_id: str,
        from_date: date | datetime | None = None,
        to_date: date | datetime | None = None,
        today: date | None = None,
    ) -> LedgerStatement:
        """원장 명세서 생성 (build_statement 참고)"""
        return build_statement(self.repository, party_id, from_date, to_date, today)
