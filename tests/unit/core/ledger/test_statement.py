"""
원장 명세서 생성기 테스트

기초 잔액 / 기간 필터 / 누적 잔액 / 기말 잔액 계산 검증
"""

import logging
from datetime import date, datetime
from decimal import Decimal

import pytest

from adapters.dataset.static_repository import StaticPartyRepository
from core.ledger.statement import (
    PartyNotFoundError,
    StatementBuilder,
    build_statement,
    compute_statement,
    sort_entries,
)
from core.ledger.types import LedgerParty
from tests.helpers import make_entry, make_party


FY_START = date(2024, 4, 1)
FY_TODAY = date(2024, 10, 15)


class TestExampleScenario:
    """ABC Company Ltd 예시 시나리오"""

    def test_running_balances(self, repository: StaticPartyRepository) -> None:
        """거래별 누적 잔액"""
        statement = build_statement(repository, "abc-company", FY_START, FY_TODAY)

        assert [line.balance for line in statement.lines] == [
            Decimal("28650"),
            Decimal("0"),
            Decimal("41250"),
            Decimal("21250"),
            Decimal("41050"),
            Decimal("21250"),
        ]

    def test_opening_and_closing(self, repository: StaticPartyRepository) -> None:
        """기초 0, 기말 21250"""
        statement = build_statement(repository, "abc-company", FY_START, FY_TODAY)

        assert statement.opening_balance == Decimal("0")
        assert statement.closing_balance == Decimal("21250")

    def test_lines_sorted_by_date(self, repository: StaticPartyRepository) -> None:
        """입력 순서와 무관하게 날짜순"""
        statement = build_statement(repository, "abc-company", FY_START, FY_TODAY)

        assert [line.entry.entry_id for line in statement.lines] == [
            "abc-1", "abc-2", "abc-3", "abc-4", "abc-5", "abc-6",
        ]

    def test_effective_range(self, repository: StaticPartyRepository) -> None:
        """요청한 기간이 그대로 기록됨"""
        statement = build_statement(repository, "abc-company", FY_START, FY_TODAY)

        assert statement.from_date == FY_START
        assert statement.to_date == FY_TODAY
        assert statement.party.name == "ABC Company Ltd"


class TestDefaults:
    """기본 기간 (회계연도 시작일 ~ 오늘)"""

    def test_default_range_uses_financial_year(self, repository: StaticPartyRepository) -> None:
        """from/to 생략 시 today 기준 회계연도"""
        statement = build_statement(repository, "abc-company", today=date(2025, 2, 10))

        assert statement.from_date == date(2024, 4, 1)
        assert statement.to_date == date(2025, 2, 10)
        assert len(statement.lines) == 6

    def test_default_range_next_financial_year(self, repository: StaticPartyRepository) -> None:
        """다음 회계연도면 전년도 거래는 모두 기초 잔액"""
        statement = build_statement(repository, "abc-company", today=date(2025, 4, 1))

        assert statement.from_date == date(2025, 4, 1)
        assert statement.lines == ()
        assert statement.opening_balance == Decimal("21250")
        assert statement.closing_balance == Decimal("21250")

    def test_datetime_arguments_use_day_granularity(self, repository: StaticPartyRepository) -> None:
        """datetime 인자는 날짜 단위로 비교"""
        statement = build_statement(
            repository,
            "abc-company",
            datetime(2024, 4, 15, 18, 30),
            datetime(2024, 5, 8, 0, 0),
        )

        assert [line.entry.entry_id for line in statement.lines] == ["abc-2", "abc-3"]
        assert statement.from_date == date(2024, 4, 15)


class TestOpeningBalance:
    """기초 잔액 계산"""

    def test_entries_before_from_date(self) -> None:
        """from_date 이전 거래만 합산"""
        party = make_party([
            make_entry("a", date(2024, 3, 1), credit="1000"),
            make_entry("b", date(2024, 3, 31), debit="300"),
            make_entry("c", date(2024, 4, 2), credit="50"),
        ])

        statement = compute_statement(party, FY_START, FY_TODAY)

        assert statement.opening_balance == Decimal("700")
        assert [line.balance for line in statement.lines] == [Decimal("750")]
        assert statement.closing_balance == Decimal("750")

    def test_entry_on_from_date_not_in_opening(self) -> None:
        """from_date 당일 거래는 기초 잔액이 아니라 기간 내 거래"""
        party = make_party([
            make_entry("before", date(2024, 3, 31), credit="100"),
            make_entry("same-day", FY_START, credit="500"),
        ])

        statement = compute_statement(party, FY_START, FY_TODAY)

        assert statement.opening_balance == Decimal("100")
        assert [line.entry.entry_id for line in statement.lines] == ["same-day"]
        assert statement.closing_balance == Decimal("600")

    def test_entry_on_to_date_included(self) -> None:
        """to_date 당일 거래 포함, 이후 거래 제외"""
        party = make_party([
            make_entry("last", FY_TODAY, debit="40"),
            make_entry("after", date(2024, 10, 16), debit="999"),
        ])

        statement = compute_statement(party, FY_START, FY_TODAY)

        assert [line.entry.entry_id for line in statement.lines] == ["last"]
        assert statement.closing_balance == Decimal("-40")


class TestEdgeCases:
    """경계 조건"""

    def test_no_entries(self, repository: StaticPartyRepository) -> None:
        """거래 없음 → 0 / 0 / 빈 목록"""
        statement = build_statement(repository, "new-party", FY_START, FY_TODAY)

        assert statement.lines == ()
        assert statement.opening_balance == Decimal("0")
        assert statement.closing_balance == Decimal("0")
        assert statement.is_empty

    def test_reversed_range_is_empty(self, repository: StaticPartyRepository) -> None:
        """to_date < from_date → 거래 없음, 기말 = 기초"""
        statement = build_statement(repository, "abc-company", date(2024, 6, 1), date(2024, 5, 1))

        assert statement.lines == ()
        assert statement.opening_balance == Decimal("41250")
        assert statement.closing_balance == statement.opening_balance

    def test_debit_and_credit_on_same_entry(self) -> None:
        """debit/credit 동시 입력도 오류 없이 처리"""
        party = make_party([make_entry("both", date(2024, 5, 1), debit="30", credit="100")])

        statement = compute_statement(party, FY_START, FY_TODAY)

        assert statement.closing_balance == Decimal("70")

    def test_zero_amount_marker_entry(self) -> None:
        """debit/credit 모두 0인 거래도 행으로 포함"""
        party = make_party([make_entry("marker", date(2024, 4, 1), reference="BAL")])

        statement = compute_statement(party, FY_START, FY_TODAY)

        assert len(statement.lines) == 1
        assert statement.lines[0].balance == Decimal("0")

    def test_same_date_keeps_original_order(self) -> None:
        """같은 날짜 거래는 원래 순서 유지"""
        party = make_party([
            make_entry("second-day", date(2024, 5, 2), credit="1"),
            make_entry("first-a", date(2024, 5, 1), credit="10"),
            make_entry("first-b", date(2024, 5, 1), debit="3"),
        ])

        statement = compute_statement(party, FY_START, FY_TODAY)

        assert [line.entry.entry_id for line in statement.lines] == ["first-a", "first-b", "second-day"]
        assert [line.balance for line in statement.lines] == [Decimal("10"), Decimal("7"), Decimal("8")]

    def test_decimal_precision(self) -> None:
        """Decimal 연산 (float 오차 없음)"""
        party = make_party([
            make_entry("a", date(2024, 5, 1), credit="0.1"),
            make_entry("b", date(2024, 5, 2), credit="0.2"),
        ])

        statement = compute_statement(party, FY_START, FY_TODAY)

        assert statement.closing_balance == Decimal("0.3")


class TestInvariants:
    """명세서 불변 조건"""

    def test_closing_equals_opening_plus_net(self, abc_party: LedgerParty) -> None:
        """기말 = 기초 + Σ(credit - debit)"""
        statement = compute_statement(abc_party, date(2024, 5, 1), date(2024, 8, 31))

        net = sum((line.entry.net for line in statement.lines), Decimal("0"))
        assert statement.closing_balance == statement.opening_balance + net
        assert statement.total_credit - statement.total_debit == net

    def test_deterministic(self, repository: StaticPartyRepository) -> None:
        """같은 입력 → 같은 결과"""
        first = build_statement(repository, "abc-company", FY_START, FY_TODAY)
        second = build_statement(repository, "abc-company", FY_START, FY_TODAY)

        assert first == second

    def test_source_entries_untouched(self, abc_party: LedgerParty) -> None:
        """거래처 원본 순서는 변경되지 않음"""
        original = abc_party.entries

        compute_statement(abc_party, FY_START, FY_TODAY)

        assert abc_party.entries is original
        assert abc_party.entries[0].entry_id == "abc-3"


class TestSortEntries:
    """sort_entries 테스트"""

    def test_returns_new_list(self, abc_party: LedgerParty) -> None:
        result = sort_entries(abc_party.entries)

        assert isinstance(result, list)
        assert [e.date for e in result] == sorted(e.date for e in abc_party.entries)


class TestPartyNotFound:
    """존재하지 않는 거래처"""

    def test_raises(self, repository: StaticPartyRepository) -> None:
        with pytest.raises(PartyNotFoundError, match="Party not found") as exc_info:
            build_statement(repository, "no-such-party", FY_START, FY_TODAY)

        assert exc_info.value.party_id == "no-such-party"


class TestStatementBuilder:
    """StatementBuilder 래퍼"""

    def test_build_delegates(self, repository: StaticPartyRepository) -> None:
        builder = StatementBuilder(repository)

        statement = builder.build("abc-company", FY_START, FY_TODAY)

        assert statement.closing_balance == Decimal("21250")
        assert builder.repository is repository


class TestBuildLogging:
    """명세서 생성 로그"""

    def test_logs_totals(self, repository: StaticPartyRepository, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="core.ledger.statement"):
            build_statement(repository, "abc-company", FY_START, FY_TODAY)

        assert "거래=6건, 차변=68450, 대변=89700, 기말잔액=21250" in caplog.text

    def test_logs_empty_range(self, repository: StaticPartyRepository, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="core.ledger.statement"):
            build_statement(repository, "new-party", FY_START, FY_TODAY)

        assert "기간 내 거래 없음" in caplog.text
