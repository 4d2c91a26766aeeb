"""
정적 거래처 데이터셋

YAML 파일(data/ledger_parties.yaml)을 서버 시작 시 1회 로드하여
메모리에 보관하는 읽기 전용 거래처 카탈로그.
IPartyRepository Protocol 준수.
"""

import logging
from collections.abc import Iterable
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from core.constants import Paths
from core.ledger.types import LedgerEntry, LedgerParty

logger = logging.getLogger(__name__)


class DatasetLoadError(Exception):
    """데이터셋 로드 실패 예외"""

    pass


def _parse_amount(value: Any, field_name: str, entry_id: str) -> Decimal:
    """금액 파싱 (음수 불허, 미기재는 0)"""
    if value is None or value == "":
        return Decimal("0")
    try:
        amount = Decimal(str(value))
    except InvalidOperation as e:
        raise DatasetLoadError(
            f"거래 {entry_id}의 {field_name} 금액 형식 오류: {value!r}"
        ) from e
    if amount < 0:
        raise DatasetLoadError(f"거래 {entry_id}의 {field_name} 금액이 음수입니다: {value!r}")
    return amount


def _parse_date(value: Any, entry_id: str) -> date:
    """거래일 파싱 (YAML date 또는 YYYY-MM-DD 문자열)"""
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError as e:
        raise DatasetLoadError(f"거래 {entry_id}의 날짜 형식 오류: {value!r}") from e


def _parse_entry(raw: dict[str, Any]) -> LedgerEntry:
    entry_id = raw.get("id")
    if not entry_id:
        raise DatasetLoadError(f"거래 'id'가 없습니다: {raw!r}")

    return LedgerEntry(
        entry_id=str(entry_id),
        date=_parse_date(raw.get("date"), entry_id),
        reference=str(raw.get("reference", "")),
        particulars=str(raw.get("particulars", "")),
        debit=_parse_amount(raw.get("debit"), "debit", entry_id),
        credit=_parse_amount(raw.get("credit"), "credit", entry_id),
    )


def _parse_party(raw: dict[str, Any]) -> LedgerParty:
    party_id = raw.get("id")
    name = raw.get("name")
    if not party_id or not name:
        raise DatasetLoadError(f"거래처 'id'/'name'이 없습니다: {raw!r}")

    entries = tuple(_parse_entry(item) for item in raw.get("entries") or [])

    return LedgerParty(
        party_id=str(party_id),
        name=str(name),
        email=str(raw.get("email", "")),
        gstin=raw.get("gstin") or None,
        address=raw.get("address") or None,
        entries=entries,
    )


class StaticPartyRepository:
    """메모리 거래처 카탈로그

    IPartyRepository Protocol 구현.
    생성 후 변경되지 않으므로 동시 요청에서 잠금 없이 공유 가능.

    사용 예시:
    ```python
    repository = StaticPartyRepository.from_yaml()
    party = repository.find_party("abc-company")
    ```
    """

    def __init__(self, parties: Iterable[LedgerParty]):
        """
        Args:
            parties: 거래처 목록 (ID 중복 불가)
        """
        self._parties: dict[str, LedgerParty] = {}
        for party in parties:
            if party.party_id in self._parties:
                raise DatasetLoadError(f"거래처 ID 중복: {party.party_id}")
            self._parties[party.party_id] = party

    @classmethod
    def from_yaml(cls, path: Path | None = None) -> "StaticPartyRepository":
        """YAML 데이터셋에서 로드

        Args:
            path: 데이터셋 경로 (None이면 기본 경로 사용)

        Raises:
            DatasetLoadError: 파일이 없거나 형식이 잘못된 경우
        """
        if path is None:
            path = Paths.PARTIES_FILE

        if not path.exists():
            raise DatasetLoadError(f"거래처 데이터셋 파일을 찾을 수 없습니다: {path}")

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise DatasetLoadError(f"거래처 데이터셋 파싱 실패: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("parties"), list):
            raise DatasetLoadError("거래처 데이터셋에 'parties' 목록이 없습니다")

        repository = cls(_parse_party(raw) for raw in data["parties"])
        logger.info(f"거래처 데이터셋 로드: {len(repository)}곳 ({path.name})")
        return repository

    def find_party(self, party_id: str) -> LedgerParty | None:
        """거래처 조회"""
        return self._parties.get(party_id)

    def list_parties(self) -> list[LedgerParty]:
        """전체 거래처 목록"""
        return list(self._parties.values())

    def __len__(self) -> int:
        return len(self._parties)
