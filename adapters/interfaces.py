"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from adapters.models import OutgoingMail
    from core.ledger.types import LedgerParty


@runtime_checkable
class IPartyRepository(Protocol):
    """거래처 데이터셋 인터페이스

    읽기 전용 카탈로그. 실제 배포에서는 영속 저장소 조회로 교체 가능.
    """

    def find_party(self, party_id: str) -> "LedgerParty | None":
        """거래처 조회

        Args:
            party_id: 거래처 ID

        Returns:
            LedgerParty 또는 None (없음)
        """
        ...

    def list_parties(self) -> list["LedgerParty"]:
        """전체 거래처 목록 (등록 순서)"""
        ...


@runtime_checkable
class IMailer(Protocol):
    """메일 발송 인터페이스"""

    async def send(self, message: "OutgoingMail") -> None:
        """메일 1통 발송

        Args:
            message: 발송할 메일 (첨부 포함)

        Raises:
            MailDeliveryError: 발송 실패
        """
        ...


@runtime_checkable
class IStatementStore(Protocol):
    """렌더링된 PDF 로컬 저장 인터페이스"""

    async def save(self, filename: str, content: bytes) -> Path | None:
        """PDF 저장

        저장 실패는 치명적이지 않음 (로그 후 None 반환).

        Args:
            filename: 파일명
            content: PDF 바이트

        Returns:
            저장 경로 또는 None (실패)
        """
        ...
