"""
원장 메일 서비스

거래처 원장 명세서 생성 → PDF 렌더링 → 로컬 저장(선택) → 메일 발송.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from adapters.interfaces import IMailer, IPartyRepository, IStatementStore
from adapters.models import MailAttachment, build_statement_mail, ledger_pdf_filename
from adapters.pdf.renderer import StatementHeader, StatementPdfRenderer
from core.ledger.statement import PartyNotFoundError, StatementBuilder
from core.ledger.types import LedgerParty, LedgerStatement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatementPdf:
    """렌더링된 원장 PDF"""

    statement: LedgerStatement
    filename: str
    content: bytes


@dataclass(frozen=True)
class SendResult:
    """메일 발송 결과"""

    party_id: str
    to_email: str
    filename: str
    saved_path: Path | None


class LedgerMailService:
    """원장 메일 서비스

    요청마다 명세서를 새로 계산하고 PDF를 새로 렌더링 (캐시 없음).
    로컬 저장 실패는 메일 발송을 막지 않음.
    """

    def __init__(
        self,
        repository: IPartyRepository,
        mailer: IMailer,
        store: IStatementStore,
        company_name: str,
        from_email: str,
        renderer: StatementPdfRenderer | None = None,
    ):
        self.repository = repository
        self.mailer = mailer
        self.store = store
        self.company_name = company_name
        self.from_email = from_email
        self.renderer = renderer or StatementPdfRenderer()
        self.builder = StatementBuilder(repository)

    def list_parties(self) -> list[LedgerParty]:
        """거래처 목록"""
        return self.repository.list_parties()

    def get_party(self, party_id: str) -> LedgerParty:
        """거래처 조회

        Raises:
            PartyNotFoundError: 거래처가 없는 경우
        """
        party = self.repository.find_party(party_id)
        if party is None:
            raise PartyNotFoundError(party_id)
        return party

    def build_statement(
        self,
        party_id: str,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> LedgerStatement:
        """원장 명세서 (기본: 당기 회계연도 시작일 ~ 오늘)"""
        return self.builder.build(party_id, from_date, to_date)

    def render_pdf(
        self,
        party_id: str,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> StatementPdf:
        """원장 명세서 PDF 생성

        Raises:
            PartyNotFoundError: 거래처가 없는 경우
            RenderError: PDF 렌더링 실패
        """
        statement = self.build_statement(party_id, from_date, to_date)
        content = self.renderer.render(statement, StatementHeader(company_name=self.company_name))
        return StatementPdf(
            statement=statement,
            filename=ledger_pdf_filename(statement.party.name),
            content=content,
        )

    async def send_statement(
        self,
        party_id: str,
        to_email: str,
        subject: str,
        body: str,
    ) -> SendResult:
        """원장 PDF를 첨부하여 메일 발송

        Args:
            party_id: 거래처 ID
            to_email: 수신 이메일
            subject: 메일 제목 (비어 있으면 기본 제목)
            body: 메일 본문 평문 (비어 있으면 기본 본문)

        Returns:
            SendResult (saved_path는 로컬 저장 실패 시 None)

        Raises:
            PartyNotFoundError: 거래처가 없는 경우
            RenderError: PDF 렌더링 실패
            MailDeliveryError: 메일 발송 실패
        """
        party = self.get_party(party_id)

        # CPU 작업 (명세서 계산 + PDF 레이아웃)은 워커 스레드에서
        pdf = await asyncio.to_thread(self.render_pdf, party.party_id)

        saved_path = await self.store.save(pdf.filename, pdf.content)

        message = build_statement_mail(
            from_email=self.from_email,
            to_email=to_email,
            subject=subject,
            body=body,
            attachment=MailAttachment(filename=pdf.filename, content=pdf.content),
        )
        await self.mailer.send(message)

        logger.info(
            f"원장 메일 발송: party={party.party_id}, to={to_email}, "
            f"file={pdf.filename}, saved={saved_path}"
        )

        return SendResult(
            party_id=party.party_id,
            to_email=to_email,
            filename=pdf.filename,
            saved_path=saved_path,
        )
