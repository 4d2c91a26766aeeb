"""
거래처 원장 API 라우트

거래처 목록 / 원장 명세서 조회 (JSON, PDF)
"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from adapters.pdf.renderer import RenderError
from core.ledger.statement import PartyNotFoundError
from web.dependencies import get_ledger_mail_service
from web.models.responses import PartySummaryResponse, StatementResponse
from web.services.ledger_mail_service import LedgerMailService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ledger", tags=["Ledger"])


@router.get("/parties", response_model=list[PartySummaryResponse])
async def list_parties(
    service: LedgerMailService = Depends(get_ledger_mail_service),
) -> list[PartySummaryResponse]:
    """거래처 목록 (메일 작성 폼 선택 목록용)"""
    return [PartySummaryResponse.from_party(party) for party in service.list_parties()]


@router.get("/parties/{party_id}/statement", response_model=StatementResponse)
async def get_statement(
    party_id: str,
    from_date: date | None = Query(default=None, description="시작일 (기본: 회계연도 시작일)"),
    to_date: date | None = Query(default=None, description="종료일 (기본: 오늘)"),
    service: LedgerMailService = Depends(get_ledger_mail_service),
) -> StatementResponse:
    """거래처 원장 명세서 (기초/누적/기말 잔액)"""
    try:
        statement = service.build_statement(party_id, from_date, to_date)
    except PartyNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return StatementResponse.from_statement(statement)


@router.get("/parties/{party_id}/statement.pdf")
async def download_statement_pdf(
    party_id: str,
    from_date: date | None = Query(default=None),
    to_date: date | None = Query(default=None),
    service: LedgerMailService = Depends(get_ledger_mail_service),
) -> Response:
    """거래처 원장 명세서 PDF"""
    try:
        pdf = service.render_pdf(party_id, from_date, to_date)
    except PartyNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RenderError as e:
        logger.error(f"원장 PDF 생성 실패: party={party_id}, error={e}")
        raise HTTPException(status_code=500, detail=str(e))

    return Response(
        content=pdf.content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{pdf.filename}"'},
    )
