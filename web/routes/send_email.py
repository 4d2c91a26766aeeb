"""
원장 메일 발송 API

POST /api/send-email - 거래처 원장 PDF를 첨부하여 메일 발송
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from core.constants import EmailDefaults
from core.ledger.statement import PartyNotFoundError
from web.dependencies import get_ledger_mail_service
from web.models.requests import SendLedgerEmailRequest
from web.models.responses import ErrorResponse, SendLedgerEmailResponse
from web.services.ledger_mail_service import LedgerMailService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Email"])


@router.post(
    "/send-email",
    response_model=SendLedgerEmailResponse,
    responses={
        400: {"model": ErrorResponse, "description": "요청 검증 실패"},
        404: {"model": ErrorResponse, "description": "거래처 없음"},
        500: {"model": ErrorResponse, "description": "렌더링/발송 실패"},
    },
)
async def send_ledger_email(
    request: SendLedgerEmailRequest,
    service: LedgerMailService = Depends(get_ledger_mail_service),
) -> SendLedgerEmailResponse:
    """원장 메일 발송

    1. 거래처 확인 (없으면 404)
    2. 원장 명세서 계산 + PDF 렌더링
    3. 로컬 저장 (실패해도 계속)
    4. 메일 발송

    Returns:
        결과 메시지 + 저장 경로 (저장 실패 시 null)
    """
    try:
        result = await service.send_statement(
            party_id=request.party_id,
            to_email=request.email,
            subject=request.subject,
            body=request.body,
        )
    except PartyNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"원장 메일 발송 실패: party={request.party_id}, to={request.email}")
        raise HTTPException(status_code=500, detail=str(e) or "Failed to send email")

    return SendLedgerEmailResponse(
        message=EmailDefaults.SUCCESS_MESSAGE,
        saved_path=str(result.saved_path) if result.saved_path else None,
    )
