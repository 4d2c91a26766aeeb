"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import SendLedgerEmailRequest
from web.models.responses import (
    ErrorResponse,
    PartySummaryResponse,
    SendLedgerEmailResponse,
    StatementLineResponse,
    StatementResponse,
)

__all__ = [
    # Requests
    "SendLedgerEmailRequest",
    # Responses
    "ErrorResponse",
    "PartySummaryResponse",
    "SendLedgerEmailResponse",
    "StatementLineResponse",
    "StatementResponse",
]
