"""
Web 서비스 패키지

비즈니스 로직 처리
"""

from web.services.ledger_mail_service import LedgerMailService, SendResult, StatementPdf

__all__ = [
    "LedgerMailService",
    "SendResult",
    "StatementPdf",
]
