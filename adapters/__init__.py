"""
어댑터 레이어

외부 자원(거래처 데이터셋, PDF, SMTP, 파일 시스템)과의 연동을 담당.
Protocol 기반 인터페이스로 Mock 교체 가능.
"""

from adapters.interfaces import (
    IMailer,
    IPartyRepository,
    IStatementStore,
)
from adapters.models import (
    MailAttachment,
    OutgoingMail,
)

__all__ = [
    # Interfaces
    "IMailer",
    "IPartyRepository",
    "IStatementStore",
    # Models
    "MailAttachment",
    "OutgoingMail",
]
