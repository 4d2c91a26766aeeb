"""
Mock 메일 발송기

테스트용 Mock Mailer.
IMailer Protocol 준수.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from adapters.mail.smtp_mailer import MailDeliveryError
from adapters.models import OutgoingMail


@dataclass
class SentMailRecord:
    """발송 기록"""

    message: OutgoingMail
    timestamp: datetime
    sent: bool


class MockMailer:
    """Mock 메일 발송기

    IMailer Protocol 구현.
    발송된 모든 메일을 기록하여 테스트에서 검증 가능.

    사용 예시:
    ```python
    mailer = MockMailer()

    await mailer.send(message)

    assert len(mailer.sent) == 1
    assert mailer.last_message.to_email == "accounts@abccompany.test"
    ```
    """

    def __init__(self, should_fail: bool = False):
        """
        Args:
            should_fail: True면 모든 발송 실패 (에러 시나리오 테스트용)
        """
        self.should_fail = should_fail
        self.records: list[SentMailRecord] = []

    async def send(self, message: OutgoingMail) -> None:
        """메일 발송 (기록만 함)"""
        self.records.append(
            SentMailRecord(
                message=message,
                timestamp=datetime.now(timezone.utc),
                sent=not self.should_fail,
            )
        )
        if self.should_fail:
            raise MailDeliveryError("Failed to send email: mock failure")

    @property
    def sent(self) -> list[OutgoingMail]:
        """성공한 메일 목록"""
        return [r.message for r in self.records if r.sent]

    @property
    def last_message(self) -> OutgoingMail | None:
        """마지막 발송 시도 메일"""
        return self.records[-1].message if self.records else None

    def clear(self) -> None:
        """기록 초기화"""
        self.records.clear()
