"""
SMTP 메일 발송

표준 smtplib로 첨부파일 포함 메일 전송.
smtplib는 블로킹 I/O이므로 asyncio.to_thread로 워커 스레드에서 실행.
IMailer Protocol 준수.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage

from adapters.models import OutgoingMail
from core.config.loader import SmtpConfig

logger = logging.getLogger(__name__)


class MailDeliveryError(Exception):
    """메일 발송 실패 예외"""

    pass


def build_email_message(message: OutgoingMail) -> EmailMessage:
    """OutgoingMail → EmailMessage (text + html alternative + 첨부)"""
    email = EmailMessage()
    email["From"] = message.from_email
    email["To"] = message.to_email
    email["Subject"] = message.subject

    email.set_content(message.text_body)
    email.add_alternative(message.html_body, subtype="html")

    for attachment in message.attachments:
        email.add_attachment(
            attachment.content,
            maintype=attachment.maintype,
            subtype=attachment.subtype,
            filename=attachment.filename,
        )

    return email


class SmtpMailer:
    """SMTP 메일 발송기

    IMailer Protocol 구현.
    secure=True면 SMTP_SSL(암묵적 TLS), 아니면 평문 SMTP로 연결.
    user/password가 모두 있을 때만 로그인.

    사용 예시:
    ```python
    mailer = SmtpMailer(settings.smtp)
    await mailer.send(message)
    ```
    """

    def __init__(self, config: SmtpConfig, timeout: float = 30.0):
        """
        Args:
            config: SMTP 설정
            timeout: 연결/전송 타임아웃 (초)
        """
        self.config = config
        self.timeout = timeout

    def _connect(self) -> smtplib.SMTP:
        if self.config.secure:
            return smtplib.SMTP_SSL(self.config.host, self.config.port, timeout=self.timeout)
        return smtplib.SMTP(self.config.host, self.config.port, timeout=self.timeout)

    def _send_sync(self, message: OutgoingMail) -> None:
        email = build_email_message(message)
        with self._connect() as smtp:
            if self.config.has_credentials:
                smtp.login(self.config.user, self.config.password)
            smtp.send_message(email)

    async def send(self, message: OutgoingMail) -> None:
        """메일 1통 발송

        Raises:
            MailDeliveryError: SMTP 연결/인증/전송 실패
        """
        try:
            await asyncio.to_thread(self._send_sync, message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"메일 발송 실패: to={message.to_email}, error={e}")
            raise MailDeliveryError(f"Failed to send email: {e}") from e

        logger.info(
            f"메일 발송 완료: to={message.to_email}, subject={message.subject!r}, "
            f"첨부={len(message.attachments)}개"
        )
