"""
어댑터 공통 데이터 모델

메일 발송 메시지 / 첨부파일 구조.
"""

import html
import re
from dataclasses import dataclass, field

from core.constants import EmailDefaults

PDF_MIME_TYPE = "application/pdf"

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


@dataclass(frozen=True)
class MailAttachment:
    """메일 첨부파일"""

    filename: str
    content: bytes
    mime_type: str = PDF_MIME_TYPE

    @property
    def maintype(self) -> str:
        return self.mime_type.split("/", 1)[0]

    @property
    def subtype(self) -> str:
        return self.mime_type.split("/", 1)[1]


@dataclass(frozen=True)
class OutgoingMail:
    """발송할 메일 1통"""

    from_email: str
    to_email: str
    subject: str
    text_body: str
    html_body: str
    attachments: tuple[MailAttachment, ...] = field(default_factory=tuple)


def text_to_html(text: str) -> str:
    """평문 본문을 HTML로 변환 (escape 후 줄바꿈 → <br />)

    Example:
        >>> text_to_html("Dear <Sir>\\nThanks")
        'Dear &lt;Sir&gt;<br />Thanks'
    """
    return html.escape(text, quote=False).replace("\n", "<br />")


def ledger_pdf_filename(party_name: str) -> str:
    """거래처명으로 첨부파일명 생성 (영숫자 외 문자는 '_')

    Example:
        >>> ledger_pdf_filename("ABC Company Ltd")
        'Ledger_ABC_Company_Ltd.pdf'
    """
    return f"Ledger_{_NON_ALNUM.sub('_', party_name)}.pdf"


def build_statement_mail(
    from_email: str,
    to_email: str,
    subject: str,
    body: str,
    attachment: MailAttachment,
) -> OutgoingMail:
    """원장 PDF 첨부 메일 구성

    제목/본문이 비어 있으면 기본 문구 사용.
    """
    subject = subject or EmailDefaults.SUBJECT
    text_body = body or EmailDefaults.BODY

    return OutgoingMail(
        from_email=from_email,
        to_email=to_email,
        subject=subject,
        text_body=text_body,
        html_body=text_to_html(text_body),
        attachments=(attachment,),
    )
