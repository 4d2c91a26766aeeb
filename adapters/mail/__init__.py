"""
메일 어댑터

SMTP를 통한 원장 PDF 메일 발송.
IMailer Protocol 준수.
"""

from adapters.mail.smtp_mailer import MailDeliveryError, SmtpMailer, build_email_message

__all__ = [
    "MailDeliveryError",
    "SmtpMailer",
    "build_email_message",
]
