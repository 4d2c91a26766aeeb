"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

# 간단한 형식 검사 (실제 수신 가능 여부는 SMTP 서버가 판단)
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _required(value: str, message: str) -> str:
    if not value or not value.strip():
        raise PydanticCustomError("required", message)
    return value


class SendLedgerEmailRequest(BaseModel):
    """원장 메일 발송 요청

    JSON 키는 camelCase (partyId). 누락된 필드도 각 필드의 메시지로 검증 실패.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "partyId": "abc-company",
                    "email": "accounts@abccompany.test",
                    "subject": "Ledger Statement",
                    "body": "Dear Sir/Madam,\n\nPlease find attached the ledger statement.",
                }
            ]
        },
    )

    party_id: str = Field(default="", alias="partyId", validate_default=True, description="거래처 ID")
    email: str = Field(default="", validate_default=True, description="수신 이메일")
    subject: str = Field(default="", validate_default=True, description="메일 제목")
    body: str = Field(default="", validate_default=True, description="메일 본문 (평문)")

    @field_validator("party_id")
    @classmethod
    def _check_party_id(cls, value: str) -> str:
        return _required(value, "Party is required")

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        value = value.strip()
        if not EMAIL_PATTERN.match(value):
            raise PydanticCustomError("invalid_email", "Invalid email address")
        return value

    @field_validator("subject")
    @classmethod
    def _check_subject(cls, value: str) -> str:
        return _required(value, "Subject is required")

    @field_validator("body")
    @classmethod
    def _check_body(cls, value: str) -> str:
        return _required(value, "Body is required")
