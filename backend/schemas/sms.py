"""Pydantic schemas for SMS API."""

from datetime import datetime
import re

from pydantic import BaseModel, field_validator

from backend.utils.constants import SMS_CODE_LENGTH

_PHONE_RE = re.compile(r"^\+?\d{6,15}$")


def _validate_phone(value: str) -> str:
    phone = value.strip().replace(" ", "").replace("-", "")
    if not _PHONE_RE.fullmatch(phone):
        raise ValueError("must be a phone number of 6-15 digits")
    return phone


class SendSMSRequest(BaseModel):
    phone_number: str

    @field_validator("phone_number")
    @classmethod
    def _validate_phone_number(cls, value: str) -> str:
        return _validate_phone(value)


class SendSMSResponse(BaseModel):
    verification_code: str


class ValidateSMSRequest(BaseModel):
    phone_number: str
    verification_code: str

    @field_validator("phone_number")
    @classmethod
    def _validate_phone_number(cls, value: str) -> str:
        return _validate_phone(value)

    @field_validator("verification_code")
    @classmethod
    def _validate_code(cls, value: str) -> str:
        code = value.strip()
        if len(code) != SMS_CODE_LENGTH or not code.isdigit():
            raise ValueError(f"must be {SMS_CODE_LENGTH} digits")
        return code


class ValidateSMSResponse(BaseModel):
    success: bool


class SMSRead(BaseModel):
    id: int
    phone_number: str
    verification_code: str
    is_used: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
