"""Phone verification codes.

No SMS gateway is wired in: the code is persisted and returned to the caller,
which is responsible for delivering it.
"""

import logging
import secrets
from datetime import datetime, timezone

from sqlalchemy import update
from sqlmodel import Session, select

from backend.models.sms import SMS
from backend.services.errors import SMSValidationFailed
from backend.utils.constants import SMS_CODE_LENGTH

logger = logging.getLogger(__name__)


def generate_verification_code(length: int = SMS_CODE_LENGTH) -> str:
    return "".join(secrets.choice("0123456789") for _ in range(length))


def send_sms(session: Session, phone_number: str) -> SMS:
    record = SMS(phone_number=phone_number, verification_code=generate_verification_code())
    session.add(record)
    session.commit()
    session.refresh(record)
    logger.info(f"Issued verification code for phone ending {phone_number[-4:]}")
    return record


def validate_sms(session: Session, phone_number: str, verification_code: str) -> bool:
    """Check the latest code issued to ``phone_number`` and use it up.

    A code validates once; the conditional update makes a concurrent second
    attempt with the same code fail.
    """
    record = session.exec(
        select(SMS)
        .where(SMS.phone_number == phone_number)
        .order_by(SMS.created_at.desc(), SMS.id.desc())
    ).first()
    if record is None:
        raise SMSValidationFailed("No verification code was sent to this phone number")
    if record.verification_code != verification_code:
        raise SMSValidationFailed()

    result = session.exec(
        update(SMS)
        .where(SMS.id == record.id, SMS.is_used == False)
        .values(is_used=True, updated_at=datetime.now(timezone.utc))
    )
    session.commit()
    if result.rowcount != 1:
        raise SMSValidationFailed()
    logger.info(f"Verification code {record.id} used")
    return True
