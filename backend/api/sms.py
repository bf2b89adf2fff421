"""SMS verification API."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import delete
from sqlmodel import Session, select

from backend.database import get_session
from backend.models.sms import SMS
from backend.schemas.batch import BatchDeleteResult, BatchIds
from backend.schemas.sms import (
    SMSRead,
    SendSMSRequest,
    SendSMSResponse,
    ValidateSMSRequest,
    ValidateSMSResponse,
)
from backend.services.sms import send_sms, validate_sms
from backend.api.deps import require_superuser

router = APIRouter(prefix="/api/sms", tags=["sms"])


@router.post("/send", response_model=SendSMSResponse)
def send(body: SendSMSRequest, session: Session = Depends(get_session)):
    record = send_sms(session, body.phone_number)
    return SendSMSResponse(verification_code=record.verification_code)


@router.post("/validate", response_model=ValidateSMSResponse)
def validate(body: ValidateSMSRequest, session: Session = Depends(get_session)):
    return ValidateSMSResponse(
        success=validate_sms(session, body.phone_number, body.verification_code)
    )


@router.get("", response_model=list[SMSRead], dependencies=[Depends(require_superuser)])
def list_sms(session: Session = Depends(get_session)):
    return session.exec(select(SMS).order_by(SMS.created_at.desc())).all()


@router.delete("/{sms_id}", response_model=SMSRead, dependencies=[Depends(require_superuser)])
def delete_sms(sms_id: int, session: Session = Depends(get_session)):
    record = session.get(SMS, sms_id)
    if not record:
        raise HTTPException(status_code=404, detail="SMS not found")
    deleted = SMSRead.model_validate(record)
    session.delete(record)
    session.commit()
    return deleted


@router.post("/batch-delete", response_model=BatchDeleteResult, dependencies=[Depends(require_superuser)])
def delete_sms_batch(body: BatchIds, session: Session = Depends(get_session)):
    result = session.exec(delete(SMS).where(SMS.id.in_(body.ids)))
    session.commit()
    return BatchDeleteResult(n=result.rowcount, deleted_count=result.rowcount)
