"""File upload API."""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from backend.config import settings
from backend.services.uploader import save_upload
from backend.api.deps import require_superuser

router = APIRouter(prefix="/api/uploads", tags=["uploads"], dependencies=[Depends(require_superuser)])


@router.post("", status_code=201)
async def upload_file(file: UploadFile = File(...)):
    content = await file.read(settings.upload_max_bytes + 1)
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    if len(content) > settings.upload_max_bytes:
        raise HTTPException(status_code=413, detail="Uploaded file is too large")
    return save_upload(file.filename, content)
