"""CRUD API for best albums."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import delete
from sqlmodel import Session, select

from backend.database import get_session
from backend.models.best_album import BestAlbum
from backend.schemas.batch import BatchDeleteResult, BatchIds
from backend.schemas.best_album import BestAlbumCreate, BestAlbumUpdate, BestAlbumRead
from backend.api.deps import require_superuser

router = APIRouter(prefix="/api/best-albums", tags=["best-albums"])


@router.get("", response_model=list[BestAlbumRead])
def list_best_albums(session: Session = Depends(get_session)):
    return session.exec(select(BestAlbum).order_by(BestAlbum.release_date.desc())).all()


@router.get("/{album_id}", response_model=BestAlbumRead)
def get_best_album(album_id: int, session: Session = Depends(get_session)):
    album = session.get(BestAlbum, album_id)
    if not album:
        raise HTTPException(status_code=404, detail="Album not found")
    return album


@router.post("", response_model=BestAlbumRead, status_code=201, dependencies=[Depends(require_superuser)])
def create_best_album(data: BestAlbumCreate, session: Session = Depends(get_session)):
    album = BestAlbum(**data.model_dump())
    session.add(album)
    session.commit()
    session.refresh(album)
    return album


@router.put("/{album_id}", response_model=BestAlbumRead, dependencies=[Depends(require_superuser)])
def update_best_album(
    album_id: int,
    data: BestAlbumUpdate,
    session: Session = Depends(get_session),
):
    album = session.get(BestAlbum, album_id)
    if not album:
        raise HTTPException(status_code=404, detail="Album not found")

    for key, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(album, key, value)
    album.updated_at = datetime.now(timezone.utc)

    session.add(album)
    session.commit()
    session.refresh(album)
    return album


@router.delete("/{album_id}", response_model=BestAlbumRead, dependencies=[Depends(require_superuser)])
def delete_best_album(album_id: int, session: Session = Depends(get_session)):
    album = session.get(BestAlbum, album_id)
    if not album:
        raise HTTPException(status_code=404, detail="Album not found")
    deleted = BestAlbumRead.model_validate(album)
    session.delete(album)
    session.commit()
    return deleted


@router.post("/batch-delete", response_model=BatchDeleteResult, dependencies=[Depends(require_superuser)])
def delete_best_albums(body: BatchIds, session: Session = Depends(get_session)):
    result = session.exec(delete(BestAlbum).where(BestAlbum.id.in_(body.ids)))
    session.commit()
    return BatchDeleteResult(n=result.rowcount, deleted_count=result.rowcount)
