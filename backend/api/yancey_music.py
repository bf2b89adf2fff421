"""CRUD API for the site owner's own music."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import delete
from sqlmodel import Session, select

from backend.database import get_session
from backend.models.yancey_music import YanceyMusic
from backend.schemas.batch import BatchDeleteResult, BatchIds
from backend.schemas.yancey_music import YanceyMusicCreate, YanceyMusicUpdate, YanceyMusicRead
from backend.api.deps import require_superuser

router = APIRouter(prefix="/api/yancey-music", tags=["yancey-music"])


@router.get("", response_model=list[YanceyMusicRead])
def list_yancey_music(session: Session = Depends(get_session)):
    return session.exec(select(YanceyMusic).order_by(YanceyMusic.release_date.desc())).all()


@router.get("/{music_id}", response_model=YanceyMusicRead)
def get_yancey_music(music_id: int, session: Session = Depends(get_session)):
    music = session.get(YanceyMusic, music_id)
    if not music:
        raise HTTPException(status_code=404, detail="Music not found")
    return music


@router.post("", response_model=YanceyMusicRead, status_code=201, dependencies=[Depends(require_superuser)])
def create_yancey_music(data: YanceyMusicCreate, session: Session = Depends(get_session)):
    music = YanceyMusic(**data.model_dump())
    session.add(music)
    session.commit()
    session.refresh(music)
    return music


@router.put("/{music_id}", response_model=YanceyMusicRead, dependencies=[Depends(require_superuser)])
def update_yancey_music(
    music_id: int,
    data: YanceyMusicUpdate,
    session: Session = Depends(get_session),
):
    music = session.get(YanceyMusic, music_id)
    if not music:
        raise HTTPException(status_code=404, detail="Music not found")

    for key, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(music, key, value)
    music.updated_at = datetime.now(timezone.utc)

    session.add(music)
    session.commit()
    session.refresh(music)
    return music


@router.delete("/{music_id}", response_model=YanceyMusicRead, dependencies=[Depends(require_superuser)])
def delete_yancey_music(music_id: int, session: Session = Depends(get_session)):
    music = session.get(YanceyMusic, music_id)
    if not music:
        raise HTTPException(status_code=404, detail="Music not found")
    deleted = YanceyMusicRead.model_validate(music)
    session.delete(music)
    session.commit()
    return deleted


@router.post("/batch-delete", response_model=BatchDeleteResult, dependencies=[Depends(require_superuser)])
def delete_yancey_music_batch(body: BatchIds, session: Session = Depends(get_session)):
    result = session.exec(delete(YanceyMusic).where(YanceyMusic.id.in_(body.ids)))
    session.commit()
    return BatchDeleteResult(n=result.rowcount, deleted_count=result.rowcount)
