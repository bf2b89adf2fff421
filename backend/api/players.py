"""CRUD API for music player tracks."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import delete, update
from sqlmodel import Session, select

from backend.database import get_session
from backend.models.player import Player
from backend.schemas.batch import BatchDeleteResult, BatchIds, BatchUpdateResult
from backend.schemas.player import PlayerCreate, PlayerUpdate, PlayerRead
from backend.api.deps import require_superuser

router = APIRouter(prefix="/api/players", tags=["players"])


@router.get("", response_model=list[PlayerRead])
def list_players(
    displayed: bool | None = None,
    session: Session = Depends(get_session),
):
    stmt = select(Player).order_by(Player.updated_at.desc())
    if displayed is not None:
        stmt = stmt.where(Player.is_displayed == displayed)
    return session.exec(stmt).all()


@router.get("/{player_id}", response_model=PlayerRead)
def get_player(player_id: int, session: Session = Depends(get_session)):
    player = session.get(Player, player_id)
    if not player:
        raise HTTPException(status_code=404, detail="Player not found")
    return player


@router.post("", response_model=PlayerRead, status_code=201, dependencies=[Depends(require_superuser)])
def create_player(data: PlayerCreate, session: Session = Depends(get_session)):
    player = Player(**data.model_dump())
    session.add(player)
    session.commit()
    session.refresh(player)
    return player


@router.put("/{player_id}", response_model=PlayerRead, dependencies=[Depends(require_superuser)])
def update_player(
    player_id: int,
    data: PlayerUpdate,
    session: Session = Depends(get_session),
):
    player = session.get(Player, player_id)
    if not player:
        raise HTTPException(status_code=404, detail="Player not found")

    for key, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(player, key, value)
    player.updated_at = datetime.now(timezone.utc)

    session.add(player)
    session.commit()
    session.refresh(player)
    return player


@router.delete("/{player_id}", response_model=PlayerRead, dependencies=[Depends(require_superuser)])
def delete_player(player_id: int, session: Session = Depends(get_session)):
    player = session.get(Player, player_id)
    if not player:
        raise HTTPException(status_code=404, detail="Player not found")
    deleted = PlayerRead.model_validate(player)
    session.delete(player)
    session.commit()
    return deleted


@router.post("/batch-delete", response_model=BatchDeleteResult, dependencies=[Depends(require_superuser)])
def delete_players(body: BatchIds, session: Session = Depends(get_session)):
    result = session.exec(delete(Player).where(Player.id.in_(body.ids)))
    session.commit()
    return BatchDeleteResult(n=result.rowcount, deleted_count=result.rowcount)


@router.post("/offline", response_model=BatchUpdateResult, dependencies=[Depends(require_superuser)])
def offline_players(body: BatchIds, session: Session = Depends(get_session)):
    """Hide the given tracks from the public player."""
    matched = session.exec(select(Player.id).where(Player.id.in_(body.ids))).all()
    result = session.exec(
        update(Player)
        .where(Player.id.in_(body.ids), Player.is_displayed == True)
        .values(is_displayed=False, updated_at=datetime.now(timezone.utc))
    )
    session.commit()
    return BatchUpdateResult(n=len(matched), modified_count=result.rowcount)
