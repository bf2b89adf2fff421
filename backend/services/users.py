"""User persistence: lookups, creation, updates and recovery-code storage.

Operations that must not race (unique email/username, flipping the TOTP flag,
consuming a recovery code) are expressed as single conditional statements so the
database decides the outcome.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select, func

from backend.models.recovery_code import RecoveryCode
from backend.models.user import User
from backend.services.auth import hash_recovery_code
from backend.services.errors import AlreadyRegistered

logger = logging.getLogger(__name__)


class UserStore:
    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, user_id: int) -> User | None:
        return self.session.get(User, user_id)

    def find_by_email(self, email: str) -> User | None:
        return self.session.exec(select(User).where(User.email == email)).first()

    def find_by_username(self, username: str) -> User | None:
        return self.session.exec(select(User).where(User.username == username)).first()

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(User)).one()

    def create(self, **fields) -> User:
        """Insert a user. A unique-constraint violation raises ``AlreadyRegistered``."""
        user = User(**fields)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise AlreadyRegistered()
        self.session.refresh(user)
        return user

    def update(self, user_id: int, **fields) -> User | None:
        user = self.session.get(User, user_id)
        if user is None:
            return None
        for key, value in fields.items():
            setattr(user, key, value)
        user.updated_at = datetime.now(timezone.utc)
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def enable_totp(self, user_id: int) -> bool:
        """Set ``is_totp``; returns True only for the call that actually flipped it."""
        result = self.session.exec(
            update(User)
            .where(User.id == user_id, User.is_totp == False)
            .values(is_totp=True, updated_at=datetime.now(timezone.utc))
        )
        self.session.commit()
        return result.rowcount == 1

    def replace_recovery_codes(self, user_id: int, codes: list[str]):
        """Swap the user's whole recovery-code set in one transaction."""
        self.session.exec(delete(RecoveryCode).where(RecoveryCode.user_id == user_id))
        self.session.add_all(
            RecoveryCode(user_id=user_id, code_hash=hash_recovery_code(code)) for code in codes
        )
        self.session.commit()

    def consume_recovery_code(self, user_id: int, code: str) -> bool:
        """Delete the matching code if present. True means this call consumed it."""
        result = self.session.exec(
            delete(RecoveryCode).where(
                RecoveryCode.user_id == user_id,
                RecoveryCode.code_hash == hash_recovery_code(code),
            )
        )
        self.session.commit()
        return result.rowcount == 1

    def count_recovery_codes(self, user_id: int) -> int:
        return self.session.exec(
            select(func.count()).select_from(RecoveryCode).where(RecoveryCode.user_id == user_id)
        ).one()
