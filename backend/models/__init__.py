"""Database models."""

from backend.models.user import User, UserRole
from backend.models.recovery_code import RecoveryCode
from backend.models.player import Player
from backend.models.best_album import BestAlbum
from backend.models.sms import SMS
from backend.models.yancey_music import YanceyMusic

__all__ = [
    "User",
    "UserRole",
    "RecoveryCode",
    "Player",
    "BestAlbum",
    "SMS",
    "YanceyMusic",
]
