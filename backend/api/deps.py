"""Shared API dependencies."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from backend.database import get_session
from backend.models.user import User, UserRole
from backend.services.auth import decode_access_token
from backend.services.auth_flow import AuthService
from backend.services.users import UserStore

bearer_scheme = HTTPBearer()


def get_user_store(session: Session = Depends(get_session)) -> UserStore:
    return UserStore(session)


def get_auth_service(store: UserStore = Depends(get_user_store)) -> AuthService:
    return AuthService(store)


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    store: UserStore = Depends(get_user_store),
) -> User:
    """Validate JWT and return the current user."""
    claims = decode_access_token(credentials.credentials)
    subject = claims.get("sub") if claims else None
    if subject is None or not str(subject).isdigit():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    user = store.find_by_id(int(subject))
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return user


def require_superuser(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.SUPERUSER:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Superuser access required",
        )
    return current_user
