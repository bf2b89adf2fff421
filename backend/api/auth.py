"""Authentication API — login, registration, TOTP and recovery codes."""

from fastapi import APIRouter, Depends

from backend.api.deps import get_auth_service, get_current_user
from backend.models.user import User
from backend.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RecoveryCodesResponse,
    RegisterRequest,
    TOTPEnrollmentResponse,
    TwoFactorRequest,
    UserPublic,
    public_view,
)
from backend.services.auth_flow import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    return auth.login(body.email, body.password)


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(body: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    return auth.register(body.email, body.username, body.password)


@router.post("/totp", response_model=TOTPEnrollmentResponse)
def create_totp(
    current_user: User = Depends(get_current_user),
    auth: AuthService = Depends(get_auth_service),
):
    """Start (or restart) TOTP enrollment for the current user."""
    return auth.create_totp(current_user.id, current_user.email)


@router.post("/totp/validate", response_model=AuthResponse)
def validate_totp(body: TwoFactorRequest, auth: AuthService = Depends(get_auth_service)):
    return auth.validate_totp(body.user_id, body.token)


@router.post("/recovery-codes", response_model=RecoveryCodesResponse)
def create_recovery_codes(
    current_user: User = Depends(get_current_user),
    auth: AuthService = Depends(get_auth_service),
):
    """Issue a fresh batch of recovery codes; any previous batch stops working."""
    return auth.create_recovery_codes(current_user.id)


@router.post("/recovery-codes/validate", response_model=AuthResponse)
def validate_recovery_code(body: TwoFactorRequest, auth: AuthService = Depends(get_auth_service)):
    return auth.validate_recovery_code(body.user_id, body.token)


@router.get("/me", response_model=UserPublic)
def get_me(current_user: User = Depends(get_current_user)):
    return public_view(current_user)
