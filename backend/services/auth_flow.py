"""Login, registration and two-factor flows.

Every successful path that confirms the caller's identity ends in
``_authenticated``, which signs a fresh token and attaches the public projection
of the user. Raw ``User`` rows never leave this module.
"""

import logging

from backend.models.user import User, UserRole
from backend.schemas.auth import (
    AuthResponse,
    RecoveryCodesResponse,
    TOTPEnrollmentResponse,
    public_view,
)
from backend.services.auth import (
    create_access_token,
    generate_recovery_codes,
    generate_totp_secret,
    get_totp_uri,
    hash_password,
    render_qrcode,
    verify_password,
    verify_totp,
)
from backend.services.encryption import decrypt, encrypt
from backend.services.errors import (
    AlreadyRegistered,
    InvalidCredentials,
    TwoFactorFailed,
    UserNotFound,
)
from backend.services.users import UserStore

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, store: UserStore):
        self.store = store

    def _authenticated(self, user: User) -> AuthResponse:
        token = create_access_token(subject=str(user.id), email=user.email)
        return AuthResponse(access_token=token, user=public_view(user))

    def login(self, email: str, password: str) -> AuthResponse:
        user = self.store.find_by_email(email)
        # Unknown email and wrong password look the same to the caller
        if user is None or not verify_password(password, user.hashed_password):
            logger.warning("Failed login attempt")
            raise InvalidCredentials()

        logger.info(f"User {user.id} logged in")
        return self._authenticated(user)

    def register(self, email: str, username: str, password: str) -> AuthResponse:
        if self.store.find_by_email(email) or self.store.find_by_username(username):
            raise AlreadyRegistered()

        # The first account in an empty store becomes the superuser. Two concurrent
        # registrations against an empty store can both see count == 0.
        role = UserRole.SUPERUSER if self.store.count() == 0 else UserRole.REGULAR

        user = self.store.create(
            email=email,
            username=username,
            hashed_password=hash_password(password),
            role=role,
        )
        logger.info(f"Registered user {user.id} with role {role.value}")
        return self._authenticated(user)

    def create_totp(self, user_id: int, email: str) -> TOTPEnrollmentResponse:
        """Provision a new TOTP secret, replacing any previous one.

        Two-factor is not switched on here; that happens on the first
        successful ``validate_totp``.
        """
        if self.store.find_by_id(user_id) is None:
            raise UserNotFound()

        secret = generate_totp_secret()
        self.store.update(user_id, totp_secret_encrypted=encrypt(secret))
        logger.info(f"TOTP secret provisioned for user {user_id}")

        return TOTPEnrollmentResponse(
            qrcode=render_qrcode(get_totp_uri(secret, email)),
            secret_key=secret,
        )

    def validate_totp(self, user_id: int, code: str) -> AuthResponse:
        user = self.store.find_by_id(user_id)
        if user is None or not user.totp_secret_encrypted:
            raise TwoFactorFailed()

        if not verify_totp(decrypt(user.totp_secret_encrypted), code):
            logger.warning(f"TOTP verification failed for user {user_id}")
            raise TwoFactorFailed()

        if not user.is_totp and self.store.enable_totp(user_id):
            logger.info(f"Two-factor authentication enabled for user {user_id}")
            user = self.store.find_by_id(user_id)

        return self._authenticated(user)

    def create_recovery_codes(self, user_id: int) -> RecoveryCodesResponse:
        user = self.store.find_by_id(user_id)
        if user is None:
            raise UserNotFound()

        codes = generate_recovery_codes()
        self.store.replace_recovery_codes(user_id, codes)
        user = self.store.update(user_id)
        logger.info(f"Issued {len(codes)} recovery codes for user {user_id}")

        return RecoveryCodesResponse(recovery_codes=codes, user=public_view(user))

    def validate_recovery_code(self, user_id: int, code: str) -> AuthResponse:
        user = self.store.find_by_id(user_id)
        if user is None or not self.store.consume_recovery_code(user_id, code):
            logger.warning(f"Recovery code rejected for user {user_id}")
            raise TwoFactorFailed()

        remaining = self.store.count_recovery_codes(user_id)
        logger.info(f"Recovery code redeemed for user {user_id} ({remaining} left)")
        return self._authenticated(user)
