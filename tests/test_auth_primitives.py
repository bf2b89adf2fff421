"""Tests for hashing, token signing, TOTP and recovery-code helpers."""

import re
import time

import pyotp
import pytest
from cryptography.fernet import InvalidToken
from jose import jwt

from backend.config import settings
from backend.services import encryption
from backend.services.auth import (
    create_access_token,
    decode_access_token,
    generate_recovery_codes,
    generate_totp_secret,
    get_totp_uri,
    hash_password,
    hash_recovery_code,
    render_qrcode,
    verify_password,
    verify_totp,
)


def test_password_roundtrip():
    hashed = hash_password("correct horse")
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


def test_access_token_claims():
    token = create_access_token(subject="7", email="a@x.com")
    claims = decode_access_token(token)
    assert claims["sub"] == "7"
    assert claims["email"] == "a@x.com"
    assert "exp" in claims


def test_decode_rejects_foreign_signature():
    token = jwt.encode({"sub": "7", "email": "a@x.com"}, "another-secret", algorithm="HS256")
    assert decode_access_token(token) is None
    assert decode_access_token("not-a-token") is None


def test_totp_accepts_current_and_adjacent_step():
    secret = generate_totp_secret()
    totp = pyotp.TOTP(secret)
    now = time.time()
    assert verify_totp(secret, totp.at(now))
    assert verify_totp(secret, totp.at(now - 30))
    assert verify_totp(secret, totp.at(now + 30))


def test_totp_rejects_stale_code():
    secret = generate_totp_secret()
    totp = pyotp.TOTP(secret)
    stale = totp.at(time.time() - 300)
    if stale not in {totp.at(time.time() + d) for d in (-30, 0, 30)}:
        assert not verify_totp(secret, stale)


def test_totp_uri_carries_issuer_and_account():
    uri = get_totp_uri(generate_totp_secret(), "a@x.com")
    assert uri.startswith("otpauth://totp/")
    assert "a%40x.com" in uri
    assert "issuer=Yancey%20Inc." in uri


def test_render_qrcode_is_png_data_uri():
    assert render_qrcode("otpauth://totp/x").startswith("data:image/png;base64,iVBOR")


def test_recovery_code_batch():
    codes = generate_recovery_codes()
    assert len(codes) == 10
    assert len(set(codes)) == 10
    assert all(re.fullmatch(r"[0-9a-f]{5}-[0-9a-f]{5}", c) for c in codes)


def test_recovery_code_hash_is_exact():
    assert hash_recovery_code("ABCDE-12345") != hash_recovery_code("abcde-12345")
    assert hash_recovery_code("abcde-12345 ") != hash_recovery_code("abcde-12345")
    assert hash_recovery_code("abcde-12345") != hash_recovery_code("abcde-12346")


class TestEncryption:
    def test_roundtrip(self):
        token = encryption.encrypt("JBSWY3DPEHPK3PXP")
        assert token != "JBSWY3DPEHPK3PXP"
        assert encryption.decrypt(token) == "JBSWY3DPEHPK3PXP"

    def test_missing_key_raises(self, monkeypatch):
        monkeypatch.setattr(settings, "encryption_key", "")
        encryption.reset_cipher()
        try:
            with pytest.raises(RuntimeError, match="BLOG_ENCRYPTION_KEY"):
                encryption.encrypt("x")
        finally:
            monkeypatch.undo()
            encryption.reset_cipher()

    def test_ciphertext_from_other_key_rejected(self):
        from cryptography.fernet import Fernet

        foreign = Fernet(Fernet.generate_key()).encrypt(b"secret").decode()
        with pytest.raises(InvalidToken):
            encryption.decrypt(foreign)
