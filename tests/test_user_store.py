"""Tests for UserStore's conditional writes."""

import pytest

from backend.models.recovery_code import RecoveryCode
from backend.models.user import UserRole
from backend.services.auth import hash_recovery_code
from backend.services.errors import AlreadyRegistered
from sqlmodel import select


def _make_user(store, email="a@x.com", username="alice"):
    return store.create(email=email, username=username, hashed_password="x")


def test_lookups(store):
    user = _make_user(store)
    assert store.find_by_email("a@x.com").id == user.id
    assert store.find_by_username("alice").id == user.id
    assert store.find_by_id(user.id).email == "a@x.com"
    assert store.find_by_email("missing@x.com") is None
    assert store.find_by_username("missing") is None
    assert store.find_by_id(999) is None


def test_count(store):
    assert store.count() == 0
    _make_user(store)
    _make_user(store, "b@x.com", "bob")
    assert store.count() == 2


def test_default_role_is_regular(store):
    assert _make_user(store).role == UserRole.REGULAR


def test_unique_violation_maps_to_already_registered(store):
    _make_user(store)
    with pytest.raises(AlreadyRegistered):
        _make_user(store, "a@x.com", "other")
    # Session still usable after the rollback
    assert store.count() == 1


def test_update_missing_user_returns_none(store):
    assert store.update(42, is_totp=True) is None


def test_update_bumps_updated_at(store):
    user = _make_user(store)
    before = user.updated_at
    updated = store.update(user.id, totp_secret_encrypted="cipher")
    assert updated.totp_secret_encrypted == "cipher"
    assert updated.updated_at >= before


def test_enable_totp_flips_once(store):
    user = _make_user(store)
    assert store.enable_totp(user.id) is True
    assert store.enable_totp(user.id) is False
    assert store.find_by_id(user.id).is_totp is True


def test_recovery_codes_stored_hashed(store, session):
    user = _make_user(store)
    store.replace_recovery_codes(user.id, ["aaaaa-bbbbb", "ccccc-ddddd"])

    rows = session.exec(select(RecoveryCode).where(RecoveryCode.user_id == user.id)).all()
    stored = {row.code_hash for row in rows}
    assert stored == {hash_recovery_code("aaaaa-bbbbb"), hash_recovery_code("ccccc-ddddd")}
    assert "aaaaa-bbbbb" not in stored


def test_consume_recovery_code_is_remove_if_present(store):
    user = _make_user(store)
    store.replace_recovery_codes(user.id, ["aaaaa-bbbbb", "ccccc-ddddd"])

    assert store.consume_recovery_code(user.id, "aaaaa-bbbbb") is True
    assert store.consume_recovery_code(user.id, "aaaaa-bbbbb") is False
    assert store.consume_recovery_code(user.id, "zzzzz-zzzzz") is False
    assert store.count_recovery_codes(user.id) == 1


def test_consume_requires_exact_match(store):
    user = _make_user(store)
    store.replace_recovery_codes(user.id, ["aaaaa-bbbbb"])
    assert store.consume_recovery_code(user.id, "  AAAAA-BBBBB ") is False
    assert store.consume_recovery_code(user.id, "aaaaa-bbbbb ") is False
    assert store.consume_recovery_code(user.id, "aaaaa-bbbbb") is True


def test_replace_recovery_codes_drops_previous(store):
    user = _make_user(store)
    store.replace_recovery_codes(user.id, ["aaaaa-bbbbb"])
    store.replace_recovery_codes(user.id, ["ccccc-ddddd", "eeeee-fffff"])
    assert store.count_recovery_codes(user.id) == 2
    assert store.consume_recovery_code(user.id, "aaaaa-bbbbb") is False
