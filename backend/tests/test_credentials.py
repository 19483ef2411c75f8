"""Password hashing and admin provisioning."""

import pytest

from portfolio.models.admin import Admin
from portfolio.services import auth_service
from portfolio.services.token_service import validate_token
from portfolio.utils.errors import AdminAlreadyExistsError, AuthError, ConflictError


def test_hash_is_salted_and_verifies():
    first = auth_service.hash_password("hunter22")
    second = auth_service.hash_password("hunter22")
    assert first != second
    assert auth_service.verify_password("hunter22", first)
    assert auth_service.verify_password("hunter22", second)
    assert not auth_service.verify_password("hunter23", first)


@pytest.mark.parametrize("stored", ["", "not-a-hash", "$pbkdf2-sha256$broken", None])
def test_verify_never_raises_on_malformed_hash(stored):
    assert auth_service.verify_password("hunter22", stored) is False


def test_create_admin_persists_hash_not_password(db):
    admin = auth_service.create_admin(db, "Owner@Example.com", "hunter22")
    stored = db.query(Admin).filter(Admin.admin_id == admin.admin_id).one()
    assert stored.email == "owner@example.com"
    assert stored.password_hash != "hunter22"


def test_create_admin_rejects_existing_email(db):
    auth_service.create_admin(db, "owner@example.com", "hunter22")
    with pytest.raises(AdminAlreadyExistsError) as exc_info:
        auth_service.create_admin(db, "owner@example.com", "another")
    assert isinstance(exc_info.value, ConflictError)
    assert db.query(Admin).count() == 1


def test_authenticate_admin_returns_valid_admin_token(db):
    for email, password in [("a@b.com", "secret1"), ("second@example.org", "p@ssw0rd!")]:
        auth_service.create_admin(db, email, password)
        token = auth_service.authenticate_admin(db, email, password)
        claims = validate_token(token)
        assert claims is not None
        assert claims.email == email
        assert claims.is_admin is True


def test_authenticate_admin_rejects_bad_password(db):
    auth_service.create_admin(db, "a@b.com", "secret1")
    with pytest.raises(AuthError):
        auth_service.authenticate_admin(db, "a@b.com", "wrong")
