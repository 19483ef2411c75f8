"""Admin credential store: password hashing, admin provisioning and login."""

import logging

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portfolio.models.admin import Admin
from portfolio.services.token_service import issue_token
from portfolio.utils.errors import AdminAlreadyExistsError, AuthError

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    try:
        return pwd_context.verify(password, password_hash)
    except (ValueError, TypeError):
        # unrecognized or corrupt hash
        return False


def _normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def get_admin(db: Session, email: str) -> Admin | None:
    return db.query(Admin).filter(Admin.email == _normalize_email(email)).first()


def create_admin(db: Session, email: str, password: str) -> Admin:
    normalized = _normalize_email(email)
    if get_admin(db, normalized):
        raise AdminAlreadyExistsError()
    admin = Admin(email=normalized, password_hash=hash_password(password))
    db.add(admin)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise AdminAlreadyExistsError()
    db.refresh(admin)
    logger.info("[auth] admin created: %s", normalized)
    return admin


def authenticate_admin(db: Session, email: str, password: str) -> str:
    admin = get_admin(db, email)
    if not admin or not verify_password(password, admin.password_hash):
        logger.warning("[auth] failed login for %s", _normalize_email(email))
        raise AuthError("Invalid credentials")
    return issue_token(admin.email)
