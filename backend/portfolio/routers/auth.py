"""Auth API router: login sets the session cookie, verify reports the session, logout clears it."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from portfolio.config import settings
from portfolio.database import get_db
from portfolio.middleware.auth_middleware import get_current_admin
from portfolio.schemas.auth import AdminSession, LoginRequest, SessionResponse
from portfolio.services import auth_service
from portfolio.services.token_service import TokenClaims

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login")
def login(request: LoginRequest, response: Response, db: Session = Depends(get_db)):
    token = auth_service.authenticate_admin(db, request.email, request.password)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )
    return {"success": True, "message": "Login successful"}


@router.get("/verify", response_model=SessionResponse)
def verify(current_admin: TokenClaims = Depends(get_current_admin)):
    return SessionResponse(user=AdminSession(email=current_admin.email, is_admin=current_admin.is_admin))


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )
    return {"success": True, "message": "Logged out"}
