"""Admin authentication: request-level gate for admin pages and a dependency for protected API routes."""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse

from portfolio.config import settings
from portfolio.services.token_service import TokenClaims, validate_token
from portfolio.utils.errors import AuthError

logger = logging.getLogger(__name__)

bearer = HTTPBearer(auto_error=False)


def is_protected_path(path: str, prefix: str = None, login_path: str = None) -> bool:
    prefix = (prefix or settings.ADMIN_PREFIX).rstrip("/")
    login_path = (login_path or settings.ADMIN_LOGIN_PATH).rstrip("/")
    if path != prefix and not path.startswith(prefix + "/"):
        return False
    return path != login_path and not path.startswith(login_path + "/")


def _session_token(request: Request, credentials: Optional[HTTPAuthorizationCredentials] = None) -> Optional[str]:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token and credentials is not None:
        token = credentials.credentials
    return token


class AdminGateMiddleware(BaseHTTPMiddleware):
    """Redirects unauthenticated requests for admin pages to the login page before any handler runs."""

    async def dispatch(self, request: Request, call_next):
        if not is_protected_path(request.url.path):
            return await call_next(request)

        token = request.cookies.get(settings.SESSION_COOKIE_NAME)
        if not token:
            logger.debug("[gate] no session cookie for %s", request.url.path)
            return RedirectResponse(settings.ADMIN_LOGIN_PATH)

        try:
            claims = validate_token(token)
        except Exception as exc:
            # fail closed
            logger.warning("[gate] session validation error for %s: %s", request.url.path, exc)
            claims = None

        if claims is None or not claims.is_admin:
            logger.debug("[gate] invalid session for %s", request.url.path)
            return RedirectResponse(settings.ADMIN_LOGIN_PATH)

        request.state.admin = claims
        return await call_next(request)


def get_current_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
) -> TokenClaims:
    token = _session_token(request, credentials)
    if not token:
        raise AuthError("No token provided")
    claims = validate_token(token)
    if claims is None or not claims.is_admin:
        raise AuthError("Invalid or expired token")
    return claims
