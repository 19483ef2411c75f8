"""Admin surface: login page, session overview and content seeding."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from portfolio.config import settings
from portfolio.database import get_db
from portfolio.middleware.auth_middleware import get_current_admin
from portfolio.models.project import Project
from portfolio.services import content_service
from portfolio.services.cache_service import RevalidationDispatcher, get_dispatcher
from portfolio.services.token_service import TokenClaims

router = APIRouter(tags=["admin"])

LOGIN_PAGE = """<!doctype html>
<html lang="en">
<head><meta charset="utf-8"><title>Admin login</title></head>
<body>
  <form id="login">
    <input name="email" type="email" placeholder="Email" required>
    <input name="password" type="password" placeholder="Password" required>
    <button type="submit">Sign in</button>
    <p id="error" hidden></p>
  </form>
  <script>
    document.getElementById("login").addEventListener("submit", async (event) => {
      event.preventDefault();
      const form = new FormData(event.target);
      const resp = await fetch("/api/auth/login", {
        method: "POST",
        headers: {"Content-Type": "application/json"},
        body: JSON.stringify({email: form.get("email"), password: form.get("password")}),
      });
      if (resp.ok) { window.location.href = "%(admin_prefix)s"; return; }
      const error = document.getElementById("error");
      error.textContent = "Invalid credentials";
      error.hidden = false;
    });
  </script>
</body>
</html>
"""


@router.get(settings.ADMIN_LOGIN_PATH, response_class=HTMLResponse)
def login_page():
    return LOGIN_PAGE % {"admin_prefix": settings.ADMIN_PREFIX}


@router.get(settings.ADMIN_PREFIX)
def admin_home(
    db: Session = Depends(get_db),
    current_admin: TokenClaims = Depends(get_current_admin),
):
    return {
        "success": True,
        "user": {"email": current_admin.email, "isAdmin": current_admin.is_admin},
        "sections": [*content_service.CONTENT_TYPES, "projects"],
        "projectCount": db.query(Project).count(),
    }


@router.post("/api/init-db")
def init_db(
    db: Session = Depends(get_db),
    dispatcher: RevalidationDispatcher = Depends(get_dispatcher),
    _admin: TokenClaims = Depends(get_current_admin),
):
    created = content_service.seed_all(db)
    if created:
        dispatcher.invalidate_all()
    return {"success": True, "created": created}
