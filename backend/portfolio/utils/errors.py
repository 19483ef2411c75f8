"""Domain exceptions shared by services and routers. Handlers in main translate them to JSON responses."""

from typing import Any, Dict, List, Optional


class PortfolioError(Exception):
    status_code = 500
    default_detail = "Internal server error"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)

    def to_payload(self) -> Dict[str, Any]:
        return {"success": False, "detail": self.detail}


class AuthError(PortfolioError):
    status_code = 401
    default_detail = "Not authenticated"


class ValidationError(PortfolioError):
    status_code = 400
    default_detail = "Validation failed"

    def __init__(self, detail: Optional[str] = None, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(detail)
        self.errors = errors or []

    @classmethod
    def for_field(cls, field: str, reason: str) -> "ValidationError":
        return cls(f"{field}: {reason}", errors=[{"field": field, "reason": reason}])

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        payload["errors"] = self.errors
        return payload


class NotFoundError(PortfolioError):
    status_code = 404
    default_detail = "Not found"


class ConflictError(PortfolioError):
    status_code = 409
    default_detail = "Conflict"


class DuplicateSlugError(ConflictError):
    default_detail = "A project with this title already exists"


class AdminAlreadyExistsError(ConflictError):
    default_detail = "Admin already exists"


class StorageError(PortfolioError):
    status_code = 500
    default_detail = "Storage backend unavailable"


class ConfigError(RuntimeError):
    """Missing or invalid environment configuration. Raised at startup only."""


def field_errors_from_pydantic(errors: List[Dict[str, Any]], skip_prefixes=("body",)) -> List[Dict[str, str]]:
    result = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if str(part) not in skip_prefixes]
        result.append({"field": ".".join(loc) or "body", "reason": str(err.get("msg", "invalid value"))})
    return result
