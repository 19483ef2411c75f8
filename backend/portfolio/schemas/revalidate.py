"""Request/response schemas for cache revalidation."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from portfolio.schemas.base import CamelModel


class RevalidateRequest(BaseModel):
    type: Literal["path", "tag", "all"]
    path: Optional[str] = None
    tag: Optional[str] = None
    force: bool = False

    @model_validator(mode="after")
    def _check_target(self):
        if self.type == "path":
            if not self.path or not self.path.startswith("/"):
                raise ValueError("path must be an absolute path when type is 'path'")
        if self.type == "tag" and not self.tag:
            raise ValueError("tag is required when type is 'tag'")
        return self


class RevalidateResponse(CamelModel):
    success: bool = True
    message: str
    invalidated_targets: List[str] = Field(default_factory=list)
