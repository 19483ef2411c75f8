"""Pydantic schemas for the login / session contract."""

from pydantic import BaseModel, Field

from portfolio.schemas.base import CamelModel


class LoginRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AdminSession(CamelModel):
    email: str
    is_admin: bool


class SessionResponse(BaseModel):
    success: bool = True
    user: AdminSession
