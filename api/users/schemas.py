"""
User API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class UserPayload(BaseModel):
    # Both optional here; presence is checked by the handlers so a missing
    # field answers 400 with the API's own message.
    name: str | None = Field(default=None, description="Nome do usuário")
    email: str | None = Field(default=None, description="Email do usuário")


class User(BaseModel):
    id: int = Field(..., description="ID do usuário")
    name: str = Field(..., description="Nome do usuário")
    email: str = Field(..., description="Email do usuário")


class ErrorResponse(BaseModel):
    error: str


class MessageResponse(BaseModel):
    message: str
