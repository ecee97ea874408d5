from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Password = Annotated[str, StringConstraints(min_length=1)]


class RegisterRequestDTO(BaseModel):
    username: Username
    password: Password


class LoginRequestDTO(BaseModel):
    username: Username
    password: Password


class RegisteredDTO(BaseModel):
    message: str = "User registered successfully"
    username: str


class TokenDTO(BaseModel):
    token: str

    model_config = ConfigDict(frozen=True)
