# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class UserTokenDTO(BaseModel):
    id: int
    username: str
    token: str

    model_config = ConfigDict(from_attributes=True)


class UsersListDTO(BaseModel):
    success: bool = True
    data: list[UserTokenDTO]


class ErrorResponseDTO(BaseModel):
    success: bool = False
    error: str
