# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from userhub.application.use_cases.users.list_users import ListUsersUseCase
from userhub.interfaces.http.dto.users import ErrorResponseDTO, UserTokenDTO, UsersListDTO
from userhub.shared.errors import StoreError
from userhub.shared.logging import logger


class UsersController:
    def __init__(self, *, list_users: ListUsersUseCase) -> None:
        self._list_users = list_users

    def list_users(self) -> tuple[Response, int]:
        logger.info("users.list: fetching users")
        try:
            issued = self._list_users.execute()
        except StoreError as exc:
            logger.error(f"users.list: error fetching users: {exc}")
            payload = ErrorResponseDTO(error="Failed to fetch users")
            return jsonify(payload.model_dump()), 500

        payload = UsersListDTO(data=[UserTokenDTO.model_validate(item) for item in issued])
        logger.info(f"users.list: ok count={len(payload.data)}")
        return jsonify(payload.model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/api/users")
        bp.add_url_rule("", view_func=self.list_users, methods=["GET"], strict_slashes=False)
        return bp
