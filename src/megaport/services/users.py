# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Company user management.

Users who have logged in at least once cannot be deleted, only deactivated;
users who have not yet accepted their invitation cannot be updated.
"""

from __future__ import annotations

import logging

from ..exceptions import InvalidStateError
from ..models.user import (
    CreatedUser,
    CreateUserRequest,
    UpdateUserRequest,
    User,
    UserActivity,
)
from .base import BaseService

logger = logging.getLogger(__name__)


class UserService(BaseService):
    resource = "user"

    async def create_user(self, request: CreateUserRequest) -> CreatedUser:
        """Invite a user. ``request`` was validated when it was built."""
        created = await self._client.request_model(
            "POST", "/v2/employment", CreatedUser, body=request
        )
        logger.info(f"Created user {created.employee_id} ({request.email})")
        return created

    async def get_user(self, employee_id: int) -> User:
        return await self._client.request_model("GET", f"/v2/employee/{employee_id}", User)

    async def list_company_users(self) -> list[User]:
        return await self._client.request_model("GET", "/v2/employment", list[User])

    async def update_user(self, employee_id: int, request: UpdateUserRequest) -> None:
        """
        Raises:
            InvalidStateError: If the user has not accepted their invitation.
        """
        user = await self.get_user(employee_id)
        if user.invitation_pending:
            raise InvalidStateError(
                f"cannot update user {employee_id}: invitation not yet accepted"
            )
        await self._client.execute("PUT", f"/v2/employee/{employee_id}", body=request)

    async def deactivate_user(self, employee_id: int) -> None:
        await self._client.execute(
            "PUT", f"/v2/employee/{employee_id}", body=UpdateUserRequest(active=False)
        )

    async def delete_user(self, employee_id: int) -> None:
        """
        Raises:
            InvalidStateError: If the user has already logged in; deactivate
                them instead.
        """
        user = await self.get_user(employee_id)
        if not user.invitation_pending:
            raise InvalidStateError(
                f"user {employee_id} has already logged in and can only be deactivated"
            )
        await self._client.execute("DELETE", f"/v2/employee/{employee_id}")
        logger.info(f"Deleted user {employee_id}")

    async def get_user_activity(
        self,
        person_id_or_uid: str | int | None = None,
        company_id_or_uid: str | int | None = None,
    ) -> list[UserActivity]:
        """Portal activity log, optionally narrowed to one user and/or company."""
        params: dict[str, str] = {}
        if person_id_or_uid:
            params["personIdOrUid"] = str(person_id_or_uid)
        if company_id_or_uid:
            params["companyIdOrUid"] = str(company_id_or_uid)
        return await self._client.request_model(
            "GET",
            "/v3/activity",
            list[UserActivity],
            params=params or None,
            enveloped=False,
        )


__all__ = ["UserService"]
