"""USE CASE: Logout (forget one device token of the caller)."""

from __future__ import annotations

from ....domain.repositories import UserRepository
from .user_results import LogoutResult


class LogoutUseCase:
    def __init__(self, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int, device_token: str) -> LogoutResult:
        # R: unknown tokens are not an error; the device is signed out either way.
        return LogoutResult(removed=self._users.delete_device_token(user_id, device_token))
