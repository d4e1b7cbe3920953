"""USE CASE: Mobile numbers of active, regular users (contact matching)."""

from __future__ import annotations

from ....domain.repositories import UserRepository
from .user_results import UserMobilesResult


class ListUserMobilesUseCase:
    def __init__(self, users: UserRepository) -> None:
        self._users = users

    def execute(self) -> UserMobilesResult:
        return UserMobilesResult(users=self._users.list_active_user_mobiles())
