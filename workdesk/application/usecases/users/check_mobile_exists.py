"""USE CASE: Check whether a mobile number is already registered."""

from __future__ import annotations

from ....domain.repositories import UserRepository
from .user_results import MobileCheckResult, conflict


class CheckMobileExistsUseCase:
    def __init__(self, users: UserRepository) -> None:
        self._users = users

    def execute(self, country_code: str, mobile: str) -> MobileCheckResult:
        if self._users.get_user_by_mobile(country_code, mobile) is not None:
            return MobileCheckResult(exists=True, error=conflict())
        return MobileCheckResult(exists=False)
