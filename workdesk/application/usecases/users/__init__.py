"""User account use cases (public exports)."""

from __future__ import annotations

from .check_mobile_exists import CheckMobileExistsUseCase
from .list_user_mobiles import ListUserMobilesUseCase
from .logout import LogoutUseCase
from .register_user import RegisterUserInput, RegisterUserUseCase
from .user_results import (
    AccessToken,
    LogoutResult,
    MobileCheckResult,
    RegistrationResult,
    UserError,
    UserErrorCode,
    UserMobilesResult,
)

__all__ = [
    "CheckMobileExistsUseCase",
    "RegisterUserInput",
    "RegisterUserUseCase",
    "LogoutUseCase",
    "ListUserMobilesUseCase",
    "AccessToken",
    "UserError",
    "UserErrorCode",
    "MobileCheckResult",
    "RegistrationResult",
    "LogoutResult",
    "UserMobilesResult",
]
