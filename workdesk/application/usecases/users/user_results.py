"""
===============================================================================
USER USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Responsibilities:
    - UserErrorCode / UserError for the account flows.
    - Results: MobileCheckResult, RegistrationResult, LogoutResult,
      UserMobilesResult.

Collaborators:
    - domain.entities.UserRecord
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import UserRecord

USER_ALREADY_EXISTS_MESSAGE = "User Already Exists"
INVALID_OTP_MESSAGE = "Invalid OTP"


class UserErrorCode(str, Enum):
    """
    Codes:
      - CONFLICT: the mobile number already belongs to an account.
      - INVALID_OTP: no active OTP matches the mobile + code.
    """

    CONFLICT = "CONFLICT"
    INVALID_OTP = "INVALID_OTP"


@dataclass(frozen=True)
class UserError:
    code: UserErrorCode
    message: str


@dataclass(frozen=True)
class AccessToken:
    token: str
    expires_in: int
    token_type: str = "bearer"


@dataclass
class MobileCheckResult:
    exists: bool = False
    error: UserError | None = None


@dataclass
class RegistrationResult:
    user: UserRecord | None = None
    access_token: AccessToken | None = None
    error: UserError | None = None


@dataclass
class LogoutResult:
    removed: bool = False
    error: UserError | None = None


@dataclass
class UserMobilesResult:
    users: List[UserRecord] = field(default_factory=list)
    error: UserError | None = None


def conflict() -> UserError:
    return UserError(code=UserErrorCode.CONFLICT, message=USER_ALREADY_EXISTS_MESSAGE)
