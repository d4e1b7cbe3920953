"""
===============================================================================
USE CASE: Register User (OTP verified)
===============================================================================

Business Goal:
    Create an account for a mobile number that proved ownership with an OTP,
    and sign the new user in on the registering device.

Flow:
    1) reject a mobile that already has an account
    2) find an Active OTP for (country_code, mobile, otp)
    3) create the user (role User, status Active, fresh account id)
    4) consume the OTP (Inactive) so it cannot be replayed
    5) store the device token
    6) issue a bearer access token

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    RegisterUserUseCase

Collaborators:
    - UserRepository: get_user_by_mobile, find_active_otp, create_user,
      consume_otp, add_device_token
    - token_issuer: identity-layer callable (user -> (token, expires_in))
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple
from uuid import uuid4

from ....domain.entities import (
    DeviceToken,
    RecordStatus,
    UserRecord,
    UserRole,
)
from ....domain.repositories import UserRepository
from .user_results import (
    INVALID_OTP_MESSAGE,
    AccessToken,
    RegistrationResult,
    UserError,
    UserErrorCode,
    conflict,
)

TokenIssuer = Callable[[UserRecord], Tuple[str, int]]


@dataclass
class RegisterUserInput:
    first_name: str
    last_name: Optional[str]
    country_code: str
    mobile: str
    otp: str
    device_token: str


class RegisterUserUseCase:
    def __init__(self, users: UserRepository, token_issuer: TokenIssuer) -> None:
        self._users = users
        self._issue_token = token_issuer

    def execute(self, input_data: RegisterUserInput) -> RegistrationResult:
        if (
            self._users.get_user_by_mobile(input_data.country_code, input_data.mobile)
            is not None
        ):
            return RegistrationResult(error=conflict())

        otp = self._users.find_active_otp(
            input_data.country_code, input_data.mobile, input_data.otp
        )
        if otp is None:
            return RegistrationResult(
                error=UserError(
                    code=UserErrorCode.INVALID_OTP, message=INVALID_OTP_MESSAGE
                )
            )

        user = self._users.create_user(
            UserRecord(
                first_name=input_data.first_name.strip(),
                last_name=(input_data.last_name or "").strip() or None,
                country_code=input_data.country_code,
                mobile=input_data.mobile,
                account_id=self._new_account_id(),
                role=UserRole.USER,
                status=RecordStatus.ACTIVE,
            )
        )
        self._users.consume_otp(otp.id)
        self._users.add_device_token(
            DeviceToken(user_id=user.id, token=input_data.device_token)
        )

        token, expires_in = self._issue_token(user)
        return RegistrationResult(
            user=user, access_token=AccessToken(token=token, expires_in=expires_in)
        )

    @staticmethod
    def _new_account_id() -> str:
        return uuid4().hex[:12].upper()
