"""
===============================================================================
CRC CARD — interfaces/api/http/routers/users.py
===============================================================================

Module:
    Users Router (mobile + OTP accounts)

Responsibilities:
    - Mobile availability check before registration.
    - Registration with OTP, returning the bearer token.
    - Logout (device token removal) and the contact mobile list.

Collaborators:
    - application.usecases.users
    - identity.auth_users.require_user
    - container (DI factories)

Notes:
    - check-mobile-exists answers "User Not Found!" with status_code 200 when
      the number is free; a taken number is the 400 outcome.
===============================================================================
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from .....application.usecases.users import (
    CheckMobileExistsUseCase,
    ListUserMobilesUseCase,
    LogoutUseCase,
    RegisterUserInput,
    RegisterUserUseCase,
)
from .....container import (
    get_check_mobile_exists_use_case,
    get_list_user_mobiles_use_case,
    get_logout_use_case,
    get_register_user_use_case,
)
from .....crosscutting.envelope import envelope_response
from .....crosscutting.logger import logger
from .....domain.entities import UserRecord
from .....identity.auth_users import require_user
from ..error_mapping import raise_user_error
from ..schemas.users import LogoutReq, MobileReq, RegisterUserReq

router = APIRouter(tags=["users"])


def user_to_dict(user: UserRecord) -> Dict[str, Any]:
    return {
        "id": user.id,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "country_code": user.country_code,
        "mobile": user.mobile,
        "account_id": user.account_id,
        "email": user.email,
        "role": user.role.value,
        "status": user.status.value,
    }


@router.post("/check-mobile-exists")
def check_mobile_exists(
    req: MobileReq,
    use_case: CheckMobileExistsUseCase = Depends(get_check_mobile_exists_use_case),
):
    result = use_case.execute(req.country_code, req.mobile)
    if result.error:
        raise_user_error(result.error)
    return envelope_response(200, "User Not Found!")


@router.post("/user-registration")
def register_user(
    req: RegisterUserReq,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
):
    result = use_case.execute(
        RegisterUserInput(
            first_name=req.first_name,
            last_name=req.last_name,
            country_code=req.country_code,
            mobile=req.mobile,
            otp=req.otp,
            device_token=req.device_token,
        )
    )
    if result.error:
        raise_user_error(result.error)

    logger.info("user registered", extra={"user_id": result.user.id})
    token = result.access_token
    return envelope_response(
        200,
        "User Registered Successfully.",
        {
            "userDetails": user_to_dict(result.user),
            "token": token.token,
            "token_type": token.token_type,
            "expires_in": token.expires_in,
        },
    )


@router.post("/logout")
def logout(
    req: LogoutReq,
    user: UserRecord = Depends(require_user()),
    use_case: LogoutUseCase = Depends(get_logout_use_case),
):
    use_case.execute(user.id, req.device_token)
    return envelope_response(200, "Logout Successfully.")


@router.post("/users-mobile-numbers")
def users_mobile_numbers(
    user: UserRecord = Depends(require_user()),
    use_case: ListUserMobilesUseCase = Depends(get_list_user_mobiles_use_case),
):
    result = use_case.execute()
    numbers = [
        {"country_code": u.country_code, "mobile": u.mobile} for u in result.users
    ]
    return envelope_response(200, "Get Data Successfully.", {"mobileNumbers": numbers})
