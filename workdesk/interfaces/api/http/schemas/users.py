"""
===============================================================================
CRC CARD — schemas/users.py
===============================================================================

Responsibilities:
    - Request DTOs for the account endpoints.
    - Format rules: names (letters/spaces), country code (+1..+999),
      10-digit mobile, 6-digit OTP.
===============================================================================
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

_NAME_RE = re.compile(r"^[A-Za-z ]+$")
_COUNTRY_CODE_RE = re.compile(r"^\+\d{1,3}$")
_MOBILE_RE = re.compile(r"^\d{10}$")
_OTP_RE = re.compile(r"^\d{6}$")


def _check(pattern: re.Pattern, value: str, label: str, message: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError(f"{label} is required.")
    value = str(value).strip()
    if not pattern.match(value):
        raise ValueError(message)
    return value


class MobileReq(BaseModel):
    country_code: str = Field(...)
    mobile: str = Field(...)

    @field_validator("country_code")
    @classmethod
    def country_code_format(cls, v: str) -> str:
        return _check(
            _COUNTRY_CODE_RE, v, "Country Code", "Invalid country code format."
        )

    @field_validator("mobile")
    @classmethod
    def mobile_format(cls, v: str) -> str:
        return _check(
            _MOBILE_RE,
            v,
            "Mobile",
            "Invalid mobile number format. It should be numeric and 10 digits long.",
        )


class RegisterUserReq(MobileReq):
    first_name: str = Field(..., max_length=255)
    last_name: Optional[str] = Field(None, max_length=255)
    otp: str = Field(...)
    device_token: str = Field(..., max_length=512)

    @field_validator("first_name")
    @classmethod
    def first_name_format(cls, v: str) -> str:
        return _check(
            _NAME_RE, v, "First Name", "First Name may only contain letters and spaces."
        )

    @field_validator("last_name")
    @classmethod
    def last_name_format(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return _check(
            _NAME_RE, v, "Last Name", "Last Name may only contain letters and spaces."
        )

    @field_validator("otp")
    @classmethod
    def otp_format(cls, v: str) -> str:
        return _check(_OTP_RE, v, "Otp", "OTP must be 6 digits.")

    @field_validator("device_token")
    @classmethod
    def device_token_required(cls, v: str) -> str:
        if v is None or not str(v).strip():
            raise ValueError("Device Token is required.")
        return v.strip()


class LogoutReq(BaseModel):
    device_token: str = Field(...)

    @field_validator("device_token")
    @classmethod
    def device_token_required(cls, v: str) -> str:
        if v is None or not str(v).strip():
            raise ValueError("Device Token is required.")
        return v.strip()
