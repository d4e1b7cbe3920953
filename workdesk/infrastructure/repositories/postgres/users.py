"""
============================================================
CRC CARD — infrastructure/repositories/postgres/users.py
============================================================
Class: PostgresUserRepository

Responsibilities:
- Read/create accounts, verify and consume OTPs, manage device tokens.

Collaborators:
- domain.entities: UserRecord, UserOtp, DeviceToken
- PostgresRepositoryBase
- Tables: users, user_otps, user_device_tokens

Notes:
- Device tokens are hard-deleted on logout (no history kept).
============================================================
"""

from __future__ import annotations

from typing import List, Optional

from ....domain.entities import (
    DeviceToken,
    RecordStatus,
    UserOtp,
    UserRecord,
    UserRole,
)
from .base import PostgresRepositoryBase


class PostgresUserRepository(PostgresRepositoryBase):
    """R: PostgreSQL implementation of UserRepository."""

    _USER_COLUMNS = """
        id, first_name, last_name, country_code, mobile, email,
        account_id, role, status, created_at
    """

    @staticmethod
    def _row_to_user(row: tuple) -> UserRecord:
        (
            user_id,
            first_name,
            last_name,
            country_code,
            mobile,
            email,
            account_id,
            role,
            status,
            created_at,
        ) = row
        return UserRecord(
            id=user_id,
            first_name=first_name,
            last_name=last_name,
            country_code=country_code,
            mobile=mobile,
            email=email,
            account_id=account_id,
            role=UserRole(role),
            status=RecordStatus(status),
            created_at=created_at,
        )

    # =========================================================
    # Users
    # =========================================================
    def get_user(self, user_id: int) -> Optional[UserRecord]:
        row = self._fetchone(
            query=f"""
                SELECT {self._USER_COLUMNS}
                FROM users
                WHERE id = %s AND deleted_at IS NULL
            """,
            params=[user_id],
            context_msg="PostgresUserRepository: Failed to get user",
            extra={"user_id": user_id},
        )
        return self._row_to_user(row) if row else None

    def get_user_by_mobile(
        self, country_code: str, mobile: str
    ) -> Optional[UserRecord]:
        row = self._fetchone(
            query=f"""
                SELECT {self._USER_COLUMNS}
                FROM users
                WHERE country_code = %s AND mobile = %s AND deleted_at IS NULL
            """,
            params=[country_code, mobile],
            context_msg="PostgresUserRepository: Failed to get user by mobile",
            extra={"country_code": country_code},
        )
        return self._row_to_user(row) if row else None

    def create_user(self, user: UserRecord) -> UserRecord:
        row = self._fetchone(
            query=f"""
                INSERT INTO users
                    (first_name, last_name, country_code, mobile, email,
                     account_id, role, status)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                RETURNING {self._USER_COLUMNS}
            """,
            params=[
                user.first_name,
                user.last_name,
                user.country_code,
                user.mobile,
                user.email,
                user.account_id,
                user.role.value,
                user.status.value,
            ],
            context_msg="PostgresUserRepository: Failed to create user",
            extra={"account_id": user.account_id},
        )
        return self._row_to_user(row)

    def list_active_user_mobiles(self) -> List[UserRecord]:
        rows = self._fetchall(
            query=f"""
                SELECT {self._USER_COLUMNS}
                FROM users
                WHERE role = %s AND status = %s AND deleted_at IS NULL
                ORDER BY id ASC
            """,
            params=[UserRole.USER.value, RecordStatus.ACTIVE.value],
            context_msg="PostgresUserRepository: Failed to list user mobiles",
            extra={},
        )
        return [self._row_to_user(r) for r in rows]

    # =========================================================
    # OTPs
    # =========================================================
    def find_active_otp(
        self, country_code: str, mobile: str, otp: str
    ) -> Optional[UserOtp]:
        row = self._fetchone(
            query="""
                SELECT id, country_code, mobile, otp, status
                FROM user_otps
                WHERE country_code = %s AND mobile = %s AND otp = %s
                  AND status = %s
                ORDER BY id DESC
                LIMIT 1
            """,
            params=[country_code, mobile, otp, RecordStatus.ACTIVE.value],
            context_msg="PostgresUserRepository: Failed to find OTP",
            extra={"country_code": country_code},
        )
        if row is None:
            return None
        otp_id, cc, mob, code, status = row
        return UserOtp(
            id=otp_id,
            country_code=cc,
            mobile=mob,
            otp=code,
            status=RecordStatus(status),
        )

    def consume_otp(self, otp_id: int) -> None:
        self._execute(
            query="UPDATE user_otps SET status = %s, updated_at = NOW() WHERE id = %s",
            params=[RecordStatus.INACTIVE.value, otp_id],
            context_msg="PostgresUserRepository: Failed to consume OTP",
            extra={"otp_id": otp_id},
        )

    # =========================================================
    # Device tokens
    # =========================================================
    def add_device_token(self, token: DeviceToken) -> DeviceToken:
        row = self._fetchone(
            query="""
                INSERT INTO user_device_tokens (user_id, token)
                VALUES (%s, %s)
                RETURNING id
            """,
            params=[token.user_id, token.token],
            context_msg="PostgresUserRepository: Failed to add device token",
            extra={"user_id": token.user_id},
        )
        return DeviceToken(id=row[0], user_id=token.user_id, token=token.token)

    def delete_device_token(self, user_id: int, token: str) -> bool:
        removed = self._execute(
            query="DELETE FROM user_device_tokens WHERE user_id = %s AND token = %s",
            params=[user_id, token],
            context_msg="PostgresUserRepository: Failed to delete device token",
            extra={"user_id": user_id},
        )
        return removed > 0
