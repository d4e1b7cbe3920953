"""
============================================================
CRC CARD — infrastructure/repositories/in_memory/users.py
============================================================
Class: InMemoryUserRepository

Responsibilities:
  - Keep users, OTPs and device tokens in memory (tests / local dev).
  - Offer seeding helpers (add_otp) that the HTTP surface does not expose.

Constraints:
  - Thread-safe (Lock) + defensive copies.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Optional

from ....domain.entities import (
    DeviceToken,
    RecordStatus,
    UserOtp,
    UserRecord,
    UserRole,
)
from ....domain.repositories import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._lock = Lock()
        self._users: Dict[int, UserRecord] = {}
        self._otps: Dict[int, UserOtp] = {}
        self._tokens: Dict[int, DeviceToken] = {}
        self._next_user_id = 1
        self._next_otp_id = 1
        self._next_token_id = 1

    # =========================================================
    # Users
    # =========================================================
    def get_user(self, user_id: int) -> Optional[UserRecord]:
        with self._lock:
            user = self._users.get(user_id)
            return replace(user) if user else None

    def get_user_by_mobile(
        self, country_code: str, mobile: str
    ) -> Optional[UserRecord]:
        with self._lock:
            for user in self._users.values():
                if user.country_code == country_code and user.mobile == mobile:
                    return replace(user)
        return None

    def create_user(self, user: UserRecord) -> UserRecord:
        with self._lock:
            stored = replace(
                user,
                id=self._next_user_id,
                created_at=user.created_at or datetime.now(timezone.utc),
            )
            self._users[stored.id] = stored
            self._next_user_id += 1
            return replace(stored)

    def list_active_user_mobiles(self) -> List[UserRecord]:
        with self._lock:
            values = [
                replace(u)
                for u in self._users.values()
                if u.role == UserRole.USER and u.status == RecordStatus.ACTIVE
            ]
        return sorted(values, key=lambda u: u.id)

    # =========================================================
    # OTPs
    # =========================================================
    def add_otp(self, otp: UserOtp) -> UserOtp:
        with self._lock:
            stored = replace(otp, id=self._next_otp_id)
            self._otps[stored.id] = stored
            self._next_otp_id += 1
            return replace(stored)

    def find_active_otp(
        self, country_code: str, mobile: str, otp: str
    ) -> Optional[UserOtp]:
        with self._lock:
            for row in self._otps.values():
                if (
                    row.country_code == country_code
                    and row.mobile == mobile
                    and row.otp == otp
                    and row.status == RecordStatus.ACTIVE
                ):
                    return replace(row)
        return None

    def consume_otp(self, otp_id: int) -> None:
        with self._lock:
            row = self._otps.get(otp_id)
            if row is not None:
                row.status = RecordStatus.INACTIVE

    # =========================================================
    # Device tokens
    # =========================================================
    def add_device_token(self, token: DeviceToken) -> DeviceToken:
        with self._lock:
            stored = replace(token, id=self._next_token_id)
            self._tokens[stored.id] = stored
            self._next_token_id += 1
            return replace(stored)

    def delete_device_token(self, user_id: int, token: str) -> bool:
        with self._lock:
            doomed = [
                k
                for k, t in self._tokens.items()
                if t.user_id == user_id and t.token == token
            ]
            for k in doomed:
                del self._tokens[k]
            return bool(doomed)

    def list_device_tokens(self, user_id: int) -> List[DeviceToken]:
        with self._lock:
            return [replace(t) for t in self._tokens.values() if t.user_id == user_id]
