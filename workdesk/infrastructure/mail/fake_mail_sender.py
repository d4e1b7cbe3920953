"""
Name: Fake Mail Sender (Deterministic Test Double)

What it is
----------
In-memory implementation of domain.services.MailSender for tests, CI and
local development (FAKE_MAIL=1). No network I/O.

Responsibilities:
  - Record every delivered OutgoingEmail in order
  - Simulate failures for chosen addresses (MailDeliveryError)
  - Simulate slow servers (delay) to exercise timeouts
"""

from __future__ import annotations

import asyncio
from typing import Iterable, List

from ...crosscutting.exceptions import MailDeliveryError
from ...crosscutting.logger import logger
from ...domain.services import OutgoingEmail


class FakeMailSender:
    def __init__(
        self,
        *,
        failing_addresses: Iterable[str] = (),
        delay_seconds: float = 0.0,
    ) -> None:
        self.sent: List[OutgoingEmail] = []
        self._failing = {a.lower() for a in failing_addresses}
        self._delay = delay_seconds

    async def send(self, message: OutgoingEmail, *, timeout: float) -> None:
        if self._delay:
            await asyncio.sleep(self._delay)
        if message.to.lower() in self._failing:
            raise MailDeliveryError(f"Simulated delivery failure for {message.to}")

        self.sent.append(message)
        logger.info("fake mail recorded", extra={"to": message.to})

    def clear(self) -> None:
        self.sent.clear()
