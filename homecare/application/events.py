from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from homecare.application.ports.auth import AuthChangeEvent, Subscription
from homecare.domain.entities.user import AuthUser


@dataclass(frozen=True)
class SessionChanged:
    seq: int
    event: AuthChangeEvent
    user: AuthUser | None


SessionHandler = Callable[[SessionChanged], None]


class SessionEvents:
    """In-process channel for session changes.

    Every published event gets the next sequence number, so consumers that
    report back asynchronously can be ordered against each other.
    """

    def __init__(self) -> None:
        self._handlers: list[SessionHandler] = []
        self._last_seq = 0
        self._logger = logging.getLogger(__name__)

    @property
    def last_seq(self) -> int:
        return self._last_seq

    def subscribe(self, handler: SessionHandler) -> Subscription:
        self._handlers.append(handler)
        return Subscription(lambda: self._handlers.remove(handler))

    def publish(self, event: AuthChangeEvent, user: AuthUser | None) -> SessionChanged:
        self._last_seq += 1
        message = SessionChanged(seq=self._last_seq, event=event, user=user)
        self._logger.debug(
            "Session changed",
            extra={"event": event.value, "seq": message.seq, "user_id": user.id if user else None},
        )
        for handler in list(self._handlers):
            handler(message)
        return message
