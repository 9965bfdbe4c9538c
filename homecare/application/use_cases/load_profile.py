from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from homecare.application.events import SessionChanged
from homecare.application.ports.profile_store import ProfileStorePort

if TYPE_CHECKING:
    from homecare.application.auth_session import AuthSession


class ProfileLoader:
    """Consumes session-changed events and fetches the matching profile.

    Results are reported back to the session together with the sequence
    number of the event that triggered them.
    """

    def __init__(self, store: ProfileStorePort, session: "AuthSession") -> None:
        self._store = store
        self._session = session
        self._logger = logging.getLogger(__name__)

    def handle(self, message: SessionChanged) -> None:
        if message.user is None:
            self._session.profile_cleared(message.seq)
            return

        self._session.profile_loading(message.seq)
        try:
            profile = self._store.get_profile(message.user.id)
        except Exception as e:
            self._logger.exception(
                "Error loading profile",
                extra={"user_id": message.user.id, "seq": message.seq, "error": str(e)},
            )
            self._session.profile_failed(message.seq, e)
            return

        self._session.profile_loaded(message.seq, profile)
