"""Anonymous identity provider."""

import logging
import uuid
from typing import Callable, Optional

from salesmaster.domain.entities import User
from salesmaster.domain.errors import AuthenticationError

logger = logging.getLogger(__name__)

AuthListener = Callable[[Optional[User]], None]

ANONYMOUS_DISABLED_REMEDIATION = (
    "Anonymous sign-in is disabled. Set SALESMASTER_ANONYMOUS_AUTH=1 to enable "
    "the anonymous provider, then run the command again."
)


class AnonymousIdentityProvider:
    """Hands out anonymous identities and announces sign-in state changes."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._current: Optional[User] = None
        self._listeners: list[AuthListener] = []

    @property
    def current_user(self) -> Optional[User]:
        return self._current

    def sign_in_anonymously(self) -> User:
        """Sign in with a fresh anonymous identity.

        Raises:
            AuthenticationError: If anonymous sign-in is disabled
        """
        if not self.enabled:
            logger.error("Anonymous sign-in attempted while disabled")
            raise AuthenticationError(
                "Anonymous sign-in is not enabled", ANONYMOUS_DISABLED_REMEDIATION
            )
        self._current = User(uid=uuid.uuid4().hex)
        logger.info("Signed in anonymously as %s", self._current.uid)
        self._emit()
        return self._current

    def sign_out(self) -> None:
        self._current = None
        self._emit()

    def on_auth_state_changed(self, listener: AuthListener) -> Callable[[], None]:
        """Register a listener; it is called right away with the current user."""
        self._listeners.append(listener)
        listener(self._current)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener(self._current)
