"""Login and session lifecycle."""

import logging
from typing import Sequence

from salesmaster.clients.identity import AnonymousIdentityProvider
from salesmaster.domain.entities import Role, Session
from salesmaster.domain.errors import (
    AuthenticationError,
    ValidationError,
    invalid_admin_password,
    invalid_vendor_name,
)

logger = logging.getLogger(__name__)

ADMIN_DISPLAY_NAME = "Master"


def require_admin(session: Session) -> None:
    """Reject sessions that are not administrators.

    Raises:
        AuthenticationError: If the session is a vendor session
    """
    if not session.is_admin:
        raise AuthenticationError(
            "Administrator session required",
            "Log in as administrator to import or review all accounts.",
        )


class SessionService:
    """Creates and destroys session contexts."""

    def __init__(self, identity: AnonymousIdentityProvider, admin_passwords: Sequence[str]):
        """Initialize session service.

        Args:
            identity: Identity provider used for the underlying sign-in
            admin_passwords: Accepted administrator secrets
        """
        self.identity = identity
        self.admin_passwords = tuple(admin_passwords)

    def _user_id(self) -> str:
        user = self.identity.current_user
        if user is None:
            user = self.identity.sign_in_anonymously()
        return user.uid

    def login_admin(self, password: str) -> Session:
        """Open an administrator session.

        Raises:
            ValidationError: If the password is not an accepted secret
        """
        if password not in self.admin_passwords:
            raise ValidationError(invalid_admin_password())
        session = Session(role=Role.ADMIN, name=ADMIN_DISPLAY_NAME, user_id=self._user_id())
        logger.info("Administrator session opened")
        return session

    def login_vendor(self, name: str) -> Session:
        """Open a vendor session for ``name``.

        Raises:
            ValidationError: If the trimmed name has fewer than two characters
        """
        name = (name or "").strip()
        if len(name) <= 1:
            raise ValidationError(invalid_vendor_name())
        session = Session(role=Role.VENDOR, name=name, user_id=self._user_id())
        logger.info("Vendor session opened for %s", name)
        return session

    def logout(self, session: Session) -> None:
        logger.info("Session closed for %s", session.name)
        self.identity.sign_out()
