"""Admin login backed by a single flag in the caller's session."""

from __future__ import annotations

import logging
from typing import MutableMapping

ADMIN_SESSION_KEY = "admin"


class SessionAuthorizer:
    """Binary admin / anonymous gate for one statically configured admin identity.

    The session is passed in explicitly: Flask's cookie session in request
    handlers, any mutable mapping elsewhere. Credentials are compared as plain
    strings; there are no roles and no expiry beyond the session itself.
    """

    def __init__(self, admin_user: str, admin_pass: str) -> None:
        self._admin_user = admin_user
        self._admin_pass = admin_pass

    def login(self, session: MutableMapping, username: str | None, password: str | None) -> bool:
        """Mark the session as admin if the credentials match.

        Returns False on mismatch without saying which field was wrong.
        """
        if username == self._admin_user and password == self._admin_pass:
            session[ADMIN_SESSION_KEY] = True
            logging.info("Admin logged in")
            return True
        logging.warning("Rejected admin login attempt")
        return False

    def is_authorized(self, session: MutableMapping) -> bool:
        return session.get(ADMIN_SESSION_KEY) is True

    def logout(self, session: MutableMapping) -> None:
        """Clear all session state, admin flag included."""
        session.clear()
        logging.info("Admin logged out")
