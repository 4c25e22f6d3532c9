"""Sign-in sessions, each owning one Ledger."""

import logging
import threading
import uuid
from typing import Callable

from fundfolio.core.exceptions import UnauthenticatedError
from fundfolio.domain.models import User
from fundfolio.services.ledger import Ledger

logger = logging.getLogger(__name__)

LedgerFactory = Callable[[str], Ledger]


class SessionManager:
    """
    Maps bearer tokens to loaded ledgers.

    A user has at most one active session: signing in again closes the
    previous one, so two ledgers never mirror the same wallet.
    """

    def __init__(self, ledger_factory: LedgerFactory):
        self._ledger_factory = ledger_factory
        self._ledgers: dict[str, Ledger] = {}
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()
        # Held for the whole sign-in so one user never has two live ledgers
        self._sign_in_locks: dict[str, threading.Lock] = {}

    def open(self, user: User) -> str:
        """Build and load a ledger for ``user`` and return its session token."""
        with self._lock:
            sign_in_lock = self._sign_in_locks.setdefault(user.user_id, threading.Lock())

        with sign_in_lock:
            with self._lock:
                stale = [t for t, u in self._users.items() if u.user_id == user.user_id]
                for token in stale:
                    self._drop(token)

            ledger = self._ledger_factory(user.user_id)
            try:
                ledger.load()
            except Exception:
                ledger.close()
                raise

            token = uuid.uuid4().hex
            with self._lock:
                self._ledgers[token] = ledger
                self._users[token] = user
        logger.info("Opened session for user %s", user.user_id)
        return token

    def get(self, token: str) -> Ledger:
        ledger = self._ledgers.get(token)
        if ledger is None or not ledger.is_open:
            raise UnauthenticatedError()
        return ledger

    def get_user(self, token: str) -> User:
        user = self._users.get(token)
        if user is None:
            raise UnauthenticatedError()
        return user

    def close(self, token: str) -> None:
        """Sign out. Unknown tokens are ignored."""
        with self._lock:
            self._drop(token)

    def close_all(self) -> None:
        with self._lock:
            for token in list(self._ledgers):
                self._drop(token)

    def _drop(self, token: str) -> None:
        ledger = self._ledgers.pop(token, None)
        user = self._users.pop(token, None)
        if ledger is not None:
            ledger.close()
            logger.info("Closed session for user %s", user.user_id if user else "?")
