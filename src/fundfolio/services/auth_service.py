"""Account sign-up and sign-in."""

import logging
import uuid

from passlib.context import CryptContext

from fundfolio.core.exceptions import UnauthenticatedError, ValidationError
from fundfolio.core.money import ZERO
from fundfolio.core.timezone import now_ist
from fundfolio.domain.models import User
from fundfolio.repositories.protocols import UserRepository, WalletRepository

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class AuthService:
    """Creates users and checks their credentials."""

    def __init__(self, user_repo: UserRepository, wallet_repo: WalletRepository):
        self._users = user_repo
        self._wallets = wallet_repo

    def register(self, email: str, password: str) -> User:
        """
        Create a user and an empty wallet.

        Raises ValidationError for a malformed email, a short password or an
        email that is already registered.
        """
        email = (email or "").strip().lower()
        if "@" not in email or email.startswith("@") or email.endswith("@"):
            raise ValidationError("Please enter a valid email address")
        if len(password or "") < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if self._users.get_by_email(email):
            raise ValidationError("An account with this email already exists")

        user = self._users.create(
            User(
                user_id=str(uuid.uuid4()),
                email=email,
                password_hash=pwd_context.hash(password),
                created_at=now_ist(),
            )
        )
        self._wallets.set_balance(user.user_id, ZERO)
        logger.info("Registered user %s", user.user_id)
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Return the user for valid credentials or raise UnauthenticatedError."""
        user = self._users.get_by_email((email or "").strip().lower())
        if user is None or not pwd_context.verify(password or "", user.password_hash):
            raise UnauthenticatedError("Invalid email or password")
        return user
