"""Registration, login and account update use cases."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from chirpy.core.security import hash_password, verify_password
from chirpy.models import User
from chirpy.repositories.user_repo import UserRepository
from chirpy.services.tokens import TokenService

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Base class for authentication-related exceptions."""


class InvalidCredentialsError(AuthError):
    """Raised when a password does not match the stored hash."""


@dataclass(frozen=True)
class LoginResult:
    """Authenticated user together with a freshly issued token."""

    user: User
    token: str


class AuthService:
    """Ties the user repository to password hashing and session tokens."""

    def __init__(self, users: UserRepository, tokens: TokenService) -> None:
        self.users = users
        self.tokens = tokens

    def register(self, email: str, password: str) -> User:
        """Create an account for `email`.

        Raises:
            PasswordTooLongError: If the password exceeds bcrypt's limit.
            DuplicateEmailError: If the email is already registered.
        """
        return self.users.create(email, hash_password(password))

    def login(self, email: str, password: str, expires_in_seconds: int | None = None) -> LoginResult:
        """Check a password and issue a session token.

        Raises:
            NotFoundError: If no user owns `email`.
            InvalidCredentialsError: If the password is wrong.
        """
        user = self.users.get_by_email(email)
        if not verify_password(password, user.password_hash):
            logger.info("Failed login for user %d", user.id)
            raise InvalidCredentialsError("incorrect password")
        token = self.tokens.issue(user.id, expires_in_seconds)
        return LoginResult(user=user, token=token)

    def update_self(self, credential: str | None, email: str, password: str) -> User:
        """Update the account named by a bearer credential.

        Only the token's subject can be modified, so a caller can never touch
        another user's account.

        Raises:
            TokenError: If the credential does not validate.
            PasswordTooLongError: If the password exceeds bcrypt's limit.
            NotFoundError: If the token's user no longer exists.
            DuplicateEmailError: If another user owns `email`.
        """
        user_id = self.tokens.validate(credential)
        return self.users.update(user_id, email, password)
