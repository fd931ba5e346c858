"""Authentication domain service.

Owns the account rules for password and federated (Google) login. Token
issuance lives in ``JWTService``; verifying a federated ID token is
delegated to a ``FederatedIdentityVerifier``.
"""

import re
import secrets
from datetime import datetime
from uuid import uuid4

import logfire

from blog.domain.error import NotFoundError, ValidationError
from blog.domain.model import User
from blog.domain.model.user import default_profile_img
from blog.domain.repository import UserRepository
from blog.domain.value import FederatedIdentity, UserId, Username
from blog.util.password import hash_password, verify_password

from .base import Service

EMAIL_PATTERN = re.compile(r"^\w+([\.-]?\w+)*@\w+([\.-]?\w+)*(\.\w{2,3})+$")
PASSWORD_PATTERN = re.compile(r"^(?=.*\d)(?=.*[a-z])(?=.*[A-Z]).{6,20}$")

PASSWORD_RULE = (
    "Password must be 6-20 characters long and include at least one number, "
    "one uppercase letter, and one lowercase letter"
)


class FederatedIdentityVerifier:
    """Interface to the federated identity provider."""

    async def verify(self, id_token: str) -> FederatedIdentity:
        """Verify an ID token issued by the provider.

        Args:
            id_token: Token obtained by the client from the provider

        Returns:
            The identity asserted by the token

        Raises:
            InvalidCredentialError: If the provider rejects the token
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for account creation and credential checks."""

    def __init__(
        self,
        user_repository: UserRepository,
        identity_verifier: FederatedIdentityVerifier,
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            identity_verifier: Federated identity provider client
        """
        self.user_repository = user_repository
        self.identity_verifier = identity_verifier

    async def generate_username(self, email: str) -> str:
        """Derive a unique username from the local part of an email.

        A random 5 character suffix is added when the plain local part is
        already taken.
        """
        username = email.split("@")[0]
        if await self.user_repository.find_by_username(username):
            username += secrets.token_urlsafe(8)[:5]
        return username

    async def signup(self, fullname: str, email: str, password: str) -> User:
        """Create a password account.

        Raises:
            ValidationError: If a field breaks the account rules or the
                email is already registered
        """
        with logfire.span("auth_service.signup", email=email):
            if not fullname or len(fullname) < 3:
                raise ValidationError("Full name must be at least 3 characters long")
            if not email or not EMAIL_PATTERN.match(email):
                raise ValidationError("Invalid email address")
            if await self.user_repository.find_by_email(email):
                logfire.warn("Signup with registered email", email=email)
                raise ValidationError("Email is already used! Proceed to sign in")
            if not PASSWORD_PATTERN.match(password or ""):
                raise ValidationError(PASSWORD_RULE)

            username = await self.generate_username(email)
            user = User(
                id=UserId(uuid4()),
                fullname=fullname,
                email=email,
                username=Username(username),
                password_hash=hash_password(password),
                profile_img=default_profile_img(username),
                joined_at=datetime.now(),
                updated_at=datetime.now(),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User signed up", user_id=str(saved.id), username=username)
            return saved

    async def signin(self, email: str, password: str) -> User:
        """Check email and password.

        Raises:
            ValidationError: If the email is unknown or the password is wrong
        """
        with logfire.span("auth_service.signin", email=email):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("Signin with unknown email", email=email)
                raise ValidationError("Email not found")

            if user.google_auth or not user.password_hash:
                raise ValidationError(
                    "Account was created using Google. Try logging in with Google."
                )

            if not verify_password(password, user.password_hash):
                logfire.warn("Signin with wrong password", user_id=str(user.id))
                raise ValidationError("Password entered is incorrect")

            logfire.info("User signed in", user_id=str(user.id))
            return user

    async def federated_login(self, id_token: str) -> User:
        """Sign in with a federated ID token, creating the account on first use.

        Raises:
            InvalidCredentialError: If the provider rejects the token
            ValidationError: If the email belongs to a password account
        """
        with logfire.span("auth_service.federated_login"):
            identity = await self.identity_verifier.verify(id_token)
            picture = (identity.picture or "").replace("s96-c", "s384-c")

            user = await self.user_repository.find_by_email(identity.email)
            if user:
                if not user.google_auth:
                    logfire.warn(
                        "Federated login for password account",
                        user_id=str(user.id),
                    )
                    raise ValidationError(
                        "This email was signed up without Google. "
                        "Please log in with a password to access the account."
                    )
                logfire.info("Federated user signed in", user_id=str(user.id))
                return user

            username = await self.generate_username(identity.email)
            user = User(
                id=UserId(uuid4()),
                fullname=identity.name,
                email=identity.email,
                username=Username(username),
                profile_img=picture or default_profile_img(username),
                google_auth=True,
                joined_at=datetime.now(),
                updated_at=datetime.now(),
            )
            saved = await self.user_repository.save(user)
            logfire.info("Federated user created", user_id=str(saved.id))
            return saved

    async def change_password(
        self, user_id: UserId, current_password: str, new_password: str
    ) -> None:
        """Replace the password of a password account.

        Raises:
            ValidationError: If either password breaks the rule, the account
                is federated, or the current password is wrong
            NotFoundError: If the user does not exist
        """
        with logfire.span("auth_service.change_password", user_id=str(user_id)):
            if not PASSWORD_PATTERN.match(
                current_password or ""
            ) or not PASSWORD_PATTERN.match(new_password or ""):
                raise ValidationError(
                    "Both passwords must be 6-20 characters long and include at "
                    "least one number, one uppercase letter, and one lowercase letter"
                )

            user = await self.user_repository.find_by_id(user_id)
            if not user:
                raise NotFoundError("User", str(user_id))

            if user.google_auth or not user.password_hash:
                raise ValidationError(
                    "You cannot change this password because you are logged in via Google"
                )

            if not verify_password(current_password, user.password_hash):
                logfire.warn("Wrong current password", user_id=str(user_id))
                raise ValidationError("Incorrect Current Password")

            await self.user_repository.update_password(
                user_id, hash_password(new_password)
            )
            logfire.info("Password changed", user_id=str(user_id))
