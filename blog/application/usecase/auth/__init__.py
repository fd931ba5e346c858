"""Authentication use cases."""

from .change_password import (
    ChangePasswordRequest,
    ChangePasswordResponse,
    ChangePasswordUseCase,
)
from .google_auth import GoogleAuthRequest, GoogleAuthUseCase
from .response import AuthResponse
from .signin import SigninRequest, SigninUseCase
from .signup import SignupRequest, SignupUseCase

__all__ = [
    "AuthResponse",
    "ChangePasswordRequest",
    "ChangePasswordResponse",
    "ChangePasswordUseCase",
    "GoogleAuthRequest",
    "GoogleAuthUseCase",
    "SigninRequest",
    "SigninUseCase",
    "SignupRequest",
    "SignupUseCase",
]
