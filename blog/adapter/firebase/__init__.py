"""Firebase identity adapter."""

from .identity import (
    FirebaseIdentityVerifier,
    MockFirebaseIdentityVerifier,
    RealFirebaseIdentityVerifier,
)

__all__ = [
    "FirebaseIdentityVerifier",
    "RealFirebaseIdentityVerifier",
    "MockFirebaseIdentityVerifier",
]
