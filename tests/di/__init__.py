"""Mock providers for testing."""

from .firebase import MockFirebaseProvider
from .persistence import MockPersistenceProvider
from .storage import MockStorageProvider
from .container import build_test_container

__all__ = [
    "MockFirebaseProvider",
    "MockPersistenceProvider",
    "MockStorageProvider",
    "build_test_container",
]
