"""Infrastructure providers."""

# Import bases
from .firebase import FirebaseProvider
from .persistence import PersistenceProvider
from .storage import StorageProvider

# Import implementations (needed for __subclasses__())
from .firebase import ProdFirebaseProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .storage import ProdStorageProvider  # noqa: F401

__all__ = [
    "FirebaseProvider",
    "PersistenceProvider",
    "ProdFirebaseProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
    "StorageProvider",
]
