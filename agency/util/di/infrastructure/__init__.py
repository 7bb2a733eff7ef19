"""Infrastructure providers."""

# Importing the implementation registers it as a subclass of its base
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
