"""Dependency injection module.

Providers come in two kinds. Concrete providers (config, domain services,
use cases) have no subclasses and are always used as-is. Component
providers such as persistence are abstract bases whose subclasses are the
production and mock implementations; containers pick one per component.
"""

from typing import Type

from agency.util.di.application import ProdApplicationProvider
from agency.util.di.base import Component, ProviderBase
from agency.util.di.core import ProdConfigProvider
from agency.util.di.domain import ProdDomainProvider
from agency.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable for in-memory repositories in tests
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for a base.

    Args:
        base: Entry from PROVIDERS
        use_mock: For components, pick the mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component_name = getattr(base, "__mock_component__", base.__name__)
    raise ValueError(f"No {kind} implementation for {component_name}")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
