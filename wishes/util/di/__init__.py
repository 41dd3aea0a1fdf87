"""Dependency injection wiring for the wishes API."""

from typing import Type

from wishes.util.di.application import ProdApplicationProvider
from wishes.util.di.base import Component, ProviderBase
from wishes.util.di.core import ProdConfigProvider
from wishes.util.di.domain import ProdDomainProvider
from wishes.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

# Order matters only for readability; dishka resolves by type
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,  # swappable: PostgreSQL or in-memory
]


def is_swappable(base: Type[ProviderBase]) -> bool:
    """Whether ``base`` is a component with several implementations."""
    return bool(base.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    Concrete providers are returned as-is. For swappable components the
    subclass whose ``__is_mock__`` matches ``use_mock`` is chosen; the test
    suite registers the in-memory subclasses by importing them.

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    if not is_swappable(base):
        return base

    for candidate in base.__subclasses__():
        if candidate.__is_mock__ == use_mock:
            return candidate

    component = base.__mock_component__ or base.__name__
    variant = "in-memory" if use_mock else "production"
    raise ValueError(f"No {variant} implementation registered for {component}")


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
    "is_swappable",
]
