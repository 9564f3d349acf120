"""Dependency injection wiring.

``PROVIDERS`` lists one entry per concern. ``get_provider`` turns each entry
into the class to instantiate, picking production or mock implementations
for swappable components.
"""

from typing import Type

from baz.util.di.application import ProdApplicationProvider
from baz.util.di.base import Component, ProviderBase
from baz.util.di.core import ProdConfigProvider
from baz.util.di.domain import ProdDomainProvider
from baz.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from baz.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a PROVIDERS entry to a concrete provider class.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the mock implementation of a swappable component

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If the component has no implementation of
            the requested kind (e.g. no mock registered because tests/di was
            never imported)
    """
    if not base.is_mockable():
        return base

    for candidate in base.__subclasses__():
        if candidate.__is_mock__ == use_mock:
            return candidate

    raise DependencyInjectionError(
        base.__mock_component__ or base.__name__,
        "mock" if use_mock else "production",
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
