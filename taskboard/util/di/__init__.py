"""Dependency injection module."""

from taskboard.util.di.application import ProdApplicationProvider
from taskboard.util.di.base import COMPONENTS, Component, ProviderBase
from taskboard.util.di.core import ProdConfigProvider
from taskboard.util.di.domain import ProdDomainProvider
from taskboard.util.di.infrastructure import (
    EmailProvider,
    PersistenceProvider,
    ProdEmailProvider,
    ProdPersistenceProvider,
    ProdRealtimeProvider,
    RealtimeProvider,
)

# Concrete providers first, then swappable infrastructure components
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    EmailProvider,
    RealtimeProvider,
]


def build_providers(mocked: set[Component] | None = None) -> list[ProviderBase]:
    """Instantiate one provider per entry of :data:`PROVIDERS`.

    Args:
        mocked: Components that get their mock implementation. Mock
            providers must have been imported so they are registered.

    Raises:
        ValueError: If an unknown component is named
    """
    mocked = mocked or set()
    unknown = mocked - COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return [
        base.implementation(mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "COMPONENTS",
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "build_providers",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "EmailProvider",
    "PersistenceProvider",
    "RealtimeProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
    "ProdRealtimeProvider",
]
