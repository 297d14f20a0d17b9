"""Dependency injection wiring.

Providers come in two kinds. Plain providers (config, domain services,
use cases) have one implementation. A *component* provider is an abstract
base with a production subclass and a test double, told apart by
`__is_mock__`; `resolve_providers` picks one per component.
"""

from collections.abc import Collection
from typing import Type, get_args

from natter.util.di.application import ProdApplicationProvider
from natter.util.di.base import Component, ProviderBase
from natter.util.di.core import ProdConfigProvider
from natter.util.di.domain import ProdDomainProvider
from natter.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]

COMPONENTS: frozenset[str] = frozenset(get_args(Component))


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Concrete provider class for `base`.

    Raises:
        ValueError: `base` is a component without the requested variant
    """
    variants = base.__subclasses__()
    if not variants:
        return base

    for variant in variants:
        if variant.__is_mock__ == use_mock:
            return variant

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


def resolve_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate every provider, using test doubles for `mocked` components.

    Raises:
        ValueError: `mocked` names a component nobody declares
    """
    unknown = set(mocked) - COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "COMPONENTS",
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "resolve_providers",
]
