"""
Compass Providers
Pluggable zone, pointer and overlay providers for compass renderers.
"""

from sailgeom.providers.base_provider import (
    BaseProvider,
    CompassContext,
    OverlayProvider,
    PointerProvider,
    ZoneProvider,
)
from sailgeom.providers.provider_factory import (
    PROVIDER_KINDS,
    create_provider,
    list_providers,
    provider_kind,
    register_provider,
)

__all__ = [
    'BaseProvider',
    'CompassContext',
    'OverlayProvider',
    'PointerProvider',
    'ZoneProvider',
    'PROVIDER_KINDS',
    'create_provider',
    'list_providers',
    'provider_kind',
    'register_provider',
]
