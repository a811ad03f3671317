"""
Provider Registry
Compass providers looked up by name. Each registered class is one of the
three provider kinds (zones, pointers, overlay), and callers can ask for a
specific kind so a pointer provider is never handed to a rim painter.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from sailgeom.providers.base_provider import (
    BaseProvider,
    OverlayProvider,
    PointerProvider,
    ZoneProvider,
)
from sailgeom.providers.sailing import (
    HeadingZoneProvider,
    PerformanceOverlayProvider,
    SailingZoneProvider,
    WindPointerProvider,
)

_logger = logging.getLogger(__name__)

PROVIDER_KINDS = (ZoneProvider, PointerProvider, OverlayProvider)

# name -> provider class
_registry: Dict[str, Type[BaseProvider]] = {}


def provider_kind(provider_class) -> Optional[type]:
    """Which of ZoneProvider / PointerProvider / OverlayProvider a class implements."""
    for kind in PROVIDER_KINDS:
        if isinstance(provider_class, type) and issubclass(provider_class, kind):
            return kind
    return None


def register_provider(name: str, provider_class: type):
    """
    Make a provider class available under a name.

    Args:
        name: Lookup key (e.g., 'sailing_zones')
        provider_class: Subclass of ZoneProvider, PointerProvider or OverlayProvider

    Raises:
        ValueError: If the name is empty
        TypeError: If the class is not a compass provider kind
    """
    if not name:
        raise ValueError("Provider name must not be empty")
    if provider_kind(provider_class) is None:
        raise TypeError(
            f"{provider_class!r} is not a ZoneProvider, PointerProvider or OverlayProvider"
        )

    if name in _registry and _registry[name] is not provider_class:
        _logger.debug("Replacing provider '%s': %s -> %s",
                      name, _registry[name].__name__, provider_class.__name__)
    _registry[name] = provider_class


def create_provider(name: str, config: Dict[str, Any] = None, kind: type = None) -> BaseProvider:
    """
    Instantiate a registered provider.

    Args:
        name: Registered provider name
        config: Optional provider configuration dict
        kind: Optional expected kind (ZoneProvider, PointerProvider or OverlayProvider)

    Returns:
        Provider instance

    Raises:
        ValueError: If nothing is registered under name
        TypeError: If the provider is not of the expected kind
    """
    provider_class = _registry.get(name)
    if provider_class is None:
        raise ValueError(
            f"Unknown provider '{name}' (registered: {', '.join(sorted(_registry))})"
        )

    if kind is not None and not issubclass(provider_class, kind):
        raise TypeError(
            f"Provider '{name}' supplies {provider_kind(provider_class).__name__}, "
            f"not {kind.__name__}"
        )

    return provider_class(config)


def list_providers(kind: type = None) -> List[str]:
    """
    Registered provider names, sorted, optionally limited to one kind.
    """
    return sorted(name for name, provider_class in _registry.items()
                  if kind is None or issubclass(provider_class, kind))


for _name, _provider_class in (
    ('sailing_zones', SailingZoneProvider),
    ('heading_zones', HeadingZoneProvider),
    ('wind_pointers', WindPointerProvider),
    ('performance_overlay', PerformanceOverlayProvider),
):
    register_provider(_name, _provider_class)
