"""Domain models for directive maps, guest configs and interface addresses."""

from .models import (
    AddressFamily,
    AddressRecord,
    ConfigurationMap,
    GuestConfig,
    InterfaceEntry,
    InterfaceQueryResult,
    Service,
)

__all__ = [
    "AddressFamily",
    "AddressRecord",
    "ConfigurationMap",
    "GuestConfig",
    "InterfaceEntry",
    "InterfaceQueryResult",
    "Service",
]
