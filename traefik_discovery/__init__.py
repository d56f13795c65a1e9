"""Discovery of traefik directives and guest addresses from virtualization metadata.

Two independent, stateless normalizers:
- LabelTokenizer: description text -> ConfigurationMap
- InterfaceFlattener: interface-query result -> list of AddressRecord
"""

from .domain import AddressRecord, ConfigurationMap, InterfaceEntry, InterfaceQueryResult, Service
from .interfaces import InterfaceFlattener, decode_interface_payload, flatten_interfaces
from .labels import DirectiveShape, LabelTokenizer, decode_guest_config, tokenize_description

__version__ = "0.1.0"

__all__ = [
    "AddressRecord",
    "ConfigurationMap",
    "DirectiveShape",
    "InterfaceEntry",
    "InterfaceFlattener",
    "InterfaceQueryResult",
    "LabelTokenizer",
    "Service",
    "decode_guest_config",
    "decode_interface_payload",
    "flatten_interfaces",
    "tokenize_description",
]
