"""Address extraction from guest-agent interface queries.

This package provides:
- InterfaceFlattener: service flattening interfaces into AddressRecord lists
- flatten_interfaces: one-call convenience wrapper
- decode_interface_payload: decoder for the raw agent payload
"""

from .decoding import decode_interface_payload
from .flattener import InterfaceFlattener, flatten_interfaces

__all__ = [
    "InterfaceFlattener",
    "decode_interface_payload",
    "flatten_interfaces",
]
