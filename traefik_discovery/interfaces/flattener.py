"""Flattening of interface-query results into a single address list."""

import logging
from typing import Iterable, List, Optional, Union

from traefik_discovery.domain.models import AddressRecord, InterfaceEntry, InterfaceQueryResult
from traefik_discovery.logging import get_logger

logger = get_logger(__name__, component="interfaces")


class InterfaceFlattener:
    """Concatenates every interface's addresses in reported order.

    No filtering, deduplication or reordering is applied: loopback and
    link-local addresses are returned like any other.
    """

    def __init__(self, logger_instance: Optional[logging.Logger] = None):
        self.logger = logger_instance or logger

    def flatten(
        self, result: Union[InterfaceQueryResult, Iterable[InterfaceEntry]]
    ) -> List[AddressRecord]:
        """Flatten interfaces into one list of AddressRecord.

        Args:
            result: Decoded query result, or any iterable of InterfaceEntry

        Returns:
            New list; empty when there are no interfaces or no addresses
        """
        interfaces = result.result if isinstance(result, InterfaceQueryResult) else result

        addresses: List[AddressRecord] = []
        interface_count = 0
        for interface in interfaces:
            interface_count += 1
            addresses.extend(interface.ip_addresses)

        self.logger.debug(
            "Flattened interface addresses",
            extra={
                "event": "interfaces.flatten.completed",
                "interfaces": interface_count,
                "addresses": len(addresses),
            },
        )
        return addresses


def flatten_interfaces(
    result: Union[InterfaceQueryResult, Iterable[InterfaceEntry]]
) -> List[AddressRecord]:
    """Flatten an interface-query result with a default InterfaceFlattener."""
    return InterfaceFlattener().flatten(result)
