"""Core domain models for label and address discovery.

This module defines the data structures shared across the package:
- AddressRecord: one address reported by the guest agent
- InterfaceEntry / InterfaceQueryResult: the decoded interface-query payload
- GuestConfig: the decoded VM/container config record carrying the description
- Service: the record an external collaborator assembles from the above
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# Dotted directive key -> verbatim value
ConfigurationMap = Dict[str, str]


class AddressFamily(str, Enum):
    """Address family tags reported by the guest agent."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"


class AddressRecord(BaseModel):
    """A single network address as reported by the guest agent.

    Field values are kept exactly as reported. The guest agent spells its
    keys ``ip-address`` and ``ip-address-type``; the shorter ``address`` and
    ``address-type`` spellings are accepted too.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    address: str = Field(
        ...,
        validation_alias=AliasChoices("ip-address", "address"),
        serialization_alias="address",
        description="Address in textual form (IPv4 or IPv6)",
    )
    address_type: str = Field(
        ...,
        validation_alias=AliasChoices("ip-address-type", "address-type"),
        serialization_alias="address-type",
        description="Address family tag, e.g. ipv4 or ipv6",
    )
    prefix: int = Field(..., ge=0, description="Prefix length in bits")

    @property
    def family(self) -> Optional[AddressFamily]:
        """Known address family, or None for tags outside AddressFamily."""
        try:
            return AddressFamily(self.address_type)
        except ValueError:
            return None

    def __str__(self) -> str:
        return f"{self.address}/{self.prefix}"


class InterfaceEntry(BaseModel):
    """One network interface from an interface-query result."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: Optional[str] = Field(None, description="Interface name inside the guest")
    hardware_address: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("hardware-address", "hardware_address"),
        description="MAC address",
    )
    ip_addresses: List[AddressRecord] = Field(
        default_factory=list,
        validation_alias=AliasChoices("ip-addresses", "ip_addresses"),
        description="Addresses assigned to this interface, in reported order",
    )

    @field_validator("ip_addresses", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        """Treat a null address list as empty."""
        return [] if v is None else v


class InterfaceQueryResult(BaseModel):
    """Decoded interface-query payload: the guest agent's ``result`` list."""

    model_config = ConfigDict(frozen=True)

    result: List[InterfaceEntry] = Field(default_factory=list)

    def get_ips(self) -> List[AddressRecord]:
        """All address records across every interface, in reported order."""
        from traefik_discovery.interfaces.flattener import flatten_interfaces

        return flatten_interfaces(self)


class GuestConfig(BaseModel):
    """Decoded VM/container config record.

    Only the free-text description matters here; every other key the
    platform returns is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    description: str = Field("", description="Free-text notes attached to the guest")

    def get_traefik_map(self, tokenizer=None) -> ConfigurationMap:
        """Extract the directive map from the description.

        Args:
            tokenizer: LabelTokenizer to use (defaults to the ``traefik.`` prefix)

        Returns:
            ConfigurationMap, empty when the description has no directives
        """
        from traefik_discovery.labels.tokenizer import LabelTokenizer

        return (tokenizer or LabelTokenizer()).tokenize(self.description)


class Service(BaseModel):
    """A discovered guest together with its directives and addresses."""

    id: int = Field(..., description="Guest identifier on the platform")
    name: str = Field(..., description="Guest name")
    config: ConfigurationMap = Field(default_factory=dict)
    ips: List[AddressRecord] = Field(default_factory=list)

    @property
    def is_enabled(self) -> bool:
        """Whether the guest opted in with ``traefik.enable=true``."""
        return self.config.get("traefik.enable", "").lower() == "true"
