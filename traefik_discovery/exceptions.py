"""Exceptions raised at the decoding boundary.

The tokenizer and the flattener are total over their inputs and raise
nothing; only turning raw payloads into domain models can fail.
"""

from typing import List, Optional


class DiscoveryError(Exception):
    """Base exception for traefik-label-discovery errors."""

    pass


class PayloadDecodeError(DiscoveryError):
    """A raw payload could not be decoded into a domain model.

    Raised for invalid JSON, an unexpected envelope shape, or field values
    that fail validation (e.g. a negative prefix length).
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None) -> None:
        """Initialize with a summary message and per-field error details.

        Args:
            message: Human-readable summary
            errors: Individual validation errors, one per offending field
        """
        self.message = message
        self.errors = errors or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.errors:
            return self.message
        details = "\n".join(f"  - {error}" for error in self.errors)
        return f"{self.message}\n{details}"
