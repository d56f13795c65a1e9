"""Helpers shared by the payload decoders."""

import json
from typing import Any, List, Union

from pydantic import ValidationError

from traefik_discovery.exceptions import PayloadDecodeError


def load_json_payload(payload: Union[str, bytes, bytearray, Any]) -> Any:
    """Return ``payload`` parsed from JSON when it is text, unchanged otherwise.

    Raises:
        PayloadDecodeError: If text is not valid JSON
    """
    if not isinstance(payload, (str, bytes, bytearray)):
        return payload

    try:
        return json.loads(payload)
    except ValueError as e:
        raise PayloadDecodeError(f"Payload is not valid JSON: {e}") from e


def format_validation_errors(error: ValidationError) -> List[str]:
    """Flatten a pydantic ValidationError into one line per failing field.

    Example:
        ``result -> 0 -> ip-addresses -> 1 -> prefix: Input should be greater than or equal to 0``
    """
    messages = []
    for item in error.errors():
        field_path = " -> ".join(str(loc) for loc in item["loc"]) or "<root>"
        messages.append(f"{field_path}: {item['msg']}")
    return messages
