"""Decoding of guest config payloads into GuestConfig."""

from typing import Any

from pydantic import ValidationError

from traefik_discovery.domain.models import GuestConfig
from traefik_discovery.exceptions import PayloadDecodeError
from traefik_discovery.logging import get_logger
from traefik_discovery.utils.payloads import format_validation_errors, load_json_payload

logger = get_logger(__name__, component="labels")


def decode_guest_config(payload: Any) -> GuestConfig:
    """Decode a guest config record.

    Accepts the config mapping itself, the API envelope ``{"data": {...}}``,
    or JSON text of either. A record without a description decodes to an
    empty description.

    Args:
        payload: Raw config payload

    Returns:
        GuestConfig

    Raises:
        PayloadDecodeError: If the payload is not a mapping or fails validation
    """
    data = load_json_payload(payload)

    if isinstance(data, dict) and isinstance(data.get("data"), dict):
        data = data["data"]

    if not isinstance(data, dict):
        raise PayloadDecodeError(
            f"Expected a JSON object for the guest config, got {type(data).__name__}"
        )

    # Platforms omit the key or send null when the notes field is blank
    if data.get("description") is None:
        data = {**data, "description": ""}

    try:
        config = GuestConfig.model_validate(data)
    except ValidationError as e:
        raise PayloadDecodeError(
            "Guest config failed validation", errors=format_validation_errors(e)
        ) from e

    logger.debug(
        "Decoded guest config",
        extra={
            "event": "labels.decode.completed",
            "description_length": len(config.description),
        },
    )
    return config
