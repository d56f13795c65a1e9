"""Decoding of guest-agent interface payloads into InterfaceQueryResult."""

from typing import Any

from pydantic import ValidationError

from traefik_discovery.domain.models import InterfaceQueryResult
from traefik_discovery.exceptions import PayloadDecodeError
from traefik_discovery.logging import get_logger
from traefik_discovery.utils.payloads import format_validation_errors, load_json_payload

logger = get_logger(__name__, component="interfaces")


def decode_interface_payload(payload: Any) -> InterfaceQueryResult:
    """Decode a ``network-get-interfaces`` style payload.

    Accepted shapes:
    - ``{"result": [...]}`` as returned by the guest agent
    - ``{"data": {"result": [...]}}`` as wrapped by the platform API
    - a bare list of interface entries
    - JSON text of any of the above

    Args:
        payload: Raw interface payload

    Returns:
        InterfaceQueryResult

    Raises:
        PayloadDecodeError: On invalid JSON, an unknown envelope, or failed validation
    """
    data = load_json_payload(payload)

    if isinstance(data, dict) and isinstance(data.get("data"), dict):
        data = data["data"]

    if isinstance(data, list):
        data = {"result": data}

    if not isinstance(data, dict) or "result" not in data:
        raise PayloadDecodeError(
            "Expected an interface list or an object with a 'result' list, "
            f"got {type(data).__name__}"
        )

    # An agent with no interfaces may report null instead of []
    if data["result"] is None:
        data = {**data, "result": []}

    try:
        result = InterfaceQueryResult.model_validate(data)
    except ValidationError as e:
        raise PayloadDecodeError(
            "Interface payload failed validation", errors=format_validation_errors(e)
        ) from e

    logger.debug(
        "Decoded interface payload",
        extra={
            "event": "interfaces.decode.completed",
            "interfaces": len(result.result),
        },
    )
    return result
