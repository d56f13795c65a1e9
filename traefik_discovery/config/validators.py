"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for settings that are valid but probably unintended.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    labels = config_dict.get("labels", {})
    if not isinstance(labels, dict):
        return warning_messages

    prefix = labels.get("prefix")
    if isinstance(prefix, str) and prefix:
        # "traefik" would also accept keys like "traefikfoo.x"
        if not prefix.endswith("."):
            warning_messages.append(
                f"Label prefix '{prefix}' does not end with '.' and will match "
                f"unrelated keys starting with '{prefix}'"
            )

        # Matching is case-sensitive
        if prefix != prefix.lower():
            warning_messages.append(
                f"Label prefix '{prefix}' contains uppercase letters; "
                "directives are matched case-sensitively"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
