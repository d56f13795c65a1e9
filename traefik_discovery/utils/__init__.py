"""Shared helpers for decoding raw payloads."""

from .payloads import format_validation_errors, load_json_payload

__all__ = ["format_validation_errors", "load_json_payload"]
