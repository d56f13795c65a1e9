"""Directive extraction from free-text descriptions.

This package provides:
- DirectiveShape: configurable prefix/separator grammar for directives
- split_tokens: whitespace tokenization stage
- LabelTokenizer: service turning description text into a ConfigurationMap
- tokenize_description: one-call convenience wrapper
- decode_guest_config: decoder for the platform config record
"""

from .decoding import decode_guest_config
from .shape import DEFAULT_PREFIX, DEFAULT_SEPARATOR, DirectiveShape
from .tokenizer import LabelTokenizer, split_tokens, tokenize_description

__all__ = [
    "DEFAULT_PREFIX",
    "DEFAULT_SEPARATOR",
    "DirectiveShape",
    "LabelTokenizer",
    "decode_guest_config",
    "split_tokens",
    "tokenize_description",
]
