"""Label tokenizer for recovering directives from free-text descriptions.

Descriptions come from a platform notes field and mix narrative text with
``traefik.*`` directives. Depending on the guest type the directives are
one per line, separated by single spaces, or both. Extraction runs in two
stages so that every convention reduces to the same result:

1. Split the text on runs of whitespace into candidate tokens.
2. Keep tokens with the directive shape, split each at its first ``=``,
   and insert into the map in token order (last write wins).

Values containing whitespace are truncated at the first whitespace
character; there is no quoting syntax.
"""

import logging
import re
from typing import Iterator, List, Optional, Tuple

from traefik_discovery.domain.models import ConfigurationMap
from traefik_discovery.logging import get_logger

from .shape import DEFAULT_PREFIX, DirectiveShape

logger = get_logger(__name__, component="labels")

# Whitespace minus the ASCII separator controls that str.split() also breaks on
_WHITESPACE_RUN = re.compile(r"[^\S\x1c-\x1f]+")


def split_tokens(text: Optional[str]) -> List[str]:
    """Split text into candidate tokens on any run of whitespace.

    Spaces, tabs, newlines, carriage returns and other Unicode whitespace
    are boundaries, and consecutive boundaries count as one. The ASCII
    separator controls \\x1c-\\x1f are not whitespace and stay inside
    tokens. Leading and trailing whitespace produce no empty tokens.

    Args:
        text: Description text (None is treated as empty)

    Returns:
        Tokens in their original order
    """
    if not text:
        return []
    return [token for token in _WHITESPACE_RUN.split(text) if token]


class LabelTokenizer:
    """Extracts a ConfigurationMap from description text.

    Stateless apart from its immutable DirectiveShape, so one instance can
    be shared across threads.
    """

    def __init__(
        self,
        shape: Optional[DirectiveShape] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize LabelTokenizer.

        Args:
            shape: Directive grammar (defaults to ``traefik.`` keys and ``=``)
            logger_instance: Logger instance (defaults to module logger)
        """
        self.shape = shape or DirectiveShape()
        self.logger = logger_instance or logger

    def iter_directives(self, text: Optional[str]) -> Iterator[Tuple[str, str]]:
        """Yield every (key, value) directive in token order.

        Duplicate keys are yielded each time they occur.
        """
        return self._directives_from_tokens(split_tokens(text))

    def _directives_from_tokens(self, tokens: List[str]) -> Iterator[Tuple[str, str]]:
        for token in tokens:
            if self.shape.matches(token):
                yield self.shape.split(token)

    def tokenize(self, text: Optional[str]) -> ConfigurationMap:
        """Extract directives from description text.

        Tokens that do not have the directive shape are discarded silently.
        When a key repeats, the later value replaces the earlier one.

        Args:
            text: Description text, possibly empty

        Returns:
            Fresh ConfigurationMap; empty when no directives are present
        """
        tokens = split_tokens(text)
        result: ConfigurationMap = {}
        directive_count = 0

        for key, value in self._directives_from_tokens(tokens):
            directive_count += 1
            if key in result:
                self.logger.debug(
                    f"Directive {key} overrides an earlier value",
                    extra={
                        "event": "labels.tokenize.duplicate_key",
                        "key": key,
                    },
                )
            result[key] = value

        if self.logger.isEnabledFor(logging.DEBUG):
            token_count = len(tokens)
            self.logger.debug(
                "Tokenized description",
                extra={
                    "event": "labels.tokenize.completed",
                    "prefix": self.shape.prefix,
                    "tokens": token_count,
                    "directives": directive_count,
                    "discarded": token_count - directive_count,
                    "keys": len(result),
                },
            )

        return result


def tokenize_description(text: Optional[str], prefix: str = DEFAULT_PREFIX) -> ConfigurationMap:
    """Extract the directive map from description text.

    Example:
        >>> tokenize_description("Web box\\ntraefik.enable=true traefik.a=1")
        {'traefik.enable': 'true', 'traefik.a': '1'}
    """
    return LabelTokenizer(DirectiveShape(prefix=prefix)).tokenize(text)
