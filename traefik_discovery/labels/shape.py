"""Directive shape: the constants of the ``prefix.key=value`` grammar."""

from dataclasses import dataclass
from typing import Tuple

DEFAULT_PREFIX = "traefik."
DEFAULT_SEPARATOR = "="


@dataclass(frozen=True)
class DirectiveShape:
    """Predicate and splitter for directive tokens.

    A token is a directive when it contains the separator and the text
    before the first separator starts with the prefix. Only the first
    separator is significant; values may contain further separators.

    Attributes:
        prefix: Required key prefix (case-sensitive)
        separator: Key/value separator
    """

    prefix: str = DEFAULT_PREFIX
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        if not self.prefix:
            raise ValueError("prefix cannot be empty")
        if not self.separator:
            raise ValueError("separator cannot be empty")
        if self.separator in self.prefix:
            raise ValueError(
                f"prefix {self.prefix!r} contains the separator {self.separator!r} and could never match"
            )

    def matches(self, token: str) -> bool:
        """Whether ``token`` has the directive shape."""
        key, found, _ = token.partition(self.separator)
        return bool(found) and key.startswith(self.prefix)

    def split(self, token: str) -> Tuple[str, str]:
        """Split a directive token into (key, value) at the first separator.

        The value may be empty. Callers are expected to check matches() first.
        """
        key, _, value = token.partition(self.separator)
        return key, value
