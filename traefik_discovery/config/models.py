"""Configuration schema models using Pydantic."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from traefik_discovery.labels.shape import DEFAULT_PREFIX, DEFAULT_SEPARATOR, DirectiveShape


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class LabelConfig(BaseModel):
    """Directive grammar settings."""

    prefix: str = Field(DEFAULT_PREFIX, min_length=1, description="Required directive key prefix")
    separator: str = Field(
        DEFAULT_SEPARATOR, min_length=1, max_length=1, description="Key/value separator"
    )

    @field_validator("prefix", "separator")
    @classmethod
    def reject_whitespace(cls, v: str) -> str:
        """Directive parts are whitespace-delimited, so they cannot contain whitespace."""
        if any(ch.isspace() for ch in v):
            raise ValueError("cannot contain whitespace")
        return v

    @model_validator(mode="after")
    def validate_prefix_separator(self):
        """A prefix containing the separator could never match a key."""
        if self.separator in self.prefix:
            raise ValueError(
                f"prefix '{self.prefix}' must not contain the separator '{self.separator}'"
            )
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True}


class AppConfig(BaseModel):
    """Root configuration object for traefik-label-discovery."""

    labels: LabelConfig = Field(default_factory=LabelConfig, description="Directive grammar")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    def directive_shape(self) -> DirectiveShape:
        """Build the DirectiveShape the tokenizer should use."""
        return DirectiveShape(prefix=self.labels.prefix, separator=self.labels.separator)
