"""Command-line entry point for traefik-label-discovery."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from pydantic import ValidationError

from traefik_discovery.config.environment import EnvironmentConfig
from traefik_discovery.config.exceptions import ConfigurationError
from traefik_discovery.config.loader import load_config
from traefik_discovery.config.models import AppConfig, LabelConfig
from traefik_discovery.exceptions import PayloadDecodeError
from traefik_discovery.interfaces import InterfaceFlattener, decode_interface_payload
from traefik_discovery.labels import LabelTokenizer
from traefik_discovery.logging import get_logger
from traefik_discovery.logging.config import configure_logging
from traefik_discovery.logging.context import log_context

logger = get_logger(__name__, component="cli")

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_INPUT_ERROR = 2


def load_runtime_config(
    config_path: Optional[Path],
    log_level_override: Optional[str] = None,
    prefix_override: Optional[str] = None,
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and apply overrides.

    Priority for the log level, log format and directive prefix is
    CLI > environment > config file > defaults.

    Args:
        config_path: Explicit config file, or None for the default lookup
        log_level_override: Log level from CLI
        prefix_override: Directive prefix from CLI

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with overrides applied

    Raises:
        ConfigurationError: If configuration or an override is invalid
    """
    app_config, env_config = load_config(config_path)

    log_level = log_level_override or env_config.log_level or app_config.logging.level
    log_format = env_config.log_format or app_config.logging.format
    # An empty --prefix is still an override and goes through validation
    if prefix_override is not None:
        prefix = prefix_override
    else:
        prefix = env_config.label_prefix or app_config.labels.prefix

    try:
        labels = LabelConfig(prefix=prefix, separator=app_config.labels.separator)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid directive prefix: {prefix!r}",
            errors=[error["msg"] for error in e.errors()],
            suggestions=["Use a prefix such as 'traefik.' without whitespace or '='"],
        )

    app_config = app_config.model_copy(
        update={
            "labels": labels,
            "logging": app_config.logging.model_copy(
                update={"level": log_level.upper(), "format": log_format}
            ),
        }
    )
    env_config.log_level = app_config.logging.level

    return app_config, env_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="traefik-discovery",
        description="Extract traefik directives from guest descriptions and addresses from guest-agent interface payloads",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: discovery.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    parser.add_argument(
        "--prefix",
        default=None,
        help="Directive key prefix (overrides config and environment)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    labels_parser = subparsers.add_parser("labels", help="Extract directives from description text")
    source = labels_parser.add_mutually_exclusive_group()
    source.add_argument("--description-file", type=Path, help="File holding the description text")
    source.add_argument("--text", help="Description text given inline")
    labels_parser.add_argument(
        "--format",
        choices=["json", "env"],
        default="json",
        help="Output as a JSON object or as key=value lines (default: json)",
    )

    ips_parser = subparsers.add_parser("ips", help="Flatten addresses from an interface payload")
    ips_parser.add_argument(
        "--payload-file", type=Path, help="JSON interface payload (default: read stdin)"
    )
    ips_parser.add_argument(
        "--format",
        choices=["json", "env"],
        default="json",
        help="Output as a JSON list or as address/prefix lines (default: json)",
    )

    return parser


def _read_input(path: Optional[Path], stdin: TextIO) -> str:
    source = path or "stdin"
    try:
        if path is None:
            return stdin.read()
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PayloadDecodeError(f"Failed to read {source}: {e}") from e


def run_labels(args: argparse.Namespace, app_config: AppConfig, stdin: TextIO, stdout: TextIO) -> int:
    """Tokenize a description and print the directive map."""
    if args.text is not None:
        text, source = args.text, "argument"
    else:
        text = _read_input(args.description_file, stdin)
        source = str(args.description_file) if args.description_file else "stdin"

    with log_context(source=source):
        config_map = LabelTokenizer(app_config.directive_shape()).tokenize(text)

        logger.info(
            f"Extracted {len(config_map)} directives",
            extra={"event": "cli.labels.completed", "directives": len(config_map)},
        )

    if args.format == "env":
        for key, value in config_map.items():
            stdout.write(f"{key}={value}\n")
    else:
        stdout.write(json.dumps(config_map, indent=2, ensure_ascii=False) + "\n")

    return EXIT_OK


def run_ips(args: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> int:
    """Decode an interface payload and print the flattened addresses."""
    source = str(args.payload_file) if args.payload_file else "stdin"

    with log_context(source=source):
        result = decode_interface_payload(_read_input(args.payload_file, stdin))
        addresses = InterfaceFlattener().flatten(result)

        logger.info(
            f"Extracted {len(addresses)} addresses",
            extra={"event": "cli.ips.completed", "addresses": len(addresses)},
        )

    if args.format == "env":
        for record in addresses:
            stdout.write(f"{record}\n")
    else:
        payload = [record.model_dump(by_alias=True) for record in addresses]
        stdout.write(json.dumps(payload, indent=2) + "\n")

    return EXIT_OK


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    Main entry point.

    Returns:
        Exit code: 0 on success, 2 on configuration or input errors, 1 otherwise.
    """
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level, args.prefix)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    configure_logging(
        level=app_config.logging.level,
        format_type=app_config.logging.format,
        environment=env_config.environment,
    )

    logger.debug(
        "Running command",
        extra={
            "event": "cli.command.starting",
            "command": args.command,
            "prefix": app_config.labels.prefix,
        },
    )

    try:
        if args.command == "labels":
            return run_labels(args, app_config, stdin, stdout)
        return run_ips(args, stdin, stdout)
    except PayloadDecodeError as e:
        logger.error(
            "Failed to decode input",
            extra={"event": "cli.input.invalid", "command": args.command},
        )
        print(f"Input error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except Exception:
        logger.exception(
            "Unexpected error",
            extra={"event": "cli.command.failed", "command": args.command},
        )
        return EXIT_UNEXPECTED


if __name__ == "__main__":
    sys.exit(main())
