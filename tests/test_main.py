"""Unit tests for the command-line entry point.

Covers:
- Runtime config priority (CLI > environment > config file > defaults)
- labels and ips subcommands with each input source and output format
- Exit codes for configuration, input and unexpected errors
"""

import io
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from traefik_discovery.config.exceptions import ConfigurationError
from traefik_discovery.main import (
    EXIT_INPUT_ERROR,
    EXIT_OK,
    EXIT_UNEXPECTED,
    load_runtime_config,
    main,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"

DESCRIPTION = (
    "My application server\n\n"
    "traefik.enable=true traefik.http.routers.app.rule=Host(`app.example.com`)\n"
    "traefik.http.services.app.loadbalancer.server.port=3000"
)


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test from an empty directory so no discovery.yaml is picked up."""
    monkeypatch.chdir(tmp_path)


def run(argv, stdin_text=""):
    stdout = io.StringIO()
    code = main(argv, stdin=io.StringIO(stdin_text), stdout=stdout)
    return code, stdout.getvalue()


class TestLoadRuntimeConfig:
    """Test suite for load_runtime_config."""

    def test_defaults(self):
        app_config, env_config = load_runtime_config(None)

        assert app_config.labels.prefix == "traefik."
        assert app_config.logging.level == "INFO"
        assert env_config.log_level == "INFO"

    def test_config_file_values(self):
        app_config, _ = load_runtime_config(FIXTURES_DIR / "valid_config.yaml")

        assert app_config.logging.level == "DEBUG"
        assert app_config.logging.format == "json"

    def test_environment_overrides_file(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setenv("LOG_FORMAT", "key-value")
        monkeypatch.setenv("LABEL_PREFIX", "lb.")

        app_config, _ = load_runtime_config(FIXTURES_DIR / "valid_config.yaml")

        assert app_config.logging.level == "WARNING"
        assert app_config.logging.format == "key-value"
        assert app_config.labels.prefix == "lb."

    def test_cli_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setenv("LABEL_PREFIX", "lb.")

        app_config, env_config = load_runtime_config(None, "ERROR", "caddy.")

        assert app_config.logging.level == "ERROR"
        assert env_config.log_level == "ERROR"
        assert app_config.labels.prefix == "caddy."

    def test_invalid_prefix_override(self):
        with pytest.raises(ConfigurationError, match="Invalid directive prefix"):
            load_runtime_config(None, None, "a=b")

    def test_empty_prefix_override_is_rejected(self, monkeypatch):
        monkeypatch.setenv("LABEL_PREFIX", "lb.")

        with pytest.raises(ConfigurationError, match="Invalid directive prefix"):
            load_runtime_config(None, None, "")


class TestLabelsCommand:
    """Tests for the labels subcommand."""

    def test_text_argument(self):
        code, out = run(["labels", "--text", DESCRIPTION])

        assert code == EXIT_OK
        assert json.loads(out) == {
            "traefik.enable": "true",
            "traefik.http.routers.app.rule": "Host(`app.example.com`)",
            "traefik.http.services.app.loadbalancer.server.port": "3000",
        }

    def test_stdin(self):
        code, out = run(["labels"], stdin_text="traefik.a=1 traefik.a=2")

        assert code == EXIT_OK
        assert json.loads(out) == {"traefik.a": "2"}

    def test_description_file(self, tmp_path):
        description_file = tmp_path / "notes.txt"
        description_file.write_text("Notes\ntraefik.enable=true\n", encoding="utf-8")

        code, out = run(["labels", "--description-file", str(description_file)])

        assert code == EXIT_OK
        assert json.loads(out) == {"traefik.enable": "true"}

    def test_env_format(self):
        code, out = run(["labels", "--format", "env", "--text", "traefik.enable=true traefik.a=b=c"])

        assert code == EXIT_OK
        assert out.splitlines() == ["traefik.enable=true", "traefik.a=b=c"]

    def test_empty_description(self):
        code, out = run(["labels", "--text", "nothing to see here"])

        assert code == EXIT_OK
        assert json.loads(out) == {}

    def test_prefix_flag(self):
        code, out = run(["--prefix", "caddy.", "labels", "--text", "caddy.x=1 traefik.y=2"])

        assert code == EXIT_OK
        assert json.loads(out) == {"caddy.x": "1"}

    def test_missing_description_file(self, tmp_path):
        code, out = run(["labels", "--description-file", str(tmp_path / "missing.txt")])

        assert code == EXIT_INPUT_ERROR
        assert out == ""

    def test_description_file_not_utf8(self, tmp_path, capsys):
        description_file = tmp_path / "notes.txt"
        description_file.write_bytes(b"traefik.enable=true \xff\xfe")

        code, out = run(["labels", "--description-file", str(description_file)])

        assert code == EXIT_INPUT_ERROR
        assert out == ""
        assert "Input error" in capsys.readouterr().err

    def test_stdin_not_decodable(self):
        stdin = io.TextIOWrapper(io.BytesIO(b"traefik.a=1 \xff"), encoding="utf-8")
        stdout = io.StringIO()

        code = main(["labels"], stdin=stdin, stdout=stdout)

        assert code == EXIT_INPUT_ERROR
        assert stdout.getvalue() == ""

    def test_empty_prefix_flag(self, capsys):
        code, out = run(["--prefix", "", "labels", "--text", "traefik.a=1"])

        assert code == EXIT_INPUT_ERROR
        assert out == ""
        assert "Configuration error" in capsys.readouterr().err


class TestIpsCommand:
    """Tests for the ips subcommand."""

    def test_payload_file(self):
        code, out = run(["ips", "--payload-file", str(FIXTURES_DIR / "agent_interfaces.json")])

        assert code == EXIT_OK
        addresses = json.loads(out)
        assert len(addresses) == 4
        assert addresses[2] == {"address": "192.168.10.42", "address-type": "ipv4", "prefix": 24}

    def test_stdin_env_format(self):
        payload = json.dumps(
            {"result": [{"ip-addresses": [{"ip-address": "10.0.0.5", "ip-address-type": "ipv4", "prefix": 16}]}]}
        )

        code, out = run(["ips", "--format", "env"], stdin_text=payload)

        assert code == EXIT_OK
        assert out == "10.0.0.5/16\n"

    def test_invalid_payload(self):
        code, out = run(["ips"], stdin_text="{not json")

        assert code == EXIT_INPUT_ERROR
        assert out == ""

    def test_payload_file_not_utf8(self, tmp_path):
        payload_file = tmp_path / "payload.json"
        payload_file.write_bytes(b'{"result": [{"name": "\xff\xfe"}]}')

        code, out = run(["ips", "--payload-file", str(payload_file)])

        assert code == EXIT_INPUT_ERROR
        assert out == ""


class TestExitCodes:
    """Tests for error handling in main()."""

    def test_configuration_error(self, capsys):
        code, _ = run(["--config", "missing.yaml", "labels", "--text", "traefik.a=1"])

        assert code == EXIT_INPUT_ERROR
        assert "Configuration error" in capsys.readouterr().err

    def test_unexpected_error(self):
        with patch("traefik_discovery.main.LabelTokenizer") as mock_tokenizer:
            mock_tokenizer.return_value.tokenize.side_effect = RuntimeError("boom")

            code, out = run(["labels", "--text", "traefik.a=1"])

        assert code == EXIT_UNEXPECTED
        assert out == ""

    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            main([])
