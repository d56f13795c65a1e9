"""Shared fixtures for traefik-label-discovery tests."""

import json
import logging
from pathlib import Path

import pytest

from traefik_discovery.domain.models import AddressRecord, InterfaceEntry, InterfaceQueryResult
from traefik_discovery.logging.context import clear_log_context

FIXTURES_DIR = Path(__file__).parent / "fixtures"

ENV_VARS = ("LOG_LEVEL", "LOG_FORMAT", "LABEL_PREFIX", "ENVIRONMENT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove configuration environment variables for every test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging() side effects on the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    clear_log_context()
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    clear_log_context()


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def agent_payload():
    """Raw guest-agent network-get-interfaces response."""
    with open(FIXTURES_DIR / "agent_interfaces.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def two_interfaces():
    """Two interfaces: the first with two IPv4 addresses, the second with none."""
    return InterfaceQueryResult(
        result=[
            InterfaceEntry(
                name="eth0",
                ip_addresses=[
                    AddressRecord(address="192.168.1.1", address_type="ipv4", prefix=24),
                    AddressRecord(address="10.0.0.1", address_type="ipv4", prefix=16),
                ],
            ),
            InterfaceEntry(name="eth1", ip_addresses=[]),
        ]
    )
