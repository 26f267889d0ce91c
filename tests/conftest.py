"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path
from typing import Any

import pytest
from zbxexport.models.config import Settings

from tests.fakes import API_URL, FakeZabbix

ENV_VARS = (
    "ZBX_USER",
    "ZBX_PASSWD",
    "ZBX_URL",
    "ZBX_TIMEOUT",
    "ZBX_VERIFY_SSL",
    "ZBX_POPULATE_INTERFACES",
    "EXPORT_DIRECTORY",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the caller's ZBX_* variables and .env out of tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fake_zabbix() -> FakeZabbix:
    """Fake Zabbix endpoint with a working login."""
    return FakeZabbix()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at the fake endpoint and a temporary export root."""
    return Settings(
        url=API_URL,
        user="Admin",
        password="zabbix",
        export_directory=tmp_path / "export",
    )


@pytest.fixture
def host_record() -> dict[str, Any]:
    """Sample host.get record."""
    return {
        "hostid": "10084",
        "host": "Zabbix server",
        "name": "Zabbix server",
        "status": "0",
        "available": "1",
        "description": "Primary monitoring node",
        "groups": [
            {"groupid": "4", "name": "Zabbix servers", "internal": "0", "flags": "0"},
        ],
        "parentTemplates": [
            {"templateid": "10001", "name": "Linux by Zabbix agent"},
            {"templateid": "10047", "name": "Zabbix server health"},
        ],
        "interfaces": [
            {"interfaceid": "1", "ip": "127.0.0.1", "port": "10050", "type": "1", "available": "1"},
            {"interfaceid": "2", "ip": "192.168.1.10", "port": "161", "type": "2", "available": "0"},
        ],
    }


@pytest.fixture
def second_host_record() -> dict[str, Any]:
    """Second host.get record without description or templates."""
    return {
        "hostid": "10105",
        "name": "web-01",
        "status": "1",
        "available": "0",
        "groups": [{"groupid": "2", "name": "Linux servers"}],
        "parentTemplates": [],
        "interfaces": [
            {"interfaceid": "5", "ip": "10.0.0.21", "port": "10050", "type": "1"},
        ],
    }


@pytest.fixture
def item_records() -> list[dict[str, Any]]:
    """Sample item.get records."""
    return [
        {
            "itemid": "23296",
            "name": "CPU load",
            "key_": "system.cpu.load[all,avg1]",
            "lastvalue": "0.42",
            "value_type": "0",
        },
        {
            "itemid": "23297",
            "name": "Free memory",
            "key_": "vm.memory.size[available]",
            "lastvalue": "1073741824",
            "value_type": "3",
        },
    ]


@pytest.fixture
def trigger_records() -> list[dict[str, Any]]:
    """Sample trigger.get records."""
    return [
        {
            "triggerid": "13491",
            "description": "High CPU load on {HOST.NAME}",
            "priority": "3",
            "status": "0",
            "expression": "{13491}>5",
        },
    ]
