"""Unit tests for export writers."""

from pathlib import Path

import pytest
from zbxexport.api.exceptions import PersistenceError
from zbxexport.models.host import Group, Host, Interface, Template
from zbxexport.models.item import Metric, Trigger
from zbxexport.writers import (
    XML_HEADER,
    ensure_dir,
    load_host_xml,
    load_records,
    render_host_xml,
    save_host_xml,
    save_records,
)


@pytest.fixture
def host() -> Host:
    """Fully populated host."""
    return Host(
        hostid="10084",
        name="Zabbix server",
        ip="127.0.0.1",
        status="0",
        availability="Available",
        notes="Rack 4 <primary> & backup",
        groups=[Group(groupid="4", name="Zabbix servers"), Group(groupid="2", name="Linux servers")],
        templates=[Template(templateid="10001", name="Linux by Zabbix agent")],
        interfaces=[
            Interface(interfaceid="1", ip="127.0.0.1", port="10050", type="1"),
            Interface(interfaceid="2", ip="192.168.1.10", port="161", type="2"),
        ],
    )


class TestHostXml:
    """Tests for the host document."""

    def test_header_and_indent(self, host: Host) -> None:
        """Documents start with the XML declaration and use two-space indent."""
        document = render_host_xml(host)

        assert document.startswith(XML_HEADER)
        assert "\n  <hostid>10084</hostid>\n" in document
        assert "\n    <group>\n      <groupid>4</groupid>" in document

    def test_element_layout(self, host: Host) -> None:
        """Nested lists are wrapped in plural elements."""
        document = render_host_xml(host)

        assert "<groups>" in document
        assert "<templates>" in document
        assert "<interfaces>" in document
        assert "<availability>Available</availability>" in document

    def test_special_characters_escaped(self, host: Host) -> None:
        """Markup characters in values are escaped."""
        document = render_host_xml(host)

        assert "<notes>Rack 4 &lt;primary&gt; &amp; backup</notes>" in document

    def test_empty_fields_omitted(self) -> None:
        """Empty notes and empty lists produce no elements."""
        bare = Host(hostid="1", name="bare", ip="10.0.0.1", status="0")

        document = render_host_xml(bare)

        assert "<notes" not in document
        assert "<groups" not in document
        assert "<interfaces" not in document
        assert "<availability>Unknown</availability>" in document

    def test_round_trip(self, tmp_path: Path, host: Host) -> None:
        """A written host parses back to the same values."""
        path = tmp_path / "host.xml"

        save_host_xml(path, host)

        assert load_host_xml(path) == host

    def test_round_trip_bare(self, tmp_path: Path) -> None:
        """Hosts without optional parts round-trip too."""
        bare = Host(hostid="1", name="bare", ip="", status="1", availability="Unavailable")
        path = tmp_path / "host.xml"

        save_host_xml(path, bare)

        assert load_host_xml(path) == bare

    def test_carriage_return_round_trip(self, tmp_path: Path, host: Host) -> None:
        """CRLF line endings in notes survive a write and read."""
        host = host.model_copy(update={"notes": "line one\r\nline two"})
        path = tmp_path / "host.xml"

        save_host_xml(path, host)

        assert "line one&#13;\nline two" in path.read_text(encoding="utf-8")
        assert load_host_xml(path) == host

    def test_control_characters_replaced(self, tmp_path: Path, host: Host) -> None:
        """Characters XML cannot carry are replaced and the document still parses."""
        host = host.model_copy(update={"notes": "bell\x07 nul\x00", "name": "esc\x1b"})
        path = tmp_path / "host.xml"

        save_host_xml(path, host)

        loaded = load_host_xml(path)
        assert loaded.notes == "bell\ufffd nul\ufffd"
        assert loaded.name == "esc\ufffd"

    def test_tabs_and_newlines_kept(self, tmp_path: Path, host: Host) -> None:
        """Tabs and line feeds are legal and kept as-is."""
        host = host.model_copy(update={"notes": "a\tb\nc"})
        path = tmp_path / "host.xml"

        save_host_xml(path, host)

        assert load_host_xml(path).notes == "a\tb\nc"

    def test_write_failure(self, tmp_path: Path, host: Host) -> None:
        """Writing into a missing directory is a persistence error."""
        with pytest.raises(PersistenceError, match="XML"):
            save_host_xml(tmp_path / "missing" / "host.xml", host)

    def test_read_failure(self, tmp_path: Path) -> None:
        """Unparseable documents are a persistence error."""
        path = tmp_path / "host.xml"
        path.write_text("<host>")

        with pytest.raises(PersistenceError):
            load_host_xml(path)


class TestRecords:
    """Tests for the JSON arrays."""

    def test_metrics_round_trip(self, tmp_path: Path) -> None:
        """Metrics are written with export names and read back unchanged."""
        metrics = [
            Metric(itemid="23296", name="CPU load", key="system.cpu.load[all,avg1]", value="0.42"),
            Metric(itemid="23297", name="Uptime", key="system.uptime", value=""),
        ]
        path = tmp_path / "metrics.json"

        save_records(path, metrics)

        assert '"key": "system.cpu.load[all,avg1]"' in path.read_text()
        assert load_records(path, Metric) == metrics

    def test_triggers_round_trip(self, tmp_path: Path) -> None:
        """Triggers are read back unchanged."""
        triggers = [
            Trigger(
                triggerid="13491",
                description="Zabbix agent is unreachable",
                priority="4",
                status="0",
            )
        ]
        path = tmp_path / "triggers.json"

        save_records(path, triggers)

        assert load_records(path, Trigger) == triggers

    def test_indented_array(self, tmp_path: Path) -> None:
        """Arrays are indented by two spaces and have no header."""
        path = tmp_path / "triggers.json"

        save_records(path, [Trigger(triggerid="1")])

        text = path.read_text()
        assert text.startswith("[\n  {\n    \"triggerid\": \"1\"")

    def test_empty_list(self, tmp_path: Path) -> None:
        """An empty collection is written as an empty array."""
        path = tmp_path / "metrics.json"

        save_records(path, [])

        assert path.read_text() == "[]"
        assert load_records(path, Metric) == []

    def test_unicode_kept(self, tmp_path: Path) -> None:
        """Non-ASCII text is written as-is."""
        path = tmp_path / "triggers.json"

        save_records(path, [Trigger(description="Нет связи с агентом")])

        assert "Нет связи с агентом" in path.read_text(encoding="utf-8")

    def test_write_failure(self, tmp_path: Path) -> None:
        """Writing into a missing directory is a persistence error."""
        with pytest.raises(PersistenceError, match="JSON"):
            save_records(tmp_path / "missing" / "metrics.json", [])

    def test_read_mismatch(self, tmp_path: Path) -> None:
        """Records that do not match the model are a persistence error."""
        path = tmp_path / "metrics.json"
        path.write_text('[{"itemid": "1"}]')

        with pytest.raises(PersistenceError):
            load_records(path, Metric)


class TestEnsureDir:
    """Tests for ensure_dir."""

    def test_creates_parents(self, tmp_path: Path) -> None:
        """Missing parents are created."""
        path = ensure_dir(tmp_path / "hosts" / "web-01")

        assert path.is_dir()

    def test_idempotent(self, tmp_path: Path) -> None:
        """Creating an existing directory is not an error."""
        ensure_dir(tmp_path / "hosts")
        ensure_dir(tmp_path / "hosts")

        assert (tmp_path / "hosts").is_dir()

    def test_file_in_the_way(self, tmp_path: Path) -> None:
        """A file at the directory path is a persistence error."""
        (tmp_path / "hosts").write_text("")

        with pytest.raises(PersistenceError):
            ensure_dir(tmp_path / "hosts")
