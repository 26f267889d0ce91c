"""Host inventory export.

Failures are handled at three levels:

* Abort the run: any exception raised out of ``Exporter.run``. This covers
  login, ``host.get`` transport or envelope errors, and write failures.
* Skip a host: a host record that fails validation is recorded as a
  ``SkippedHost``; no directory is created for it.
* Skip a sub-resource: an ``item.get`` or ``trigger.get`` failure is recorded
  as a ``ResourceFailure`` and its file is not written. A single malformed
  item or trigger record is dropped and counted.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, TypeVar

from .api.client import ZabbixClient
from .api.exceptions import APIError, NetworkError, TimeoutError
from .models.config import Settings
from .models.decode import Decoded, decode_records
from .models.host import Host
from .models.item import Metric, Trigger
from .writers import ensure_dir, save_host_xml, save_records

logger = logging.getLogger(__name__)

HOST_FILE = "host.xml"
METRICS_FILE = "metrics.json"
TRIGGERS_FILE = "triggers.json"

SUBRESOURCE_ERRORS = (APIError, NetworkError, TimeoutError)

T = TypeVar("T")


@dataclass
class SkippedHost:
    """Host record that could not be decoded."""

    label: str
    reason: str


@dataclass
class ResourceFailure:
    """Metrics or triggers of a host that could not be fetched."""

    host: str
    resource: str
    reason: str


@dataclass
class HostExport:
    """Files written for one host. Counts are None when the file was skipped."""

    host: Host
    directory: Path
    metrics: int | None = None
    triggers: int | None = None


@dataclass
class ExportReport:
    """Outcome of one export run."""

    hosts: list[HostExport] = field(default_factory=list)
    skipped_hosts: list[SkippedHost] = field(default_factory=list)
    failures: list[ResourceFailure] = field(default_factory=list)
    dropped_records: int = 0

    @property
    def complete(self) -> bool:
        """Whether every host and sub-resource was exported."""
        return not (self.skipped_hosts or self.failures or self.dropped_records)


class Exporter:
    """Export every host with its metrics and triggers to disk."""

    def __init__(self, client: ZabbixClient, settings: Settings) -> None:
        """Initialize exporter.

        Args:
            client: Connected Zabbix client
            settings: Export settings
        """
        self.client = client
        self.settings = settings
        self._directories: dict[str, str] = {}

    async def fetch_hosts(self) -> list[Decoded[Host]]:
        """Fetch and decode the host inventory.

        Returns:
            One decode outcome per host record, in API order
        """
        records = await self.client.get_hosts()
        populate = self.settings.populate_interfaces
        return decode_records(
            records,
            lambda record: Host.from_api(record, populate_interfaces=populate),
            label_keys=("name", "hostid"),
        )

    async def run(self) -> ExportReport:
        """Export all hosts sequentially.

        Returns:
            Export report
        """
        report = ExportReport()
        self._directories = {}
        decoded = await self.fetch_hosts()

        if not decoded:
            logger.info("No hosts available for export")
            return report

        for outcome in decoded:
            if not outcome.ok:
                logger.error("Skipping host %s: %s", outcome.label, outcome.error)
                report.skipped_hosts.append(SkippedHost(outcome.label, outcome.error or ""))
                continue
            report.hosts.append(await self.export_host(outcome.value, report))

        logger.info("Host export finished: %d exported", len(report.hosts))
        return report

    async def export_host(self, host: Host, report: ExportReport) -> HostExport:
        """Write the host document, then its metrics and triggers."""
        directory = ensure_dir(self.settings.hosts_directory / self._directory_name(host))
        save_host_xml(directory / HOST_FILE, host)
        logger.info("Exported host %s to %s", host.name, directory / HOST_FILE)

        result = HostExport(host=host, directory=directory)
        result.metrics = await self.export_metrics(host, directory, report)
        result.triggers = await self.export_triggers(host, directory, report)
        return result

    def _directory_name(self, host: Host) -> str:
        """Directory for a host, unique within this run.

        A name already taken by another host gets the host ID appended.
        """
        name = host.directory_name
        owner = self._directories.get(name)
        if owner is not None and owner != host.hostid:
            unique = f"{name}-{host.hostid}"
            logger.warning(
                "Host %s maps to directory %s already used by host %s; writing to %s",
                host.name,
                name,
                owner,
                unique,
            )
            name = unique
        self._directories[name] = host.hostid
        return name

    async def export_metrics(
        self, host: Host, directory: Path, report: ExportReport
    ) -> int | None:
        """Fetch and write a host's metrics.

        Returns:
            Number of metrics written, or None if the fetch failed
        """
        try:
            records = await self.client.get_items(host.hostid)
        except SUBRESOURCE_ERRORS as e:
            logger.error("Failed to fetch metrics for host %s: %s", host.name, e)
            report.failures.append(ResourceFailure(host.name, "metrics", str(e)))
            return None

        metrics = self._decode(records, Metric.model_validate, ("name", "itemid"), host, report)
        save_records(directory / METRICS_FILE, metrics)
        logger.info(
            "Exported %d metrics for host %s to %s", len(metrics), host.name, directory / METRICS_FILE
        )
        return len(metrics)

    async def export_triggers(
        self, host: Host, directory: Path, report: ExportReport
    ) -> int | None:
        """Fetch and write a host's triggers.

        An empty or null result still writes an empty array.

        Returns:
            Number of triggers written, or None if the fetch failed
        """
        try:
            records = await self.client.get_triggers(host.hostid)
        except SUBRESOURCE_ERRORS as e:
            logger.error("Failed to fetch triggers for host %s: %s", host.name, e)
            report.failures.append(ResourceFailure(host.name, "triggers", str(e)))
            return None

        if not records:
            logger.info("No triggers for host %s", host.name)

        triggers = self._decode(
            records, Trigger.model_validate, ("description", "triggerid"), host, report
        )
        save_records(directory / TRIGGERS_FILE, triggers)
        logger.info(
            "Exported %d triggers for host %s to %s",
            len(triggers),
            host.name,
            directory / TRIGGERS_FILE,
        )
        return len(triggers)

    @staticmethod
    def _decode(
        records: list[Any],
        decoder: Callable[[Any], T],
        label_keys: tuple[str, ...],
        host: Host,
        report: ExportReport,
    ) -> list[T]:
        values = []
        for outcome in decode_records(records, decoder, label_keys):
            if outcome.ok:
                values.append(outcome.value)
            else:
                logger.warning(
                    "Dropping record %s of host %s: %s", outcome.label, host.name, outcome.error
                )
                report.dropped_records += 1
        return values
