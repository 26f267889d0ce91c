"""Export commands."""

from pathlib import Path

import typer
from rich.markup import escape

from ..api.client import ZabbixClient
from ..api.exceptions import ZbxExportError
from ..config import load_settings
from ..exporter import ExportReport, Exporter
from ..utils import (
    configure_logging,
    console,
    create_table,
    format_host_status,
    get_availability_color,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from ..utils.helpers import async_to_sync

ENV_FILE_HELP = "Environment file with ZBX_* settings (default: ./.env if present)"


@async_to_sync
async def export_all(
    env_file: Path = typer.Option(None, "--env-file", "-e", help=ENV_FILE_HELP),
    output: Path = typer.Option(
        None, "--output", "-o", help="Export root directory (overrides EXPORT_DIRECTORY)"
    ),
    no_interfaces: bool = typer.Option(
        False,
        "--no-interfaces",
        help="Leave the interface list out of host.xml (overrides ZBX_POPULATE_INTERFACES)",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log raw API responses"),
) -> None:
    """Export all hosts with their metrics and triggers."""
    try:
        settings = load_settings(
            env_file, export_directory=output, populate_interfaces=False if no_interfaces else None
        )
        configure_logging("DEBUG" if verbose else settings.log_level)

        async with ZabbixClient(settings) as client:
            report = await Exporter(client, settings).run()

    except ZbxExportError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)

    _print_report(report)


@async_to_sync
async def list_hosts(
    env_file: Path = typer.Option(None, "--env-file", "-e", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", help="Log raw API responses"),
) -> None:
    """List hosts on the server without writing files."""
    try:
        settings = load_settings(env_file)
        configure_logging("DEBUG" if verbose else settings.log_level)

        async with ZabbixClient(settings) as client:
            decoded = await Exporter(client, settings).fetch_hosts()

    except ZbxExportError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)

    if not decoded:
        print_info("No hosts found")
        return

    table = create_table(
        title="Hosts",
        columns=[
            ("Name", "cyan"),
            ("ID", ""),
            ("IP", ""),
            ("Status", ""),
            ("Availability", ""),
            ("Groups", "dim"),
        ],
    )
    for outcome in decoded:
        host = outcome.value
        if host is None:
            print_warning(escape(f"Invalid host record {outcome.label}: {outcome.error}"))
            continue
        color = get_availability_color(host.availability)
        table.add_row(
            escape(host.name),
            host.hostid,
            host.ip,
            escape(format_host_status(host.status)),
            f"[{color}]{host.availability}[/{color}]",
            escape(", ".join(g.name for g in host.groups)),
        )

    console.print(table)


def _print_report(report: ExportReport) -> None:
    """Print the export summary."""
    if not report.hosts and not report.skipped_hosts:
        print_info("No hosts available for export")
        return

    def count(value: int | None) -> str:
        return "[red]failed[/red]" if value is None else str(value)

    table = create_table(
        title="Export Summary",
        columns=[("Host", "cyan"), ("Metrics", ""), ("Triggers", ""), ("Directory", "dim")],
    )
    for item in report.hosts:
        table.add_row(
            escape(item.host.name),
            count(item.metrics),
            count(item.triggers),
            escape(str(item.directory)),
        )
    console.print(table)

    for skipped in report.skipped_hosts:
        print_warning(escape(f"Host {skipped.label} skipped: {skipped.reason}"))
    for failure in report.failures:
        print_warning(
            escape(f"{failure.resource.capitalize()} of {failure.host} not exported: {failure.reason}")
        )
    if report.dropped_records:
        print_warning(f"{report.dropped_records} invalid metric/trigger records dropped")

    if report.complete:
        print_success(f"Exported {len(report.hosts)} hosts")
    else:
        print_warning(f"Exported {len(report.hosts)} hosts with problems")
