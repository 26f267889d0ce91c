"""Main CLI application."""

import typer

from .. import __version__
from ..utils import console
from . import export

app = typer.Typer(
    name="zbxexport",
    help="Export Zabbix hosts, metrics and triggers to files",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("export")(export.export_all)
app.command("hosts")(export.list_hosts)


def version_callback(value: bool) -> None:
    """Print version and exit.

    Args:
        value: Whether version flag was set
    """
    if value:
        console.print(f"zbxexport version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """zbxexport - Export Zabbix host inventory to per-host files.

    Connection settings are read from the environment or a .env file
    (ZBX_USER, ZBX_PASSWD, ZBX_URL, EXPORT_DIRECTORY).

    Get started:
        zbxexport hosts       # List hosts on the server
        zbxexport export      # Write hosts/<name>/{host.xml,metrics.json,triggers.json}
    """
    pass


if __name__ == "__main__":
    app()
