import os
import logging
from enum import Enum
from typing import List, Optional

import typer
from dotenv import load_dotenv

from exporter import (
    ExportError,
    ExportMode,
    ServingClient,
    UsageError,
    export_service,
    load_settings,
    render,
)

load_dotenv()

app = typer.Typer(name="knexport", help="Export Knative services and their revisions")

class OutputFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"

def setup_logging(level: str = "WARNING"):
    """Set up logging configuration. Logs go to stderr, artifacts to stdout."""
    handlers = [logging.StreamHandler()]

    log_file = os.getenv("KNEXPORT_LOG_FILE")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True,
    )

@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="DEBUG, INFO, WARNING or ERROR"),
):
    """kn service export CLI."""
    setup_logging(log_level)

@app.command()
def export(
    names: Optional[List[str]] = typer.Argument(None, help="Name of the service", show_default=False),
    namespace: Optional[str] = typer.Option(None, "--namespace", "-n", help="Namespace of the service"),
    output: Optional[OutputFormat] = typer.Option(None, "--output", "-o", help="Output format, yaml or json"),
    with_revisions: bool = typer.Option(False, "--with-revisions", help="Export all routed revisions"),
    mode: ExportMode = typer.Option(ExportMode.EXPORT, "--mode", help="Format for exporting all routed revisions"),
):
    """Export a service and its revisions.

    \b
    knexport export foo -n bar -o yaml
    knexport export foo --with-revisions --mode export -n bar -o json
    knexport export foo --with-revisions --mode replay -n bar -o json
    """
    try:
        if not names or len(names) != 1:
            raise UsageError("'kn service export' requires name of the service as single argument")
        if output is None:
            raise UsageError("'kn service export' requires output format")

        settings = load_settings()
        client = ServingClient(settings, namespace)
        service = client.get_service(names[0])

        result = export_service(service, client, with_revisions, mode)
        typer.echo(render(result, output.value), nl=False)

    except ExportError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

if __name__ == "__main__":
    app()
