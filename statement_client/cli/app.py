import asyncio
import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from statement_client.cli.render import (
    ConsoleNotifier,
    render_display_model,
    render_failure,
    render_violations,
)
from statement_client.client.exceptions import StatementApiError
from statement_client.client.factory import ApiClientFactory
from statement_client.config.settings import Settings
from statement_client.formatting.formatter import format_byte_size
from statement_client.logging.logger import Log
from statement_client.upload.models import FileConstraints, UploadCandidate
from statement_client.workflow.controller import WorkflowController

app = typer.Typer(
    add_completion=False,
    help="Upload credit card statement PDFs to the parsing service and view the result.",
)
console = Console()


def _bootstrap() -> Settings:
    settings = Settings()
    Log.configure(settings.log_level)
    return settings


def _load_candidate(pdf: Path) -> UploadCandidate:
    try:
        return UploadCandidate.from_path(pdf)
    except OSError as exc:
        console.print(f"[red]Cannot read {escape(str(pdf))}: {escape(str(exc))}[/]")
        raise typer.Exit(code=1) from exc


@app.command()
def parse(
    pdf: Path = typer.Argument(..., help="Statement PDF to parse."),
    save_json: Path | None = typer.Option(
        None, "--save-json", help="Directory to write the full JSON export into."
    ),
    print_json: bool = typer.Option(
        False, "--print-json", help="Print the full JSON export after the summary."
    ),
) -> None:
    """Validate, submit and display one statement."""
    settings = _bootstrap()
    controller = WorkflowController(
        ApiClientFactory.create(settings),
        FileConstraints.from_settings(settings),
        notifier=ConsoleNotifier(console),
    )

    candidate = _load_candidate(pdf)
    console.print(f"{candidate.name} ({format_byte_size(candidate.size_bytes)})")
    validation = controller.select_file(candidate)
    if validation is None or not validation.is_admissible:
        render_violations(console, controller.violations)
        raise typer.Exit(code=1)

    with console.status("Processing your statement..."):
        asyncio.run(controller.submit())

    model = controller.display_model
    if model is None:
        render_failure(console, controller.failure)
        raise typer.Exit(code=1)

    render_display_model(console, model)
    if save_json is not None:
        path = model.to_downloadable_file().save(save_json)
        console.print(f"Statement data saved to {path}")
    if print_json:
        typer.echo(model.to_clipboard_text())


@app.command()
def debug(pdf: Path = typer.Argument(..., help="PDF to extract raw text from.")) -> None:
    """Print the service's raw text extraction for a PDF."""
    settings = _bootstrap()
    client = ApiClientFactory.create(settings)
    candidate = _load_candidate(pdf)
    try:
        text = asyncio.run(client.debug(candidate))
    except StatementApiError as exc:
        message = exc.server_message or exc.detail
        console.print(f"[red]Debug request failed: {escape(message)}[/]")
        raise typer.Exit(code=1) from exc
    typer.echo(text)


@app.command()
def health() -> None:
    """Check that the parsing service is up."""
    settings = _bootstrap()
    client = ApiClientFactory.create(settings)
    try:
        payload = asyncio.run(client.health())
    except StatementApiError as exc:
        console.print(
            f"[red]Service unavailable at {escape(client.base_url)}: "
            f"{escape(exc.detail)}[/]"
        )
        raise typer.Exit(code=1) from exc
    typer.echo(json.dumps(payload, indent=2))


@app.command()
def issuers() -> None:
    """List the card issuers the parsing service supports."""
    settings = _bootstrap()
    client = ApiClientFactory.create(settings)
    try:
        payload = asyncio.run(client.supported_issuers())
    except StatementApiError as exc:
        console.print(f"[red]Could not fetch supported issuers: {escape(exc.detail)}[/]")
        raise typer.Exit(code=1) from exc
    typer.echo(json.dumps(payload, indent=2))
