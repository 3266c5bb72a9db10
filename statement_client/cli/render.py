"""Console rendering of workflow outcomes with rich."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from statement_client.formatting.formatter import truncate_text
from statement_client.results.models import DisplayCategory, DisplayModel
from statement_client.workflow.notifier import BaseNotifier
from statement_client.workflow.states import FailureReason

_CATEGORY_STYLES = {
    DisplayCategory.CARD: "magenta",
    DisplayCategory.DATE: "blue",
    DisplayCategory.AMOUNT: "red",
}


class ConsoleNotifier(BaseNotifier):
    """Prints workflow outcomes as one-line console messages."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def success(self, message: str) -> None:
        self._console.print(f"[bold green]✓[/] {escape(message)}")

    def failure(self, message: str) -> None:
        self._console.print(f"[bold red]✗[/] {escape(message)}")


def render_display_model(console: Console, model: DisplayModel) -> None:
    console.print(Panel(escape(model.headline), title="Successfully Parsed!", style="green"))

    key_points = Table(show_header=False, box=None)
    key_points.add_column("Label", style="bold")
    key_points.add_column("Value")
    for point in model.key_data_points:
        style = _CATEGORY_STYLES[point.category]
        if point.highlight:
            style = f"bold {style}"
        key_points.add_row(point.label, f"[{style}]{escape(point.value)}[/]")
    console.print(key_points)

    if model.additional_info is not None:
        info = Table(title="Additional Information", show_header=False)
        info.add_column("Label", style="bold")
        info.add_column("Value", justify="right")
        for item in model.additional_info:
            info.add_row(item.label, escape(item.value))
        console.print(info)

    if model.transactions:
        table = Table(title=f"Recent Transactions ({model.total_transactions})")
        table.add_column("Date")
        table.add_column("Description")
        table.add_column("Amount", justify="right")
        for row in model.transactions:
            table.add_row(
                escape(row.date), escape(truncate_text(row.description)), escape(row.amount)
            )
        console.print(table)
        if model.truncated:
            console.print(
                f"Showing {len(model.transactions)} of {model.total_transactions} "
                f"transactions ({model.remaining_transactions} more)"
            )


def render_violations(console: Console, violations: tuple[str, ...]) -> None:
    lines = "\n".join(f"• {escape(violation)}" for violation in violations)
    console.print(Panel(lines, title="Upload Error", style="red"))


def render_failure(console: Console, reason: FailureReason | None) -> None:
    message = reason.message if reason is not None else "Unknown error"
    console.print(Panel(escape(message), title="Parsing Failed", style="red"))
