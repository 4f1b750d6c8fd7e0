"""Terminal rendering for todo."""

from __future__ import annotations

from datetime import datetime

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from todo.config import DisplayConfig
from todo.models import Priority, Task

PRIORITY_BADGES: dict[Priority, tuple[str, str]] = {
    Priority.HIGH: ("⚠ HIGH", "red"),
    Priority.MEDIUM: ("◆ MED", "yellow"),
    Priority.LOW: ("○ LOW", "green"),
}

RULE_WIDTH = 50


def make_console(color: bool = True) -> Console:
    """Create the console used for all user-facing output."""
    return Console(no_color=not color, highlight=False, emoji=False)


def print_banner(console: Console) -> None:
    """Print the application banner."""
    console.print(Panel.fit("[bold]TODO MANAGER[/bold]", border_style="cyan"))


def format_priority(priority: Priority | None) -> Text:
    """Return the coloured badge for a priority."""
    if priority is None:
        return Text("")
    label, style = PRIORITY_BADGES[priority]
    return Text(label, style=style)


def format_task(
    task: Task,
    display: DisplayConfig | None = None,
    now: datetime | None = None,
) -> Text:
    """Render a task as a headline plus indented detail lines."""
    display = display or DisplayConfig()

    line = Text()
    if task.completed:
        line.append("✓", style="green")
    else:
        line.append("○", style="yellow")
    line.append(" [")
    line.append(str(task.id), style="cyan")
    line.append("] ")
    line.append(task.title, style="white")
    if task.priority is not None:
        line.append(" ")
        line.append_text(format_priority(task.priority))
    line.append(" ")
    line.append(
        f"(created: {task.created_at.strftime(display.datetime_format)})", style="dim"
    )

    if task.categories:
        line.append("\n     ")
        line.append("↳ categories:", style="blue")
        line.append(" ")
        line.append(", ".join(task.categories), style="dim")

    if task.due_date is not None:
        due_style = "bold red" if task.is_overdue(now) else "dim"
        line.append("\n     ")
        line.append("↳ due:", style="yellow")
        line.append(" ")
        line.append(task.due_date.strftime(display.date_format), style=due_style)
        if task.is_overdue(now):
            line.append(" (overdue)", style="bold red")

    if task.completed_at is not None:
        line.append("\n     ")
        line.append("↳ completed:", style="green")
        line.append(" ")
        line.append(task.completed_at.strftime(display.datetime_format), style="dim")

    return line


def print_tasks(
    console: Console,
    heading: Text | str,
    tasks: list[Task],
    display: DisplayConfig | None = None,
) -> None:
    """Print a heading, a rule, and every task (or an empty notice)."""
    console.print()
    console.print(heading)
    console.print("=" * RULE_WIDTH)

    if not tasks:
        console.print("[yellow]No matching tasks found![/yellow]")
    for task in tasks:
        console.print(format_task(task, display))

    console.print()
