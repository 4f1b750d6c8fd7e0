"""CLI interface for todo."""

from __future__ import annotations

import logging
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from todo import __version__
from todo.config import TodoConfig
from todo.display import make_console, print_banner, print_tasks
from todo.errors import StoreError, TodoError
from todo.logging_setup import setup_logging
from todo.models import PRIORITY_CHOICES, parse_due_date, parse_priority
from todo.store import TaskStore

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="todo")
@click.option(
    "--file",
    "store_file",
    envvar="TODO_FILE",
    type=click.Path(dir_okay=False),
    help="Task file to use (overrides config)",
)
@click.option("--no-color", is_flag=True, help="Disable coloured output")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging on stderr")
@click.pass_context
def main(ctx: click.Context, store_file: str | None, no_color: bool, verbose: bool) -> None:
    """todo - A feature-rich todo list manager.

    \b
    Examples:
      todo add "Write report" --priority high --due 2025-03-01 --tag work
      todo list --priority high
      todo search report
      todo complete 1
      todo delete 1
    """
    setup_logging(verbose)

    ctx.ensure_object(dict)
    try:
        config = TodoConfig.load()
    except StoreError as e:
        _abort(ctx, make_console(not no_color), e)

    console = make_console(config.display.color and not no_color)
    ctx.obj["config"] = config
    ctx.obj["console"] = console
    ctx.obj["store_path"] = config.store_path(store_file)

    # If no subcommand, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    if config.display.banner:
        print_banner(console)


def _abort(ctx: click.Context, console: Console, error: TodoError) -> NoReturn:
    """Report an error and exit with its code."""
    logger.debug("Command failed: %r", error)
    console.print(f"[red]✗ Error:[/red] {escape(str(error))}", soft_wrap=True)
    ctx.exit(error.exit_code)


def _load_store(ctx: click.Context) -> TaskStore:
    return TaskStore.load(ctx.obj["store_path"])


@main.command()
@click.argument("title")
@click.option(
    "--priority",
    type=click.Choice(PRIORITY_CHOICES, case_sensitive=False),
    help="Priority level (high/medium/low)",
)
@click.option("--due", help="Due date (YYYY-MM-DD)")
@click.option("--tag", "tags", multiple=True, help="Category (can be used multiple times)")
@click.pass_context
def add(
    ctx: click.Context,
    title: str,
    priority: str | None,
    due: str | None,
    tags: tuple[str, ...],
) -> None:
    """Add a new todo item."""
    console: Console = ctx.obj["console"]

    try:
        task_priority = parse_priority(priority)
        due_date = parse_due_date(due)
        store = _load_store(ctx)
        task = store.add(title, priority=task_priority, due_date=due_date, categories=tags)
        store.save()
    except TodoError as e:
        _abort(ctx, console, e)

    console.print(
        f"[green]✓[/green] Added new todo [cyan]\\[{task.id}][/cyan]: "
        f"[cyan]{escape(task.title)}[/cyan]"
    )


@main.command("list")
@click.option("--completed", is_flag=True, help="Show only completed items")
@click.option("--all", "-a", "show_all", is_flag=True, help="Show pending and completed items")
@click.option(
    "--priority",
    type=click.Choice(PRIORITY_CHOICES, case_sensitive=False),
    help="Filter by priority",
)
@click.option("--tag", help="Filter by category")
@click.pass_context
def list_command(
    ctx: click.Context,
    completed: bool,
    show_all: bool,
    priority: str | None,
    tag: str | None,
) -> None:
    """List todo items (pending ones unless --completed or --all)."""
    config: TodoConfig = ctx.obj["config"]
    console: Console = ctx.obj["console"]

    try:
        store = _load_store(ctx)
        tasks = store.list(
            completed=completed,
            priority=parse_priority(priority),
            tag=tag,
            include_all=show_all,
        )
    except TodoError as e:
        _abort(ctx, console, e)

    print_tasks(console, Text("📋 Tasks", style="blue"), tasks, config.display)


@main.command()
@click.argument("query")
@click.pass_context
def search(ctx: click.Context, query: str) -> None:
    """Search todo items by description."""
    config: TodoConfig = ctx.obj["config"]
    console: Console = ctx.obj["console"]

    try:
        store = _load_store(ctx)
        tasks = store.search(query)
    except TodoError as e:
        _abort(ctx, console, e)

    heading = Text()
    heading.append("🔍 Search results for", style="blue")
    heading.append(f" '{query}'", style="cyan")
    print_tasks(console, heading, tasks, config.display)


@main.command()
@click.argument("task_id", metavar="ID", type=int)
@click.pass_context
def complete(ctx: click.Context, task_id: int) -> None:
    """Mark a todo item as completed."""
    console: Console = ctx.obj["console"]

    try:
        store = _load_store(ctx)
        task, changed = store.complete(task_id)
        if changed:
            store.save()
    except TodoError as e:
        _abort(ctx, console, e)

    if not changed:
        console.print(f"[yellow]![/yellow] Task {task_id} is already completed!")
        return

    console.print(f"[green]✓[/green] Completed: [cyan]{escape(task.title)}[/cyan]")


@main.command()
@click.argument("task_id", metavar="ID", type=int)
@click.pass_context
def delete(ctx: click.Context, task_id: int) -> None:
    """Delete a todo item."""
    console: Console = ctx.obj["console"]

    try:
        store = _load_store(ctx)
        task = store.delete(task_id)
        store.save()
    except TodoError as e:
        _abort(ctx, console, e)

    console.print(f"[red]✗[/red] Deleted: [cyan]{escape(task.title)}[/cyan]")


if __name__ == "__main__":
    main()
