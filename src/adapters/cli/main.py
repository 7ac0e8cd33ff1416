"""
adapters.cli.main - CLI adapter for the workflow task agent.

Uses the same ServiceFactory and AgentExecutor as any other adapter, so
behaviour (tools, prompt, timeouts) is identical.

Commands
--------
  ask     One-shot request  ("add a task to review PR 12")
  chat    Interactive session with memory across turns (/reset clears it)
  tools   List the workflow operations the agent can call

Usage
-----
  python run_cli.py ask "what is still pending?"
  python run_cli.py chat
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

# ── Ensure src/ is on the path when run as a script ──
_SRC = Path(__file__).resolve().parent.parent.parent
sys.path.insert(0, str(_SRC))

import typer
from rich import box
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from agent.executor import AgentExecutor
from application.context import SessionContext
from domain.exceptions import ConfigurationError, WorkflowAgentError
from factory import ServiceFactory
from infrastructure.config import Settings

__version__ = "1.0.0"

console = Console()
app = typer.Typer(
    help="Workflow Task Agent CLI",
    add_completion=False,
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _make_factory() -> ServiceFactory:
    config = Settings.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return ServiceFactory(config)


def _make_agent(factory: ServiceFactory) -> AgentExecutor:
    try:
        return factory.create_agent()
    except ConfigurationError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {e}")
        raise typer.Exit(code=2)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"workflow-agent v{__version__}")
        raise typer.Exit()


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command()
def ask(
    query: str = typer.Argument(..., help="What you want done with your tasks."),
) -> None:
    """Send a single request to the agent and print the answer."""
    agent = _make_agent(_make_factory())
    ctx = SessionContext()

    async def _run() -> None:
        with console.status("[bold cyan]Thinking…", spinner="dots"):
            result = await agent.run(ctx, query)
        console.print(Panel(Markdown(result.output), title="Agent", border_style="green"))

    try:
        asyncio.run(_run())
    except WorkflowAgentError as e:
        console.print(f"[bold red]Request failed:[/bold red] {e}")
        raise typer.Exit(code=1)


@app.command()
def chat() -> None:
    """Start an interactive session; the conversation is kept between turns."""
    agent = _make_agent(_make_factory())
    ctx = SessionContext()

    console.print(Panel(
        "[bold]Workflow Task Agent[/bold]\n"
        "Type your request, [bold]/reset[/bold] to start over, "
        "or [bold]exit[/bold] / [bold]quit[/bold] to stop.",
        border_style="cyan",
    ))

    async def _run() -> None:
        while True:
            try:
                user_input = Prompt.ask("\n[bold cyan]You[/bold cyan]")
            except (KeyboardInterrupt, EOFError):
                console.print("\n[dim]Goodbye![/dim]")
                break

            if user_input.strip().lower() in ("exit", "quit", "q", "bye"):
                console.print("[dim]Goodbye![/dim]")
                break

            if not user_input.strip():
                continue

            if user_input.strip().lower() == "/reset":
                agent.reset()
                console.print("[dim]Conversation cleared.[/dim]")
                continue

            try:
                with console.status("[bold cyan]Thinking…", spinner="dots"):
                    result = await agent.run(ctx, user_input)
            except WorkflowAgentError as e:
                # The turn left no trace in memory; the user can simply retry.
                console.print(f"[bold red]Request failed:[/bold red] {e}")
                continue

            console.print()
            console.print(Panel(Markdown(result.output), title="Agent", border_style="green"))

    asyncio.run(_run())


@app.command()
def tools() -> None:
    """List the workflow operations available to the agent."""
    registry = _make_factory().create_tool_registry()

    t = Table(box=box.SIMPLE, padding=(0, 2))
    t.add_column("Operation", style="bold")
    t.add_column("Arguments")
    t.add_column("Description")
    for tool in registry.all():
        fields = tool.get_schema().model_fields
        args = ", ".join(fields) if fields else "[dim]none[/dim]"
        t.add_row(tool.name.value, args, tool.description)
    console.print(Panel(t, title="Workflow Operations", border_style="blue"))


# ---------------------------------------------------------------------------
# Global version option
# ---------------------------------------------------------------------------

@app.callback()
def _callback(
    version: bool = typer.Option(
        False, "--version", "-v",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Workflow Task Agent CLI"""


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    app()
