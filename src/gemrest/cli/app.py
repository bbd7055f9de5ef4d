"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from ..config import API_KEY_ENV, API_KEY_FALLBACK_ENV, env_credential, get_base_url, get_model, get_timeout
from ..conversation import ConversationStore, Message, MessageRole
from .providers import console_debug_callback, get_client

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="gemrest",
    help="Chat with Gemini over the plain generateContent REST API",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

EXIT_COMMANDS = ("exit", "quit", "q")


def print_message(message: Message) -> None:
    """Render one conversation message to the console."""
    time_str = message.timestamp.strftime("%H:%M")
    if message.role is MessageRole.ASSISTANT:
        console.print(f"[bold magenta]Gemini[/bold magenta] [dim]{time_str}[/dim]")
        console.print(Markdown(message.content))
        console.print()
    elif message.role is MessageRole.ERROR:
        console.print(f"[bold red]Error[/bold red] [dim]{time_str}[/dim]")
        console.print(message.content, style="red", markup=False, highlight=False)
        console.print()


@app.command()
def ask(
    prompt: str = typer.Argument(..., help="Prompt to send"),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model identifier (default: GEMINI_MODEL or gemini-3-flash-preview)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show request tracing"
    ),
):
    """Send a single prompt and print the reply."""
    async def _ask() -> Message | None:
        client = get_client(model, console)
        debug = console_debug_callback(console) if verbose else None
        client.set_debug_callback(debug)
        store = ConversationStore(client, debug_callback=debug)
        try:
            return await store.submit(prompt)
        finally:
            await client.close()

    outcome = asyncio.run(_ask())
    if outcome is None:
        console.print("[red]Error: prompt is empty[/red]")
        raise typer.Exit(code=1)

    print_message(outcome)
    if outcome.is_error:
        raise typer.Exit(code=1)


@app.command()
def chat(
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model identifier (default: GEMINI_MODEL or gemini-3-flash-preview)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show request tracing"
    ),
):
    """Interactive console chat. Each prompt is sent on its own."""
    async def _chat():
        client = get_client(model, console)
        debug = console_debug_callback(console) if verbose else None
        client.set_debug_callback(debug)
        store = ConversationStore(client, debug_callback=debug)

        try:
            console.print(f"[bold cyan]Gemini REST[/bold cyan] [dim]({client.model})[/dim]")
            console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")

            while True:
                try:
                    user_input = console.input("[bold blue]You:[/bold blue] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if not user_input.strip():
                    continue

                if user_input.strip().lower() in EXIT_COMMANDS:
                    console.print("[dim]Goodbye![/dim]")
                    break

                with console.status("[dim]Gemini is typing...[/dim]"):
                    outcome = await store.submit(user_input)
                if outcome is not None:
                    print_message(outcome)
        finally:
            await client.close()

    asyncio.run(_chat())


@app.command(name="tui")
def tui_command(
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model identifier (default: GEMINI_MODEL or gemini-3-flash-preview)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch interactive TUI chat interface."""
    async def _tui():
        from ..ui import run_textual_tui

        client = get_client(model, console)
        try:
            await run_textual_tui(client=client, log_level=log_level)
        finally:
            await client.close()
            console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


@app.command()
def health():
    """Check that the credential and endpoint are configured."""
    credential_set = env_credential()() is not None

    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="bold cyan", width=12)
    table.add_column("Value")

    table.add_row("Model", get_model())
    table.add_row("Endpoint", get_base_url())
    table.add_row("Timeout", f"{get_timeout():.0f}s")
    console.print(table)

    if credential_set:
        console.print(f"[green]+[/green] {API_KEY_ENV}: SET")
    else:
        console.print(
            f"[red]x[/red] {API_KEY_ENV}: NOT SET "
            f"[dim](also checked {API_KEY_FALLBACK_ENV})[/dim]"
        )
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
