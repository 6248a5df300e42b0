"""Main CLI application using Typer."""
import asyncio
import os

import typer
from dotenv import load_dotenv
from rich.console import Console

from ..conversation import Author, ConversationController
from .providers import get_client, model_label, require_client

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="glasschat",
    help="Chat with a hosted text-generation model",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


def _last_reply(controller: ConversationController) -> str:
    last = controller.state.last_message
    if last is None or last.author != Author.ASSISTANT:
        return ""
    return last.text


@app.command()
def ask(
    prompt: str = typer.Argument(..., help="Text to send to the model"),
):
    """Send a single prompt and print the reply."""
    async def _ask():
        client = require_client(console)
        controller = ConversationController(client)
        try:
            task = controller.submit(prompt)
            if task is None:
                console.print("[yellow]Nothing to send[/yellow]")
                raise typer.Exit(code=1)
            with console.status("[dim]Waiting for reply...[/dim]"):
                await task
            console.print(f"[bold green]AI:[/bold green] {_last_reply(controller)}")
        finally:
            await controller.aclose()
            await client.close()

    asyncio.run(_ask())


@app.command()
def chat():
    """Interactive line-mode chat."""
    async def _chat():
        client = require_client(console)
        controller = ConversationController(client)

        console.print("[bold cyan]glasschat[/bold cyan]")
        console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")

        try:
            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if user_input.strip().lower() in ("exit", "quit", "q"):
                    console.print("[dim]Goodbye![/dim]")
                    break

                task = controller.submit(user_input)
                if task is None:
                    continue
                with console.status("[dim]...[/dim]"):
                    await task
                console.print(f"[bold green]AI:[/bold green] {_last_reply(controller)}\n")
        finally:
            await controller.aclose()
            await client.close()

    asyncio.run(_chat())


@app.command(name="tui")
def tui_command(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive TUI chat interface."""
    async def _tui():
        from ..ui import run_textual_tui

        client = require_client(console)
        await run_textual_tui(client, log_level=log_level, model_name=model_label(client))
        console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


@app.command()
def health():
    """Check configuration."""
    client = get_client(console)
    if client is None:
        console.print("[yellow]![/yellow] HF_API_TOKEN: NOT SET")
        raise typer.Exit(code=1)

    console.print("[green]+[/green] HF_API_TOKEN: SET")
    console.print(f"[green]+[/green] Model: {model_label(client)}")
    if os.getenv("HF_API_URL"):
        console.print("[dim]Endpoint overridden by HF_API_URL[/dim]")
    asyncio.run(client.close())


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
