"""Provider factory functions for CLI.

Centralizes creation of the inference client from environment variables.
Hides configuration details from command implementations.
"""

import os

from rich.console import Console

from ..inference import DEFAULT_API_URL, InferenceClient, create_inference_client

# Default console for output
_console = Console()


def get_client(console: Console | None = None) -> InferenceClient | None:
    """Create the inference client from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        Inference client instance, or None if not configured

    Environment variables:
        HF_API_TOKEN: Hugging Face access token (required)
        HF_API_URL: Model endpoint (default: blenderbot-400M-distill)
        GLASSCHAT_TIMEOUT: Request timeout in seconds (default: 30)
    """
    con = console or _console
    api_key = os.getenv("HF_API_TOKEN")
    if not api_key:
        con.print("[yellow]Warning: HF_API_TOKEN not set, replies disabled[/yellow]")
        return None

    try:
        timeout = float(os.getenv("GLASSCHAT_TIMEOUT", "30"))
    except ValueError:
        con.print("[yellow]Warning: GLASSCHAT_TIMEOUT is not a number, using 30s[/yellow]")
        timeout = 30.0

    return create_inference_client(
        "huggingface",
        api_key=api_key,
        api_url=os.getenv("HF_API_URL", DEFAULT_API_URL),
        timeout=timeout,
    )


def require_client(console: Console | None = None) -> InferenceClient:
    """Get the inference client, raising error if not configured.

    Raises:
        SystemExit: If the client is not configured
    """
    import typer

    con = console or _console
    client = get_client(con)
    if not client:
        con.print("[red]Error: inference client not configured[/red]")
        raise typer.Exit(code=1)
    return client


def model_label(client: InferenceClient) -> str:
    """Short name of the model behind a client, for display."""
    url = getattr(client, "api_url", "")
    marker = "/models/"
    if marker in url:
        return url.split(marker, 1)[1]
    return url or "unknown"
