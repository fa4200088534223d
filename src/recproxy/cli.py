"""recproxy CLI - drive record/playback proxy sessions by hand."""

import logging
import os

import httpx
import typer
from rich.console import Console
from rich.table import Table

from recproxy.config import get_proxy_settings
from recproxy.exceptions import RecordingProxyError
from recproxy.modules.session import ProxySession, SessionController
from recproxy.modules.transport import create_proxy_client, create_proxy_transport

app = typer.Typer(
    name="recproxy",
    help="Record/playback proxy session control",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    if verbose or os.environ.get("RECPROXY_VERBOSE", "").lower() in ("1", "true", "yes"):
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def version() -> None:
    """Show the installed recproxy version."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        current_version = pkg_version("recproxy")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"recproxy {current_version}")


def _load_settings():
    try:
        return get_proxy_settings()
    except RecordingProxyError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)


def _controller() -> SessionController:
    return SessionController(create_proxy_client(create_proxy_transport()))


@app.command()
def config() -> None:
    """Show the resolved proxy settings."""
    settings = _load_settings()

    table = Table(title="Proxy Settings")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in settings.as_dict().items():
        table.add_row(key, value)
    console.print(table)


@app.command()
def start(
    name: str = typer.Argument(..., help="Recording name (file is recordings/<name>.json)"),
) -> None:
    """Start a record or playback session and print its recording id."""
    settings = _load_settings()
    session = ProxySession.for_test(settings, name)
    controller = _controller()

    try:
        recording_id = controller.start(session)
    except (RecordingProxyError, httpx.HTTPError) as e:
        console.print(f"[red]Failed to start session: {e}[/red]")
        raise typer.Exit(1)
    finally:
        controller.client.close()

    console.print(f"[green]Started {session.mode.value} session:[/green] {recording_id}")
    console.print(f"[dim]Recording file: {session.recording_path}[/dim]")


@app.command()
def stop(
    recording_id: str = typer.Argument(..., help="Recording id returned by 'recproxy start'"),
) -> None:
    """Stop a session and save its recording."""
    settings = _load_settings()
    # The recording path is not needed to stop; the proxy knows it by id.
    session = ProxySession.for_test(settings, recording_id)
    session.recording_id = recording_id
    controller = _controller()

    try:
        controller.stop(session)
    except (RecordingProxyError, httpx.HTTPError) as e:
        console.print(f"[red]Failed to stop session: {e}[/red]")
        raise typer.Exit(1)
    finally:
        controller.client.close()

    console.print(f"[green]Stopped {session.mode.value} session:[/green] {recording_id}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
