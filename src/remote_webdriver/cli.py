"""Command line interface for remote-webdriver."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from pathlib import Path
from typing import Annotated, Callable, NoReturn, Optional

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.table import Table

from .config import load_config
from .driver import RemoteWebDriver
from .errors import WebDriverError
from .factory import build_driver
from .status import known_statuses, resolve_state

app = typer.Typer(help="Remote WebDriver wire protocol client")
console = Console()

EnvFileOption = Annotated[
    Optional[Path],
    typer.Option("--env-file", help="Path to an .env file with REMOTE_WEBDRIVER_* values."),
]
ServiceURLOption = Annotated[
    Optional[str],
    typer.Option("--service-url", help="Remote end URL, e.g. http://localhost:4444/wd/hub."),
]
SessionOption = Annotated[
    Optional[str],
    typer.Option("--session-id", "-s", help="Identifier of the running session."),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every dispatched request to stderr"),
    ] = False,
) -> None:
    # Replies go to stdout as JSON; diagnostics stay on stderr.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def version() -> None:
    """Print the installed remote-webdriver version."""

    try:
        installed = get_version("remote-webdriver")
    except PackageNotFoundError:  # pragma: no cover - source checkout
        installed = "unknown"
    typer.echo(f"remote-webdriver {installed}")


@app.command()
def statuses() -> None:
    """Print the table of known wire statuses."""

    table = Table(title="Wire statuses")
    table.add_column("Status", justify="right")
    table.add_column("State")
    for code, state in known_statuses():
        table.add_row(str(code), state)
    console.print(table)


@app.command()
def status(code: Annotated[int, typer.Argument(help="Numeric wire status.")]) -> None:
    """Resolve a numeric wire status to its symbolic state."""

    typer.echo(resolve_state(code))


@app.command("accept-alert")
def accept_alert(
    env_file: EnvFileOption = None,
    service_url: ServiceURLOption = None,
    session_id: SessionOption = None,
) -> None:
    """Accept the alert open in the session."""

    _run(RemoteWebDriver.accept_alert, env_file, service_url, session_id)


@app.command("dismiss-alert")
def dismiss_alert(
    env_file: EnvFileOption = None,
    service_url: ServiceURLOption = None,
    session_id: SessionOption = None,
) -> None:
    """Dismiss the alert open in the session."""

    _run(RemoteWebDriver.dismiss_alert, env_file, service_url, session_id)


@app.command("execute-script")
def execute_script(
    script: Annotated[str, typer.Argument(help="JavaScript to run in the page.")],
    env_file: EnvFileOption = None,
    service_url: ServiceURLOption = None,
    session_id: SessionOption = None,
) -> None:
    """Run a script synchronously in the session."""

    _run(lambda driver: driver.execute_script(script), env_file, service_url, session_id)


def _run(
    command: Callable[[RemoteWebDriver], BaseModel],
    env_file: Optional[Path],
    service_url: Optional[str],
    session_id: Optional[str],
) -> None:
    """Configure a driver, run *command* and print its reply as JSON."""

    try:
        config = load_config(env_file, service_url=service_url, session_id=session_id)
    except ValidationError as exc:
        _fail("config", str(exc), exc)
    driver = build_driver(config)
    try:
        result = command(driver)
    except WebDriverError as exc:
        _fail(exc.kind.value, str(exc), exc)
    finally:
        driver.dispatcher.transport.close()
    typer.echo(result.model_dump_json())


def _fail(label: str, message: str, cause: Exception) -> NoReturn:
    console.print(f"[{label}] {message}", style="red", markup=False)
    raise typer.Exit(code=1) from cause


if __name__ == "__main__":
    app()
