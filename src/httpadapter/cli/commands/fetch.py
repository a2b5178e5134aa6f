"""Fetch command: send one request and show the redirect chain."""

from typing import Optional, Tuple

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ...client import HttpAdapter
from ...config import AdapterConfig
from ...constants import SUPPORTED_METHODS
from ...exceptions import CLIError, HttpAdapterError
from ...pipeline import Stage
from ...redirect import RedirectChainTracker
from ...transports import available_transports

console = Console()


def parse_headers(values: Tuple[str, ...]) -> dict:
    """Parse repeated ``Name: value`` options."""
    headers = {}
    for value in values:
        name, sep, content = value.partition(":")
        if not sep or not name.strip():
            raise CLIError(f"Invalid header {value!r}, expected 'Name: value'")
        headers[name.strip()] = content.strip()
    return headers


class ChainRecorder(Stage):
    """Remembers the last request sent so the chain can be printed."""

    name = "chain-recorder"

    def __init__(self):
        self.last_request = None

    def pre_send(self, request):
        self.last_request = request
        return request


@click.command()
@click.argument("url")
@click.option(
    "-X",
    "--method",
    type=click.Choice(SUPPORTED_METHODS, case_sensitive=False),
    default="GET",
    show_default=True,
    help="HTTP method",
)
@click.option("-d", "--data", "body", help="Raw request body")
@click.option("-H", "--header", "headers", multiple=True, help="Header as 'Name: value'")
@click.option("--max-redirects", type=click.IntRange(min=0), help="Maximum redirects to follow")
@click.option("--strict", is_flag=True, help="Only 303 switches the method to GET")
@click.option("--no-throw", is_flag=True, help="Return the last response when the cap is hit")
@click.option(
    "--transport",
    type=click.Choice(available_transports()),
    help="Transport backend",
)
@click.option("--timeout", type=float, help="Per-hop timeout in seconds")
@click.option("--show-body", is_flag=True, help="Print the response body")
@click.pass_context
def fetch(
    ctx: click.Context,
    url: str,
    method: str,
    body: Optional[str],
    headers: Tuple[str, ...],
    max_redirects: Optional[int],
    strict: bool,
    no_throw: bool,
    transport: Optional[str],
    timeout: Optional[float],
    show_body: bool,
) -> None:
    """Send a request to URL and show how it was redirected.

    \b
    Examples:
        httpadapter fetch http://example.com/
        httpadapter fetch -X POST -d 'a=1' --strict http://example.com/form
        httpadapter fetch --max-redirects 2 --no-throw http://example.com/loop
    """
    config = ctx.obj["config_manager"].load_config()

    redirect = config.redirect.model_dump()
    if max_redirects is not None:
        redirect["max_redirects"] = max_redirects
    if strict:
        redirect["strict"] = True
    if no_throw:
        redirect["throw_exception"] = False

    transport_config = config.transport.model_dump()
    if transport:
        transport_config["name"] = transport
    if timeout is not None:
        transport_config["timeout"] = timeout

    try:
        effective = AdapterConfig(
            transport=transport_config,
            redirect=redirect,
            logging=config.logging.model_dump(),
        )
    except ValidationError as e:
        console.print(f"[red]✗ Invalid option: {e.errors()[0]['msg']}[/red]")
        ctx.exit(1)

    recorder = ChainRecorder()

    try:
        with HttpAdapter(config=effective, stages=[recorder]) as client:
            response = client.send(method, url, headers=parse_headers(headers), body=body)
    except HttpAdapterError as e:
        console.print(f"[red]✗ {e.message}[/red]", soft_wrap=True)
        ctx.exit(1)

    table = Table(title="Redirect chain")
    table.add_column("Hop", justify="right")
    table.add_column("Method")
    table.add_column("URL")
    for request in RedirectChainTracker().get_chain(recorder.last_request):
        table.add_row(str(request.redirect_count), request.method, request.url)
    console.print(table)

    color = "green" if response.ok else "yellow"
    console.print(f"[{color}]{response.status_code} {response.reason_phrase}[/{color}]")
    console.print(f"redirect_count: {response.redirect_count}")
    console.print(f"effective_url: {response.effective_url}")
    if show_body:
        console.print(response.text, markup=False)
