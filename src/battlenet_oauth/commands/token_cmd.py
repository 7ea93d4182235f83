"""CLI commands for acquiring and checking access tokens."""

from __future__ import annotations

import asyncio
from typing import Annotated, Optional

import typer
from rich.console import Console

from battlenet_oauth.auth import CredentialStrategy, acquire_token, validate_token
from battlenet_oauth.config import get_config
from battlenet_oauth.utils.errors import handle_error
from battlenet_oauth.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="token", help="Acquire and validate Battle.net access tokens.")

RegionOption = Annotated[
    Optional[str],
    typer.Option("--region", "-r", help="Region code (us, eu, kr, tw, cn). Defaults to BATTLENET_REGION."),
]
OutputOption = Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")]


@app.command("get")
def get_token(
    region: RegionOption = None,
    strategy: Annotated[
        Optional[CredentialStrategy],
        typer.Option("--strategy", "-s", help="Send credentials as query parameters or a Basic-Auth header"),
    ] = None,
    output: OutputOption = OutputFormat.TABLE,
) -> None:
    """Request an access token with the client-credentials grant."""
    try:
        config = get_config()
        settings = config.settings
        region = region or settings.region
        console.print(f"Requesting token for region [bold]{region}[/bold]...", style="yellow")
        token = asyncio.run(
            acquire_token(
                settings.client_id,
                settings.client_secret,
                region,
                strategy or settings.strategy,
                hosts=config.region_hosts,
            )
        )
    except Exception as e:
        handle_error(e)
        raise typer.Exit(1)

    print_output(token, output, title="Access Token")


@app.command("check")
def check_token(
    access_token: Annotated[str, typer.Argument(help="Access token to introspect")],
    region: RegionOption = None,
    output: OutputOption = OutputFormat.TABLE,
) -> None:
    """Validate an access token and show its scopes, expiry and authorities."""
    try:
        config = get_config()
        region = region or config.settings.region
        console.print(f"Checking token against region [bold]{region}[/bold]...", style="yellow")
        validated = asyncio.run(validate_token(access_token, region, hosts=config.region_hosts))
    except Exception as e:
        handle_error(e)
        raise typer.Exit(1)

    print_output(validated, output, title="Token Details")
