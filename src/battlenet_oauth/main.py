"""battlenet-oauth CLI — entry point."""

from __future__ import annotations

import logging

import typer

from battlenet_oauth.commands.token_cmd import app as token_app

app = typer.Typer(
    name="battlenet-oauth",
    help="Acquire and validate Battle.net OAuth2 client-credentials tokens.",
    no_args_is_help=True,
)

app.add_typer(token_app, name="token")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Battle.net OAuth client — request and introspect access tokens."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
        # httpx logs full request URLs, query strings included
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


if __name__ == "__main__":
    app()
