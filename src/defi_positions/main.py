"""CLI entrypoint for defi-positions."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Annotated, Any

import typer

from .adapters import ALL_ADAPTERS, PROTOCOL_ADAPTERS
from .logger import setup_logging
from .settings import CONFIG_ENV_VAR, Network, OutputFormat, ScannerSettings
from .state import AppState

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    add_help_option=True,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
    rich_markup_mode="rich",
    help="DeFi position scanner for Movement accounts.",
)


def _build_logger() -> logging.Logger:
    """Build a logger instance."""
    return logging.getLogger("defi_positions")


def _print_adapters() -> None:
    optional = {adapter.id for adapter in ALL_ADAPTERS} - {
        adapter.id for adapter in PROTOCOL_ADAPTERS
    }
    for adapter in ALL_ADAPTERS:
        suffix = "  (--include-generic)" if adapter.id in optional else ""
        typer.echo(
            f"{adapter.id:<28} {adapter.protocol:<14} "
            f"{adapter.category.value:<10}{suffix}"
        )


@app.command()
def scan(
    account_address: Annotated[
        str | None, typer.Argument(help="Account address to scan.")
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to a TOML config file (can include [defi_positions] table).",
        ),
    ] = None,
    network: Annotated[
        Network | None,
        typer.Option(
            "--network",
            "-n",
            help="Network to use (mainnet or testnet).",
        ),
    ] = None,
    fullnode_url: Annotated[
        str | None,
        typer.Option(
            "--fullnode-url",
            help="Fullnode REST endpoint; overrides the network default.",
        ),
    ] = None,
    resources_file: Annotated[
        Path | None,
        typer.Option(
            "--resources-file",
            exists=True,
            dir_okay=False,
            help="Read account resources from a JSON dump instead of the fullnode.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option(
            "--format",
            help="Output format (table or json).",
        ),
    ] = None,
    include_generic: Annotated[
        bool | None,
        typer.Option(
            "--include-generic/--no-include-generic",
            help="Also run receipt-token and generic fallback adapters.",
        ),
    ] = None,
    disable: Annotated[
        list[str] | None,
        typer.Option(
            "--disable",
            help="Adapter id to skip; may be repeated.",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Override logging verbosity (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL).",
        ),
    ] = None,
    show_config: Annotated[
        bool,
        typer.Option(
            "--show-config",
            help="Print effective config (with secrets redacted) and exit.",
        ),
    ] = False,
    list_adapters: Annotated[
        bool,
        typer.Option(
            "--list-adapters",
            help="Print the available adapters and exit.",
        ),
    ] = False,
):
    """Scan an account's resources and report its DeFi positions.

    This is the default command that loads configuration, builds the adapter
    registry, and executes the scan pipeline.
    """
    if list_adapters:
        _print_adapters()
        raise typer.Exit(code=0)

    if config_path:
        os.environ[CONFIG_ENV_VAR] = str(config_path)

    init_kwargs: dict[str, Any] = {}
    if network is not None:
        init_kwargs["network"] = network
    if fullnode_url is not None:
        init_kwargs["fullnode_url"] = fullnode_url
    if output_format is not None:
        init_kwargs["output_format"] = output_format
    if include_generic is not None:
        init_kwargs["include_generic_fallback"] = include_generic
    if disable:
        init_kwargs["disabled_adapters"] = disable
    if log_level is not None:
        init_kwargs["log_level"] = log_level.upper()
    if account_address is not None:
        init_kwargs["account_address"] = account_address

    try:
        settings = ScannerSettings(**init_kwargs)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    setup_logging(settings.log_level)
    state = AppState(settings=settings, logger=_build_logger())

    if show_config:
        typer.echo(json.dumps(settings.as_safe_dict(), indent=2))
        raise typer.Exit(code=0)

    if not settings.account_address:
        raise typer.BadParameter(
            "account_address must be configured",
            param_hint=["ADDRESS", "DEFI_POSITIONS_ACCOUNT_ADDRESS"],
        )

    from .pipeline.run import run_scan

    try:
        run_scan(state, settings.account_address_required, resources_file)
    except ValueError as e:
        state.logger.error("%s", e)
        raise typer.Exit(code=1) from e


def run() -> None:
    """Entrypoint used by the console script."""
    app()


if __name__ == "__main__":
    run()
