#!/usr/bin/env python3
"""
Main CLI Entry Point for the Cash Register

Groups the change, config and serve commands under ``cash-register``.
"""

import json
import logging
import os

import click

from ..core.config import get_config
from ..core.currency import format_amount


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override CASH_REGISTER_ENV for this run",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Cash Register - Change Calculator

    Describes the change due for "amountOwed,amountPaid" transactions as
    counts of coins and bills.
    """
    ctx.ensure_object(dict)

    # Must be set before the first get_config() call
    if config_env:
        os.environ["CASH_REGISTER_ENV"] = config_env
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    settings = get_config()
    if debug:
        logging.getLogger("cash_register").setLevel(logging.DEBUG)

    ctx.obj.update(verbose=verbose, debug=debug, config=settings)

    if verbose:
        click.echo(f"Environment: {settings.environment.value}")
        if settings.denominations_file:
            click.echo(f"Denominations file: {settings.denominations_file}")
    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from cash_register import __author__, __version__

    click.echo(f"Cash Register v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print configuration as JSON")
@click.pass_context
def config(ctx: click.Context, as_json: bool) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    if as_json:
        click.echo(json.dumps(config_obj.to_dict(), indent=2))
        return

    policy = config_obj.randomization
    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Currency Symbol: {config_obj.currency_symbol}")
    click.echo("  Denominations:")
    for denomination in config_obj.denominations:
        marker = " (sink)" if denomination.name == config_obj.denominations.sink_name else ""
        amount = format_amount(denomination.value, config_obj.currency_symbol)
        click.echo(f"    {denomination.name}: {amount}{marker}")
    click.echo(
        f"  Randomization: skip={policy.skip_probability} partial={policy.partial_probability} "
        f"full={policy.full_probability} max_coins={policy.max_coins_per_denomination}"
    )
    click.echo(f"  Max Upload Bytes: {config_obj.api.max_upload_bytes}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


# Import subcommands
from .change import change  # noqa: E402
from .serve import serve  # noqa: E402

main.add_command(change)
main.add_command(serve)


if __name__ == "__main__":
    main()
