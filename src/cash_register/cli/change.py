#!/usr/bin/env python3
"""
Change CLI - Calculate Change for a Transaction File

Reads one "amountOwed,amountPaid" transaction per line and prints the change
description for each, in order.
"""

import logging
from pathlib import Path

import click

from ..change.parser import TransactionFormatError, split_lines, validate_transaction_lines
from ..core.config import get_config
from ..core.random_source import make_rng

logger = logging.getLogger(__name__)


@click.command()
@click.argument("transactions_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--seed", type=int, help="Seed for reproducible randomized change")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def change(ctx: click.Context, transactions_file: Path, seed: int | None, verbose: bool) -> None:
    """
    Calculate change for every transaction in TRANSACTIONS_FILE.

    Each line must look like "2.12,3.00" (amount owed, amount paid). The whole
    file is checked first; a malformed line stops the run with its line number.

    Examples:
      cash-register change transactions.txt
      cash-register change transactions.txt --seed 42
    """
    config = get_config()

    try:
        text = transactions_file.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise click.ClickException(f"{transactions_file} is not a UTF-8 text file") from e

    try:
        lines = validate_transaction_lines(split_lines(text))
    except TransactionFormatError as e:
        raise click.ClickException(str(e)) from e

    if not lines:
        raise click.ClickException(f"{transactions_file} contains no transactions")

    if seed is None:
        seed = config.seed

    if verbose or (ctx.obj or {}).get("verbose", False):
        click.echo(f"Transactions: {len(lines)}")
        click.echo(f"Denominations: {', '.join(config.denominations.names)}")
        click.echo(f"Seed: {seed if seed is not None else 'none'}")
        click.echo()

    engine = config.build_engine()
    results = engine.process_transactions(lines, make_rng(seed))
    logger.debug("Processed %s: %d results", transactions_file, len(results))

    for result in results:
        click.echo(result)
