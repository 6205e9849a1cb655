#!/usr/bin/env python3
# This file is part of the gfss project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""CLI/Imperative shell for GFSS."""

import logging
from typing import List
from typing import Tuple
from typing import NoReturn
from typing import NamedTuple

import click

from . import params
from . import __version__
from . import shamir
from . import sss_random
from . import common_types as ct

logger = logging.getLogger("gfss.cli")


class LogConfig(NamedTuple):
    fmt: str
    lvl: int


LOG_FORMAT_DEFAULT = "%(levelname)-7s - %(message)s"

LOG_FORMAT_VERBOSE = "%(asctime)s.%(msecs)03d %(levelname)-7s %(name)-16s - %(message)s"


def _parse_logging_config(verbosity: int) -> LogConfig:
    if verbosity == 0:
        return LogConfig(LOG_FORMAT_DEFAULT, logging.WARNING)
    elif verbosity == 1:
        return LogConfig(LOG_FORMAT_VERBOSE, logging.INFO)
    else:
        assert verbosity >= 2
        return LogConfig(LOG_FORMAT_VERBOSE, logging.DEBUG)


_PREV_VERBOSITY: int = -1


def _configure_logging(verbosity: int = 0) -> None:
    # pylint: disable=global-statement
    global _PREV_VERBOSITY

    if verbosity <= _PREV_VERBOSITY:
        # allow function to be called multiple times
        return

    _PREV_VERBOSITY = verbosity

    # remove previous logging handlers
    for handler in list(logging.root.handlers):
        logging.root.removeHandler(handler)

    log_cfg = _parse_logging_config(verbosity)
    logging.basicConfig(level=log_cfg.lvl, format=log_cfg.fmt, datefmt="%Y-%m-%dT%H:%M:%S")


def echo(msg: str = "") -> bool:
    click.echo(msg)
    return True


def _read_shares(share_args: Tuple[str, ...]) -> List[ct.Share]:
    if share_args:
        return list(share_args)

    stdin  = click.get_text_stream('stdin')
    shares = [line.strip() for line in stdin if line.strip()]
    if not shares:
        echo("No shares given. Pass them as arguments or on stdin, one per line.")
        raise click.Abort()
    return shares


def _abort_on_error(err: ValueError) -> NoReturn:
    logger.debug("invalid input", exc_info=True)
    echo(f"Error: {err}")
    raise click.Abort()


_opt_verbose = click.option(
    '-v',
    '--verbose',
    count=True,
    help="Control log level. -vv for debug level.",
)

_opt_num_shares = click.option(
    '-n',
    '--num-shares',
    type=int,
    default=params.DEFAULT_NUM_SHARES,
    show_default=True,
    help="Total number of shares to create",
)

_opt_threshold = click.option(
    '-t',
    '--threshold',
    type=int,
    default=params.DEFAULT_THRESHOLD,
    show_default=True,
    help="Number of shares required to recover the secret",
)

_opt_bits = click.option(
    '-b',
    '--bits',
    type=int,
    default=params.DEFAULT_BITS,
    show_default=True,
    help=f"Bit width of the Galois Field ({params.MIN_BITS}-{params.MAX_BITS})",
)

_opt_padding = click.option(
    '-p',
    '--padding',
    'padding_multiple',
    type=int,
    default=params.DEFAULT_PADDING_MULTIPLE,
    show_default=True,
    help="Zero pad the secret to a multiple of this many bits (0 to disable)",
)


@click.group(context_settings={'help_option_names': ["-h", "--help"]})
@_opt_verbose
def cli(verbose: int = 0) -> None:
    """CLI for GFSS: Shamir Secret Sharing over GF(2^n)."""
    _configure_logging(verbose)


@cli.command()
def version() -> None:
    """Show version number."""
    echo(f"GFSS version: {__version__}")


@cli.command()
@click.argument('secret')
@_opt_num_shares
@_opt_threshold
@_opt_bits
@_opt_padding
@_opt_verbose
def split(
    secret          : str,
    num_shares      : int = params.DEFAULT_NUM_SHARES,
    threshold       : int = params.DEFAULT_THRESHOLD,
    bits            : int = params.DEFAULT_BITS,
    padding_multiple: int = params.DEFAULT_PADDING_MULTIPLE,
    verbose         : int = 0,
) -> None:
    """Split a hex SECRET into shares."""
    _configure_logging(verbose)
    try:
        shares = shamir.share(
            secret,
            num_shares,
            threshold,
            bits=bits,
            padding_multiple=padding_multiple,
            make_coeff=sss_random.init_randrange(),
        )
    except ValueError as err:
        _abort_on_error(err)

    for share in shares:
        echo(share)


@cli.command()
@click.argument('shares', nargs=-1)
@_opt_verbose
def join(shares: Tuple[str, ...] = (), verbose: int = 0) -> None:
    """Recover the secret by combining SHARES."""
    _configure_logging(verbose)
    try:
        secret = shamir.combine(_read_shares(shares))
    except ValueError as err:
        _abort_on_error(err)

    echo(secret)


@cli.command()
@click.argument('share_id', type=int)
@click.argument('shares', nargs=-1)
@_opt_verbose
def new_share(share_id: int, shares: Tuple[str, ...] = (), verbose: int = 0) -> None:
    """Derive the share for SHARE_ID from existing SHARES."""
    _configure_logging(verbose)
    try:
        share = shamir.new_share(share_id, _read_shares(shares))
    except ValueError as err:
        _abort_on_error(err)

    echo(share)


@cli.command()
@click.argument('n_bytes', type=int)
@_opt_verbose
def random(n_bytes: int, verbose: int = 0) -> None:
    """Generate a random hex string of N_BYTES."""
    _configure_logging(verbose)
    try:
        hex_str = sss_random.random_hex(n_bytes)
    except ValueError as err:
        _abort_on_error(err)

    echo(hex_str)


if __name__ == '__main__':
    cli()
