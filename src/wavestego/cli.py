"""Command line interface for wavestego."""

from __future__ import annotations

from typing import Callable, NoReturn, Optional, Sequence

import click
from rich.console import Console
from rich.markup import escape

from .api import STREAM, carrier_capacity, decode_file, encode_file
from .config import WAVE_BIT_DEPTH, WaveCfg
from .exceptions import WaveStegoError
from .utils import configure_logging

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

USAGE = """\
usage: wavestego encode inputWavFile inputPayloadFile outputWavFile
       wavestego decode inputWavFile outputPayloadFile
       wavestego capacity inputWavFile
"""


def _validate_bit_depth(ctx: click.Context, param: click.Parameter, value: int) -> int:
    if value <= 0 or value % 8:
        raise click.BadParameter("bit depth must be a positive multiple of 8", param_hint="--bit-depth")
    return value


def _layout_options(func: Callable) -> Callable:
    func = click.option(
        "--strict",
        is_flag=True,
        help="Reject carriers whose header disagrees with the assumed sample layout.",
    )(func)
    func = click.option(
        "--bit-depth",
        type=int,
        default=WAVE_BIT_DEPTH,
        show_default=True,
        callback=_validate_bit_depth,
        help="Carrier sample width in bits (never read from the header).",
    )(func)
    return func


def _fail(exc: Exception) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    click.get_current_context().exit(1)


def _status_console(output: str) -> Console:
    return err_console if output == STREAM else console


@click.group(help=USAGE)
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
    default=None,
    help="Set the log level for the CLI session.",
)
def cli(log_level: Optional[str]) -> None:
    configure_logging(log_level)


@cli.command()
@click.argument("carrier", type=click.Path(exists=True, dir_okay=False))
@click.argument("payload", type=click.Path(allow_dash=True, dir_okay=False))
@click.argument("output", type=click.Path(allow_dash=True, dir_okay=False))
@_layout_options
def encode(carrier: str, payload: str, output: str, bit_depth: int, strict: bool) -> None:
    """Hide PAYLOAD inside the CARRIER wave, writing the result to OUTPUT."""

    try:
        written = encode_file(carrier, payload, output, cfg=WaveCfg(bit_depth=bit_depth, strict=strict))
    except (OSError, WaveStegoError) as exc:
        _fail(exc)
    _status_console(output).print(f"Successfully encoded to {escape(str(written))}")


@cli.command()
@click.argument("carrier", type=click.Path(exists=True, dir_okay=False))
@click.argument("output", type=click.Path(allow_dash=True, dir_okay=False))
@_layout_options
def decode(carrier: str, output: str, bit_depth: int, strict: bool) -> None:
    """Recover the payload hidden in CARRIER and write it to OUTPUT."""

    try:
        written = decode_file(carrier, output, cfg=WaveCfg(bit_depth=bit_depth, strict=strict))
    except (OSError, WaveStegoError) as exc:
        _fail(exc)
    _status_console(output).print(f"Successfully decoded to {escape(str(written))}")


@cli.command()
@click.argument("carrier", type=click.Path(exists=True, dir_okay=False))
@_layout_options
def capacity(carrier: str, bit_depth: int, strict: bool) -> None:
    """Print how many payload bytes CARRIER can hold."""

    try:
        size = carrier_capacity(carrier, cfg=WaveCfg(bit_depth=bit_depth, strict=strict))
    except (OSError, WaveStegoError) as exc:
        _fail(exc)
    console.print(f"{size} bytes")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name="wavestego", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        console.print("[red]Aborted.[/red]")
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover - module entry point
    raise SystemExit(main())
