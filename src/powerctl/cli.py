from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TypeVar

import click

from powerctl.config import Config, ConfigError, load_config
from powerctl.lib.tibber import TibberApiError, TibberClient
from powerctl.output import OUTPUT_FORMATS, render_homes, render_prices
from powerctl.version import BuildInfo, format_version

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_TIMEOUT_SECONDS = 30.0

T = TypeVar("T")


def _timeout_option(func: click.Command) -> click.Command:
    return click.option(
        "--timeout",
        type=click.FloatRange(min=0, min_open=True),
        default=DEFAULT_TIMEOUT_SECONDS,
        show_default=True,
        help="Abort the request after this many seconds.",
    )(func)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to YAML config (defaults to the user config directory).",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (overrides the configured format).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str,
    output_format: str | None,
) -> None:
    _configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["output_format"] = output_format


@cli.command()
@_timeout_option
@click.pass_context
def homes(ctx: click.Context, timeout: float) -> None:
    """List the homes attached to the account."""
    config = _load_validated_config(ctx)
    client = TibberClient(config.token)
    result = _run(client.get_homes(), timeout)
    click.echo(_render(render_homes, result, _output_format(ctx, config)))


@cli.command()
@click.option("--home-id", default=None, help="Home to query (defaults to the configured home_id).")
@_timeout_option
@click.pass_context
def prices(ctx: click.Context, home_id: str | None, timeout: float) -> None:
    """Show current, today's and tomorrow's electricity prices."""
    config = _load_validated_config(ctx)
    home_id = home_id or config.home_id
    if not home_id:
        raise click.UsageError("No home id: pass --home-id or set TIBBER_HOME_ID")
    client = TibberClient(config.token)
    result = _run(client.get_prices(home_id), timeout)
    click.echo(_render(render_prices, result, _output_format(ctx, config)))


@cli.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Print version information."""
    build_info = ctx.obj.get("build_info") or BuildInfo()
    click.echo(format_version(build_info))


def _load_validated_config(ctx: click.Context) -> Config:
    try:
        config = load_config(ctx.obj["config_path"])
        config.ensure_valid()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    return config


def _output_format(ctx: click.Context, config: Config) -> str:
    return ctx.obj["output_format"] or config.format


def _render(renderer: Callable[[T, str], str], value: T, fmt: str) -> str:
    try:
        return renderer(value, fmt)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


def _run(call: Awaitable[T], timeout: float) -> T:
    async def _bounded() -> T:
        async with asyncio.timeout(timeout):
            return await call

    try:
        return asyncio.run(_bounded())
    except TimeoutError as exc:
        raise click.ClickException(f"Request timed out after {timeout:g}s") from exc
    except TibberApiError as exc:
        raise click.ClickException(str(exc)) from exc


def _configure_logging(level_str: str) -> None:
    log_level = logging.getLevelNamesMapping()[level_str.strip().upper()]
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger("powerctl").setLevel(log_level)


def main() -> None:
    cli(obj={"build_info": BuildInfo.from_environment()})


if __name__ == "__main__":
    main()
