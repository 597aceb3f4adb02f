"""CLI entry point for dirhash."""

from __future__ import annotations

import json
import os
import logging
from pathlib import Path
from typing import Annotated, NoReturn

import click
import typer
import yaml
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table
from typer.core import TyperGroup

from dirhash.config import DEFAULT_CONFIG_TEMPLATE, DirhashConfig, load_config
from dirhash.errors import DirhashError
from dirhash.hashing import h1_summary, list_file_digests
from dirhash.operations import HashOptions, VerifyOptions, run_hash, run_verify

PASSPHRASE_ENV = "DIRHASH_KEY_PASSPHRASE"

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

err_console = Console(stderr=True, soft_wrap=True)


class DefaultCommandGroup(TyperGroup):
    """Dispatches to ``hash`` when the first argument is not a command name."""

    default_command = "hash"

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if args and args[0] not in self.commands and args[0] not in ctx.help_option_names:
            args = [self.default_command, *args]
        return super().parse_args(ctx, args)


app = typer.Typer(
    name="dirhash",
    help="Cryptographically checksums a directory and its contents.",
    cls=DefaultCommandGroup,
    no_args_is_help=True,
    add_completion=False,
)

config_app = typer.Typer(help="Manage dirhash configuration.")
app.add_typer(config_app, name="config")

ConfigOption = Annotated[
    str | None, typer.Option("--config", "-c", help="Path to dirhash.yaml")
]
LogLevelOption = Annotated[
    str | None,
    typer.Option("--log-level", help="Log level: debug, info, warn or error"),
]


def _configure_logging(level: str) -> None:
    """Send dirhash logs to stderr through Rich so stdout only carries hashes."""
    logger = logging.getLogger("dirhash")
    logger.setLevel(_LOG_LEVELS[level])
    logger.handlers = []
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)


def _settings(config: str | None, log_level: str | None) -> DirhashConfig:
    """Load the config file and set up logging; CLI log level wins over the file."""
    if log_level is not None and log_level.lower() not in _LOG_LEVELS:
        raise typer.BadParameter(
            f"must be one of {', '.join(_LOG_LEVELS)}", param_hint="--log-level"
        )
    try:
        cfg = load_config(config)
    except DirhashError as e:
        _fail(e)
    _configure_logging(log_level.lower() if log_level else cfg.log_level)
    return cfg


def _fail(err: DirhashError) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(err))}")
    raise typer.Exit(1)


def _usage(ctx: typer.Context) -> NoReturn:
    typer.echo(ctx.get_help())
    raise typer.Exit(2)


def _optional_path(value: str | None) -> Path | None:
    return Path(value).expanduser() if value else None


def _display_path(path: str) -> str:
    # undecodable name bytes arrive as surrogates, which stdout cannot encode
    return os.fsencode(path).decode("utf-8", "backslashreplace")


@app.command("hash")
def hash_command(
    ctx: typer.Context,
    args: Annotated[
        list[str] | None, typer.Argument(metavar="DIRECTORY", show_default=False)
    ] = None,
    key: Annotated[
        str | None,
        typer.Option("--key", "-k", help="Sign the hash with the provided ed25519 key."),
    ] = None,
    key_passphrase: Annotated[
        str | None,
        typer.Option(
            "--key-passphrase",
            envvar=PASSPHRASE_ENV,
            help="Optional passphrase for the provided ed25519 key.",
        ),
    ] = None,
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Hash a directory, optionally signing the hash (default command)."""
    if not args or len(args) != 1:
        _usage(ctx)
    cfg = _settings(config, log_level)

    options = HashOptions(
        directory=Path(args[0]),
        key_path=_optional_path(key),
        passphrase=key_passphrase or cfg.signing.passphrase or None,
    )
    try:
        result = run_hash(options)
    except DirhashError as e:
        _fail(e)
    typer.echo(result)


@app.command()
def verify(
    ctx: typer.Context,
    args: Annotated[
        list[str] | None,
        typer.Argument(metavar="HASH DIRECTORY", show_default=False),
    ] = None,
    key: Annotated[
        str | None,
        typer.Option(
            "--key",
            "-k",
            help="Verify the hash signature with the provided ed25519 public key.",
        ),
    ] = None,
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Verify a directory hash and its optional signature."""
    if not args or len(args) != 2:
        _usage(ctx)
    _settings(config, log_level)

    options = VerifyOptions(
        signed_hash=args[0],
        directory=Path(args[1]),
        key_path=_optional_path(key),
    )
    try:
        run_verify(options)
    except DirhashError as e:
        _fail(e)


@app.command()
def files(
    ctx: typer.Context,
    args: Annotated[
        list[str] | None, typer.Argument(metavar="DIRECTORY", show_default=False)
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Print JSON instead of a table")
    ] = False,
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """List every file that goes into the hash with its SHA-256."""
    if not args or len(args) != 1:
        _usage(ctx)
    _settings(config, log_level)

    try:
        digests = list_file_digests(Path(args[0]))
    except DirhashError as e:
        _fail(e)
    digest = h1_summary(digests)

    if json_output:
        data = {
            "hash": digest,
            "files": [{"path": d.path, "sha256": d.sha256} for d in digests],
        }
        typer.echo(json.dumps(data, indent=2))
        return

    table = Table(title=f"Files ({len(digests)})")
    table.add_column("File", style="cyan")
    table.add_column("SHA-256", style="dim")
    for d in digests:
        table.add_row(escape(_display_path(d.path)), d.sha256)
    rprint(table)
    rprint(f"\n[dim]Hash:[/dim] {digest}")


@config_app.command("show")
def config_show(config: ConfigOption = None) -> None:
    """Show current resolved configuration."""
    try:
        cfg = load_config(config)
    except DirhashError as e:
        _fail(e)
    data = cfg.model_dump()
    if data["signing"]["passphrase"]:
        data["signing"]["passphrase"] = "********"
    rprint(Syntax(yaml.dump(data, default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default dirhash.yaml in current directory."""
    target = Path("dirhash.yaml")
    if target.exists() and not force:
        rprint("[yellow]dirhash.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
