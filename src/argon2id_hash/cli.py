"""Command line interface for argon2id-hash."""

from __future__ import annotations

import getpass
import logging
from importlib.metadata import PackageNotFoundError, version
from typing import Callable

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from argon2id_hash import __version__
from argon2id_hash.credential import api
from argon2id_hash.credential.format import parse_credential
from argon2id_hash.crypto.kdf import DEFAULT_PRIMITIVE, resolve_options
from argon2id_hash.errors import (
    Argon2idError,
    CredentialFormatError,
    DerivationError,
    HashMismatch,
    OptionsError,
)

EXIT_SUCCESS = 0
EXIT_USAGE = 1
EXIT_MISMATCH = 2
EXIT_FORMAT = 4

console = Console()


def _package_version() -> str:
    try:
        return version("argon2id-hash")
    except PackageNotFoundError:
        return __version__


def _prompt_password(password_opt: str | None) -> str:
    if password_opt is not None:
        return password_opt
    return getpass.getpass("Password: ")


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _handle_action(action: Callable[[], None]) -> int:
    try:
        action()
    except HashMismatch:
        console.print("[red]Invalid password[/red]")
        return EXIT_MISMATCH
    except CredentialFormatError as exc:
        console.print(f"[red]Malformed or unsupported credential:[/red] {exc}")
        return EXIT_FORMAT
    except (OptionsError, DerivationError) as exc:
        console.print(f"[red]Invalid Argon2 parameters:[/red] {exc}")
        return EXIT_USAGE
    except Argon2idError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        return EXIT_USAGE
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Unexpected error:[/red] {exc}")
        return EXIT_USAGE
    return EXIT_SUCCESS


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=False,
)
@click.version_option(version=_package_version(), prog_name="argon2id-hash")
@click.option("--verbose/--quiet", "verbose", default=False, help="Log debug details to stderr.")
def cli(verbose: bool) -> None:
    """Hash and verify passwords as Argon2id credential strings."""
    _configure_logging(verbose)


@cli.command(
    "hash",
    help="Hash a password into an Argon2id credential string.",
    epilog="Examples:\n  argon2id-hash hash --password pw\n  argon2id-hash hash --salt somesalt --time 2 --threads 1",
)
@click.option("--password", "password_opt", help="Password to hash (will prompt if omitted).")
@click.option("--salt", help="Salt text (random when omitted).")
@click.option("--time", "time_cost", type=int, default=None, help="Iteration count.")
@click.option("--memory-kib", type=int, default=None, help="Memory cost in KiB.")
@click.option("--threads", type=int, default=None, help="Degree of parallelism.")
@click.option("--key-len", type=int, default=None, help="Hash length in bytes.")
@click.pass_context
def hash_command(
    ctx: click.Context,
    password_opt: str | None,
    salt: str | None,
    time_cost: int | None,
    memory_kib: int | None,
    threads: int | None,
    key_len: int | None,
) -> None:
    password = _prompt_password(password_opt)
    result: dict[str, str] = {}

    def _run() -> None:
        options = resolve_options(time=time_cost, memory=memory_kib, threads=threads, key_len=key_len)
        result["credential"] = api.hash_password(password, salt or api.generate_salt(), options)

    code = _handle_action(_run)
    if code == EXIT_SUCCESS:
        click.echo(result["credential"])
    ctx.exit(code)


@cli.command(
    help="Verify a password against a credential string.",
    epilog="Example:\n  argon2id-hash verify '$argon2id$v=19$m=65536,t=1,p=4$...$...' --password pw",
)
@click.argument("credential")
@click.option("--password", "password_opt", help="Password to verify (will prompt if omitted).")
@click.pass_context
def verify(ctx: click.Context, credential: str, password_opt: str | None) -> None:
    password = _prompt_password(password_opt)
    code = _handle_action(lambda: api.verify_password(password, credential))
    if code == EXIT_SUCCESS:
        console.print("[green]Password matches.[/green]")
    ctx.exit(code)


@cli.command(
    help="Display the parameters stored in a credential string.",
    epilog="Example:\n  argon2id-hash info '$argon2id$v=19$m=65536,t=1,p=4$...$...'",
)
@click.argument("credential")
@click.pass_context
def info(ctx: click.Context, credential: str) -> None:
    try:
        parsed = parse_credential(credential)
    except CredentialFormatError as exc:
        console.print(f"[red]Malformed or unsupported credential:[/red] {exc}")
        ctx.exit(EXIT_FORMAT)
        return

    current = parsed.version == DEFAULT_PRIMITIVE.version
    table = Table(show_header=False, box=None)
    table.add_row("Version", f"{parsed.version}" + ("" if current else " (unsupported)"))
    table.add_row("Memory", f"{parsed.memory} KiB")
    table.add_row("Time", str(parsed.time))
    table.add_row("Threads", str(parsed.threads))
    table.add_row("Salt length", f"{len(parsed.salt)} bytes")
    table.add_row("Key length", f"{parsed.key_len} bytes")

    console.print("[bold]Argon2id credential[/bold]")
    console.print(table)
    ctx.exit(EXIT_SUCCESS)


@cli.command("version", help="Show the package version.")
def version_command() -> None:
    console.print(f"argon2id-hash {_package_version()}")


def main(argv: list[str] | None = None) -> int:
    try:
        return cli.main(args=argv, prog_name="argon2id-hash", standalone_mode=False)
    except SystemExit as exc:  # noqa: TRY003
        code = exc.code if isinstance(exc.code, int) else EXIT_USAGE
        return code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
