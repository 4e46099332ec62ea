"""CLI module for computing HMACs via Typer.

Provides commands to compute a MAC over a message or a file and to list
the hash algorithms available on this interpreter.
Uses Rich for terminal output.
"""

from pathlib import Path
from typing import Any, Callable, List, Optional

from hmackit.domain.errors import HmacError, InvalidArgumentError
from hmackit.engine import HmacEngine
from hmackit.hasher.hashlib import DEFAULT_ALGORITHM, HashlibHashAlgorithm, available_algorithms, get_hash_algorithm
from hmackit.utils import DEFAULT_ENCODING

# Domain errors that should result in exit code 1
DomainErrors = (HmacError,)

OUTPUT_FORMATS = ("hex", "base64", "json")


def create_hmac_cli(app: Optional[Any] = None) -> Any:
    """Build a Typer CLI around :class:`~hmackit.engine.HmacEngine`.

    Args:
        app: Optional pre-configured Typer instance to extend.

    Returns:
        A configured Typer application with the ``compute`` and
        ``algorithms`` commands.
    """
    typer = _import_typer()
    console = _import_console()

    cli = app or typer.Typer(
        help="Compute keyed message authentication codes.",
        no_args_is_help=True,
        pretty_exceptions_enable=False,
    )

    def handle_errors(func: Callable[[], None]) -> None:
        """Execute function with domain error handling."""
        try:
            func()
        except DomainErrors as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1) from exc

    @cli.command("compute")
    def compute(
        ctx: typer.Context,
        message: Optional[str] = typer.Argument(None, help="Message to authenticate."),
        key: Optional[str] = typer.Option(None, "--key", "-k", envvar="HMACKIT_KEY", help="Secret key."),
        algorithm: str = typer.Option(
            DEFAULT_ALGORITHM, "--algorithm", "-a", envvar="HMACKIT_ALGORITHM", help="Hash algorithm name."
        ),
        encoding: str = typer.Option(DEFAULT_ENCODING, "--encoding", "-e", help="Text encoding of key and message."),
        output_format: str = typer.Option("hex", "--format", "-f", help="Output format: hex, base64 or json."),
        file: Optional[Path] = typer.Option(
            None, "--file", exists=True, dir_okay=False, readable=True, help="Read the message from a file."
        ),
    ) -> None:
        """Compute the HMAC of a message."""
        if message is None and file is None:
            typer.echo(ctx.get_help())
            raise typer.Exit(0)

        def _run() -> None:
            if key is None:
                raise InvalidArgumentError("A key is required, pass --key or set HMACKIT_KEY.")
            if output_format not in OUTPUT_FORMATS:
                raise InvalidArgumentError(f"Unknown output format {output_format!r}, expected one of {OUTPUT_FORMATS}.")

            engine = HmacEngine(key, get_hash_algorithm(algorithm), encoding=encoding)
            payload = file.read_bytes() if file is not None else message
            digest = engine.compute_mac(payload)
            typer.echo(format_digest(engine, digest, output_format))

        handle_errors(_run)

    @cli.command("algorithms")
    def list_algorithms() -> None:
        """List the hash algorithms usable for HMAC."""
        print_algorithms_table(console, available_algorithms())

    return cli


def format_digest(engine: HmacEngine, digest: bytes, output_format: str) -> str:
    """Render a digest in one of :data:`OUTPUT_FORMATS`."""
    from hmackit._schemas import MacResult

    result = MacResult.from_digest(engine, digest)
    if output_format == "json":
        return result.model_dump_json(indent=2)
    if output_format == "base64":
        return result.base64
    return result.hex


def print_algorithms_table(console: Any, names: List[str]) -> None:
    """Print a table of hash algorithms with their sizes."""
    Table = _import_table()
    table = Table(title=f"Hash algorithms ({len(names)})", show_header=True, header_style="bold")

    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Block size", justify="right")
    table.add_column("Digest size", justify="right")

    for name in names:
        algorithm = HashlibHashAlgorithm(name)
        table.add_row(algorithm.name, str(algorithm.block_size), str(algorithm.digest_size))

    console.print(table)


def main() -> None:  # pragma: no cover
    """Entry point of the ``hmackit`` console script."""
    create_hmac_cli()()


def _import_typer() -> Any:
    """Import typer with helpful error message."""
    try:
        import typer
    except ImportError as exc:
        raise RuntimeError("Typer is required. Install with: pip install hmackit[cli]") from exc
    return typer


def _import_console() -> Any:
    """Import Rich Console."""
    try:
        from rich.console import Console
    except ImportError as exc:
        raise RuntimeError("Rich is required. Install with: pip install hmackit[cli]") from exc
    return Console()


def _import_table() -> Any:
    """Import Rich Table."""
    from rich.table import Table

    return Table
