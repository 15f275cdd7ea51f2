from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from validstring_utils.cleaner import DirectoryCleaner
from validstring_utils.config import CleanerConfig
from validstring_utils.models import CleanupEntry
from validstring_utils.service import get_default_service

app = typer.Typer(help="Clean stale download markers and check strings.")


def _default_args(argv: list[str]) -> list[str]:
    """Allow running without specifying the 'clean' subcommand.

    If the user passes only options, prepend 'clean' so Typer routes the
    arguments correctly. Explicit subcommands still work.
    """

    if not argv or argv[0].startswith("-"):
        return ["clean", *argv]
    return argv


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def echo_entry(entry: CleanupEntry) -> None:
    """Print one trace line for a cleanup entry."""
    if entry.success:
        label = "matching file" if entry.kind == "file" else "empty directory"
        typer.echo(f"Deleted {label}: {entry.path}")
    else:
        typer.echo(f"Failed to delete {entry.kind} {entry.path}: {entry.error}", err=True)


@app.command()
def clean(
    root: Optional[Path] = typer.Argument(  # noqa: B008
        None,
        help="Directory to clean (default: VALIDSTRING_CLEAN_ROOT or ~/.m2).",
    ),
    suffix: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--suffix",
        "-s",
        help="Literal file-name suffix to delete (default: .lastUpdated).",
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
) -> None:
    """Delete files ending with SUFFIX and remove directories left empty."""
    _configure_logging(verbose)
    config = CleanerConfig()
    resolved_root = (root or config.root).expanduser()
    resolved_suffix = suffix if suffix is not None else config.suffix

    if not resolved_suffix:
        typer.echo("Suffix must not be empty.", err=True)
        raise typer.Exit(code=2)

    typer.echo(f"Cleaning {resolved_root} (suffix {resolved_suffix!r})")
    report = DirectoryCleaner().clean(resolved_root, resolved_suffix, on_entry=echo_entry)

    counts = report.summary()
    typer.echo(
        f"Deleted {counts['files']} files and {counts['directories']} directories, "
        f"{counts['failures']} failures."
    )
    if not report.is_successful:
        raise typer.Exit(code=1)


@app.command()
def check(
    kind: str = typer.Argument(..., help="Validation kind, e.g. phone, email, ipv4."),  # noqa: B008
    value: str = typer.Argument(..., help="Value to check."),  # noqa: B008
    min_length: Optional[int] = typer.Option(  # noqa: B008
        None, "--min", help="Minimum length (kind 'length' only)."
    ),
    max_length: Optional[int] = typer.Option(  # noqa: B008
        None, "--max", help="Maximum length (kind 'length' only)."
    ),
) -> None:
    """Print 'true' and exit 0 if VALUE passes the KIND check, else 'false' and exit 1."""
    service = get_default_service()
    if kind not in service.available_kinds():
        typer.echo(
            f"Unknown kind '{kind}'. Available kinds: {', '.join(service.available_kinds())}",
            err=True,
        )
        raise typer.Exit(code=2)

    options: dict[str, int] = {}
    if kind == "length":
        options["min_length"] = min_length if min_length is not None else 0
        if max_length is not None:
            options["max_length"] = max_length

    try:
        ok = service.check(kind, value, **options)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    typer.echo("true" if ok else "false")
    raise typer.Exit(code=0 if ok else 1)


def main() -> None:
    cli_entrypoint()


def cli_entrypoint() -> None:
    """Console-script entry point; bare options run the 'clean' command."""

    from typer.main import get_command

    cmd = get_command(app)
    argv = _default_args(sys.argv[1:])
    cmd.main(args=argv, prog_name="validstring-utils", standalone_mode=True)


if __name__ == "__main__":
    main()
