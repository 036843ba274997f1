"""
Human-readable and JSON output formatting.

Centralizes all CLI output so commands stay thin. Results go to stdout,
errors and guidance go to stderr through rich.
"""
from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from ..errors import AmbiguousPrefix, ClosedResourceAccess, PrefixNotFound
from ..models import HashResult, PrefixReport, Resolution

_err_console = Console(stderr=True)


def print_resolution(resolution: Resolution, json_out: bool = False, verbose: bool = False) -> None:
    """
    Print a resolved ID.

    Plain mode prints only the full ID so the output can be used in scripts.
    """
    if json_out:
        typer.echo(resolution.model_dump_json())
        return
    if verbose:
        typer.echo(f"{resolution.type.value} {resolution.prefix} -> {resolution.id}")
        return
    typer.echo(resolution.id)


def print_prefix_report(report: PrefixReport, json_out: bool = False) -> None:
    if json_out:
        typer.echo(report.model_dump_json())
        return
    typer.echo(f"{report.type.value}: {report.prefix_length}")


def print_hash_result(result: HashResult, json_out: bool = False) -> None:
    if json_out:
        typer.echo(result.model_dump_json())
        return
    # Same layout as sha256sum
    typer.echo(f"{result.id}  {result.path}")


def print_error(exc: BaseException) -> None:
    """Print an error with guidance matching its kind."""
    message = escape(str(exc))
    if isinstance(exc, PrefixNotFound):
        _err_console.print(f"[bold red]Error:[/] no such object: {message}", soft_wrap=True)
        _err_console.print("Check the prefix or the object type.", soft_wrap=True)
    elif isinstance(exc, AmbiguousPrefix):
        _err_console.print(f"[bold red]Error:[/] {message}", soft_wrap=True)
        _err_console.print("The prefix matches more than one object, be more specific.", soft_wrap=True)
    elif isinstance(exc, ClosedResourceAccess):
        _err_console.print(f"[bold red]Internal error:[/] {message}", soft_wrap=True)
    else:
        _err_console.print(f"[bold red]Error:[/] {message}", soft_wrap=True)
