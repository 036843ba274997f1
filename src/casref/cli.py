"""
casref CLI

Commands:
- find: Resolve an ID prefix of any object type
- snapshot: Resolve a snapshot ID prefix
- prefix-length: Show the shortest unambiguous prefix length for a type
- hash: Compute the ID of a local file
- add: Store a local file as an object
- cat: Write an object, or a slice of it, to stdout
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from .cli_context import CLIContext
from .models import ObjectType
from .operations import Operations, OpsConfig, run_and_exit
from .operations.printers import print_hash_result, print_prefix_report, print_resolution

app = typer.Typer(name="casref", help="Resolve short ID prefixes in a content-addressed store")

_STORE_OPTION = typer.Option(None, "--store", "-s", envvar="CASREF_STORE", help="Object store directory")
_TYPE_OPTION = typer.Option(ObjectType.DATA, "--type", "-t", help="Object type")
_JSON_OPTION = typer.Option(False, "--json", help="Print JSON output")
_VERBOSE_OPTION = typer.Option(False, "--verbose", help="Show detailed output")


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _operations(store: Optional[str], json_out: bool, verbose: bool, *, require_store: bool = True) -> Operations:
    context = CLIContext.from_env(store, require_store=require_store)
    config = OpsConfig(json=json_out, verbose=verbose)
    if not require_store:
        return Operations(config=config, settings=context.settings)
    return Operations(config=config, store=context.store, settings=context.settings)


@app.command()
def find(
    prefix: str = typer.Argument(..., help="Leading characters of the ID"),
    object_type: ObjectType = _TYPE_OPTION,
    store: Optional[str] = _STORE_OPTION,
    json_out: bool = _JSON_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Resolve an ID prefix to the full ID."""
    _setup_logging(verbose)

    def _find() -> None:
        ops = _operations(store, json_out, verbose)
        print_resolution(ops.find(object_type, prefix), json_out=ops.cfg.json, verbose=ops.cfg.verbose)

    run_and_exit(_find)


@app.command()
def snapshot(
    prefix: str = typer.Argument(..., help="Leading characters of the snapshot ID"),
    store: Optional[str] = _STORE_OPTION,
    json_out: bool = _JSON_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Resolve a snapshot ID prefix."""
    _setup_logging(verbose)

    def _snapshot() -> None:
        ops = _operations(store, json_out, verbose)
        print_resolution(ops.find_snapshot(prefix), json_out=ops.cfg.json, verbose=ops.cfg.verbose)

    run_and_exit(_snapshot)


@app.command("prefix-length")
def prefix_length(
    object_type: ObjectType = _TYPE_OPTION,
    store: Optional[str] = _STORE_OPTION,
    json_out: bool = _JSON_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Show how many ID characters keep all objects of a type distinguishable."""
    _setup_logging(verbose)

    def _prefix_length() -> None:
        ops = _operations(store, json_out, verbose)
        print_prefix_report(ops.prefix_length(object_type), json_out=ops.cfg.json)

    run_and_exit(_prefix_length)


@app.command("hash")
def hash_file(
    path: Path = typer.Argument(..., help="File to hash"),
    store: Optional[str] = _STORE_OPTION,
    json_out: bool = _JSON_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Compute the ID of a local file without storing it."""
    _setup_logging(verbose)

    def _hash() -> None:
        ops = _operations(store, json_out, verbose, require_store=False)
        print_hash_result(ops.hash_file(path), json_out=ops.cfg.json)

    run_and_exit(_hash)


@app.command()
def add(
    path: Path = typer.Argument(..., help="File to store"),
    object_type: ObjectType = _TYPE_OPTION,
    store: Optional[str] = _STORE_OPTION,
    json_out: bool = _JSON_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Store a local file under the ID of its content."""
    _setup_logging(verbose)

    def _add() -> None:
        ops = _operations(store, json_out, verbose)
        print_hash_result(ops.add(object_type, path), json_out=ops.cfg.json)

    run_and_exit(_add)


@app.command()
def cat(
    prefix: str = typer.Argument(..., help="Leading characters of the ID"),
    object_type: ObjectType = _TYPE_OPTION,
    offset: int = typer.Option(0, "--offset", min=0, help="First byte to write"),
    length: Optional[int] = typer.Option(None, "--length", min=0, help="Number of bytes to write"),
    store: Optional[str] = _STORE_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Write an object's content to stdout."""
    _setup_logging(verbose)

    def _cat() -> None:
        ops = _operations(store, False, verbose)
        out = typer.get_binary_stream("stdout")
        ops.cat(object_type, prefix, out, offset=offset, length=length)
        out.flush()

    run_and_exit(_cat)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
