"""
Error mapping and CLI utilities.

Provides centralized exception-to-exit-code mapping and a CLI command wrapper
to ensure consistent error handling across all Typer commands.
"""
from __future__ import annotations

import typer
from typing import Callable, TypeVar

T = TypeVar('T')

EXIT_CODES = {
    "PrefixNotFound": 1,
    "AmbiguousPrefix": 2,
    "ValueError": 2,
    "ValidationError": 2,
    "FileNotFoundError": 4,
}


def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to standardized exit code.

    Returns:
    - 0: Success
    - 1: No object matches the prefix (PrefixNotFound)
    - 2: Ambiguous prefix or invalid input (AmbiguousPrefix, ValueError)
    - 3: Unknown error (fallback)
    - 4: Object or file missing (FileNotFoundError)

    Args:
        exc: Exception to map

    Returns:
        Exit code, with 3 as fallback for unknown exceptions
    """
    return EXIT_CODES.get(type(exc).__name__, 3)


def run_and_exit(func: Callable[[], T]) -> T:
    """
    Unified error wrapper for CLI commands.

    Executes the given function and maps any exceptions to appropriate
    exit codes using typer.Exit, printing user guidance for the error first.

    Args:
        func: Function to execute

    Returns:
        Function result if successful

    Raises:
        typer.Exit: With appropriate exit code if function raises exception
    """
    try:
        return func()
    except Exception as e:
        from .printers import print_error
        print_error(e)
        raise typer.Exit(code=exit_code_for(e)) from e
