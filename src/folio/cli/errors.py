# topmark:header:start
#
#   project      : Folio
#   file         : errors.py
#   file_relpath : src/folio/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Folio CLI.

Usage:
    The pipeline raises [`FolioBuildError`][folio.core.errors.FolioBuildError]
    subclasses; the CLI converts them with `from_build_error` and raises the
    result, so that Click prints the message and exits with the matching code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from folio.core.errors import (
    BuildError,
    CompilationError,
    ConfigError,
    FolioBuildError,
    OutputError,
)
from folio.core.exit_codes import ExitCode


class FolioError(click.ClickException):
    """Base class for all Folio CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class FolioUsageError(FolioError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class FolioConfigError(FolioError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class FolioCompileError(FolioError):
    """Error for stylesheet or typed-script compilation failures."""

    exit_code = ExitCode.COMPILATION_ERROR


class FolioIOError(FolioError):
    """Error for unrecoverable I/O errors reading sources or writing output."""

    exit_code = ExitCode.IO_ERROR


class FolioPipelineError(FolioError):
    """Error for any other task failure."""

    exit_code = ExitCode.BUILD_ERROR


def from_build_error(error: FolioBuildError) -> FolioError:
    """Map a pipeline exception to the CLI error carrying its exit code.

    A `BuildError` is classified by its underlying cause.

    Args:
        error (FolioBuildError): The exception raised by the pipeline.

    Returns:
        FolioError: The CLI error to raise.
    """
    cause: BaseException = error.cause if isinstance(error, BuildError) else error
    message: str = str(error)
    if isinstance(cause, ConfigError):
        return FolioConfigError(message)
    if isinstance(cause, CompilationError):
        return FolioCompileError(message)
    if isinstance(cause, OutputError):
        return FolioIOError(message)
    return FolioPipelineError(message)
