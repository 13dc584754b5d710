# topmark:header:start
#
#   project      : Folio
#   file         : errors.py
#   file_relpath : src/folio/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline-level exceptions.

These exceptions are CLI-free: the pipeline raises them and the CLI layer
(see [`folio.cli.errors`][folio.cli.errors]) maps them to user-facing errors
and exit codes. Every exception carries enough context for an operator to act:
the task that failed, the offending source path (when known), and the
underlying message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class FolioBuildError(Exception):
    """Base class for all failures raised by the build pipeline.

    Attributes:
        message (str): Human-readable description of the failure.
        path (Path | None): Source path that triggered the failure, if any.
        task (str | None): Name of the task that was running, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        task: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.task = task

    def __str__(self) -> str:
        parts: list[str] = []
        if self.task:
            parts.append(f"[{self.task}]")
        if self.path is not None:
            parts.append(f"{self.path}:")
        parts.append(self.message)
        return " ".join(parts)


class ConfigError(FolioBuildError):
    """Configuration file is unreadable or malformed."""


class CompilationError(FolioBuildError):
    """A stylesheet or typed script failed to compile.

    ``message`` holds the compiler diagnostic verbatim.
    """


class OutputError(FolioBuildError):
    """Unrecoverable filesystem error while reading sources or writing output."""


class BuildError(FolioBuildError):
    """A full build aborted because one of its tasks failed.

    Attributes:
        cause (Exception): The task failure.
    """

    def __init__(self, task: str, cause: Exception) -> None:
        path: Path | None = getattr(cause, "path", None)
        message: str = getattr(cause, "message", None) or str(cause)
        super().__init__(message, path=path, task=task)
        self.cause = cause
