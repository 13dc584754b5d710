# topmark:header:start
#
#   project      : Folio
#   file         : compilers.py
#   file_relpath : src/folio/pipeline/compilers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pluggable compilers for preprocessed stylesheets and typed scripts.

Tasks never talk to a toolchain directly; they receive a `Toolchain` holding
one `StylesheetCompiler` and one `ScriptCompiler`. Production code uses
`SassCompiler` (libsass, in-process) and `TscCompiler` (the pinned TypeScript
compiler as a subprocess). Tests substitute fakes.

Contracts
---------
- ``StylesheetCompiler.compile`` returns the compiled CSS (and a source map in
  development mode) or raises `CompilationError`.
- ``ScriptCompiler.compile`` returns a `CompileResult`. On success the compiler
  has deposited ``<stem>.js`` in ``options.out_dir``; on failure ``returncode`` is
  non-zero and ``stderr``/``stdout`` hold the diagnostic verbatim.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

import sass

from folio.config.logging import get_logger
from folio.core.errors import CompilationError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from folio.config import BuildConfig
    from folio.config.logging import FolioLogger

logger: FolioLogger = get_logger(__name__)


# ------------------------------ Stylesheets ------------------------------


@dataclass(frozen=True)
class StylesheetOptions:
    """Rendering options for one preprocessed stylesheet.

    Attributes:
        dev (bool): Expanded output with a source map when True; compressed otherwise.
        output_path (Path): Where the compiled CSS will be written (used for map URLs).
        source_map_path (Path | None): Where the map will be written in development mode.
    """

    dev: bool
    output_path: Path
    source_map_path: Path | None = None

    @property
    def output_style(self) -> str:
        """libsass output style for this mode."""
        return "expanded" if self.dev else "compressed"


@dataclass(frozen=True)
class StylesheetOutput:
    """Compiled stylesheet text and optional source map (JSON text)."""

    css: str
    source_map: str | None = None


class StylesheetCompiler(Protocol):
    """Compile a preprocessed stylesheet to plain CSS."""

    def compile(self, source: Path, options: StylesheetOptions) -> StylesheetOutput:
        """Compile ``source``.

        Raises:
            CompilationError: On invalid syntax or unresolved imports.
        """
        ...


class SassCompiler:
    """In-process SCSS compiler backed by libsass."""

    def compile(self, source: Path, options: StylesheetOptions) -> StylesheetOutput:
        """Compile ``source`` with libsass.

        Args:
            source (Path): ``.scss`` file to compile.
            options (StylesheetOptions): Output style and map destination.

        Returns:
            StylesheetOutput: CSS text, plus the source map in development mode.

        Raises:
            CompilationError: If libsass rejects the source.
        """
        logger.debug("libsass: compiling %s (%s)", source, options.output_style)
        try:
            if options.dev and options.source_map_path is not None:
                css, source_map = sass.compile(
                    filename=str(source),
                    output_style=options.output_style,
                    source_map_filename=str(options.source_map_path),
                    output_filename_hint=str(options.output_path),
                    source_map_contents=True,
                )
                return StylesheetOutput(css=css, source_map=source_map)
            css = sass.compile(filename=str(source), output_style=options.output_style)
        except sass.CompileError as e:
            raise CompilationError(str(e), path=source) from e
        return StylesheetOutput(css=css)


# -------------------------------- Scripts --------------------------------


@dataclass(frozen=True)
class CompileOptions:
    """Fixed flags passed to the typed-script compiler.

    Attributes:
        out_dir (Path): Directory receiving the compiled ``.js`` file.
        target (str): Emitted language level.
        module (str): Module system of the emitted code.
        lib (tuple[str, ...]): Library declaration sets available to the checker.
        strict (bool): Enable all strict type-checking options.
        skip_lib_check (bool): Skip type-checking of declaration files.
    """

    out_dir: Path
    target: str = "es2017"
    module: str = "es2015"
    lib: tuple[str, ...] = ("es2017", "dom")
    strict: bool = True
    skip_lib_check: bool = True

    def to_args(self) -> list[str]:
        """Render these options as ``tsc`` command-line flags."""
        args: list[str] = [
            "--outDir",
            str(self.out_dir),
            "--target",
            self.target,
            "--module",
            self.module,
            "--lib",
            ",".join(self.lib),
        ]
        if self.strict:
            args.append("--strict")
        if self.skip_lib_check:
            args.append("--skipLibCheck")
        return args


@dataclass(frozen=True)
class CompileResult:
    """Outcome of compiling one typed script.

    Attributes:
        source (Path): The compiled source file.
        returncode (int): Compiler exit status (0 on success).
        stdout (str): Captured standard output.
        stderr (str): Captured standard error.
        output_path (Path | None): The emitted ``.js`` file on success.
    """

    source: Path
    returncode: int
    stdout: str = ""
    stderr: str = ""
    output_path: Path | None = None

    @property
    def ok(self) -> bool:
        """Whether the compiler exited with status 0."""
        return self.returncode == 0

    @property
    def diagnostic(self) -> str:
        """Compiler output to relay to the operator (stderr, then stdout)."""
        return "\n".join(s for s in (self.stderr.strip(), self.stdout.strip()) if s)


class ScriptCompiler(Protocol):
    """Compile a typed script into ``options.out_dir``."""

    def compile(self, source: Path, options: CompileOptions) -> CompileResult:
        """Compile ``source`` and report the outcome."""
        ...


@dataclass
class TscCompiler:
    """Run the TypeScript compiler once per file as a subprocess.

    Attributes:
        command (Sequence[str]): Argument vector prefix, e.g.
            ``("npx", "--yes", "-p", "typescript@5.4.5", "tsc")``.
    """

    command: Sequence[str]

    def compile(self, source: Path, options: CompileOptions) -> CompileResult:
        """Invoke the compiler for ``source`` and wait for it to finish.

        A missing compiler executable is reported as a failed result (exit 127)
        rather than raised, so the task reports it like any other compile error.
        """
        argv: list[str] = [*self.command, str(source), *options.to_args()]
        logger.debug("tsc: %s", " ".join(argv))
        try:
            proc = subprocess.run(argv, capture_output=True, text=True, check=False)
        except FileNotFoundError as e:
            return CompileResult(
                source=source,
                returncode=127,
                stderr=f"{self.command[0]}: command not found ({e})",
            )
        output_path: Path | None = None
        if proc.returncode == 0:
            output_path = options.out_dir / f"{source.stem}.js"
        return CompileResult(
            source=source,
            returncode=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
            output_path=output_path,
        )


# ------------------------------- Toolchain -------------------------------


@dataclass
class Toolchain:
    """The compilers used by one build (or one watch session)."""

    stylesheets: StylesheetCompiler
    scripts: ScriptCompiler

    @classmethod
    def for_config(cls, config: BuildConfig) -> Toolchain:
        """Return the production toolchain configured by ``config``."""
        return cls(
            stylesheets=SassCompiler(),
            scripts=TscCompiler(command=config.script_compiler),
        )
