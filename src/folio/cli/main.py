# topmark:header:start
#
#   project      : Folio
#   file         : main.py
#   file_relpath : src/folio/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Folio command-line entry point.

Key ideas:
- Shared state (log level, console) is initialized once and placed into ``ctx.obj``.
- Configuration is merged (defaults → project files → ``--config`` → CLI flags)
  and frozen before anything runs.
- Without ``--dev`` the command runs one production build and exits. With
  ``--dev`` it runs a development build and then hands control to the watcher
  until interrupted.
- Pipeline exceptions are converted into CLI errors carrying the exit code.

Callers embedding the command (and tests) may pre-seed ``ctx.obj`` with a
``"toolchain"`` and an ``"event_source"`` to replace the external compilers and
the file-system observer.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from folio.cli.console import ClickConsole
from folio.cli.errors import FolioConfigError, from_build_error
from folio.cli.options import (
    CONTEXT_SETTINGS,
    common_verbose_options,
    path_override_options,
    resolve_verbosity,
)
from folio.config import MutableBuildConfig
from folio.config.logging import get_logger, resolve_env_log_level, setup_logging
from folio.constants import FOLIO_VERSION
from folio.core.errors import ConfigError, FolioBuildError
from folio.pipeline.compilers import Toolchain
from folio.pipeline.engine import run_build
from folio.pipeline.outcomes import BuildState
from folio.watcher import Watcher

if TYPE_CHECKING:
    from folio.cli_shared.console_api import ConsoleLike
    from folio.config import BuildConfig
    from folio.config.logging import FolioLogger
    from folio.pipeline.outcomes import BuildResult

logger: FolioLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (log level and console) on the Click context.

    ``FOLIO_LOG_LEVEL`` takes precedence over ``-v``/``-q``.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env if level_env is not None else level_cli
    setup_logging(level=ctx.obj["log_level"])

    ctx.color = not no_color
    ctx.obj.setdefault("console", ClickConsole(enable_color=not no_color))


def resolve_config(
    *,
    config_files: tuple[str, ...],
    no_config: bool,
    dev: bool,
    source: str | None,
    data: str | None,
    assets: str | None,
    output: str | None,
    write_strategy: str | None = None,
) -> BuildConfig:
    """Merge all configuration layers and freeze the result.

    Raises:
        FolioConfigError: If a config file is missing or invalid, or the merged
            paths are inconsistent.
    """
    extra: list[Path] = []
    for name in config_files:
        path = Path(name)
        if not path.is_file():
            raise FolioConfigError(f"Config file not found: {name}")
        extra.append(path)

    try:
        draft: MutableBuildConfig = MutableBuildConfig.load_merged(
            anchor=Path.cwd(),
            extra_config_files=extra,
            no_config=no_config,
        )
        draft.apply_cli_args(
            {
                "source": source,
                "data": data,
                "assets": assets,
                "output": output,
                "dev": dev or None,
                "write_strategy": write_strategy,
            }
        )
        return draft.freeze()
    except ConfigError as e:
        raise from_build_error(e) from e


@click.command(context_settings=CONTEXT_SETTINGS, help="Build the site into the output tree.")
@click.option(
    "--dev",
    "-d",
    "dev",
    is_flag=True,
    default=False,
    help="Development build (no minification, source maps), then watch for changes.",
)
@common_verbose_options
@click.option(
    "--config",
    "config_files",
    multiple=True,
    metavar="FILE",
    help="Merge this TOML config file after project config (repeatable).",
)
@click.option(
    "--no-config",
    is_flag=True,
    default=False,
    help="Ignore pyproject.toml and folio.toml in the working directory.",
)
@path_override_options
@click.option(
    "--write-strategy",
    "write_strategy",
    type=click.Choice(["atomic", "inplace"], case_sensitive=False),
    default=None,
    help="How output files are committed (default: from config, else atomic).",
)
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.version_option(FOLIO_VERSION, "--version", prog_name="folio")
@click.pass_context
def cli(
    ctx: click.Context,
    dev: bool,
    verbose: int,
    quiet: int,
    config_files: tuple[str, ...],
    no_config: bool,
    source: str | None,
    data: str | None,
    assets: str | None,
    output: str | None,
    write_strategy: str | None,
    no_color: bool,
) -> None:
    """Entry point for the Folio CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    config: BuildConfig = resolve_config(
        config_files=config_files,
        no_config=no_config,
        dev=dev,
        source=source,
        data=data,
        assets=assets,
        output=output,
        write_strategy=write_strategy,
    )
    toolchain: Toolchain = ctx.obj.get("toolchain") or Toolchain.for_config(config)

    mode: str = "development" if config.dev else "production"
    console.print(console.styled(f"🏗️  Building ({mode}) → {config.output_root}", bold=True))
    try:
        result: BuildResult = run_build(config, toolchain)
    except FolioBuildError as e:
        raise from_build_error(e) from e
    console.print(
        console.styled(
            f"✅ Build finished in {result.elapsed:.2f}s ({len(result.written)} file(s))",
            fg="green",
        )
    )

    if not config.dev:
        return

    result.transition(BuildState.IDLE)
    watcher = Watcher(config, toolchain, ctx.obj.get("event_source"), console=console)
    try:
        watcher.run()
    except KeyboardInterrupt:
        logger.debug("Watcher interrupted")
        console.print("👋 Stopped watching.")


if __name__ == "__main__":
    cli()
