# topmark:header:start
#
#   project      : Folio
#   file         : engine.py
#   file_relpath : src/folio/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build orchestrator (engine layer).

Design goals:
  - No CLI dependencies: do not import Click, console helpers, or anything under
    ``folio.cli.*`` from here. Presentation (printing, colors, exit) is a
    responsibility of the CLI layer.
  - Structured results: return a `BuildResult`; raise `BuildError` on failure.
  - Logging only: this module never prints.

A build prepares the output tree and then runs ``BUILD_PIPELINE`` strictly in
order. The first failing task stops the build: later tasks do not run and
nothing already written is rolled back.

Typical usage:

    try:
        result = run_build(config, Toolchain.for_config(config))
    except BuildError as e:
        # CLI maps this to a process exit
        ...
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from folio.config.logging import get_logger
from folio.core.errors import BuildError, OutputError
from folio.pipeline.context import BuildContext
from folio.pipeline.outcomes import BuildResult, BuildState
from folio.pipeline.pipelines import BUILD_PIPELINE, task_for

if TYPE_CHECKING:
    from collections.abc import Sequence

    from folio.config import BuildConfig
    from folio.config.logging import FolioLogger
    from folio.filetypes import TaskKind
    from folio.pipeline.compilers import Toolchain
    from folio.pipeline.outcomes import TaskResult
    from folio.pipeline.tasks import BaseTask

logger: FolioLogger = get_logger(__name__)


def run_build(
    config: BuildConfig,
    toolchain: Toolchain,
    *,
    pipeline: Sequence[BaseTask] = BUILD_PIPELINE,
) -> BuildResult:
    """Run one full build.

    Args:
        config (BuildConfig): Immutable configuration snapshot.
        toolchain (Toolchain): Compilers for stylesheets and typed scripts.
        pipeline (Sequence[BaseTask]): Ordered tasks to run (default: ``BUILD_PIPELINE``).

    Returns:
        BuildResult: The result in state ``DONE``.

    Raises:
        BuildError: The first task failure (or output preparation failure), tagged
            with the task name, source path and message.
    """
    result = BuildResult(dev=config.dev)
    ctx: BuildContext = BuildContext.bootstrap(config, toolchain)
    start: float = time.perf_counter()
    logger.info(
        "Starting %s build: %s → %s",
        "development" if config.dev else "production",
        config.source_root,
        config.output_root,
    )

    result.transition(BuildState.PREPARING_OUTPUT)
    try:
        ctx.output.prepare()
    except OSError as e:
        result.transition(BuildState.FAILED)
        result.elapsed = time.perf_counter() - start
        cause = OutputError(e.strerror or str(e), path=config.output_root)
        logger.error("Could not prepare output tree %s: %s", config.output_root, cause.message)
        raise BuildError("prepare", cause) from e

    result.transition(BuildState.RUNNING)
    for task in pipeline:
        try:
            task_result: TaskResult = task(ctx)
        except Exception as e:
            result.transition(BuildState.FAILED)
            result.elapsed = time.perf_counter() - start
            logger.error("Task %s failed: %s", task.name, e)
            raise BuildError(task.name, e) from e
        result.tasks.append(task_result)

    result.transition(BuildState.DONE)
    result.elapsed = time.perf_counter() - start
    logger.info(
        "Build finished in %.3fs (%d file(s) written)", result.elapsed, len(result.written)
    )
    return result


def run_task(kind: TaskKind, ctx: BuildContext) -> TaskResult:
    """Run the single task owning ``kind`` against an existing context.

    Used by the watcher for incremental rebuilds.

    Raises:
        FolioBuildError: The task failure, tagged with the task name.
    """
    task: BaseTask = task_for(kind)
    return task(ctx)
