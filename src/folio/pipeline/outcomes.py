# topmark:header:start
#
#   project      : Folio
#   file         : outcomes.py
#   file_relpath : src/folio/pipeline/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build states and result records.

A build walks a small state machine:

    IDLE → PREPARING_OUTPUT → RUNNING → DONE | FAILED

``DONE → IDLE`` only happens when a development build hands control to the
watcher. Results are plain records; nothing is persisted between builds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from folio.filetypes import TaskKind


class BuildState(str, Enum):
    """Lifecycle state of a build."""

    IDLE = "idle"
    PREPARING_OUTPUT = "preparing output"
    RUNNING = "running"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """True for ``DONE`` and ``FAILED``."""
        return self in (BuildState.DONE, BuildState.FAILED)


# Allowed state transitions
_TRANSITIONS: dict[BuildState, frozenset[BuildState]] = {
    BuildState.IDLE: frozenset({BuildState.PREPARING_OUTPUT}),
    BuildState.PREPARING_OUTPUT: frozenset({BuildState.RUNNING, BuildState.FAILED}),
    BuildState.RUNNING: frozenset({BuildState.DONE, BuildState.FAILED}),
    BuildState.DONE: frozenset({BuildState.IDLE}),
    BuildState.FAILED: frozenset(),
}


@dataclass
class TaskResult:
    """What one task produced.

    Attributes:
        task (TaskKind): The task that ran.
        written (list[Path]): Output files written, in write order.
        skipped (bool): True when the task had nothing to do (e.g. no data root).
        elapsed (float): Wall-clock seconds spent in the task.
    """

    task: TaskKind
    written: list[Path] = field(default_factory=lambda: [])
    skipped: bool = False
    elapsed: float = 0.0


@dataclass
class BuildResult:
    """Outcome of one full build.

    Attributes:
        state (BuildState): Current state; terminal once the build returns.
        tasks (list[TaskResult]): Per-task results in execution order.
        elapsed (float): Wall-clock seconds for the whole build.
        dev (bool): Whether this was a development build.
    """

    state: BuildState = BuildState.IDLE
    tasks: list[TaskResult] = field(default_factory=lambda: [])
    elapsed: float = 0.0
    dev: bool = False

    def transition(self, new_state: BuildState) -> None:
        """Move to ``new_state``.

        Raises:
            ValueError: If the transition is not allowed from the current state.
        """
        if new_state not in _TRANSITIONS[self.state]:
            raise ValueError(
                f"Illegal build state transition: {self.state.value} → {new_state.value}"
            )
        self.state = new_state

    @property
    def written(self) -> list[Path]:
        """All files written by the build, in write order."""
        return [p for r in self.tasks for p in r.written]
