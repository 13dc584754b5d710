# topmark:header:start
#
#   project      : Folio
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Folio test suite.

This file sets up global fixtures (a temporary project tree, frozen configs,
fake toolchains) and the logging configuration for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `folio.config.MutableBuildConfig`, then `freeze()`
      into a `folio.config.BuildConfig`.
    - Do **not** mutate a frozen `BuildConfig`. If you need to tweak one, call
      `BuildConfig.thaw()`, edit the returned builder, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest
from hypothesis import HealthCheck, settings

from folio.config import MutableBuildConfig, logging
from folio.constants import LOG_LEVEL_ENV_VAR
from folio.pipeline.context import BuildContext
from tests.fakes import make_fake_toolchain

if TYPE_CHECKING:
    from folio.config import BuildConfig
    from folio.pipeline.compilers import Toolchain

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


settings.register_profile("default", max_examples=100, deadline=None)
settings.register_profile(
    "thorough",
    max_examples=2000,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile("default")


@pytest.fixture(autouse=True)
def silence_folio_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Folio's log level is not forced via env during tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log everything (TRACE) during tests so failures come with full context."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


# ------------------------------ Project trees ------------------------------


def write(path: Path, text: str) -> Path:
    """Write ``text`` to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A minimal site: one file of every kind.

    Layout::

        proj/
          src/index.html
          src/styles/main.scss
          src/app.ts
          assets/images/logo.png
          data/profile.json
    """
    root: Path = tmp_path / "proj"
    write(root / "src" / "index.html", "<html>\n  <body>\n    <h1> Hi </h1>\n  </body>\n</html>\n")
    write(root / "src" / "styles" / "main.scss", "$c: red;\nbody {\n  color: $c;\n}\n")
    write(root / "src" / "app.ts", "const greeting: string = 'hi';\nconsole.log(greeting);\n")
    (root / "assets" / "images").mkdir(parents=True)
    (root / "assets" / "images" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x01binary")
    write(root / "data" / "profile.json", '{"name": "Ada"}\n')
    return root


def make_config(root: Path, **overrides: Any) -> BuildConfig:
    """Return a frozen config for a project rooted at ``root``.

    Args:
        root (Path): Project directory; default relative roots resolve against it.
        **overrides (Any): Attributes set on the builder before freezing.

    Returns:
        BuildConfig: The immutable configuration snapshot.
    """
    m: MutableBuildConfig = MutableBuildConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze(base_dir=root)


@pytest.fixture
def prod_config(project: Path) -> BuildConfig:
    """Production config for `project`."""
    return make_config(project)


@pytest.fixture
def dev_config(project: Path) -> BuildConfig:
    """Development config for `project` (no watch debounce)."""
    return make_config(project, dev=True, watch_debounce_ms=0)


@pytest.fixture
def toolchain() -> Toolchain:
    """Fake toolchain; compilers record their calls."""
    return make_fake_toolchain()


def prepared_context(config: BuildConfig, toolchain: Toolchain) -> BuildContext:
    """Return a build context whose output tree already exists."""
    ctx: BuildContext = BuildContext.bootstrap(config, toolchain)
    ctx.output.prepare()
    return ctx
