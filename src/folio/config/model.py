# topmark:header:start
#
#   project      : Folio
#   file         : model.py
#   file_relpath : src/folio/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build configuration model and merge policy.

This module defines:
    - `BuildConfig`: an immutable snapshot resolved once at startup and passed
      explicitly to every pipeline component.
    - `MutableBuildConfig`: a mutable builder used while merging defaults,
      TOML files and CLI overrides; it is frozen into a `BuildConfig`.

Path semantics:
    - Paths declared in a config file are resolved against that file's directory.
    - Paths passed on the command line are resolved against the invocation CWD.
    - All paths in a frozen `BuildConfig` are absolute.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from folio.config.io import (
    get_int_value_or_none,
    get_string_list_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from folio.config.keys import Toml
from folio.config.logging import get_logger
from folio.config.types import FileWriteStrategy
from folio.constants import (
    DEFAULT_ASSETS_DIR,
    DEFAULT_DATA_DIR,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SCRIPT_COMPILER,
    DEFAULT_SOURCE_DIR,
    DEFAULT_WATCH_DEBOUNCE_MS,
    DEFAULT_WATCH_IGNORE,
    FOLIO_TOML_NAME,
    PYPROJECT_TOML_NAME,
)
from folio.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from folio.config.io import TomlTable
    from folio.config.logging import FolioLogger
    from folio.config.types import ArgsLike

logger: FolioLogger = get_logger(__name__)

CLI_OVERRIDE_STR = "<CLI overrides>"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Immutable runtime configuration for a Folio build.

    Attributes:
        source_root (Path): Root of markup, stylesheet and script sources.
        data_root (Path): Root of structured data files mirrored into ``output/data``.
        assets_root (Path): Root of binary assets mirrored into ``output/assets``.
        output_root (Path): Destination of the deployable tree.
        dev (bool): Development mode: no minification, stylesheet source maps,
            and a resident watcher after the first build.
        write_strategy (FileWriteStrategy): How output files are committed.
        script_compiler (tuple[str, ...]): Argument vector prefix of the typed-script
            compiler (source path and fixed flags are appended per file).
        watch_ignore (tuple[str, ...]): Gitignore-style patterns the watcher never reacts to.
        watch_debounce_ms (int): Window in which repeated events of one kind coalesce.
        config_files (tuple[Path | str, ...]): Provenance of the merged layers.
    """

    source_root: Path
    data_root: Path
    assets_root: Path
    output_root: Path
    dev: bool = False

    write_strategy: FileWriteStrategy = FileWriteStrategy.ATOMIC
    script_compiler: tuple[str, ...] = DEFAULT_SCRIPT_COMPILER

    watch_ignore: tuple[str, ...] = DEFAULT_WATCH_IGNORE
    watch_debounce_ms: int = DEFAULT_WATCH_DEBOUNCE_MS

    config_files: tuple[Path | str, ...] = ()

    @property
    def watch_roots(self) -> tuple[Path, ...]:
        """Roots observed in development mode, in subscription order."""
        return (self.source_root, self.data_root, self.assets_root)

    def thaw(self) -> MutableBuildConfig:
        """Return a mutable copy of this frozen config.

        Prefer thaw → edit → freeze rather than working around the frozen dataclass.
        """
        return MutableBuildConfig(
            source_root=self.source_root,
            data_root=self.data_root,
            assets_root=self.assets_root,
            output_root=self.output_root,
            dev=self.dev,
            write_strategy=self.write_strategy,
            script_compiler=list(self.script_compiler),
            watch_ignore=list(self.watch_ignore),
            watch_debounce_ms=self.watch_debounce_ms,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableBuildConfig:
    """Mutable configuration used while merging layers.

    Path fields may still be relative here; `freeze` resolves them against
    ``base_dir`` (the invocation CWD unless given).
    """

    source_root: Path | None = None
    data_root: Path | None = None
    assets_root: Path | None = None
    output_root: Path | None = None
    dev: bool | None = None

    write_strategy: FileWriteStrategy | None = None
    script_compiler: list[str] = field(default_factory=lambda: [])

    watch_ignore: list[str] | None = None
    watch_debounce_ms: int | None = None

    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self, base_dir: Path | None = None) -> BuildConfig:
        """Freeze this builder into an immutable `BuildConfig`.

        Args:
            base_dir (Path | None): Directory that relative paths are resolved against.
                Defaults to the current working directory.

        Returns:
            BuildConfig: The immutable snapshot.

        Raises:
            ConfigError: If the output root overlaps one of the input roots.
        """
        base: Path = (base_dir or Path.cwd()).resolve()

        def _abs(p: Path | None, default: str) -> Path:
            candidate: Path = p if p is not None else Path(default)
            return candidate if candidate.is_absolute() else (base / candidate).resolve()

        config = BuildConfig(
            source_root=_abs(self.source_root, DEFAULT_SOURCE_DIR),
            data_root=_abs(self.data_root, DEFAULT_DATA_DIR),
            assets_root=_abs(self.assets_root, DEFAULT_ASSETS_DIR),
            output_root=_abs(self.output_root, DEFAULT_OUTPUT_DIR),
            dev=bool(self.dev),
            write_strategy=self.write_strategy or FileWriteStrategy.ATOMIC,
            script_compiler=tuple(self.script_compiler) or DEFAULT_SCRIPT_COMPILER,
            watch_ignore=(
                tuple(self.watch_ignore) if self.watch_ignore is not None else DEFAULT_WATCH_IGNORE
            ),
            watch_debounce_ms=(
                self.watch_debounce_ms
                if self.watch_debounce_ms is not None
                else DEFAULT_WATCH_DEBOUNCE_MS
            ),
            config_files=tuple(self.config_files),
        )

        # The output tree stays disjoint from every input root.
        for name, root in (
            ("source", config.source_root),
            ("data", config.data_root),
            ("assets", config.assets_root),
        ):
            if config.output_root.is_relative_to(root) or root.is_relative_to(config.output_root):
                raise ConfigError(
                    f"Output root {config.output_root} must not overlap the {name} root {root}"
                )

        logger.debug("Frozen BuildConfig: %s", config)
        return config

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableBuildConfig:
        """Return a builder populated with Folio's runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict(), config_file=None)

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableBuildConfig | None:
        """Load configuration from a single TOML file.

        For ``pyproject.toml`` the ``[tool.folio]`` table is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableBuildConfig | None: The builder, or None when a ``pyproject.toml``
            has no ``[tool.folio]`` table.
        """
        logger.debug("Creating MutableBuildConfig from TOML config: %s", path)

        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, Toml.SECTION_TOOL), Toml.SECTION_TOOL_FOLIO
            )
            if not tool_section:
                logger.debug("No [tool.folio] section in %s", path)
                return None
            toml_data = tool_section

        draft: MutableBuildConfig = cls.from_toml_dict(toml_data, config_file=path)
        logger.debug("Generated MutableBuildConfig: %s", draft)
        return draft

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        config_file: Path | None = None,
    ) -> MutableBuildConfig:
        """Create a draft config from a parsed TOML dict.

        Paths declared in the config are made absolute against the config file's
        directory. Without a config file (defaults, synthetic dicts) they stay
        relative and are resolved at `freeze` time.

        Args:
            data (TomlTable): The parsed TOML data.
            config_file (Path | None): Optional path to the source TOML file.

        Returns:
            MutableBuildConfig: The resulting builder.
        """
        paths_tbl: TomlTable = get_table_value(data, Toml.SECTION_PATHS)
        logger.trace("TOML [paths]: %s", paths_tbl)
        writer_tbl: TomlTable = get_table_value(data, Toml.SECTION_WRITER)
        logger.trace("TOML [writer]: %s", writer_tbl)
        scripts_tbl: TomlTable = get_table_value(data, Toml.SECTION_SCRIPTS)
        logger.trace("TOML [scripts]: %s", scripts_tbl)
        watch_tbl: TomlTable = get_table_value(data, Toml.SECTION_WATCH)
        logger.trace("TOML [watch]: %s", watch_tbl)

        cfg_dir: Path | None = config_file.parent.resolve() if config_file else None

        def _path(key: str) -> Path | None:
            raw: str | None = get_string_value_or_none(paths_tbl, key)
            if not raw:
                return None
            p = Path(raw)
            if not p.is_absolute() and cfg_dir is not None:
                p = (cfg_dir / p).resolve()
            return p

        draft = cls(
            source_root=_path(Toml.KEY_SOURCE),
            data_root=_path(Toml.KEY_DATA),
            assets_root=_path(Toml.KEY_ASSETS),
            output_root=_path(Toml.KEY_OUTPUT),
            config_files=[config_file] if config_file else [],
        )

        raw_strategy: str | None = get_string_value_or_none(writer_tbl, Toml.KEY_STRATEGY)
        draft.write_strategy = FileWriteStrategy.from_name(raw_strategy)
        if raw_strategy and draft.write_strategy is None:
            valid_values: str = ", ".join(m.name.lower() for m in FileWriteStrategy)
            logger.warning(
                "Invalid writer strategy %r (allowed values: %s); using default",
                raw_strategy,
                valid_values,
            )

        draft.script_compiler = get_string_list_or_none(scripts_tbl, Toml.KEY_COMPILER) or []
        draft.watch_ignore = get_string_list_or_none(watch_tbl, Toml.KEY_IGNORE)
        draft.watch_debounce_ms = get_int_value_or_none(watch_tbl, Toml.KEY_DEBOUNCE_MS)

        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found in ``start``, in merge order.

        ``pyproject.toml`` comes first and ``folio.toml`` second, so that the
        tool-specific file wins when both are present.
        """
        anchor: Path = start.resolve()
        if anchor.is_file():
            anchor = anchor.parent
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, FOLIO_TOML_NAME):
            p: Path = anchor / name
            if p.is_file():
                logger.debug("Discovered config file: %s", p)
                found.append(p)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableBuildConfig:
        """Discover and merge configuration layers into a draft.

        Merge order (lowest → highest precedence):
            1) Built-in defaults
            2) ``pyproject.toml`` ``[tool.folio]`` then ``folio.toml`` in ``anchor``
            3) Extra config files passed explicitly (in the order provided)

        Args:
            anchor (Path | None): Directory searched for project config files (CWD if None).
            extra_config_files (Iterable[Path] | None): Explicit files merged after discovery.
            no_config (bool): If True, skip project discovery.

        Returns:
            MutableBuildConfig: The merged draft, ready for CLI overrides and `freeze`.
        """
        draft: MutableBuildConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                mc: MutableBuildConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableBuildConfig) -> MutableBuildConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableBuildConfig(
            source_root=other.source_root if other.source_root is not None else self.source_root,
            data_root=other.data_root if other.data_root is not None else self.data_root,
            assets_root=other.assets_root if other.assets_root is not None else self.assets_root,
            output_root=other.output_root if other.output_root is not None else self.output_root,
            dev=other.dev if other.dev is not None else self.dev,
            write_strategy=other.write_strategy
            if other.write_strategy is not None
            else self.write_strategy,
            script_compiler=other.script_compiler or self.script_compiler,
            watch_ignore=other.watch_ignore
            if other.watch_ignore is not None
            else self.watch_ignore,
            watch_debounce_ms=other.watch_debounce_ms
            if other.watch_debounce_ms is not None
            else self.watch_debounce_ms,
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableBuildConfig:
        """Apply overrides from a parsed arguments mapping (CLI or API).

        Keys that are absent or set to None leave the merged value untouched.
        Relative paths are resolved against the current working directory.

        Args:
            args (ArgsLike): Mapping with any of ``source``, ``data``, ``assets``,
                ``output``, ``dev`` and ``write_strategy``.

        Returns:
            MutableBuildConfig: This builder, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableBuildConfig: %s", args)
        self.config_files.append(CLI_OVERRIDE_STR)

        cwd: Path = Path.cwd().resolve()
        for key, attr in (
            ("source", "source_root"),
            ("data", "data_root"),
            ("assets", "assets_root"),
            ("output", "output_root"),
        ):
            value = args.get(key)
            if value not in (None, ""):
                setattr(self, attr, (cwd / Path(value)).resolve())

        if args.get("dev") is not None:
            self.dev = bool(args["dev"])

        if args.get("write_strategy") is not None:
            strategy: FileWriteStrategy | None = FileWriteStrategy.from_name(
                str(args["write_strategy"])
            )
            if strategy is None:
                raise ConfigError(f"Unknown write strategy: {args['write_strategy']!r}")
            self.write_strategy = strategy

        logger.debug("Patched MutableBuildConfig: %s", self)
        return self
