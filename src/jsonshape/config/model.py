# topmark:header:start
#
#   project      : JsonShape
#   file         : model.py
#   file_relpath : src/jsonshape/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot used when rendering and serializing.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layering (lowest to highest precedence):
    1. runtime defaults (`jsonshape.config.io.load_defaults_dict`)
    2. discovered files, walking upward from the working directory
       (root-most first, nearest last; in one directory ``pyproject.toml``
       before ``jsonshape.toml``); ``root = true`` stops the walk
    3. explicitly given config files, in order
    4. CLI overrides (`MutableConfig.apply_cli_args`)

Unset values (``None``) on a `MutableConfig` mean "inherit"; merging only
copies values the newer layer actually sets.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, cast

from jsonshape.config.io import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from jsonshape.config.keys import ENUM_STYLES, CliKey, Toml
from jsonshape.config.logging import get_logger
from jsonshape.constants import CONFIG_FILE_NAME, JSONSHAPE, PYPROJECT_FILE_NAME
from jsonshape.core.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from jsonshape.config.io import TomlTable
    from jsonshape.config.logging import JsonShapeLogger
    from jsonshape.core.formatter import EnumStyle

ArgsLike = Mapping[str, Any]

logger: JsonShapeLogger = get_logger(__name__)

DEFAULT_INDENT: Final[int] = 2


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        indent (int | None): JSON indentation; None renders compact single-line JSON.
        ensure_ascii (bool): Escape non-ASCII characters in JSON text.
        datetime_format (str | None): ``strftime`` pattern for temporal values;
            None renders ISO 8601.
        enum_style (EnumStyle): Render enum members by ``"name"`` or ``"value"``.
        config_files (tuple[Path | str, ...]): Config sources that contributed.
        diagnostics (tuple[Diagnostic, ...]): Problems found while loading or merging.
    """

    indent: int | None
    ensure_ascii: bool
    datetime_format: str | None
    enum_style: EnumStyle
    config_files: tuple[Path | str, ...]
    diagnostics: tuple[Diagnostic, ...]

    def to_toml_dict(self) -> TomlTable:
        """Convert this Config into a TOML-serializable dict."""
        output: TomlTable = {Toml.KEY_ENSURE_ASCII: self.ensure_ascii}
        if self.indent is not None:
            output[Toml.KEY_INDENT] = self.indent
        fmt: TomlTable = {Toml.KEY_ENUM_STYLE: self.enum_style}
        if self.datetime_format is not None:
            fmt[Toml.KEY_DATETIME_FORMAT] = self.datetime_format
        return {
            Toml.SECTION_OUTPUT: output,
            Toml.SECTION_FORMAT: fmt,
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            datetime_format=self.datetime_format,
            enum_style=self.enum_style,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Attributes:
        indent (int | None): JSON indentation (negative values are rejected).
        ensure_ascii (bool | None): Escape non-ASCII characters.
        datetime_format (str | None): ``strftime`` pattern for temporal values.
        enum_style (EnumStyle | None): ``"name"`` or ``"value"``.
        compact (bool): Explicitly requested compact output (``indent`` unset).
        config_files (list[Path | str]): Config sources that contributed.
        diagnostics (DiagnosticLog): Problems found while loading or merging.
    """

    indent: int | None = None
    ensure_ascii: bool | None = None
    datetime_format: str | None = None
    enum_style: EnumStyle | None = None
    compact: bool = False
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`, filling unset values."""
        indent: int | None = None if self.compact else self.indent
        if indent is None and not self.compact:
            indent = DEFAULT_INDENT
        return Config(
            indent=indent,
            ensure_ascii=bool(self.ensure_ascii),
            datetime_format=self.datetime_format,
            enum_style=self.enum_style or "name",
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Build a draft populated with the runtime defaults."""
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict())
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: str = "<dict>") -> MutableConfig:
        """Parse a TOML table into a draft; invalid values become warnings.

        Args:
            data (TomlTable): Parsed TOML (the contents of ``[tool.jsonshape]``
                for ``pyproject.toml``).
            source (str): Label used in diagnostic messages.

        Returns:
            MutableConfig: The parsed draft.
        """
        draft = cls()
        output: TomlTable = get_table_value(data, Toml.SECTION_OUTPUT)
        fmt: TomlTable = get_table_value(data, Toml.SECTION_FORMAT)

        if Toml.KEY_INDENT in output:
            indent: int | None = get_int_value_or_none(output, Toml.KEY_INDENT)
            if indent is None or indent < 0:
                draft.diagnostics.add_warning(
                    f"{source}: [{Toml.SECTION_OUTPUT}].{Toml.KEY_INDENT} must be a "
                    f"non-negative integer (got {output[Toml.KEY_INDENT]!r}); ignored"
                )
            else:
                draft.indent = indent

        if Toml.KEY_ENSURE_ASCII in output:
            ensure_ascii: bool | None = get_bool_value_or_none(output, Toml.KEY_ENSURE_ASCII)
            if ensure_ascii is None:
                draft.diagnostics.add_warning(
                    f"{source}: [{Toml.SECTION_OUTPUT}].{Toml.KEY_ENSURE_ASCII} must be a "
                    "boolean; ignored"
                )
            draft.ensure_ascii = ensure_ascii

        if Toml.KEY_DATETIME_FORMAT in fmt:
            datetime_format: str | None = get_string_value_or_none(fmt, Toml.KEY_DATETIME_FORMAT)
            if not datetime_format:
                draft.diagnostics.add_warning(
                    f"{source}: [{Toml.SECTION_FORMAT}].{Toml.KEY_DATETIME_FORMAT} must be a "
                    "non-empty string; ignored"
                )
            else:
                draft.datetime_format = datetime_format

        if Toml.KEY_ENUM_STYLE in fmt:
            draft.enum_style = _checked_enum_style(
                fmt.get(Toml.KEY_ENUM_STYLE), draft.diagnostics, source
            )

        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from ``jsonshape.toml`` or ``pyproject.toml``.

        Returns:
            MutableConfig | None: The draft, or None when a ``pyproject.toml``
                has no ``[tool.jsonshape]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_FILE_NAME:
            tool: TomlTable = get_table_value(data, "tool")
            if JSONSHAPE not in tool:
                logger.debug("No [tool.%s] section in %s", JSONSHAPE, path)
                return None
            data = get_table_value(tool, JSONSHAPE)

        draft: MutableConfig = cls.from_toml_dict(data, source=str(path))
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``.

        Files are returned root-most first so a later merge gives the nearest
        file precedence. A file setting ``root = true`` stops the walk after
        its directory.
        """
        collected: list[list[Path]] = []
        current: Path = start.resolve()
        for directory in (current, *current.parents):
            found: list[Path] = []
            stop = False
            for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
                candidate: Path = directory / name
                if not candidate.is_file():
                    continue
                data: TomlTable = load_toml_dict(candidate)
                if name == PYPROJECT_FILE_NAME:
                    tool: TomlTable = get_table_value(data, "tool")
                    if JSONSHAPE not in tool:
                        continue
                    data = get_table_value(tool, JSONSHAPE)
                found.append(candidate)
                if get_bool_value_or_none(data, Toml.KEY_ROOT):
                    stop = True
            if found:
                collected.append(found)
            if stop:
                break

        ordered: list[Path] = [p for group in reversed(collected) for p in group]
        logger.debug("Discovered config files: %s", ordered)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        discover: bool = True,
    ) -> MutableConfig:
        """Merge defaults, discovered files and explicit config files.

        Args:
            start (Path | None): Directory to start discovery from (defaults to CWD).
            extra_config_files (Iterable[Path]): Explicit config files, merged last.
            discover (bool): Whether to walk upward for config files.

        Returns:
            MutableConfig: The merged draft.
        """
        draft: MutableConfig = cls.from_defaults()
        paths: list[Path] = []
        if discover:
            paths.extend(cls.discover_local_config_files(start or Path.cwd()))
        paths.extend(extra_config_files)

        for path in paths:
            if not path.is_file():
                draft.diagnostics.add_error(f"Config file not found: {path}")
                continue
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is None:
                draft.diagnostics.add_warning(f"[tool.{JSONSHAPE}] section missing in {path}")
                continue
            draft.merge_with(layer)
        return draft

    # ------------------------------- Merging -------------------------------

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay the values ``other`` sets on top of this draft."""
        if other.indent is not None:
            self.indent = other.indent
            self.compact = False
        if other.compact:
            self.compact = True
        if other.ensure_ascii is not None:
            self.ensure_ascii = other.ensure_ascii
        if other.datetime_format is not None:
            self.datetime_format = other.datetime_format
        if other.enum_style is not None:
            self.enum_style = other.enum_style
        self.config_files.extend(other.config_files)
        self.diagnostics.extend(other.diagnostics)
        return self

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI overrides; keys that are absent or None leave values unchanged.

        A negative ``indent`` requests compact single-line output.
        """
        indent: Any = args.get(CliKey.INDENT)
        if indent is not None:
            if int(indent) < 0:
                self.indent, self.compact = None, True
            else:
                self.indent, self.compact = int(indent), False
        ensure_ascii: Any = args.get(CliKey.ENSURE_ASCII)
        if ensure_ascii is not None:
            self.ensure_ascii = bool(ensure_ascii)
        datetime_format: Any = args.get(CliKey.DATETIME_FORMAT)
        if datetime_format:
            self.datetime_format = str(datetime_format)
        enum_style: Any = args.get(CliKey.ENUM_STYLE)
        if enum_style is not None:
            self.enum_style = _checked_enum_style(enum_style, self.diagnostics, "CLI")
        return self


def _checked_enum_style(value: object, diagnostics: DiagnosticLog, source: str) -> EnumStyle | None:
    if isinstance(value, str) and value in ENUM_STYLES:
        return cast("EnumStyle", value)
    diagnostics.add_warning(
        f"{source}: {Toml.KEY_ENUM_STYLE} must be one of {', '.join(ENUM_STYLES)} "
        f"(got {value!r}); ignored"
    )
    return None
