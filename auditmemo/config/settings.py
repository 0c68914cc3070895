# auditmemo/config/settings.py
# Settings for the auditmemo CLI: default memo location, history storage & display/policy toggles

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, cast

import typer

from ..core.exceptions import JSONParsingError, SettingsValidationError
from ..memo_io.generics import read_json_safe, write_json_safe

# env var overriding the config file location (may come from .env)
CONFIG_ENV_VAR = "AUDITMEMO_CONFIG"


# * Default settings w/ validation of user-supplied values
@dataclass
class MemoSettings:
    # default memo location
    data_dir: str = "data"
    memo_filename: str = "memo.md"

    # auditmemo internal paths
    base_dir: str = ".auditmemo"
    history_dirname: str = "history"

    # display
    theme: str = "slate"
    show_ids: bool = True

    # reject edits to read-only columns & values outside choice sets
    enforce_policy: bool = True

    # max snapshots kept per memo (0 = unlimited)
    history_limit: int = 0

    # dev mode (enables debug-level output w/ --verbose)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        for name in ("show_ids", "enforce_policy", "dev_mode"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise SettingsValidationError(
                    f"{name} must be a boolean (true/false), "
                    f"got {type(value).__name__}: {value}",
                    name,
                    value,
                )

        if (
            not isinstance(self.history_limit, int)
            or isinstance(self.history_limit, bool)
            or self.history_limit < 0
        ):
            raise SettingsValidationError(
                f"history_limit must be a non-negative integer, got {self.history_limit}",
                "history_limit",
                self.history_limit,
            )
        if self.history_limit == 1:
            raise SettingsValidationError(
                "history_limit must be 0 (unlimited) or at least 2", "history_limit", 1
            )

        from ..ui.theming.theme_definitions import THEMES

        if self.theme not in THEMES:
            raise SettingsValidationError(
                f"theme must be one of {sorted(THEMES)}, got '{self.theme}'",
                "theme",
                self.theme,
            )

        if not isinstance(self.memo_filename, str) or not self.memo_filename.strip():
            raise SettingsValidationError(
                "memo_filename must be a non-empty string", "memo_filename", self.memo_filename
            )

    @property
    def memo_path(self) -> Path:
        return Path(self.data_dir) / self.memo_filename

    @property
    def memo_dir(self) -> Path:
        return Path(self.base_dir)

    @property
    def history_dir(self) -> Path:
        return self.memo_dir / self.history_dirname


def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".auditmemo" / "config.json"


# * Settings management w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self._config_path = config_path
        self._settings: Optional[MemoSettings] = None

    @property
    def config_path(self) -> Path:
        return self._config_path or default_config_path()

    @config_path.setter
    def config_path(self, value: Optional[Path]) -> None:
        self._config_path = value
        self._settings = None

    def load(self) -> MemoSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = MemoSettings(**data)
            except (JSONParsingError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
                typer.echo("Using default settings")
                self._settings = MemoSettings()
        else:
            self._settings = MemoSettings()

        return self._settings

    def save(self, settings: MemoSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set one value; the whole settings object is re-validated before saving
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if not hasattr(settings, key):
            raise ValueError(f"Unknown setting: {key}")

        data = asdict(settings)
        data[key] = value
        self.save(MemoSettings(**data))

    def reset(self) -> None:
        self.save(MemoSettings())

    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[MemoSettings] = None
) -> MemoSettings:
    if provided is not None:
        return provided

    # search ctx, parent, & root for MemoSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, MemoSettings):
            return obj

    return settings_manager.load()
