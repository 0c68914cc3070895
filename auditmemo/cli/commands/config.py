# auditmemo/cli/commands/config.py
# Settings subcommands (list/get/set/reset/path) w/ JSON-backed storage

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

import typer
from rich.markup import escape

from ...config.settings import MemoSettings, settings_manager
from ...memo_io.console import console, refresh_theme
from ..app import app

config_app = typer.Typer(rich_markup_mode="rich", help="Manage auditmemo settings")
app.add_typer(config_app, name="config")


def _known_keys() -> set[str]:
    return {f.name for f in fields(MemoSettings)}


# coerce CLI string to a JSON value (numbers, bools, null) or keep raw string
def _coerce_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _format_value(value: Any) -> str:
    return f"[memo.accent2]{escape(json.dumps(value))}[/]"


def _print_current_settings() -> None:
    console.print()
    console.print("[memo.accent]Current Configuration[/]")
    console.print(f"[dim]Config file: {escape(str(settings_manager.config_path))}[/]")
    console.print()
    for key, value in settings_manager.list_settings().items():
        console.print(f"  [bold]{key}[/] [memo.accent2]->[/] {_format_value(value)}")


@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        _print_current_settings()


@config_app.command(name="list", help="Show all settings")
def list_cmd() -> None:
    _print_current_settings()


@config_app.command(help="Print one setting as JSON")
def get(key: str) -> None:
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")
    console.print(_format_value(settings_manager.get(key)))


# * Set a value; JSON-coerced & validated by MemoSettings before saving
@config_app.command(name="set", help="Set one setting (values parsed as JSON when possible)")
def set_cmd(key: str, value: str) -> None:
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")

    coerced = _coerce_value(value)
    try:
        settings_manager.set(key, coerced)
    except (TypeError, ValueError) as e:
        raise typer.BadParameter(str(e))

    if key == "theme":
        refresh_theme(coerced)
    console.print(f"[green]✓[/] Set {key} {_format_value(coerced)}")


@config_app.command(help="Reset all settings to defaults")
def reset() -> None:
    settings_manager.reset()
    console.print("[green]✓[/] Reset settings to defaults")


@config_app.command(help="Show the configuration file path")
def path() -> None:
    console.print(f"[memo.accent2]{escape(str(settings_manager.config_path))}[/]")
