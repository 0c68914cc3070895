# auditmemo/core/verbose.py
# Verbose logging helpers - thin wrappers over the registered output manager w/ one category per engine stage

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import Category, OutputLevel, get_output_manager, set_output_manager


# * Register a Rich-backed output manager for this CLI invocation
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
    quiet: bool = False,
) -> None:
    if enabled and dev_mode:
        requested_level = OutputLevel.DEBUG
    elif enabled:
        requested_level = OutputLevel.VERBOSE
    else:
        requested_level = OutputLevel.NORMAL

    # ! CLI layer import kept local so core stays importable without it
    from ..cli.output_manager import OutputManager

    manager = OutputManager()
    manager.initialize(
        requested_level=requested_level,
        dev_mode=dev_mode,
        quiet=quiet,
        log_file=log_file,
    )
    set_output_manager(manager)


def is_verbose_enabled() -> bool:
    return get_output_manager().is_verbose_enabled()


# * Core verbose logging function
def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().verbose(message, category, detail)


# * Log a finished parse w/ per-kind block counts
def vlog_parse(line_count: int, counts: dict[str, int]) -> None:
    summary = ", ".join(f"{kind}={n}" for kind, n in counts.items() if n)
    get_output_manager().verbose(
        f"Parsed {line_count} lines into {sum(counts.values())} blocks",
        Category.PARSE,
        summary or None,
    )


# * Log an applied edit against a block
def vlog_edit(operation: str, block_id: str, detail: str | None = None) -> None:
    get_output_manager().verbose(f"{operation} on block {block_id}", Category.EDIT, detail)


# * Log a history transition (record/undo/reset)
def vlog_history(action: str, position: int, size: int) -> None:
    get_output_manager().verbose(
        f"{action} -> position {position} of {size - 1}", Category.HISTORY
    )


def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Read: {path}{size_str}", Category.FILE)


def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Write: {path}{size_str}", Category.FILE)


def vlog_config(key: str, value: Any) -> None:
    get_output_manager().verbose(f"{key} = {value}", Category.CONFIG)


def cleanup_verbose() -> None:
    get_output_manager().end_session()
