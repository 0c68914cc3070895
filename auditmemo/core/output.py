# auditmemo/core/output.py
# Output levels, log categories & the manager registry that engine modules log through
# * No I/O here: the CLI registers a Rich-backed manager at startup (cli/output_manager.py)

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional, Protocol, runtime_checkable


class OutputLevel(IntEnum):
    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


# * Category tags printed in front of verbose/debug lines, one per engine stage
class Category:
    PARSE = "PARSE"
    EDIT = "EDIT"
    HISTORY = "HISTORY"
    FILE = "FILE"
    CONFIG = "CONFIG"
    ERROR = "ERROR"


@runtime_checkable
class OutputInterface(Protocol):
    def get_level(self) -> OutputLevel: ...

    def is_debug_enabled(self) -> bool: ...

    def is_verbose_enabled(self) -> bool: ...

    def debug(self, msg: str, category: str = "DEBUG", **kwargs: Any) -> None: ...

    def verbose(
        self, msg: str, category: str = "INFO", detail: Optional[str] = None, **kwargs: Any
    ) -> None: ...

    def info(self, msg: str, **kwargs: Any) -> None: ...

    def warning(self, msg: str, **kwargs: Any) -> None: ...

    def start_session(self) -> None: ...

    def end_session(self) -> None: ...


# * Discards everything; active for library use & until the CLI registers a manager
class NullOutputManager:
    level = OutputLevel.NORMAL

    def get_level(self) -> OutputLevel:
        return self.level

    def is_debug_enabled(self) -> bool:
        return False

    def is_verbose_enabled(self) -> bool:
        return False

    def debug(self, msg: str, category: str = "DEBUG", **kwargs: Any) -> None:
        return None

    def verbose(
        self, msg: str, category: str = "INFO", detail: Optional[str] = None, **kwargs: Any
    ) -> None:
        return None

    def info(self, msg: str, **kwargs: Any) -> None:
        return None

    # parse/edit code never warns directly; validation warnings go through the CLI manager
    def warning(self, msg: str, **kwargs: Any) -> None:
        return None

    def start_session(self) -> None:
        return None

    def end_session(self) -> None:
        return None


_registered: list[OutputInterface] = [NullOutputManager()]


def set_output_manager(manager: OutputInterface) -> None:
    _registered[0] = manager


def get_output_manager() -> OutputInterface:
    return _registered[0]


def reset_output_manager() -> None:
    _registered[0] = NullOutputManager()
