# auditmemo/cli/decorators.py
# CLI decorator mapping auditmemo errors to formatted messages & exit status 1

import functools
from typing import Any, Callable, TypeVar, cast

from rich.markup import escape

from ..core.exceptions import (
    MemoError,
    ValidationError,
    JSONParsingError,
    EditError,
    ConfigurationError,
    DocumentError,
    HistoryError,
    FileOperationError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])

# most specific first; MemoError catches the rest of the hierarchy
_ERROR_LABELS: tuple[tuple[type[MemoError], str], ...] = (
    (JSONParsingError, "JSON Parsing Error"),
    (EditError, "Edit Error"),
    (ConfigurationError, "Configuration Error"),
    (DocumentError, "Document Error"),
    (HistoryError, "History Error"),
    (FileOperationError, "File Error"),
    (MemoError, "Error"),
)


def _label_for(error: MemoError) -> str:
    for error_type, label in _ERROR_LABELS:
        if isinstance(error, error_type):
            return label
    return "Error"


# * Decorator for handling auditmemo errors in CLI commands w/ Rich output
def handle_memo_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import to avoid circular dependencies
        from ..core.debug import debug_error
        from ..memo_io.console import console

        try:
            return func(*args, **kwargs)
        except ValidationError as e:
            if e.recoverable:
                return None
            console.print(format_error_message("Validation Error", escape(str(e))))
            for warning in e.warnings:
                console.print(f"  [red]-[/] {escape(warning)}")
            raise SystemExit(1)
        except MemoError as e:
            debug_error(e, func.__name__)
            console.print(format_error_message(_label_for(e), escape(str(e))))
            raise SystemExit(1)

    return cast(F, wrapper)
