# auditmemo/core/exceptions.py
# Custom exception hierarchy for auditmemo (pure - no I/O operations)

from pathlib import Path
from typing import Any, List


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for auditmemo
class MemoError(Exception):
    pass


# * Validation error carrying warnings & whether the caller may continue
class ValidationError(MemoError):
    def __init__(self, warnings: List[str], recoverable: bool = True):
        self.warnings = warnings
        self.recoverable = recoverable
        details = "; ".join(warnings) if warnings else "no details"
        message = f"Validation failed with {len(warnings)} warnings: {details}"
        super().__init__(message)


# * Interactive edit rejected (read-only column, value outside choices)
class EditValidationError(ValidationError):
    pass


# * Base error for applying edits to a document
class EditError(MemoError):
    pass


# * No block w/ the requested id in the document
class BlockNotFoundError(EditError):
    def __init__(self, message: str, block_id: str):
        super().__init__(message)
        self.block_id = block_id

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, block_id={self.block_id!r})"


# * Block exists but is not of the kind the edit targets
class BlockKindError(EditError):
    def __init__(self, message: str, block_id: str, expected: str, actual: str):
        super().__init__(message)
        self.block_id = block_id
        self.expected = expected
        self.actual = actual

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, block_id={self.block_id!r}, "
            f"expected={self.expected!r}, actual={self.actual!r})"
        )


# * Table row or column index outside the table
class CellAddressError(EditError):
    def __init__(self, message: str, block_id: str, row: int, column: int):
        super().__init__(message)
        self.block_id = block_id
        self.row = row
        self.column = column

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, block_id={self.block_id!r}, "
            f"row={self.row!r}, column={self.column!r})"
        )


# * Edited block would re-parse as something else (vanish, split or change kind)
class BlockShapeError(EditError):
    def __init__(self, message: str, block_id: str, expected: str, reparsed: List[str]):
        super().__init__(message)
        self.block_id = block_id
        self.expected = expected
        self.reparsed = reparsed

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, block_id={self.block_id!r}, "
            f"expected={self.expected!r}, reparsed={self.reparsed!r})"
        )


# * Configuration errors
class ConfigurationError(MemoError):
    pass


# * Settings value validation failed (also a ValueError for callers validating input)
class SettingsValidationError(ConfigurationError, ValueError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * JSON parsing errors
class JSONParsingError(MemoError):
    pass


# * Base error for memo document handling
class DocumentError(MemoError):
    pass


# * Memo file missing or not decodable
class DocumentReadError(DocumentError):
    pass


# * Base error for persisted edit history
class HistoryError(MemoError):
    pass


# * Persisted history exists but cannot be restored
class HistoryCorruptError(HistoryError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Base error for file I/O operations
class FileOperationError(MemoError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to read file
class FileReadError(FileOperationError):
    pass


# * Failed to write file
class FileWriteError(FileOperationError):
    pass
