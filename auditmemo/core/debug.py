# auditmemo/core/debug.py
# Debug logging utilities - delegates to the registered output manager

from .output import Category, get_output_manager


def debug_print(message: str, category: str = "DEBUG") -> None:
    get_output_manager().debug(message, category)


# * Print exception details in debug mode
def debug_error(error: Exception, context: str = "") -> None:
    error_msg = f"Exception: {type(error).__name__}: {error}"
    if context:
        error_msg = f"{context} - {error_msg}"
    get_output_manager().debug(error_msg, Category.ERROR)
