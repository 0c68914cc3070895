# auditmemo/cli/app.py
# Root Typer application & command registration
#
# ! Command modules are imported at the bottom so they can register on `app`
# ! w/o a circular import.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup (AUDITMEMO_CONFIG may live in .env)
load_dotenv()

from ..config.settings import settings_manager
from ..core.verbose import cleanup_verbose, init_verbose, vlog_config


app = typer.Typer(
    help="Review & edit AI-generated audit memos as structured Markdown",
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)


# * Load settings, theme & output level for every invocation
@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging of parse/edit/history steps"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print errors & warnings"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    from ..ui.theming.console_theme import refresh_theme

    refresh_theme(ctx.obj.theme)

    # log_file implies verbose mode; DEBUG additionally needs dev_mode
    init_verbose(
        enabled=verbose or log_file is not None,
        log_file=log_file,
        dev_mode=ctx.obj.dev_mode,
        quiet=quiet,
    )
    ctx.call_on_close(cleanup_verbose)
    vlog_config("config", settings_manager.config_path)


# ! import command modules here to avoid circular import w/ app object
from .commands import show as _show  # noqa: F401,E402
from .commands import format as _format  # noqa: F401,E402
from .commands import edit as _edit  # noqa: F401,E402
from .commands import history as _history  # noqa: F401,E402
from .commands import config as _config  # noqa: F401,E402
