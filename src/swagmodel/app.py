"""The ``swagmodel`` command line.

``app`` is the root Typer application with two entries: ``dump`` (the whole
model as JSON) and the ``inspect`` group (tables and summaries).  The root
callback turns the global flags into a resolved
:class:`~swagmodel.models.GlobalConfig`, an installed
:class:`~swagmodel.output.OutputManager` and a logging setup before any
sub-command runs.

:func:`main` is the console-script entry point.  It converts a stray
:class:`~swagmodel.exceptions.SwagmodelError` into its exit code and writes
any other exception to a crash log under
:func:`~swagmodel.config.get_data_dir`.
"""

from __future__ import annotations

import logging
import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import typer

from swagmodel import __version__
from swagmodel.commands.dump import dump_command
from swagmodel.commands.inspect import inspect_app
from swagmodel.exit_codes import EXIT_GENERIC_FAILURE

_EXIT_INTERRUPTED = 130

app = typer.Typer(
    name="swagmodel",
    help="Model Swagger 2.0 / OpenAPI 3.0 documents for code generation.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("dump")(dump_command)
app.add_typer(inspect_app, name="inspect", help="Inspect a document's API model.")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"swagmodel {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(False, "--json", help="Render data as JSON."),
    plain_output: bool = typer.Option(False, "--plain", help="Render data as tab-separated text."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colour."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Hide informational messages."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parser debug output to stderr."),
    output_file: Optional[str] = typer.Option(
        None, "-o", "--output", help="Write data to this file instead of stdout."
    ),
) -> None:
    """Apply the global flags, then hand over to the sub-command.

    The resolved configuration is stored in ``ctx.obj["config"]``.

    Raises:
        InvalidUsageError: If both ``--json`` and ``--plain`` are given.
        ConfigError: If a config layer is invalid.
    """
    from swagmodel.config import resolve_config
    from swagmodel.exceptions import InvalidUsageError
    from swagmodel.output import OutputFormat, OutputManager, set_output

    if json_output and plain_output:
        raise InvalidUsageError("--json and --plain are mutually exclusive")

    cli_format: Optional[str] = None
    if json_output:
        cli_format = OutputFormat.JSON.value
    elif plain_output:
        cli_format = OutputFormat.PLAIN.value
    config = resolve_config(cli_format=cli_format)

    set_output(
        OutputManager(
            format=OutputFormat(config.output.format),
            no_color=no_color,
            quiet=quiet,
            verbose=verbose,
            output_file=output_file,
        )
    )
    _configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


def _configure_logging(verbose: bool) -> None:
    """Send library log records to stderr; debug level with ``--verbose``."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _setup_signal_handlers() -> None:
    def _on_sigint(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(_EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _on_sigint)


def _write_crash_log(exc: Exception) -> str:
    """Save the active traceback under ``<data dir>/logs`` and return the path."""
    from swagmodel.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"crash-{datetime.now():%Y%m%d-%H%M%S}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def main() -> None:
    """Console-script entry point.

    Raises:
        SystemExit: Always; with the error's ``exit_code`` for a
            :class:`~swagmodel.exceptions.SwagmodelError`, 1 for anything
            unexpected, 130 on Ctrl-C.
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(_EXIT_INTERRUPTED)
    except Exception as exc:
        from swagmodel.exceptions import SwagmodelError
        from swagmodel.output import error

        if isinstance(exc, SwagmodelError):
            error(str(exc))
            sys.exit(exc.exit_code)
        log_path = _write_crash_log(exc)
        error(f"Unexpected error. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)
