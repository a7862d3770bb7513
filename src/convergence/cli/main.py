"""Main CLI entry point for the convergence command.

This module provides the Typer application used to inspect what the content
cache resolves for spaces, pages and attachments. Each invocation builds its
own ContentCache, so every command reflects a fresh read from Confluence.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, TypeVar

import typer

from convergence import __version__
from convergence.cli.models import ExitCode
from convergence.cli.output import OutputHandler
from convergence.confluence_client import (
    Authenticator,
    ConfluenceError,
    ContentClient,
    InvalidCredentialsError,
    NotFoundError,
)
from convergence.content_cache import ContentCache

T = TypeVar('T')

app = typer.Typer(
    name="convergence",
    help="Read spaces, pages and attachments through the Confluence content cache.",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'convergence' namespace logger to avoid affecting
    third-party libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("convergence")
    app_logger.setLevel(level)
    app_logger.handlers.clear()

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"convergence_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(file_format, datefmt=date_format))
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _build_cache() -> ContentCache:
    return ContentCache(ContentClient(Authenticator()))


def _resolve(output: OutputHandler, message: str, action: Callable[[], T]) -> T:
    """Run a cache call and map failures to exit codes.

    Not-found is reported separately from every other failure; the rest are
    logged for diagnosis.
    """
    try:
        with output.spinner(message):
            return action()
    except NotFoundError as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.NOT_FOUND)
    except InvalidCredentialsError as e:
        logger.error(f"Invalid configuration: {e}")
        output.error(f"Invalid configuration: {e}")
        raise typer.Exit(ExitCode.CONFIG_ERROR)
    except ConfluenceError as e:
        logger.error(f"Content request failed: {e}")
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"convergence {__version__}")
        raise typer.Exit(ExitCode.SUCCESS)


@app.callback()
def main(
    ctx: typer.Context,
    verbosity: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v info, -vv debug)",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Read spaces, pages and attachments through the Confluence content cache.

    Credentials come from CONFLUENCE_URL, CONFLUENCE_USER and
    CONFLUENCE_API_TOKEN (a .env file in the working directory is loaded).
    """
    _configure_logging(verbosity, logdir)
    ctx.obj = OutputHandler(verbosity=verbosity, no_color=no_color)


@app.command()
def spaces(ctx: typer.Context) -> None:
    """List all spaces."""
    output: OutputHandler = ctx.obj
    cache = _build_cache()

    result = _resolve(output, "Fetching spaces...", cache.get_spaces)
    output.print_spaces(result)


@app.command()
def space(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Space key (e.g., DEV)"),
    body: bool = typer.Option(True, "--body/--no-body", help="Show the homepage body"),
) -> None:
    """Show a space's homepage."""
    output: OutputHandler = ctx.obj
    cache = _build_cache()

    found = _resolve(output, f"Fetching space {key}...", lambda: cache.get_space(key))
    output.info(f"{found.name} ({found.key}): homepage {found.homepage_id}")

    page = _resolve(
        output,
        "Fetching homepage...",
        lambda: cache.get_page_by_id(key, found.homepage_id),
    )
    output.print_page(page, show_body=body)


@app.command()
def page(
    ctx: typer.Context,
    space_key: str = typer.Argument(..., help="Space key (e.g., DEV)"),
    page_id: Optional[str] = typer.Option(None, "--id", help="Content ID of the page"),
    title: Optional[str] = typer.Option(
        None,
        "--title",
        help="Page title as shown in Confluence",
    ),
    body: bool = typer.Option(True, "--body/--no-body", help="Show the page body"),
) -> None:
    """Show a page looked up by ID or by title."""
    output: OutputHandler = ctx.obj

    if (page_id is None) == (title is None):
        output.error("Specify exactly one of --id or --title")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    cache = _build_cache()
    if page_id is not None:
        result = _resolve(
            output,
            f"Fetching page {page_id}...",
            lambda: cache.get_page_by_id(space_key, page_id),
        )
    else:
        result = _resolve(
            output,
            f"Fetching page '{title}'...",
            lambda: cache.get_page_by_title(space_key, title),
        )

    output.print_page(result, show_body=body)


@app.command()
def attachment(
    ctx: typer.Context,
    content_id: str = typer.Argument(..., help="ID of the content owning the attachment"),
    filename: str = typer.Argument(..., help="Attachment file name"),
    version: str = typer.Option(..., "--version", help="Attachment version"),
    mod_date: str = typer.Option(..., "--modification-date", help="Modification date"),
    api_token: str = typer.Option(..., "--api", help="Access token from the download link"),
    output_path: Path = typer.Option(..., "--output", "-o", help="File to write"),
) -> None:
    """Download an attachment to a file."""
    output: OutputHandler = ctx.obj
    cache = _build_cache()

    result = _resolve(
        output,
        f"Downloading {filename}...",
        lambda: cache.get_attachment(content_id, filename, version, mod_date, api_token),
    )

    output_path.write_bytes(result.data)
    output.success(
        f"Wrote {len(result.data)} bytes ({result.content_type or 'unknown type'}) "
        f"to {output_path}"
    )


if __name__ == "__main__":
    app()
