"""Main CLI entry point for the confluence-publish command.

This module provides the Typer application that loads publish metadata,
connects to Confluence and publishes the local page tree.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from ..confluence_client.api_wrapper import APIWrapper
from ..confluence_client.auth import Authenticator
from ..confluence_client.errors import (
    APIUnreachableError,
    InvalidCredentialsError,
    PublisherError,
)
from ..metadata.loader import MetadataLoader
from ..publisher.publisher import ConfluencePublisher
from ..publisher.strategy import PublishingStrategy
from .models import ExitCode
from .output import ConsolePublisherListener, OutputHandler

app = typer.Typer(
    name="confluence-publish",
    help="""Publish a local page tree to Confluence.

Pages are written only when their content changed since the last publish.

EXAMPLE:
  confluence-publish publish.yaml
  confluence-publish publish.yaml --strategy replace_ancestor -v""",
    add_completion=False,
    rich_markup_mode=None,
)

logger = logging.getLogger(__name__)

APP_LOGGER_NAME = "confluence_publisher"


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'confluence_publisher' namespace logger so that
    third-party libraries keep their own levels.

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

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(level)

    # Repeated runs in one process replace earlier handlers instead of stacking
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter("%(asctime)s [%(levelname)8s] %(message)s", datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"confluence-publish_{timestamp}.log"

        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt=date_format
        )
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _run_publish(
    metadata_file: str,
    strategy_name: str,
    keep_orphans: bool,
    version_message: Optional[str],
    env_file: Optional[str],
    output: OutputHandler,
) -> ExitCode:
    """Load everything, publish and report.

    Returns:
        ExitCode describing the outcome
    """
    try:
        strategy = PublishingStrategy.from_name(strategy_name)
        metadata = MetadataLoader.load(metadata_file)
        output.info(f"Loaded {len(metadata.pages)} root page(s) from {metadata_file}")

        store = APIWrapper(Authenticator(env_file=env_file))
        listener = ConsolePublisherListener(output)
        publisher = ConfluencePublisher(
            metadata=metadata,
            strategy=strategy,
            store=store,
            listener=listener,
            version_message=version_message,
            delete_orphans=not keep_orphans,
        )
        result = publisher.publish()

    except InvalidCredentialsError as e:
        logger.error(f"Authentication failed: {e}")
        output.error(f"Authentication failed: {e}")
        return ExitCode.AUTH_ERROR

    except APIUnreachableError as e:
        logger.error(f"Network error: {e}")
        output.error(f"Network error: {e}")
        return ExitCode.NETWORK_ERROR

    except PublisherError as e:
        logger.error(f"Publish failed: {e}")
        output.error(f"Publish failed: {e}")
        return ExitCode.GENERAL_ERROR

    summary = listener.summary
    summary.unchanged_count = len(result.pages) - summary.added_count - summary.updated_count
    output.print_summary(summary, result.root_url)
    return ExitCode.SUCCESS


@app.command()
def main_command(
    metadata_file: str = typer.Argument(
        ...,
        help="YAML file describing the space, ancestor and page tree",
        metavar="METADATA",
    ),
    strategy: str = typer.Option(
        PublishingStrategy.APPEND_TO_ANCESTOR.value,
        "--strategy",
        "-s",
        help="append_to_ancestor or replace_ancestor",
    ),
    keep_orphans: bool = typer.Option(
        False,
        "--keep-orphans",
        help="Keep remote pages that have no local counterpart",
    ),
    version_message: Optional[str] = typer.Option(
        None,
        "--version-message",
        "-m",
        help="Message attached to every page version written",
    ),
    env_file: Optional[str] = typer.Option(
        None,
        "--env-file",
        help="Read credentials from this .env file",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity: -v for info, -vv for debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Publish a local page tree to Confluence."""
    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    try:
        exit_code = _run_publish(
            metadata_file=metadata_file,
            strategy_name=strategy,
            keep_orphans=keep_orphans,
            version_message=version_message,
            env_file=env_file,
            output=output,
        )
    except Exception as e:
        logger.exception("Unexpected error during publish")
        output.error(f"Unexpected error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    raise typer.Exit(exit_code)


def main() -> None:
    """Entry point for the confluence-publish console script."""
    app()


if __name__ == "__main__":
    main()
