"""Command-line entry point for Autoname Cleaner."""

import asyncio
import sys
from typing import Any, Optional

import click
from rich.console import Console
from textual.logging import TextualHandler

from autoname_cleaner import __version__
from autoname_cleaner.config import Settings, get_settings
from autoname_cleaner.context import CleanupContext
from autoname_cleaner.managers import (
    CleanupController,
    CleanupState,
    ContainerDiscovery,
    ContainerRemover,
)
from autoname_cleaner.runtime import RuntimeClient, open_runtime
from autoname_cleaner.ui.app import CleanupApp
from autoname_cleaner.ui.prompt import run_prompt_session
from autoname_cleaner.ui.rendering import (
    CANCELLED_TEXT,
    NO_CANDIDATES_TEXT,
    candidate_table,
    outcome_text,
)
from autoname_cleaner.utils import get_logger, setup_logging
from autoname_cleaner.utils.exceptions import DiscoveryError, StartupError

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_REMOVAL_ERRORS = 3


async def run_session(
    runtime: RuntimeClient,
    settings: Settings,
    console: Console,
    list_only: bool = False,
) -> int:
    """
    Discover candidates, ask for confirmation and remove them.

    Args:
        runtime: Connected runtime client
        settings: Effective settings for this run
        console: Console used for operator-facing output
        list_only: Print the candidates and stop before asking

    Returns:
        Process exit code
    """
    ctx = CleanupContext.create(runtime, settings)

    try:
        candidates = await ContainerDiscovery(ctx).find_candidates()
    except DiscoveryError as e:
        console.print(f"[red]Failed to find auto-named containers:[/red] {e}")
        return EXIT_FAILURE

    if not candidates:
        console.print(NO_CANDIDATES_TEXT)
        return EXIT_OK

    if list_only:
        console.print(f"Found {len(candidates)} auto-named container(s):")
        console.print(candidate_table(candidates, image_width=settings.image_display_width))
        return EXIT_OK

    controller = CleanupController(candidates, ContainerRemover(ctx))

    if settings.ui_mode == "interactive":
        app = CleanupApp(controller, image_width=settings.image_display_width)
        await app.run_async()
        if controller.state is CleanupState.CANCELLED:
            console.print(CANCELLED_TEXT)
        elif controller.outcome is not None:
            console.print(outcome_text(controller.outcome))
    else:
        await run_prompt_session(
            controller, console, image_width=settings.image_display_width
        )

    if controller.outcome is not None and controller.outcome.error is not None:
        return EXIT_REMOVAL_ERRORS
    return EXIT_OK


async def _run(settings: Settings, console: Console, list_only: bool) -> int:
    with open_runtime(settings) as runtime:
        return await run_session(runtime, settings, console, list_only=list_only)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--mode",
    type=click.Choice(["interactive", "prompt"]),
    default=None,
    help="Confirmation front end (default: interactive, or AUTONAME_UI_MODE).",
)
@click.option("--docker-host", default=None, help="Docker daemon URL (default: environment).")
@click.option(
    "--list-only",
    is_flag=True,
    default=False,
    help="Only print the auto-named containers; never remove anything.",
)
@click.option("--no-dictionary", is_flag=True, default=False, help="Match names by shape only.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
)
@click.option("--log-format", type=click.Choice(["text", "json"]), default=None)
@click.version_option(__version__, prog_name="autoname-cleaner")
def main(
    mode: Optional[str],
    docker_host: Optional[str],
    list_only: bool,
    no_dictionary: bool,
    log_level: Optional[str],
    log_format: Optional[str],
) -> None:
    """Remove containers that still carry a randomly generated adjective_surname name."""
    overrides: dict[str, Any] = {}
    if mode:
        overrides["ui_mode"] = mode
    if docker_host:
        overrides["docker_host"] = docker_host
    if no_dictionary:
        overrides["use_name_dictionary"] = False
    if log_level:
        overrides["log_level"] = log_level
    if log_format:
        overrides["log_format"] = log_format
    settings = get_settings().model_copy(update=overrides)

    no_terminal = settings.ui_mode == "interactive" and not sys.stdin.isatty()
    if no_terminal:
        settings = settings.model_copy(update={"ui_mode": "prompt"})

    if settings.ui_mode == "interactive" and not list_only:
        setup_logging(settings.log_level, settings.log_format, handler=TextualHandler())
    else:
        setup_logging(settings.log_level, settings.log_format)

    if no_terminal and not list_only:
        logger.info("Standard input is not a terminal, using prompt mode")

    console = Console()

    try:
        exit_code = asyncio.run(_run(settings, console, list_only))
    except StartupError as e:
        console.print(f"[red]Failed to initialize docker client:[/red] {e}")
        sys.exit(EXIT_FAILURE)
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down")
        console.print(CANCELLED_TEXT)
        sys.exit(EXIT_OK)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
