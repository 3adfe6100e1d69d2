"""Command-line interface for n."""

import logging
from collections.abc import Sequence
from pathlib import Path

import click
from pydantic import ValidationError

from .config import Settings
from .core.errors import ManagerNotFoundError
from .core.models import PackageManager
from .core.orchestrator import Orchestrator
from .core.reporting import CommandReporter

# Conventional shell exit code for "command not found"
EXIT_NOT_FOUND = 127


def prompt_for_manager(candidates: Sequence[PackageManager]) -> PackageManager:
    """Ask which manager to use. Ctrl-C or EOF raises click.Abort."""
    choice = click.prompt(
        "Which package manager do you want to use?",
        type=click.Choice([manager.value for manager in candidates]),
        err=True,
    )
    return PackageManager(choice)


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": [],
    }
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(args):
    """
    n - Run the right JavaScript package manager.

    Detects npm, yarn, pnpm or bun from the nearest lock file and forwards
    ARGS to it. The first argument may be a shortcut, e.g. `n d` runs the
    dev script and `n a lodash` adds a dependency.
    """
    try:
        settings = Settings()
    except ValidationError as e:
        raise click.UsageError(f"Invalid N_* environment variable:\n{e}") from e

    # Setup logging
    logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(message)s")

    reporter = CommandReporter(quiet=settings.quiet)
    orchestrator = Orchestrator(
        selector=prompt_for_manager,
        reporter=reporter,
        search_depth=settings.search_depth,
    )

    try:
        exit_code = orchestrator.run(Path.cwd(), list(args))
    except ManagerNotFoundError as e:
        reporter.error(str(e))
        raise SystemExit(EXIT_NOT_FOUND)

    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
