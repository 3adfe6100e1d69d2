"""Orchestrator tying detection, expansion and execution together."""

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from .detector import DEFAULT_SEARCH_DEPTH, detect
from .models import FALLBACK_CANDIDATES, PackageManager, ShortcutTable
from .patcher import expand, is_install_command
from .reporting import CommandReporter
from .runner import run_command

logger = logging.getLogger(__name__)

Selector = Callable[[Sequence[PackageManager]], PackageManager]
Runner = Callable[[PackageManager, list[str]], int]


class Orchestrator:
    """Picks a package manager and runs the user's command with it."""

    def __init__(
        self,
        selector: Selector,
        reporter: CommandReporter | None = None,
        runner: Runner = run_command,
        search_depth: int = DEFAULT_SEARCH_DEPTH,
        shortcuts: ShortcutTable | None = None,
    ):
        """
        Initialize orchestrator.

        Args:
            selector: Asks the user to choose among candidates when nothing
                is detected. May raise (e.g. click.Abort) to cancel.
            reporter: Output sink for status lines
            runner: Runs one manager command and returns its exit code
            search_depth: Ancestor directories searched for lock files
            shortcuts: Shortcut table (defaults to the bundled one)
        """
        self.selector = selector
        self.reporter = reporter or CommandReporter()
        self.runner = runner
        self.search_depth = search_depth
        self.shortcuts = shortcuts

    def run(self, cwd: Path, args: list[str]) -> int:
        """
        Run ``args`` with the project's package manager.

        Args:
            cwd: Directory the search starts from
            args: Raw arguments given after ``n``

        Returns:
            Exit code of the last command that ran
        """
        detection = detect(cwd, max_depth=self.search_depth)

        if detection is not None:
            self.reporter.detected(detection)
            manager = detection.manager
            return self._execute(manager, [expand(manager, args, self.shortcuts)])

        self.reporter.not_detected(self.search_depth)
        manager = self.selector(FALLBACK_CANDIDATES)
        logger.info(f"User selected {manager.value}")

        expanded = expand(manager, args, self.shortcuts)
        return self._execute(manager, self.plan_fallback(expanded))

    @staticmethod
    def plan_fallback(expanded: list[str]) -> list[list[str]]:
        """
        Commands to run for a freshly chosen manager.

        Install commands run as-is; anything else is preceded by a plain
        install. With no command at all, only the install runs.
        """
        if is_install_command(expanded):
            return [expanded]
        if not expanded:
            return [["install"]]
        return [["install"], expanded]

    def _execute(self, manager: PackageManager, steps: list[list[str]]) -> int:
        """Run steps in order, stopping at the first failure."""
        exit_code = 0
        for step in steps:
            self.reporter.command(manager, step)
            exit_code = self.runner(manager, step)
            if exit_code != 0:
                logger.warning(
                    f"'{manager.value} {' '.join(step)}' failed with exit code {exit_code}"
                )
                break
        return exit_code
