"""Spawning the package manager process."""

import logging
import shutil
import signal
import subprocess
import threading
from contextlib import contextmanager

from .errors import ManagerNotFoundError
from .models import PackageManager

logger = logging.getLogger(__name__)


def build_command(manager: PackageManager, args: list[str]) -> list[str]:
    """Full argv for running ``args`` with ``manager``."""
    return [manager.executable, *args]


def exit_status(returncode: int) -> int:
    """Map a death by signal N (returncode -N) to the shell's 128 + N."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def _let_child_handle_interrupt(signum, frame):
    pass


@contextmanager
def interrupts_deferred_to_child():
    """
    Keep Ctrl-C from tearing n down while a child runs.

    The terminal delivers SIGINT to the whole process group, so the child
    gets it and decides how to exit; n just keeps waiting. A no-op handler
    is installed rather than SIG_IGN so the child starts with the default
    disposition.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    previous = signal.signal(signal.SIGINT, _let_child_handle_interrupt)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def run_command(manager: PackageManager, args: list[str]) -> int:
    """
    Run the package manager and wait for it to finish.

    The child inherits stdin, stdout and stderr, so interactive manager
    prompts keep working.

    Args:
        manager: Package manager to run
        args: Arguments after the executable name

    Returns:
        Exit status of the child process (128 + N if killed by signal N)

    Raises:
        ManagerNotFoundError: If the executable can't be started
    """
    command = build_command(manager, args)
    logger.info(f"Running: {' '.join(command)}")

    # Resolves npm.cmd and friends on Windows
    executable = shutil.which(manager.executable) or manager.executable

    with interrupts_deferred_to_child():
        try:
            process = subprocess.Popen([executable, *args])
        except OSError as e:
            raise ManagerNotFoundError(manager.executable, e) from e
        returncode = exit_status(process.wait())

    if returncode != 0:
        logger.info(f"{manager.executable} exited with code {returncode}")
    return returncode
