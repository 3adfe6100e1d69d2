"""Package manager detection from lock files."""

import logging
from pathlib import Path

from .models import Detection, PackageManager

logger = logging.getLogger(__name__)

# Ancestors searched above the starting directory
DEFAULT_SEARCH_DEPTH = 5


def find_lock_file(directory: Path) -> Detection | None:
    """
    Check a single directory for a known lock file.

    Managers are tried in declaration order, so when several lock files
    share a directory the first declared manager wins.

    Args:
        directory: Directory to inspect (not searched recursively)

    Returns:
        Detection for the first lock file found, or None
    """
    for manager in PackageManager:
        for lock_name in manager.lock_files:
            candidate = directory / lock_name
            if candidate.is_file():
                return Detection(manager=manager, lock_file=candidate)
    return None


def detect(start_dir: Path, max_depth: int = DEFAULT_SEARCH_DEPTH) -> Detection | None:
    """
    Find the package manager used by the project containing ``start_dir``.

    Checks ``start_dir`` and then up to ``max_depth`` ancestors. The
    closest directory with a lock file wins.

    Args:
        start_dir: Directory to start from (usually the working directory)
        max_depth: Number of parent directories to climb

    Returns:
        Detection for the closest lock file, or None if none was found
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")

    directory = Path(start_dir).resolve()
    for _ in range(max_depth + 1):
        logger.debug(f"Looking for lock files in {directory}")
        detection = find_lock_file(directory)
        if detection is not None:
            logger.info(
                f"Detected {detection.manager.value} from {detection.lock_file}"
            )
            return detection

        if directory.parent == directory:
            break  # filesystem root
        directory = directory.parent

    logger.info(f"No lock file found within {max_depth} level(s) of {start_dir}")
    return None
