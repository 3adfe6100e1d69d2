"""Exceptions raised by n."""


class NError(Exception):
    """Base class for errors n reports to the user."""


class ManagerNotFoundError(NError):
    """The package manager executable could not be started.

    Covers a missing executable as well as one the OS refuses to run.
    """

    def __init__(self, executable: str, cause: OSError):
        self.executable = executable
        self.cause = cause
        super().__init__(f"Could not run '{executable}': {cause}")


class ShortcutTableError(NError):
    """The bundled shortcut table is missing or malformed."""
