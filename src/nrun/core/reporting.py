"""Console output for n."""

from rich.console import Console
from rich.markup import escape

from .models import Detection, PackageManager
from .runner import build_command


class CommandReporter:
    """Human-readable status lines using rich.

    Everything goes to stderr so the package manager's own stdout stays
    clean for piping.
    """

    def __init__(self, console: Console | None = None, quiet: bool = False):
        """Initialize reporter with optional console."""
        self.console = console or Console(stderr=True)
        self.quiet = quiet

    def detected(self, detection: Detection) -> None:
        """Announce which manager was picked and why."""
        if self.quiet:
            return
        self.console.print(
            f"Using [bold cyan]{detection.manager.value}[/] "
            f"[dim]({escape(detection.lock_file.name)})[/]"
        )

    def not_detected(self, depth: int) -> None:
        """Explain that the fallback prompt is coming.

        Shown even when quiet: the prompt that follows would make no sense
        without it.
        """
        self.console.print(
            f"No lock file found in this directory or {depth} above it.",
            style="yellow",
        )

    def command(self, manager: PackageManager, args: list[str]) -> None:
        """Echo a command before it runs."""
        if self.quiet:
            return
        line = escape(" ".join(build_command(manager, args)))
        self.console.print(f"[bold]$[/] {line}", highlight=False, soft_wrap=True)

    def error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"Error: {escape(message)}", style="bold red", soft_wrap=True)
