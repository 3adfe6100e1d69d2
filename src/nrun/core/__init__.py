"""Detection, shortcut expansion and execution."""
