"""Allow running n as ``python -m nrun``."""

from .cli import main

if __name__ == "__main__":
    main(prog_name="n")
