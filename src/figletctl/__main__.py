"""Allow running figletctl with ``python -m figletctl``."""

from figletctl.cli import cli

if __name__ == "__main__":
    cli()
