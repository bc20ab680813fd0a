"""Allow ``python -m trickster_cli``."""

from trickster_cli.cli import run

run()
