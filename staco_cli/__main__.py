"""Allow ``python -m staco_cli``."""

from staco_cli.cli import run

run()
