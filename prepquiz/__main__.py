"""Allow ``python -m prepquiz``."""

from prepquiz.cli.app import app

app(prog_name="prepquiz")
