"""Allow ``python -m pakt``."""

from pakt.main import cli

cli()
