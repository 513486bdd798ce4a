import sys

import typer
from loguru import logger
from typer import Typer

from .commands.build import build
from .commands.config import config
from .commands.deploy import deploy
from .commands.show import show
from .commands.validate import validate
from ..cli.services import output

app = Typer(name="appconfig", no_args_is_help=True, add_completion=False)

_verbose_help = "Print debug logging to stderr"


@app.callback()
def cb(
    stacktrace: bool = typer.Option(False, hidden=True),
    verbose: bool = typer.Option(False, "-v", "--verbose", help=_verbose_help),
):
    if stacktrace:
        output.RAISE_ERRORS = True
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


for command in (
    build,
    config,
    deploy,
    show,
    validate,
):
    app.command()(command)


def main():
    app()
