import sys

import typer
from loguru import logger
from typer_di import TyperDI

from .commands import check, tags
from .version import version_callback


app = TyperDI(help="Validate special triton.* instance tags.")


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show the version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log validation activity to stderr.",
    ),
) -> None:
    if verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("triton_tags")


app.command()(check)
app.command()(tags)


if __name__ == "__main__":
    app()
