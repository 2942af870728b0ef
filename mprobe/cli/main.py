import logging

import click
import requests

from mprobe import __version__ as about
from mprobe.cli.exit_codes import EXTERNAL_FAILURE, INTERNAL_BUG, USER_ERROR
from mprobe.cli.presenter import CliPresenter
from mprobe.config import load_settings
from mprobe.errors import ConfigurationError
from mprobe.manga_loader import SeriesLoader

# Get a logger for this module.
log = logging.getLogger(__name__)

EPILOG = f"""
Examples:

{click.style('• download every chapter of a series into ./mangas/<series>', fg="green")}

    $ mprobe one-piece

Set MPROBE_DOWNLOAD_ROOT or MPROBE_MAX_DELAY (environment or .env file)
to change the download directory or the maximum pause between requests.
"""


@click.command(
    help=about.__description__,
    epilog=EPILOG,
)
@click.argument("series")
@click.pass_context
def main(ctx: click.Context, series: str):
    """
    Main entry point for the series downloader CLI.

    Parameters:
        ctx (click.Context): Click context.
        series (str): Series identifier, used verbatim in URLs and directory names.
    """
    presenter = CliPresenter()
    presenter.emit_intro(about.__intro__)

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        presenter.emit_error(str(exc))
        ctx.exit(USER_ERROR)

    log.info("Started download")
    loader = SeriesLoader(settings)
    try:
        result = loader.download(series)
    except (requests.RequestException, OSError) as exc:
        log.exception("Failed to download manga")
        presenter.emit_error(f"Download of '{series}' failed: {exc}")
        ctx.exit(EXTERNAL_FAILURE)
    except Exception as exc:
        log.exception("Unexpected error while downloading manga")
        presenter.emit_error(f"Download of '{series}' failed: {exc}")
        ctx.exit(INTERNAL_BUG)

    presenter.emit_run_summary(result)
    log.info("SUCCESS")


if __name__ == "__main__":
    main(prog_name=about.__title__)
