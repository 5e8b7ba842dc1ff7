"""
pls CLI — `pls` command.

  pls                  Current streaming activity
  pls -l [N]           Last N history records (default 25)
"""

import json
import logging
import sys
from typing import NoReturn, Optional

import click
from rich.markup import escape

from pls import styles
from pls.client import Plexpy
from pls.config import resolve_settings
from pls.errors import PlsError
from pls.normalize import Outcome, Render, raise_for_outcome
from pls.plexpy import DEFAULT_HISTORY_LENGTH
from pls.printer import print_data

logger = logging.getLogger(__name__)


def _fail(message: str, color: str) -> NoReturn:
    err = styles.make_console(color, stderr=True)
    err.print(f"[{styles.ERROR}]error:[/{styles.ERROR}] {escape(message)}", soft_wrap=True, highlight=False, emoji=False)
    raise SystemExit(1)


def _fetch(server: Optional[str], key: Optional[str], entries: Optional[int]) -> Outcome:
    settings = resolve_settings(server, key)
    with Plexpy(settings.server, settings.key) as client:
        if entries is not None:
            return client.get_history(entries)
        return client.get_activity()


@click.command()
@click.version_option("0.1.0", prog_name="pls")
@click.option("-s", "--server", default=None, help="URL of the Tautulli (Plexpy) server")
@click.option("-k", "--key", default=None, help="Valid API key for the server")
@click.option("-l", "--list", "entries", type=click.IntRange(min=1), is_flag=False,
              flag_value=DEFAULT_HISTORY_LENGTH, default=None,
              help=f"Get a listing of Plex history (default {DEFAULT_HISTORY_LENGTH} entries)")
@click.option("--json-output", "--json", is_flag=True, help="Print the decoded payload as JSON")
@click.option("--color", type=click.Choice(styles.COLOR_CHOICES), default="auto", show_default=True)
@click.option("-v", "--verbose", is_flag=True, help="Log requests and decoding to stderr")
def main(server: Optional[str], key: Optional[str], entries: Optional[int],
         json_output: bool, color: str, verbose: bool):
    """Show what a Plex server is streaming, or what it has played, via Tautulli."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format="%(levelname)s %(name)s: %(message)s")
    try:
        outcome = raise_for_outcome(_fetch(server, key, entries))
    except PlsError as e:
        logger.debug("%s: %s", e.code, e.details)
        _fail(e.message, color)

    if not isinstance(outcome, Render):
        return
    if json_output:
        click.echo(json.dumps(outcome.payload.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))
        return
    print_data(styles.make_console(color), outcome.payload)


if __name__ == "__main__":
    main()
