import logging

import click
from rich.console import Console
from rich.table import Table

from eventwait import config
from eventwait import logger as eventwait_logger
from eventwait.errors import EventWaitError
from eventwait.events import build_mask
from eventwait.session import Mode, open_session
from eventwait.watcher import run_watcher

logger = logging.getLogger(__name__)


def print_watches(session):
    """Print the established watches as a table on stderr."""
    table = Table(title="Established Watches")
    table.add_column("WD", style="cyan", justify="right")
    table.add_column("Path", style="magenta")
    for handle, path in session.registry:
        table.add_row(str(handle), path)
    Console(stderr=True).print(table)


@click.command(name="eventwait")
@click.argument("files", nargs=-1, type=click.Path())
@click.option("--event", "-e", "events", multiple=True, metavar="EVENT",
              help="Listen for specific event(s). If omitted, all events are listened for.")
@click.option("--monitor", "-m", is_flag=True,
              help="Keep listening for events forever. Without this option, "
                   "eventwait will exit after one event is received.")
@click.option("--recursive", "-r", is_flag=True, help="Watch directories recursively.")
@click.option("--quiet", "-q", is_flag=True, help="Do not print the setup banners.")
@click.option("--fromfile", "fromfile", default=None, type=click.Path(),
              help="Read paths to watch from a YAML file or a directory of YAML files.")
@click.option("--config", "-c", "config_path", default=None, help="Path to configuration TOML file.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.option("--list-watches", is_flag=True, help="Print established watches before waiting.")
@click.pass_context
def main(ctx, files, events, monitor, recursive, quiet, fromfile, config_path, debug, list_watches):
    """
    Wait for changes to FILES using inotify.
    """
    try:
        cfg = config.load_config(config_path)
        eventwait_logger.setup_from_config(cfg, debug=debug)
        settings = config.watch_settings(cfg)

        mask = build_mask(events or settings["events"])
        paths = list(files)
        if fromfile:
            paths.extend(config.load_watch_lists(fromfile))
    except EventWaitError as e:
        click.echo(str(e), err=True)
        ctx.exit(1)

    mode = Mode.MONITOR if monitor or settings["monitor"] else Mode.ONE_SHOT
    logger.debug("Watching %d path(s) with mask %#x in %s mode", len(paths), mask, mode.value)

    try:
        with open_session(paths, mask, mode=mode,
                          recursive=recursive or settings["recursive"]) as session:
            run_watcher(session, banners=not quiet,
                        on_ready=print_watches if list_watches else None)
    except EventWaitError as e:
        click.echo(str(e), err=True)
        ctx.exit(1)
    except KeyboardInterrupt:
        ctx.exit(130)


if __name__ == "__main__":
    main()
