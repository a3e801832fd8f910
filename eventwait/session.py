"""
Per-run watcher state.

A WatcherSession owns everything a single run needs: the inotify channel,
the registry of established watches, the event mask, the input paths that
have not been processed yet and the termination mode. It is passed
explicitly to the enumerator and the event loop.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Deque, Iterable, Optional

import click
from inotify_simple import INotify

from eventwait.errors import ChannelInitError
from eventwait.registry import WatchRegistry

logger = logging.getLogger(__name__)


class Mode(Enum):
    """When the event loop stops."""

    ONE_SHOT = "one-shot"
    MONITOR = "monitor"


def _report(message: str) -> None:
    click.echo(message, err=True)


@dataclass
class WatcherSession:
    """
    State for one watcher run.

    Attributes:
        mask: Event mask applied to every watch
        notifier: inotify channel exposing add_watch() and read(); opened by
            open_channel() when not supplied
        mode: Termination mode of the event loop
        recursive: Whether directories are enumerated recursively
        pending_paths: Input paths not yet handed to the enumerator
        registry: Established watches
        emit: Receives one formatted line per event
        report: Receives per-path error messages
    """

    mask: int
    notifier: Optional[Any] = None
    mode: Mode = Mode.ONE_SHOT
    recursive: bool = False
    pending_paths: Deque[str] = field(default_factory=deque)
    registry: WatchRegistry = field(default_factory=WatchRegistry)
    emit: Callable[[str], None] = click.echo
    report: Callable[[str], None] = _report

    @property
    def monitor(self) -> bool:
        return self.mode is Mode.MONITOR

    def open_channel(self):
        """
        Return the inotify channel, creating it on first use.

        Raises:
            ChannelInitError: If the inotify instance cannot be created.
        """
        if self.notifier is None:
            try:
                self.notifier = INotify()
            except OSError as e:
                raise ChannelInitError(f"failed to initialize inotify: {e}") from e
            logger.debug("Opened inotify channel on fd %s", self.notifier.fileno())
        return self.notifier

    def close(self) -> None:
        """Release the inotify channel and, with it, every watch."""
        close = getattr(self.notifier, "close", None)
        if close is not None:
            close()
            logger.debug("Closed inotify channel")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def open_session(
    paths: Iterable[str],
    mask: int,
    mode: Mode = Mode.ONE_SHOT,
    recursive: bool = False,
    notifier: Optional[Any] = None,
    **kwargs,
) -> WatcherSession:
    """
    Create a session for `paths`.

    Without an explicit notifier the inotify channel is opened later, by
    WatcherSession.open_channel().
    """
    return WatcherSession(
        notifier=notifier,
        mask=mask,
        mode=mode,
        recursive=recursive,
        pending_paths=deque(paths),
        **kwargs,
    )
