"""
Event loop for EventWait.

Reads batches of inotify events, decodes each one against the watch
registry and emits one line per event. In one-shot mode the loop ends
right after the first event, even if the batch holds more; in monitor
mode it blocks for the next batch until the process is terminated.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from eventwait import enumerator
from eventwait.errors import ChannelReadError, EmptyInputWarning
from eventwait.events import event_names
from eventwait.registry import WatchRegistry
from eventwait.session import WatcherSession

logger = logging.getLogger(__name__)

SETUP_BANNER = "Setting up watches."
READY_BANNER = "Watches established."


class LoopState(Enum):
    IDLE = "idle"
    WATCHING = "watching"
    TERMINATED_ONE_SHOT = "terminated-one-shot"
    TERMINATED_ERROR = "terminated-error"


@dataclass
class EventRecord:
    """One decoded inotify event."""

    source_path: str
    kinds: List[str] = field(default_factory=list)
    child_name: str = ""

    def format_line(self) -> str:
        return f"{self.source_path}\t{','.join(self.kinds)} {self.child_name}"


def decode(registry: WatchRegistry, event) -> EventRecord:
    """
    Turn a raw event into an EventRecord.

    An event for a descriptor missing from the registry decodes with an
    empty path.
    """
    name = event.name or ""
    if isinstance(name, bytes):
        name = name.decode(errors="replace")
    return EventRecord(
        source_path=registry.resolve(event.wd),
        kinds=event_names(event.mask),
        child_name=name,
    )


class EventLoop:
    """
    Blocking read/decode/print cycle over a session's inotify channel.

    Attributes:
        session: The session being watched
        state: Current LoopState
        emitted: Number of events emitted so far
    """

    def __init__(self, session: WatcherSession):
        self.session = session
        self.state = LoopState.IDLE
        self.emitted = 0

    def start(self) -> None:
        self.state = LoopState.WATCHING
        logger.debug("Event loop watching in %s mode", self.session.mode.value)

    def step(self) -> LoopState:
        """
        Read one batch and emit its events.

        Returns:
            LoopState: The state after handling the batch.

        Raises:
            ChannelReadError: If the read fails.
        """
        if self.state is LoopState.IDLE:
            self.start()
        if self.state is not LoopState.WATCHING:
            return self.state

        try:
            batch = self.session.open_channel().read()
        except OSError as e:
            self.state = LoopState.TERMINATED_ERROR
            logger.error("Failed to read inotify events: %s", e)
            raise ChannelReadError(f"failed to read inotify event: {e}") from e

        logger.debug("Read batch of %d event(s)", len(batch))
        for event in batch:
            record = decode(self.session.registry, event)
            self.session.emit(record.format_line())
            self.emitted += 1
            if not self.session.monitor:
                self.state = LoopState.TERMINATED_ONE_SHOT
                break
        return self.state

    def run(self) -> LoopState:
        """Step until a terminal state is reached."""
        self.start()
        while self.state is LoopState.WATCHING:
            self.step()
        return self.state


def run_watcher(
    session: WatcherSession,
    banners: bool = True,
    on_ready: Optional[Callable[[WatcherSession], None]] = None,
) -> LoopState:
    """
    Set up every pending watch, then run the event loop.

    Args:
        session: A freshly opened session
        banners: Whether to emit the setup progress lines
        on_ready: Called with the session once all watches are established

    Returns:
        LoopState: The terminal state, or IDLE when there was nothing to watch.

    Raises:
        ChannelInitError: If the inotify instance cannot be created.
        EnumerationError: If a directory cannot be listed during setup.
        ChannelReadError: If reading events fails.
    """
    if banners:
        session.emit(SETUP_BANNER)
    if not session.pending_paths:
        notice = EmptyInputWarning()
        logger.info(str(notice))
        session.emit(str(notice))
        return LoopState.IDLE

    session.open_channel()
    enumerator.watch_all(session)
    if banners:
        session.emit(READY_BANNER)
    if on_ready is not None:
        on_ready(session)

    return EventLoop(session).run()
