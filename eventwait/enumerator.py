"""
Watch setup.

Walks each input path, adding an inotify watch for it and, in recursive
mode, for every subdirectory that exists when setup runs. A path that
cannot be stat'd or watched is reported and skipped; a directory whose
contents cannot be listed aborts the whole run.
"""

import logging
import os
import stat
from collections import deque
from typing import List

from eventwait.errors import (EnumerationError, PathUnavailableError,
                              WatchCreationError)
from eventwait.session import WatcherSession

logger = logging.getLogger(__name__)


def list_subdirectories(path: str) -> List[str]:
    """
    Immediate subdirectories of `path`, sorted by name.

    Symlinks are not followed.

    Raises:
        EnumerationError: If the directory or an entry's type cannot be read.
    """
    subdirs = []
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(entry.path)
    except OSError as e:
        raise EnumerationError(path, e.strerror or e) from e
    return sorted(subdirs)


def add_watch(session: WatcherSession, path: str) -> int:
    """
    Add a single watch and register it.

    Raises:
        WatchCreationError: If the kernel refuses the watch.
    """
    try:
        handle = session.open_channel().add_watch(path, session.mask)
    except OSError as e:
        raise WatchCreationError(path, e.strerror or e) from e
    session.registry.register(path, handle)
    logger.debug("Watching %s (wd=%s)", path, handle)
    return handle


def enumerate_and_watch(session: WatcherSession, root_path: str, recursive: bool) -> None:
    """
    Watch `root_path` and, if recursive, every directory beneath it.

    Args:
        session: The session whose channel and registry are used
        root_path: File or directory to watch
        recursive: Whether to descend into subdirectories

    Raises:
        EnumerationError: If a directory cannot be listed.
    """
    # Depth-first, pre-order; children are pushed reversed so they pop sorted.
    pending = deque([root_path])
    while pending:
        path = pending.pop()
        try:
            st = os.stat(path)
        except OSError as e:
            error = PathUnavailableError(path, e.strerror or e)
            logger.warning(str(error))
            session.report(str(error))
            continue

        try:
            add_watch(session, path)
        except WatchCreationError as error:
            logger.warning(str(error))
            session.report(str(error))

        if recursive and stat.S_ISDIR(st.st_mode):
            pending.extend(reversed(list_subdirectories(path)))


def watch_all(session: WatcherSession) -> int:
    """
    Drain the session's pending paths through the enumerator.

    Returns:
        int: Number of watches established.
    """
    while session.pending_paths:
        path = session.pending_paths.popleft()
        enumerate_and_watch(session, path, session.recursive)
    logger.info("Established %d watch(es)", len(session.registry))
    return len(session.registry)
