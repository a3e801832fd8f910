"""
Translation between event names and inotify event masks.

Users name events with lowercase tokens (``create``, ``close_write`` ...).
These are combined into the native bitmask passed to ``inotify_add_watch``;
masks read back from the kernel are rendered as flag names.
"""

from typing import Iterable, List

from inotify_simple import flags

from eventwait.errors import ConfigurationError

EVENT_MASKS = {
    "access": flags.ACCESS,
    "modify": flags.MODIFY,
    "attrib": flags.ATTRIB,
    "close_write": flags.CLOSE_WRITE,
    "close_nowrite": flags.CLOSE_NOWRITE,
    "close": flags.CLOSE_WRITE | flags.CLOSE_NOWRITE,
    "open": flags.OPEN,
    "moved_to": flags.MOVED_TO,
    "moved_from": flags.MOVED_FROM,
    "move": flags.MOVED_FROM | flags.MOVED_TO,
    "moved_self": flags.MOVE_SELF,
    "move_self": flags.MOVE_SELF,
    "create": flags.CREATE,
    "delete": flags.DELETE,
    "delete_self": flags.DELETE_SELF,
}

DEFAULT_MASK = (
    flags.ACCESS
    | flags.ATTRIB
    | flags.CLOSE_NOWRITE
    | flags.CLOSE_WRITE
    | flags.CREATE
    | flags.DELETE
    | flags.DELETE_SELF
    | flags.MODIFY
    | flags.MOVED_FROM
    | flags.MOVED_TO
    | flags.MOVE_SELF
    | flags.OPEN
)


def build_mask(names: Iterable[str]) -> int:
    """
    Combine event names into a single inotify mask.

    Args:
        names: Event names as given on the command line or in config.

    Returns:
        int: The OR of every named event, or DEFAULT_MASK if no names are given.

    Raises:
        ConfigurationError: If any name is not a known event.
    """
    mask = 0
    seen = False
    for name in names:
        seen = True
        token = name.strip().lower()
        if token not in EVENT_MASKS:
            raise ConfigurationError(f"unknown event type: {name}")
        mask |= EVENT_MASKS[token]
    if not seen:
        return int(DEFAULT_MASK)
    return int(mask)


def event_names(mask: int) -> List[str]:
    """Names of the flags set in a mask read from the kernel, in bit order."""
    return [flag.name for flag in flags.from_mask(mask)]