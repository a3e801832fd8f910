"""Mapping between inotify watch descriptors and the paths they watch."""

from typing import Dict, Iterator, Optional, Tuple


class WatchRegistry:
    """
    Bidirectional association between watch descriptors and paths.

    Entries are only added while watches are being set up; the event loop
    reads from it afterwards. Not safe for concurrent mutation.
    """

    def __init__(self):
        self._paths: Dict[int, str] = {}
        self._handles: Dict[str, int] = {}

    def register(self, path: str, handle: int) -> None:
        """
        Record that `handle` watches `path`.

        The kernel hands back an existing descriptor when the same inode is
        watched twice, in which case the newer path replaces the older one.
        """
        previous = self._paths.get(handle)
        if previous is not None and self._handles.get(previous) == handle:
            del self._handles[previous]
        self._paths[handle] = path
        self._handles[path] = handle

    def resolve(self, handle: int) -> str:
        """Path watched by `handle`, or an empty string for an unknown handle."""
        return self._paths.get(handle, "")

    def handle_for(self, path: str) -> Optional[int]:
        return self._handles.get(path)

    def __contains__(self, path: str) -> bool:
        return path in self._handles

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return iter(self._paths.items())
