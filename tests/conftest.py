import errno

import pytest
from inotify_simple import Event


class FakeNotifier:
    """In-memory stand-in for an inotify channel."""

    def __init__(self, batches=None, refuse=()):
        self.batches = list(batches or [])
        self.refuse = set(refuse)
        self.watches = []
        self.reads = 0
        self.closed = False
        self._next_wd = 1

    def add_watch(self, path, mask):
        if path in self.refuse:
            raise OSError(errno.EACCES, "Permission denied", path)
        wd = self._next_wd
        self._next_wd += 1
        self.watches.append((path, mask, wd))
        return wd

    def read(self, timeout=None, read_delay=None):
        self.reads += 1
        if not self.batches:
            raise OSError(errno.EBADF, "Bad file descriptor")
        return self.batches.pop(0)

    def close(self):
        self.closed = True


@pytest.fixture
def fake_notifier():
    return FakeNotifier()


@pytest.fixture
def notifier_factory():
    return FakeNotifier


@pytest.fixture
def tree(tmp_path):
    """Directory tree root/{a/, b/file.txt, c/d/}."""
    root = tmp_path / "root"
    (root / "a").mkdir(parents=True)
    (root / "b").mkdir()
    (root / "b" / "file.txt").write_text("content")
    (root / "c" / "d").mkdir(parents=True)
    return root


@pytest.fixture
def make_event():
    def _make_event(wd, mask, name=""):
        return Event(wd=wd, mask=mask, cookie=0, name=name)
    return _make_event
