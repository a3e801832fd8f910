"""Exceptions raised while setting up watches or reading events."""


class EventWaitError(Exception):
    """Base class for all eventwait errors."""

    pass


class ConfigurationError(EventWaitError):
    """Raised for an unknown event name or an unusable configuration file."""

    pass


class PathUnavailableError(EventWaitError):
    """Raised when a path to watch cannot be stat'd."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"error when getting metadata of {path}: {reason}")


class WatchCreationError(EventWaitError):
    """Raised when the kernel refuses to add a watch for a path."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"failed to add inotify watch for {path}: {reason}")


class EnumerationError(EventWaitError):
    """Raised when a directory cannot be listed during recursion."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"error when reading directory {path}: {reason}")


class ChannelInitError(EventWaitError):
    """Raised when the inotify instance cannot be created."""

    pass


class ChannelReadError(EventWaitError):
    """Raised when reading from the inotify instance fails."""

    pass


class EmptyInputWarning(EventWaitError):
    """Signals that no paths were given. Not a failure."""

    def __init__(self):
        super().__init__("No files specified to watch!")
