"""
EventWait: wait for filesystem changes using inotify.

Provides a CLI and a small library API for registering inotify watches on
files and directories and printing each change event as it arrives.
"""

__version__ = "0.1.0"
