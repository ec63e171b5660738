"""Application data: the inter-thread action channel and the project context."""

from __future__ import annotations

import enum
import queue
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from gisapp.config import APP_FILE_EXT


class GISAction(enum.Enum):
    """Actions passed between application threads."""

    MAP_IMAGE_UPDATED = enum.auto()


class GISChannel:
    """A thread-safe, unbounded, first-in first-out queue of actions."""

    def __init__(self) -> None:
        self._queue: queue.Queue[GISAction] = queue.Queue()

    def send(self, action: GISAction) -> None:
        """Put an action on the channel."""
        if not isinstance(action, GISAction):
            raise TypeError(f"expected a GISAction, got {type(action).__name__}")
        self._queue.put(action)

    def receive(self, timeout: float | None = None) -> GISAction:
        """Take the next action, waiting up to ``timeout`` seconds.

        Raises TimeoutError if nothing arrives in time. With no timeout
        the call waits until an action is sent.
        """
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError("no action received within the timeout") from None

    def __iter__(self) -> Iterator[GISAction]:
        """Yield actions as they arrive, blocking between them."""
        while True:
            yield self.receive()


@dataclass
class ProjectContext:
    """State of the currently open project."""

    project_file: Path | None = None
    map_image_file: Path | None = None


_GLOBAL_CHANNEL = GISChannel()

_PROJECT_CONTEXT = ProjectContext()
_PROJECT_LOCK = threading.Lock()


def get_global_channel() -> GISChannel:
    """Return the application-wide action channel."""
    return _GLOBAL_CHANNEL


def get_global_sender() -> GISChannel:
    """Return the channel end used to send actions."""
    return get_global_channel()


def get_global_receiver() -> GISChannel:
    """Return the channel end used to receive actions."""
    return get_global_channel()


@contextmanager
def get_project_context() -> Iterator[ProjectContext]:
    """Hold exclusive access to the project context for the ``with`` block."""
    with _PROJECT_LOCK:
        yield _PROJECT_CONTEXT


def with_project_extension(path: str | Path) -> Path:
    """Append the project file extension to ``path``."""
    return Path(f"{path}{APP_FILE_EXT}")