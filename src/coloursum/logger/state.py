"""Process-wide logging state.

One LoggingState owns the record queue and the listener thread that feeds
the real handlers. setup_logging starts it, and a forced re-setup or
interpreter exit stops it.
"""

from __future__ import annotations

import contextlib
import queue
import threading
from dataclasses import dataclass, field
from logging.handlers import QueueListener
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import logging


@dataclass
class LoggingState:
    """Queue, listener and init flag shared by every coloursum logger."""

    lock: threading.Lock = field(default_factory=threading.Lock)
    root_initialized: bool = False
    queue_listener: QueueListener | None = None
    log_queue: queue.Queue | None = None

    def start(self, *handlers: logging.Handler) -> queue.Queue:
        """Start a listener draining a fresh queue into handlers.

        Returns:
            The queue a QueueHandler should put records on.

        """
        self.log_queue = queue.Queue(-1)
        self.queue_listener = QueueListener(
            self.log_queue, *handlers, respect_handler_level=True
        )
        self.queue_listener.start()
        self.root_initialized = True
        return self.log_queue

    def stop(self) -> None:
        """Handle every queued record, then close the handlers."""
        if self.queue_listener is not None:
            # stop() enqueues a sentinel and joins the listener thread
            self.queue_listener.stop()
            for handler in self.queue_listener.handlers:
                handler.close()
        self.queue_listener = None
        self.log_queue = None
        self.root_initialized = False

    def flush(self) -> None:
        """Wait until queued records are handled and flush the handlers."""
        if self.queue_listener is None or self.log_queue is None:
            return
        # The listener calls task_done() once each record is handled
        self.log_queue.join()
        for handler in self.queue_listener.handlers:
            with contextlib.suppress(OSError, ValueError):
                handler.flush()


_state = LoggingState()


def get_state() -> LoggingState:
    """Return the process-wide logging state."""
    return _state
