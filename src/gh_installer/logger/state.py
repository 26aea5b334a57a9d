"""Process-wide logging state shared by the logger modules."""

import queue
import threading
from dataclasses import dataclass, field
from logging.handlers import QueueListener


@dataclass
class LoggerState:
    """Mutable logging state; exactly one instance exists per process.

    ``root_initialized`` becomes True once the QueueHandler chain is in
    place and goes back to False on ``clear_logger_state()``.
    """

    lock: threading.Lock = field(default_factory=threading.Lock)
    root_initialized: bool = False
    queue_listener: QueueListener | None = None
    log_queue: queue.Queue | None = None


_STATE = LoggerState()


def get_state() -> LoggerState:
    return _STATE
