"""Process-unique fortune identifiers."""

import threading
from datetime import datetime

from .time import epoch_millis


class FortuneIdGenerator:
    """
    Millisecond-timestamp ids that never repeat within the process.

    Two fortunes generated in the same millisecond (or after the clock
    steps backwards) get the last id plus one.
    """

    def __init__(self):
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self, timestamp: datetime) -> str:
        with self._lock:
            candidate = epoch_millis(timestamp)
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return str(candidate)
