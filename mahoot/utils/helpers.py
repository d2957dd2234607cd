"""
Helper Functions

Contains utility functions used throughout the application.
"""

import math
import threading
import time
from datetime import datetime, timezone
from typing import Dict, Iterable


def is_finite_number(value) -> bool:
    """True for int or float values that are not bool, NaN or infinite."""
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def get_user_identity(request_obj) -> Dict[str, str]:
    """Extract user identity information from request."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'user_agent': str(getattr(request_obj, 'user_agent', '') or '')
    }


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.strftime('%Y-%m-%dT%H:%M:%S.') + f"{now.microsecond // 1000:03d}Z"


class IdGenerator:
    """
    Millisecond timestamp identifiers that never repeat.

    Two ids requested within the same millisecond would collide, so each
    new id is at least one greater than the previous one.
    """

    def __init__(self, existing_ids: Iterable[int] = ()):
        self._lock = threading.Lock()
        self._last = max(existing_ids, default=0)

    def next_id(self) -> int:
        with self._lock:
            candidate = int(time.time() * 1000)
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return candidate
