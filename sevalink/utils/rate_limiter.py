"""
In-memory sliding window rate limiter
"""

import time
import threading
from collections import defaultdict
from typing import Dict, List


class RateLimiter:
    """In-memory rate limiter with thread safety"""

    def __init__(self, max_requests: int = 10, window_seconds: int = 60):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.requests: Dict[str, List[float]] = defaultdict(list)
        self.lock = threading.RLock()

    def _prune(self, key: str, now: float) -> List[float]:
        self.requests[key] = [
            req_time for req_time in self.requests[key]
            if now - req_time < self.window_seconds
        ]
        return self.requests[key]

    def check_rate_limit(self, key: str) -> bool:
        """
        Check if request is within rate limit, recording it when allowed
        """
        with self.lock:
            now = time.time()
            recent = self._prune(key, now)

            if len(recent) >= self.max_requests:
                return False

            recent.append(now)
            return True

    def get_reset_time(self, key: str) -> float:
        """Get time until rate limit resets (in seconds)"""
        with self.lock:
            now = time.time()
            recent = self._prune(key, now)
            if not recent:
                return 0
            return max(0, min(recent) + self.window_seconds - now)
