"""Minimal in-process metrics recorder (not suitable for multi-process aggregation)."""

from __future__ import annotations

from collections import Counter
from threading import Lock
from typing import Dict, Optional


class MetricsRecorder:
    def __init__(self) -> None:
        self._lock = Lock()
        self._requests = 0
        self._success: Counter[str] = Counter()
        self._error: Counter[str] = Counter()
        self._error_kinds: Dict[str, Counter[str]] = {}

    def record_call(self, operation: str, *, error_kind: Optional[str] = None) -> None:
        with self._lock:
            self._requests += 1
            if error_kind is None:
                self._success[operation] += 1
                return
            self._error[operation] += 1
            self._error_kinds.setdefault(operation, Counter())[error_kind] += 1

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "requests": self._requests,
                "success": dict(self._success),
                "error": dict(self._error),
                "error_kinds": {op: dict(kinds) for op, kinds in self._error_kinds.items()},
            }

    def reset(self) -> None:
        with self._lock:
            self._requests = 0
            self._success.clear()
            self._error.clear()
            self._error_kinds.clear()


default_metrics = MetricsRecorder()
