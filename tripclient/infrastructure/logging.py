"""Structured logging: one JSON object per line, secrets redacted."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional

from tripclient.security.redact import redact_sensitive


class StructuredLogger:
    """Emits JSON lines tagged with a trace id; every line passes through redaction."""

    def __init__(
        self,
        trace_id: Optional[str] = None,
        output=None,
        *,
        secrets: tuple[str, ...] = (),
    ):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output or sys.stderr
        self._secrets = tuple(s for s in secrets if s)
        self._timers: dict[str, float] = {}

    def _scrub(self, text: str) -> str:
        return redact_sensitive(text, secrets=self._secrets)

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            line = self._scrub(line)
            self._output.write(line + "\n")
            self._output.flush()
        except Exception as exc:
            # Last-resort fallback to avoid silent logger failures.
            fallback = {
                "event": "logger_internal_error",
                "trace_id": self.trace_id,
                "timestamp": time.time(),
                "error": str(exc),
            }
            sys.stderr.write(json.dumps(fallback, ensure_ascii=False, default=str) + "\n")

    def step_start(self, step: str, **extra: Any) -> None:
        self._timers[step] = time.time()
        self._emit({"event": "step_start", "step": step, **extra})

    def step_end(self, step: str, *, ok: bool = True, **extra: Any) -> None:
        start = self._timers.pop(step, time.time())
        duration_ms = round((time.time() - start) * 1000, 1)
        self._emit({
            "event": "step_end",
            "step": step,
            "ok": ok,
            "duration_ms": duration_ms,
            **extra,
        })

    def rejected(self, step: str, reason: str, **extra: Any) -> None:
        self._emit({"event": "rejected", "step": step, "reason": self._scrub(reason), **extra})

    def error(self, step: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "step": step, "error": self._scrub(error), **extra})

    def summary(self, **extra: Any) -> None:
        self._emit({"event": "summary", **extra})


def get_logger(trace_id: Optional[str] = None, *, secrets: tuple[str, ...] = ()) -> StructuredLogger:
    """Fresh logger per call; a trace id groups the lines of one planning call."""
    return StructuredLogger(trace_id=trace_id, secrets=secrets)


__all__ = ["StructuredLogger", "get_logger"]
