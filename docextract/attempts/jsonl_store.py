import json
import os
import threading
from collections.abc import Mapping
from pathlib import Path

from docextract.attempts.base import BaseAttemptStore
from docextract.attempts.exceptions import AttemptLogError


class JsonlAttemptStore(BaseAttemptStore):
    """Appends one JSON object per line to a flat log file.

    Each record is written with a single ``os.write`` on an ``O_APPEND``
    descriptor, so concurrent appends never interleave partial lines.
    """

    _lock = threading.Lock()

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def append(self, record: Mapping[str, object]) -> None:
        try:
            line = json.dumps(record, ensure_ascii=False, allow_nan=False) + "\n"
        except (TypeError, ValueError) as exc:
            raise AttemptLogError(f"Attempt record is not JSON-serializable: {exc}") from exc

        data = line.encode("utf-8")
        try:
            with self._lock:
                fd = os.open(self._path, os.O_WRONLY | os.O_APPEND | os.O_CREAT, 0o644)
                try:
                    written = os.write(fd, data)
                finally:
                    os.close(fd)
        except OSError as exc:
            raise AttemptLogError(f"Failed to append to {self._path}: {exc}") from exc
        if written != len(data):
            raise AttemptLogError(
                f"Short write to {self._path}: {written} of {len(data)} bytes"
            )
