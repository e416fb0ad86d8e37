import json
import threading
from pathlib import Path

import pytest

from docextract.attempts.exceptions import AttemptLogError
from docextract.attempts.jsonl_store import JsonlAttemptStore


def _read_records(path: Path) -> list[dict[str, object]]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


class TestAppend:
    def test_creates_file_and_writes_one_line(self, tmp_path: Path) -> None:
        store = JsonlAttemptStore(tmp_path / "model_logs.txt")

        store.append({"timestamp": "2026-01-01T00:00:00.000Z", "model": "gpt-4o"})

        assert _read_records(store.path) == [
            {"timestamp": "2026-01-01T00:00:00.000Z", "model": "gpt-4o"}
        ]

    def test_appends_without_touching_existing_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "model_logs.txt"
        path.write_text('{"model": "old"}\n', encoding="utf-8")
        store = JsonlAttemptStore(path)

        store.append({"model": "new"})

        assert _read_records(path) == [{"model": "old"}, {"model": "new"}]

    def test_keeps_unicode_readable(self, tmp_path: Path) -> None:
        store = JsonlAttemptStore(tmp_path / "log")
        store.append({"response": {"name": "Zoë"}})
        assert "Zoë" in store.path.read_text(encoding="utf-8")

    def test_concurrent_appends_do_not_interleave(self, tmp_path: Path) -> None:
        store = JsonlAttemptStore(tmp_path / "log")
        big = "x" * 10_000

        def write(worker: int) -> None:
            for i in range(20):
                store.append({"model": f"m{worker}", "i": i, "response": big})

        threads = [threading.Thread(target=write, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        records = _read_records(store.path)
        assert len(records) == 160
        assert all(record["response"] == big for record in records)


class TestAppendFailures:
    def test_unwritable_location_raises(self, tmp_path: Path) -> None:
        store = JsonlAttemptStore(tmp_path / "missing-dir" / "log")
        with pytest.raises(AttemptLogError, match="Failed to append"):
            store.append({"model": "gpt-4o"})

    def test_unserializable_record_raises(self, tmp_path: Path) -> None:
        store = JsonlAttemptStore(tmp_path / "log")
        with pytest.raises(AttemptLogError, match="not JSON-serializable"):
            store.append({"model": object()})
        assert not store.path.exists()

    def test_nan_value_is_rejected_instead_of_written(self, tmp_path: Path) -> None:
        store = JsonlAttemptStore(tmp_path / "log")
        with pytest.raises(AttemptLogError, match="not JSON-serializable"):
            store.append({"response": {"v": float("nan")}})
        assert not store.path.exists()
