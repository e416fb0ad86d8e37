from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from docextract.logging.logger import Log


@contextmanager
def discard_upload(path: Path) -> Generator[Path, None, None]:
    """Remove the uploaded file once the wrapped block exits, however it exits."""
    try:
        yield path
    finally:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            Log.warning(f"Failed to remove upload {path}: {exc}")
