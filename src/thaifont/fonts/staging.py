"""Stage font bytes in a temporary file for the duration of a load attempt."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager, suppress
from pathlib import Path
import tempfile
import time

from thaifont.fonts.constants import DEFAULT_TEMP_PREFIX


def staged_path(
    stem: str, *, prefix: str = DEFAULT_TEMP_PREFIX, directory: Path | None = None
) -> Path:
    """Return a unique temporary path built from ``prefix``, ``stem`` and a timestamp."""
    root = directory or Path(tempfile.gettempdir())
    return root / f"{prefix}_{stem}_{time.time_ns()}.ttf"


@contextmanager
def staged_font_file(
    data: bytes,
    stem: str,
    *,
    prefix: str = DEFAULT_TEMP_PREFIX,
    directory: Path | None = None,
) -> Iterator[Path]:
    """Write ``data`` to a temporary font file and remove it on exit.

    Removal is best-effort: a file that cannot be deleted is left behind
    silently rather than masking the outcome of the load attempt.
    """
    target = staged_path(stem, prefix=prefix, directory=directory)
    while target.exists():
        target = staged_path(stem, prefix=prefix, directory=directory)
    try:
        target.write_bytes(data)
        yield target
    finally:
        with suppress(OSError):
            target.unlink(missing_ok=True)


__all__ = ["staged_font_file", "staged_path"]
