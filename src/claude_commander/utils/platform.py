"""Cross-platform file locking for Windows and POSIX systems.

Uses fcntl.flock() on POSIX and msvcrt.locking() on Windows. The lock is
advisory: it serializes claude-commander processes rewriting settings.json,
not other programs that edit the file without taking it.
"""

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Final

logger = logging.getLogger(__name__)

# Platform detection
IS_WINDOWS: Final[bool] = sys.platform == "win32"
IS_POSIX: Final[bool] = os.name == "posix"


def acquire_file_lock(file_handle: IO[Any], blocking: bool = False) -> bool:
    """Acquire an exclusive lock on a file.

    Args:
        file_handle: Open file handle to lock.
        blocking: If True, block until lock is acquired. If False, fail immediately
                  if lock is not available.

    Returns:
        True if lock was acquired, False if non-blocking and lock unavailable.

    Raises:
        OSError: If blocking=True and lock cannot be acquired, or other I/O errors.
    """
    if IS_WINDOWS:
        import msvcrt

        try:
            lock_mode = msvcrt.LK_LOCK if blocking else msvcrt.LK_NBLCK  # type: ignore[attr-defined]
            file_handle.seek(0)
            msvcrt.locking(file_handle.fileno(), lock_mode, 1)  # type: ignore[attr-defined]
            return True
        except OSError:
            if not blocking:
                return False
            raise
    else:
        import fcntl

        try:
            flags = fcntl.LOCK_EX
            if not blocking:
                flags |= fcntl.LOCK_NB
            fcntl.flock(file_handle, flags)
            return True
        except OSError:
            if not blocking:
                return False
            raise


def release_file_lock(file_handle: IO[Any]) -> None:
    """Release a file lock.

    Args:
        file_handle: File handle that was previously locked.

    Note:
        This is a no-op if the file was not locked. Always safe to call.
    """
    if IS_WINDOWS:
        import msvcrt

        try:
            file_handle.seek(0)
            msvcrt.locking(file_handle.fileno(), msvcrt.LK_UNLCK, 1)  # type: ignore[attr-defined]
        except OSError as e:
            logger.debug(f"Failed to release Windows file lock: {e}")
    else:
        import fcntl

        try:
            fcntl.flock(file_handle, fcntl.LOCK_UN)
        except OSError as e:
            logger.debug(f"Failed to release POSIX file lock: {e}")


@contextmanager
def exclusive_lock(lock_path: Path) -> Iterator[None]:
    """Hold a blocking exclusive lock on ``lock_path`` for the duration of the block.

    The lock file is created if missing and left in place afterwards.

    Raises:
        OSError: If the lock file cannot be opened or locked.
    """
    with open(lock_path, "a+") as handle:
        acquire_file_lock(handle, blocking=True)
        try:
            yield
        finally:
            release_file_lock(handle)
