"""
File Reading Module

Reads text files and classifies read failures so the console layer can
decide how to retry: missing, permission denied, locked by another process,
or otherwise unreadable.
"""

import errno
from pathlib import Path
from typing import Iterable, List, Optional

from .config import get_config
from .errors import FileUnavailableError, FileUnavailableReason
from .logging_config import get_logger, log_action


logger = get_logger(__name__)

# Windows ERROR_SHARING_VIOLATION and ERROR_LOCK_VIOLATION
WINDOWS_LOCK_ERRORS = (32, 33)
POSIX_LOCK_ERRNOS = (errno.EBUSY, errno.ETXTBSY)


def is_file_locked(exc: OSError, markers: Optional[Iterable[str]] = None) -> bool:
    """
    Check whether an OSError means the file is held by another process
    
    Args:
        exc: Error raised while opening or reading the file
        markers: Message fragments identifying a lock; defaults to configuration
    """
    if getattr(exc, "winerror", None) in WINDOWS_LOCK_ERRORS:
        return True
    if exc.errno in POSIX_LOCK_ERRNOS:
        return True
    
    if markers is None:
        markers = get_config().lock_error_markers
    message = str(exc).lower()
    return any(marker.lower() in message for marker in markers)


def classify_os_error(exc: OSError) -> FileUnavailableReason:
    """Map an OSError to the reason reported to the user"""
    if isinstance(exc, FileNotFoundError):
        return FileUnavailableReason.MISSING
    # Windows reports sharing violations as PermissionError
    if is_file_locked(exc):
        return FileUnavailableReason.LOCKED
    if isinstance(exc, PermissionError):
        return FileUnavailableReason.PERMISSION_DENIED
    return FileUnavailableReason.UNREADABLE


def read_lines(path, encoding: Optional[str] = None) -> List[str]:
    """
    Read all lines of a text file
    
    Args:
        path: File path
        encoding: Text encoding; defaults to configuration
        
    Returns:
        Lines without their line terminators
        
    Raises:
        FileUnavailableError: If the file cannot be read
    """
    path = str(path).strip()
    encoding = encoding or get_config().file_encoding
    
    try:
        text = Path(path).read_text(encoding=encoding)
    except OSError as e:
        reason = classify_os_error(e)
        log_action(
            logger, "warning", f"Cannot read {path}: {e}",
            action="read_file", resource=path, extra={"reason": reason.value},
            error=e
        )
        raise FileUnavailableError(str(e), path=path, reason=reason) from e
    except UnicodeDecodeError as e:
        log_action(
            logger, "warning", f"Cannot decode {path} as {encoding}",
            action="read_file", resource=path,
            extra={"reason": FileUnavailableReason.UNREADABLE.value},
            error=e
        )
        raise FileUnavailableError(
            f"File is not valid {encoding} text", path=path,
            reason=FileUnavailableReason.UNREADABLE
        ) from e
    
    lines = text.splitlines()
    log_action(
        logger, "debug", f"Read {len(lines)} lines from {path}",
        action="read_file", resource=path
    )
    return lines
