"""Checks run on the source and destination paths before any conversion."""
import errno
import logging
import os
import stat
import tempfile
from enum import Enum
from pathlib import Path

from notes2md.errors import ErrorKind, Notes2MdError

logger = logging.getLogger(__name__)


class SourceType(Enum):
    """Kind of filesystem node a source format is read from."""
    FILE = "file"
    DIRECTORY = "directory"


def _is_permission_error(error: OSError) -> bool:
    return isinstance(error, PermissionError) or error.errno in (errno.EACCES, errno.EPERM)


def verify_dest(dest_dir: Path) -> None:
    """Ensure ``dest_dir`` exists, is a directory and accepts new files."""
    try:
        mode = os.stat(dest_dir).st_mode
    except FileNotFoundError as e:
        raise Notes2MdError(ErrorKind.NOT_FOUND, f"dest_dir: '{dest_dir}' not found") from e

    if not stat.S_ISDIR(mode):
        raise Notes2MdError(
            ErrorKind.INVALID_INPUT, f"dest_dir: '{dest_dir}' must be a directory"
        )

    # os.access() is not reliable for ACLs or root, so create a real file
    try:
        with tempfile.TemporaryFile(dir=dest_dir):
            pass
    except OSError as e:
        if _is_permission_error(e):
            raise Notes2MdError(
                ErrorKind.PERMISSION_DENIED, f"dest_dir: '{dest_dir}' not writable"
            ) from e
        raise

    logger.debug(f"Destination directory {dest_dir} is writable")


def verify_source(source_path: Path, source_type: SourceType) -> None:
    """Ensure ``source_path`` exists, is of ``source_type`` and is readable."""
    try:
        mode = os.stat(source_path).st_mode
    except FileNotFoundError as e:
        raise Notes2MdError(
            ErrorKind.NOT_FOUND, f"source_path: '{source_path}' not found"
        ) from e

    if stat.S_ISDIR(mode):
        if source_type is not SourceType.DIRECTORY:
            raise Notes2MdError(
                ErrorKind.INVALID_INPUT,
                f"source_path: '{source_path}' is a directory but file was required",
            )
        try:
            with os.scandir(source_path):
                pass
        except OSError as e:
            if _is_permission_error(e):
                raise Notes2MdError(
                    ErrorKind.PERMISSION_DENIED,
                    f"source_path: '{source_path}' directory access denied",
                ) from e
            raise
    elif stat.S_ISREG(mode):
        if source_type is not SourceType.FILE:
            raise Notes2MdError(
                ErrorKind.INVALID_INPUT,
                f"source_path: '{source_path}' is a file but directory was required",
            )
        try:
            with open(source_path, "rb"):
                pass
        except OSError as e:
            if _is_permission_error(e):
                raise Notes2MdError(
                    ErrorKind.PERMISSION_DENIED,
                    f"source_path: '{source_path}' file access denied",
                ) from e
            raise
    else:
        raise Notes2MdError(
            ErrorKind.INVALID_INPUT,
            f"source_path: '{source_path}' is not a file or directory",
        )

    logger.debug(f"Source {source_path} verified as {source_type.value}")
