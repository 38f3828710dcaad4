"""Path utilities shared by the scanner, parser and checksum engine."""

import errno
import os
import stat
from pathlib import Path
from typing import Optional, Union

# stat() failures that mean "there is no regular file here"
_MISSING_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR, errno.EBADF, errno.ELOOP})


def stat_regular_file(path: Union[Path, str]) -> Optional[os.stat_result]:
    """
    Stat a path that should be a regular file.

    Returns:
        The stat result, or None when the path does not exist or is not a
        regular file

    Raises:
        OSError: For any other failure, e.g. permission denied on a parent
            directory
    """
    try:
        result = os.stat(path)
    except OSError as e:
        if e.errno in _MISSING_ERRNOS:
            return None
        raise

    return result if stat.S_ISREG(result.st_mode) else None
