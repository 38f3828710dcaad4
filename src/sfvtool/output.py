"""Report output.

Filenames come from the filesystem and may hold undecodable bytes as
surrogate escapes. Text streams that expose a byte buffer get the
filesystem-encoded bytes, unchanged and without newline translation, so
CR LF manifest lines stay CR LF and names round-trip to disk.
"""

import os
from typing import TextIO


def write_text(stream: TextIO, text: str) -> None:
    """Write text to a stream, through its byte buffer when it has one."""
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(text)
        return

    # Pending text must reach the buffer first to keep the order
    stream.flush()
    buffer.write(os.fsencode(text))
    buffer.flush()


def write_line(stream: TextIO, line: str) -> None:
    write_text(stream, line + "\n")
