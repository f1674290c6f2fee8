from __future__ import annotations

import base64
import errno
import os


def encode_file_to_base64(source_path: str | os.PathLike) -> str:
    """Read ``source_path`` and return its bytes as a base64 string.

    Raises ``FileNotFoundError`` when the path is not an existing file and
    ``OSError`` (chained) when the bytes cannot be read.
    """
    if not os.path.isfile(source_path):
        raise FileNotFoundError(errno.ENOENT, "The specified file was not found.", os.fspath(source_path))

    try:
        with open(source_path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise OSError("An error occurred while reading the file.") from e
    return base64.b64encode(data).decode("ascii")
