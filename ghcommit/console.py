from __future__ import annotations

import sys
from typing import TextIO


class Console:
    """Tagged console output, same shape as ``print(f"[INFO] ...")``.

    Purely diagnostic. Nothing reads back what was written here.
    """

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None):
        self._out = out
        self._err = err

    def _write(self, tag: str, text: str, stream: TextIO | None, default: TextIO) -> None:
        print(f"[{tag}] {text}", file=stream or default, flush=True)

    def info(self, text: str) -> None:
        self._write("INFO", text, self._out, sys.stdout)

    def success(self, text: str) -> None:
        self._write("OK", text, self._out, sys.stdout)

    def warn(self, text: str) -> None:
        self._write("WARN", text, self._out, sys.stdout)

    def error(self, text: str, exc: BaseException | None = None) -> None:
        if exc is not None:
            text = f"{text} {type(exc).__name__}: {exc}"
        self._write("ERROR", text, self._err, sys.stderr)
