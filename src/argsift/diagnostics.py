## argsift — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import os
import sys
from pathlib import Path

from .errors import SiftSetupError
from .formatting import write_without_ansi


class NullSink:
    """Sink used when diagnostics are disabled; drops everything."""
    enabled = False

    def debug(self, message: str) -> None:
        pass

    def close(self) -> None:
        pass

    def __enter__(self): return self
    def __exit__(self, *exc_info): self.close()


class DiagnosticSink(NullSink):
    """Writes one diagnostic line per call, either to a file or to stderr but never both."""
    enabled = True

    def __init__(self, path: str | Path | None = None, stream=None, plain: bool = False):
        self.path = Path(path) if path else None
        try:
            self._file = self.path.open('a', encoding='utf-8') if self.path is not None else None
        except OSError as exc:
            raise SiftSetupError(f"Cannot open diagnostic log `{self.path}`: {exc.strerror or exc}.") from None
        self._stream = self._file or stream or sys.stderr
        # Files never get colour codes, terminals only when not plain.
        strip = plain or self._file is not None
        self._write = write_without_ansi(self._stream.write) if strip else self._stream.write

    def debug(self, message: str) -> None:
        self._write(f"\033[90m[argsift]\033[0m {message}\n")
        self._stream.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None


def sink_from_env(verbose: bool = False, log_file: str | None = None, plain: bool = False) -> NullSink:
    verbose = verbose or bool(os.environ.get('ARGSIFT_VERBOSE'))
    log_file = log_file or os.environ.get('ARGSIFT_LOG') or None
    if not verbose:
        return NullSink()
    return DiagnosticSink(path=log_file, plain=plain)
