"""Signal-aware output of rendered trees for the explorertree CLI.

Trees are written one line at a time so that a broken pipe or Ctrl+C stops the
output at a line boundary instead of part-way through a connector.
"""

import errno
import os
import types
from pathlib import Path
from typing import Iterable, Optional, Type, Union

from explorertree.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes tree text to a file descriptor or a file path.

    A path is opened for writing on construction and closed by close() or by
    leaving the context manager. A file descriptor passed in, such as stdout, is
    never closed.

    Attributes:
        file: The file descriptor or path given.
        fd: The descriptor actually written to.
        lines_written (int): Number of complete lines written so far.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     with SafeWriter(Path(tmp) / "tree.txt") as writer:
        ...         writer.write_tree("proj\\n└─ README.md\\n")
        ...     writer.lines_written
        2
    """

    def __init__(self, file: Union[int, Path, str]):
        """Initialize the writer.

        Args:
            file: A file descriptor, or the path of the file to create.

        Raises:
            TypeError: If file is neither an int nor a path.
        """
        self.file = file
        self.lines_written = 0
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write text as UTF-8, retrying until the whole payload is out.

        Args:
            data: The text to write.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is closed.
            OSError: If another I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode("utf-8")
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write lines one by one, checking for interruption before each.

        Args:
            lines: Lines including their line breaks.

        Raises:
            BrokenPipeError: As soon as a signal was received or the pipe closed.
        """
        for line in lines:
            self.write(line)
            self.lines_written += 1

    def write_tree(self, tree: str) -> None:
        """Write a rendered tree, stopping at a line boundary when interrupted."""
        self.write_lines(tree.splitlines(keepends=True))

    def close(self) -> None:
        """Close the file if this writer opened it.

        The writer counts as closed even when closing fails with a broken pipe,
        which is ignored; other errors propagate.
        """
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer, letting an exception from the block win over a close failure."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
