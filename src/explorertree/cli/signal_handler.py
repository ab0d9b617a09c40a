"""Signal handling for the explorertree CLI.

A tree run has two phases that react differently to signals: the mode prompt,
where Ctrl+C dismisses the question, and the output phase, where SIGPIPE or SIGINT
stop writing at the next line. Both are recorded here so the process can exit with
the conventional status code once it has stopped cleanly.
"""

import atexit
import os
import signal
import sys
from contextlib import contextmanager
from threading import Event
from types import FrameType
from typing import Iterator, Optional

EXIT_SIGPIPE = 141
EXIT_SIGINT = 130


class SignalHandler:
    """Records SIGPIPE and SIGINT deliveries for the current run.

    Each handler restores the original disposition after the first delivery, so a
    second Ctrl+C interrupts the process the usual way. While a prompt is waiting
    for input (see prompting()), SIGINT additionally raises KeyboardInterrupt so
    that the blocked read returns control to the caller immediately.

    Attributes:
        sigpipe_received: Set once SIGPIPE has been delivered.
        sigint_received: Set once SIGINT has been delivered.
        original_sigpipe_handler: The SIGPIPE disposition before setup.
        original_sigint_handler: The SIGINT disposition before setup.
    """

    def __init__(self) -> None:
        """Remember the original handlers and start with no signal recorded."""
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(signal.SIGPIPE)
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)
        self._prompting = False

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        """Record that the reader of our output went away.

        Args:
            signum: The signal number.
            frame: The current stack frame.
        """
        self.sigpipe_received.set()
        signal.signal(signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        """Record a Ctrl+C, breaking out of a pending prompt if there is one.

        Args:
            signum: The signal number.
            frame: The current stack frame.

        Raises:
            KeyboardInterrupt: If the signal arrives while a prompt is waiting.
        """
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)
        if self._prompting:
            raise KeyboardInterrupt

    def interrupted(self) -> bool:
        """Whether output should stop because SIGPIPE or SIGINT was received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_status(self) -> Optional[int]:
        """The exit status a received signal calls for, or None if there was none.

        A broken pipe takes precedence, since nothing more can reach the reader.
        """
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None

    @contextmanager
    def prompting(self) -> Iterator[None]:
        """Mark the enclosed block as waiting for user input."""
        self._prompting = True
        try:
            yield
        finally:
            self._prompting = False


signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the SIGPIPE and SIGINT handlers of the singleton."""
    signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Point stdout at the null device after an interruption.

    Registered with atexit so that the interpreter's final flush of stdout cannot
    report a broken pipe after the tree output was cut short.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
