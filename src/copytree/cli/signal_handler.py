"""Signal handling for the copytree command line.

SIGINT (Ctrl+C) and SIGPIPE (the reader of our stdout went away, as with ``| head``)
are recorded instead of killing the process, so output can stop cleanly and the exit
code can report what happened. SIGPIPE does not exist on Windows and is only handled
where the platform defines it.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Optional

EXIT_SIGINT = 130
EXIT_SIGPIPE = 141

HAS_SIGPIPE = hasattr(signal, "SIGPIPE")


class SignalHandler:
    """Records SIGPIPE and SIGINT for graceful interruption.

    Each handler restores the original disposition after the first signal, so a second
    Ctrl+C falls through to the default behavior.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received.
        sigint_received: Event that is set when a SIGINT signal is received.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler: Any = signal.getsignal(signal.SIGPIPE) if HAS_SIGPIPE else None
        self.original_sigint_handler: Any = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        signal.signal(signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def interrupted(self) -> bool:
        """Return True if output should stop because of a received signal."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Return the exit code for a received signal, or None if no signal arrived.

        SIGPIPE takes precedence: once the reader is gone nothing else can be reported.
        """
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None

    def reset(self) -> None:
        """Forget received signals."""
        self.sigpipe_received.clear()
        self.sigint_received.clear()


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the handlers for SIGINT and, where it exists, SIGPIPE."""
    if HAS_SIGPIPE:
        signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Point stdout at the null device after an interruption.

    This keeps the interpreter from reporting a second broken pipe while flushing
    stdout at shutdown.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
