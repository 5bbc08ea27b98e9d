"""The sending side: transmits a message to a server one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
from contextlib import contextmanager
from typing import Iterator

from minitalk.errors import ErrorCode, MinitalkError
from minitalk.printf import fprint
from minitalk.protocol import encode_message
from minitalk.textutil import atoi

_SIGNAL_FOR_BIT = {0: signal.SIGUSR1, 1: signal.SIGUSR2}


def parse_args(argv: list[str]) -> tuple[int, str]:
    """Check the arguments (server PID and message) and return them."""
    if len(argv) != 2:
        raise MinitalkError(ErrorCode.USAGE)
    pid_text, message = argv
    if not all(ch in "0123456789" for ch in pid_text):
        raise MinitalkError(ErrorCode.BAD_PID)
    pid = atoi(pid_text)
    if pid <= 0:
        raise MinitalkError(ErrorCode.BAD_PID)
    return pid, message


@contextmanager
def _acknowledgements_blocked() -> Iterator[None]:
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, {signal.SIGUSR1})
    try:
        yield
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def send_message(pid: int, message: str | bytes) -> int:
    """Send message to pid, waiting for an acknowledgement after every bit.

    Returns the number of signals sent.
    """
    if isinstance(message, str):
        message = os.fsencode(message)
    sent = 0
    with _acknowledgements_blocked():
        for bit in encode_message(message):
            try:
                os.kill(pid, _SIGNAL_FOR_BIT[bit])
            except OSError as exc:
                raise MinitalkError(ErrorCode.CLIENT_SIGNAL) from exc
            sent += 1
            signal.sigwait({signal.SIGUSR1})
    return sent


def main(argv: list[str] | None = None) -> int:
    """Send the message given on the command line to the given server."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        pid, message = parse_args(argv)
        send_message(pid, message)
    except MinitalkError as exc:
        if exc.message:
            fprint("%s\n", exc.message)
        return exc.exit_status
    return 0


if __name__ == "__main__":
    sys.exit(main())