"""The receiving side: rebuilds messages from SIGUSR1/SIGUSR2 and prints them."""

from __future__ import annotations

import os
import signal
import sys
from typing import TextIO

from minitalk.errors import ErrorCode, MinitalkError
from minitalk.printf import format_string, fprint
from minitalk.protocol import Decoder


class Server:
    """Decodes one bit per signal and acknowledges each to its sender."""

    def __init__(self, output: TextIO) -> None:
        self.output = output
        self._decoder = Decoder()
        self._bit_of = {signal.SIGUSR1: 0, signal.SIGUSR2: 1}

    def handle(self, signum: int, sender_pid: int) -> bytes | None:
        """Process one received signal; return a message once it is complete."""
        try:
            bit = self._bit_of[signum]
        except KeyError:
            raise ValueError(f"unexpected signal {signum}") from None
        message = self._decoder.feed(bit)
        if message is not None:
            self.output.write(message.decode("utf-8", "replace"))
            self.output.flush()
        try:
            os.kill(sender_pid, signal.SIGUSR1)
        except OSError as exc:
            raise MinitalkError(ErrorCode.SERVER_SIGNAL) from exc
        return message

    def serve_forever(self) -> None:
        """Announce the process id, then handle signals until stopped."""
        watched = set(self._bit_of)
        signal.pthread_sigmask(signal.SIG_BLOCK, watched)
        self.output.write(format_string("Server PID : %d\n", os.getpid()))
        self.output.flush()
        while True:
            info = signal.sigwaitinfo(watched)
            self.handle(info.si_signo, info.si_pid)


def main(argv: list[str] | None = None) -> int:
    """Run the server on standard output."""
    server = Server(sys.stdout)
    try:
        server.serve_forever()
    except MinitalkError as exc:
        if exc.message:
            fprint("%s\n", exc.message)
        return exc.exit_status
    return 1


if __name__ == "__main__":
    sys.exit(main())