"""Error codes and the exception raised for them."""

from __future__ import annotations

from enum import IntEnum

EXIT_FAILURE = 1


class ErrorCode(IntEnum):
    """Reasons the client or the server stops."""

    USAGE = 1
    BAD_PID = 2
    OUT_OF_MEMORY = 3
    CLIENT_SIGNAL = 4
    SERVER_SIGNAL = 5


_MESSAGES = {
    ErrorCode.USAGE: "Expected : ./client [server-PID] [message]",
    ErrorCode.BAD_PID: "Bad PID",
    ErrorCode.OUT_OF_MEMORY: "Bad malloc",
    ErrorCode.CLIENT_SIGNAL: "Bad signal in client",
    ErrorCode.SERVER_SIGNAL: "Bad signal in server",
}


def error_message(code: int) -> str:
    """Return the text shown for an error code; unknown codes have none."""
    try:
        return _MESSAGES[ErrorCode(code)]
    except ValueError:
        return ""


class MinitalkError(Exception):
    """Raised where the program must stop with a failure status."""

    exit_status = EXIT_FAILURE

    def __init__(self, code: int) -> None:
        try:
            self.code: int = ErrorCode(code)
        except ValueError:
            self.code = int(code)
        self.message = error_message(code)
        super().__init__(self.message)