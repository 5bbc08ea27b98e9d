import pytest

from minitalk.errors import ErrorCode, MinitalkError, error_message


@pytest.mark.parametrize(
    "code, text",
    [
        (ErrorCode.USAGE, "Expected : ./client [server-PID] [message]"),
        (ErrorCode.BAD_PID, "Bad PID"),
        (ErrorCode.OUT_OF_MEMORY, "Bad malloc"),
        (ErrorCode.CLIENT_SIGNAL, "Bad signal in client"),
        (ErrorCode.SERVER_SIGNAL, "Bad signal in server"),
    ],
)
def test_messages(code, text):
    assert error_message(code) == text


def test_plain_int_accepted():
    assert error_message(2) == error_message(ErrorCode.BAD_PID)


def test_unknown_code_has_empty_message():
    assert error_message(99) == ""


def test_exception_carries_code_and_message():
    err = MinitalkError(ErrorCode.CLIENT_SIGNAL)
    assert err.code is ErrorCode.CLIENT_SIGNAL
    assert str(err) == "Bad signal in client"
    assert err.message == "Bad signal in client"
    assert err.exit_status == 1


def test_exception_with_unknown_code():
    err = MinitalkError(42)
    assert err.code == 42
    assert err.message == ""