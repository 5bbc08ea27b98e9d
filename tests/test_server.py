import io
import os
import signal
from types import SimpleNamespace
from unittest import mock

import pytest

from minitalk.errors import ErrorCode, MinitalkError
from minitalk.protocol import encode_message
from minitalk.server import Server, main

SIGNAL_OF = {0: signal.SIGUSR1, 1: signal.SIGUSR2}


def _signals(text):
    return [SIGNAL_OF[bit] for bit in encode_message(text)]


def test_handle_prints_message_and_acknowledges():
    out = io.StringIO()
    server = Server(out)
    with mock.patch("minitalk.server.os.kill") as kill:
        results = [server.handle(signum, 4242) for signum in _signals("hi")]
    assert out.getvalue() == "hi"
    assert results[-1] == b"hi"
    assert all(result is None for result in results[:-1])
    assert kill.call_count == len(results)
    assert all(call.args == (4242, signal.SIGUSR1) for call in kill.call_args_list)


def test_handle_two_messages_in_sequence():
    out = io.StringIO()
    server = Server(out)
    with mock.patch("minitalk.server.os.kill"):
        for signum in _signals("one") + _signals("two"):
            server.handle(signum, 1)
    assert out.getvalue() == "onetwo"


def test_handle_unicode_message():
    out = io.StringIO()
    server = Server(out)
    with mock.patch("minitalk.server.os.kill"):
        for signum in _signals("héllo ✓"):
            server.handle(signum, 1)
    assert out.getvalue() == "héllo ✓"


def test_handle_rejects_other_signals():
    server = Server(io.StringIO())
    with mock.patch("minitalk.server.os.kill"):
        with pytest.raises(ValueError):
            server.handle(signal.SIGTERM, 1)


def test_failed_acknowledgement_raises():
    server = Server(io.StringIO())
    with mock.patch("minitalk.server.os.kill", side_effect=ProcessLookupError):
        with pytest.raises(MinitalkError) as info:
            server.handle(signal.SIGUSR1, 999999)
    assert info.value.code == ErrorCode.SERVER_SIGNAL


def test_serve_forever_announces_pid_and_decodes():
    out = io.StringIO()
    server = Server(out)
    events = [SimpleNamespace(si_signo=s, si_pid=77) for s in _signals("ok")]
    with mock.patch("minitalk.server.signal.pthread_sigmask"), \
            mock.patch("minitalk.server.signal.sigwaitinfo", side_effect=events), \
            mock.patch("minitalk.server.os.kill") as kill:
        with pytest.raises(StopIteration):
            server.serve_forever()
    assert out.getvalue() == f"Server PID : {os.getpid()}\nok"
    assert kill.call_count == len(events)


def test_main_reports_signal_failure(capsys):
    event = SimpleNamespace(si_signo=signal.SIGUSR2, si_pid=123)
    with mock.patch("minitalk.server.signal.pthread_sigmask"), \
            mock.patch("minitalk.server.signal.sigwaitinfo", return_value=event), \
            mock.patch("minitalk.server.os.kill", side_effect=PermissionError):
        status = main()
    assert status == 1
    assert capsys.readouterr().out.endswith("Bad signal in server\n")