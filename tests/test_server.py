import io
import os
import signal

import pytest

from minitalk.client import send_message
from minitalk.protocol import encode_bits, iter_signals
from minitalk.server import Server


class _Stop(Exception):
    pass


@pytest.fixture
def restore_handlers():
    saved = {sig: signal.getsignal(sig) for sig in (signal.SIGUSR1, signal.SIGUSR2)}
    yield
    for sig, handler in saved.items():
        signal.signal(sig, handler)


def test_handle_signal_writes_bytes():
    output = io.BytesIO()
    server = Server(output)
    for signum in iter_signals(encode_bits("ok")):
        server.handle_signal(signum, None)
    assert output.getvalue() == b"ok"


def test_partial_byte_writes_nothing():
    output = io.BytesIO()
    server = Server(output)
    for signum in list(iter_signals(encode_bits("x")))[:7]:
        server.handle_signal(signum, None)
    assert output.getvalue() == b""


def test_client_to_server_round_trip():
    output = io.BytesIO()
    server = Server(output)
    message = "Hello, wörld!\n"
    send_message(99, message, delay=0, kill=lambda pid, sig: server.handle_signal(sig, None))
    assert output.getvalue().decode("utf-8") == message


def test_consecutive_messages_concatenate():
    output = io.BytesIO()
    server = Server(output)
    for message in ("ab", "cd"):
        send_message(1, message, delay=0, kill=lambda pid, sig: server.handle_signal(sig, None))
    assert output.getvalue() == b"abcd"


def test_install_sets_handlers(restore_handlers):
    server = Server(io.BytesIO())
    server.install()
    assert signal.getsignal(signal.SIGUSR1) == server.handle_signal
    assert signal.getsignal(signal.SIGUSR2) == server.handle_signal


def test_serve_forever_announces_pid(monkeypatch, restore_handlers):
    def stop():
        raise _Stop

    monkeypatch.setattr(signal, "pause", stop)
    output = io.BytesIO()
    server = Server(output)
    with pytest.raises(_Stop):
        server.serve_forever()
    assert output.getvalue() == f"Server PID: {os.getpid()}\n".encode("ascii")
    assert signal.getsignal(signal.SIGUSR1) == server.handle_signal