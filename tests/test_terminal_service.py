from __future__ import annotations

import io
import os
import termios
import threading
from types import SimpleNamespace

import pytest

from termdeck.services import terminal_service
from termdeck.services.terminal_service import PAGE_DOWN, PAGE_UP, raw_mode, read_command, type_out


class TestReadCommand:
    def test_single_key(self):
        stream = io.StringIO("nq")
        assert read_command(stream) == "n"
        assert read_command(stream) == "q"

    @pytest.mark.parametrize("seq", [PAGE_UP, PAGE_DOWN])
    def test_page_keys_are_four_bytes(self, seq):
        stream = io.StringIO(seq + "x")
        assert read_command(stream) == seq
        assert read_command(stream) == "x"

    def test_other_escape_sequences_eat_three_more(self):
        # Arrow up is only 3 bytes; the next key gets swallowed with it.
        stream = io.StringIO("\x1b[An")
        assert read_command(stream) == "\x1b[An"
        assert read_command(stream) == ""

    def test_end_of_input(self):
        assert read_command(io.StringIO("")) == ""


class TestRawMode:
    def test_non_tty_untouched(self, monkeypatch):
        def boom(*_a):
            raise AssertionError("termios must not be used")

        monkeypatch.setattr(terminal_service.termios, "tcgetattr", boom)
        with raw_mode(io.StringIO()):
            pass

    def test_settings_restored_on_error(self, monkeypatch):
        calls = []
        monkeypatch.setattr(terminal_service.termios, "tcgetattr", lambda fd: ["saved", fd])
        monkeypatch.setattr(terminal_service.tty, "setraw", lambda fd, when: calls.append(("raw", fd, when)))
        monkeypatch.setattr(
            terminal_service.termios, "tcsetattr", lambda fd, when, attrs: calls.append(("restore", fd, attrs))
        )
        fake_tty = SimpleNamespace(isatty=lambda: True, fileno=lambda: 7)

        with pytest.raises(RuntimeError):
            with raw_mode(fake_tty):
                raise RuntimeError("boom")

        assert calls == [("raw", 7, termios.TCSANOW), ("restore", 7, ["saved", 7])]

    def test_real_pty_restored(self, pty_stdin):
        _, stream = pty_stdin
        before = termios.tcgetattr(stream.fileno())
        with raw_mode(stream):
            assert termios.tcgetattr(stream.fileno()) != before
        assert termios.tcgetattr(stream.fileno()) == before

    def test_keys_typed_ahead_are_kept(self, pty_stdin):
        master, stream = pty_stdin
        os.write(master, b"nn")
        got = []
        reader = threading.Thread(target=lambda: got.append(read_command(stream)), daemon=True)
        reader.start()
        reader.join(timeout=2)
        assert got == ["n"]


class TestTypeOut:
    def test_writes_every_character_with_delay(self, monkeypatch):
        sleeps = []
        monkeypatch.setattr(terminal_service.time, "sleep", sleeps.append)
        out = io.StringIO()
        type_out("abc", out, delay=0.01)
        assert out.getvalue() == "abc"
        assert sleeps == [0.01, 0.01, 0.01]

    def test_zero_delay_never_sleeps(self, monkeypatch):
        monkeypatch.setattr(terminal_service.time, "sleep", lambda _s: pytest.fail("slept"))
        out = io.StringIO()
        type_out("abc", out, delay=0)
        assert out.getvalue() == "abc"


def test_viewport_read_each_time(monkeypatch):
    sizes = iter([os.terminal_size((80, 24)), os.terminal_size((100, 40))])
    monkeypatch.setattr(terminal_service.shutil, "get_terminal_size", lambda: next(sizes))
    assert terminal_service.viewport() == terminal_service.Viewport(rows=24, cols=80)
    assert terminal_service.viewport() == terminal_service.Viewport(rows=40, cols=100)
