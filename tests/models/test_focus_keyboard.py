"""Unit tests for KeyboardHandler.

All terminal / OS-level calls are mocked so tests run in any CI environment
without requiring a real TTY.
"""

from __future__ import annotations

import termios
from unittest.mock import MagicMock

import pytest

from pomodoro_cli.models.focus.keyboard import KeyboardHandler

READY = ([0], [], [])
IDLE = ([], [], [])


def _make_keyboard_handler(mocker, old_settings=None):
    """Create a KeyboardHandler with all terminal calls patched."""
    stream = MagicMock()
    stream.fileno.return_value = 0
    mocker.patch("termios.tcgetattr", return_value=old_settings or ["saved"])
    mocker.patch("tty.setcbreak")
    return KeyboardHandler(stream)


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------


class TestKeyboardHandlerSetup:
    def test_init_stores_fd(self, mocker):
        handler = _make_keyboard_handler(mocker)
        assert handler.fd == 0

    def test_init_saves_old_settings(self, mocker):
        sentinel = ["saved_settings"]
        handler = _make_keyboard_handler(mocker, old_settings=sentinel)
        assert handler.old_settings == sentinel

    def test_setup_calls_setcbreak(self, mocker):
        stream = MagicMock()
        stream.fileno.return_value = 0
        mocker.patch("termios.tcgetattr", return_value=["settings"])
        mock_setcbreak = mocker.patch("tty.setcbreak")

        KeyboardHandler(stream)

        mock_setcbreak.assert_called_once_with(0)

    def test_setup_tolerates_non_tty(self, mocker):
        stream = MagicMock()
        stream.fileno.return_value = 0
        mocker.patch("termios.tcgetattr", side_effect=termios.error("not a tty"))
        mocker.patch("tty.setcbreak")

        handler = KeyboardHandler(stream)

        assert handler.old_settings is None


# ---------------------------------------------------------------------------
# wait_for_key
# ---------------------------------------------------------------------------


class TestWaitForKey:
    def test_returns_none_when_no_input(self, mocker):
        handler = _make_keyboard_handler(mocker)
        mock_select = mocker.patch("select.select", return_value=IDLE)

        assert handler.wait_for_key(1.0) is None
        mock_select.assert_called_once_with([0], [], [], 1.0)

    def test_returns_lowercase_key(self, mocker):
        handler = _make_keyboard_handler(mocker)
        mocker.patch("select.select", return_value=READY)
        mocker.patch("os.read", return_value=b"P")

        assert handler.wait_for_key(1.0) == "p"

    @pytest.mark.parametrize(
        ("raw", "name"),
        [(b" ", "space"), (b"\x03", "ctrl+c"), (b"q", "q"), (b"X", "x")],
    )
    def test_names_special_keys(self, mocker, raw, name):
        handler = _make_keyboard_handler(mocker)
        mocker.patch("select.select", side_effect=[READY, IDLE])
        mocker.patch("os.read", return_value=raw)

        assert handler.wait_for_key(1.0) == name

    def test_lone_escape_is_reported(self, mocker):
        handler = _make_keyboard_handler(mocker)
        mocker.patch("select.select", side_effect=[READY, IDLE])
        mocker.patch("os.read", return_value=b"\x1b")

        assert handler.wait_for_key(1.0) == "escape"

    def test_escape_sequences_are_swallowed(self, mocker):
        """Arrow keys send ESC [ A; they must not read as a lone Esc."""
        handler = _make_keyboard_handler(mocker)
        mocker.patch("select.select", side_effect=[READY, READY, READY, IDLE])
        mock_read = mocker.patch("os.read", side_effect=[b"\x1b", b"[", b"A"])

        assert handler.wait_for_key(1.0) is None
        assert mock_read.call_count == 3

    def test_end_of_input_raises_eof(self, mocker):
        handler = _make_keyboard_handler(mocker)
        mocker.patch("select.select", return_value=READY)
        mocker.patch("os.read", return_value=b"")

        with pytest.raises(EOFError):
            handler.wait_for_key(1.0)


# ---------------------------------------------------------------------------
# stop
# ---------------------------------------------------------------------------


class TestKeyboardHandlerStop:
    def test_stop_restores_settings(self, mocker):
        mock_setattr = mocker.patch("termios.tcsetattr")
        handler = _make_keyboard_handler(mocker, old_settings=["saved"])

        handler.stop()

        mock_setattr.assert_called_once_with(0, termios.TCSADRAIN, ["saved"])

    def test_stop_twice_restores_once(self, mocker):
        mock_setattr = mocker.patch("termios.tcsetattr")
        handler = _make_keyboard_handler(mocker)

        handler.stop()
        handler.stop()

        mock_setattr.assert_called_once()
        assert handler.old_settings is None

    def test_stop_does_nothing_when_no_old_settings(self, mocker):
        mock_setattr = mocker.patch("termios.tcsetattr")
        stream = MagicMock()
        stream.fileno.return_value = 0
        mocker.patch("termios.tcgetattr", side_effect=termios.error("not a tty"))
        mocker.patch("tty.setcbreak")

        KeyboardHandler(stream).stop()

        mock_setattr.assert_not_called()

    def test_stop_handles_error_in_tcsetattr(self, mocker):
        mocker.patch("termios.tcsetattr", side_effect=termios.error("gone"))
        handler = _make_keyboard_handler(mocker)

        handler.stop()  # must not raise
