"""
Tests for the terminal session.

These tests verify that raw mode is taken and given back exactly once,
and that key reads decode arrows and a bare escape correctly.
"""

import unittest
from unittest.mock import MagicMock

from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.keys import Keys

from interface.terminal import TerminalError, TerminalInputClosed, TerminalSession


class TestRawModeScope(unittest.TestCase):
    """Test acquisition and release of raw input mode."""

    def setUp(self):
        self.mock_input = MagicMock()
        self.raw_mode = self.mock_input.raw_mode.return_value

    def test_enter_and_exit_once(self):
        session = TerminalSession(self.mock_input)

        with session:
            self.assertTrue(session.active)
            self.raw_mode.__enter__.assert_called_once()
            self.raw_mode.__exit__.assert_not_called()

        self.assertFalse(session.active)
        self.raw_mode.__exit__.assert_called_once()

    def test_restored_when_body_raises(self):
        session = TerminalSession(self.mock_input)

        with self.assertRaises(RuntimeError):
            with session:
                raise RuntimeError("boom")

        self.raw_mode.__exit__.assert_called_once()
        self.assertFalse(session.active)

    def test_restored_on_keyboard_interrupt(self):
        session = TerminalSession(self.mock_input)

        with self.assertRaises(KeyboardInterrupt):
            with session:
                raise KeyboardInterrupt

        self.raw_mode.__exit__.assert_called_once()

    def test_reentering_active_session_fails(self):
        session = TerminalSession(self.mock_input)

        with session:
            with self.assertRaises(TerminalError):
                session.__enter__()

        self.mock_input.raw_mode.assert_called_once()

    def test_setup_failure_is_terminal_error(self):
        self.raw_mode.__enter__.side_effect = OSError("not a tty")
        session = TerminalSession(self.mock_input)

        with self.assertRaises(TerminalError):
            with session:
                self.fail("body must not run")

        self.assertFalse(session.active)

    def test_read_outside_session_fails(self):
        session = TerminalSession(self.mock_input)

        with self.assertRaises(TerminalError):
            session.read_keys()

    def test_closed_input_raises(self):
        self.mock_input.closed = True
        session = TerminalSession(self.mock_input)

        with session:
            with self.assertRaises(TerminalInputClosed):
                session.read_keys()

        self.raw_mode.__exit__.assert_called_once()


class TestReadKeys(unittest.TestCase):
    """Test key decoding through prompt_toolkit's pipe input."""

    def read(self, text: str):
        with create_pipe_input() as pipe_input:
            pipe_input.send_text(text)
            with TerminalSession(pipe_input) as session:
                return [key_press.key for key_press in session.read_keys()]

    def test_arrow_keys(self):
        self.assertEqual(self.read("\x1b[D\x1b[C"), [Keys.Left, Keys.Right])

    def test_plain_letters(self):
        self.assertEqual(self.read("qQ"), ["q", "Q"])

    def test_bare_escape_is_flushed(self):
        self.assertEqual(self.read("\x1b"), [Keys.Escape])


if __name__ == '__main__':
    unittest.main()
