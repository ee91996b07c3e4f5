"""
Poem Viewer - Terminal Session
Raw input mode and blocking key reads on top of prompt_toolkit's input layer
"""

import select
from typing import List, Optional

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding import KeyPress

from core.logger import log_debug


class TerminalError(Exception):
    """Raised when the terminal cannot be put into (or out of) raw mode."""


class TerminalInputClosed(TerminalError):
    """Raised when the input stream is gone, e.g. the terminal was detached."""


class TerminalSession:
    """
    Scoped ownership of the terminal's raw input mode.

    Raw mode is entered once in __enter__ and left once in __exit__, so
    every exit path out of a ``with`` block restores the terminal,
    including exceptions raised by the code inside it.

    Usage:
        with TerminalSession() as terminal:
            keys = terminal.read_keys()
    """

    def __init__(self, term_input: Optional[Input] = None):
        """
        Args:
            term_input: prompt_toolkit input to read from. Defaults to the
                controlling terminal, created when the session is entered.
        """
        self._input = term_input
        self._raw_mode = None

    @property
    def active(self) -> bool:
        """True while raw mode is held."""
        return self._raw_mode is not None

    def __enter__(self) -> "TerminalSession":
        if self.active:
            raise TerminalError("Terminal session is already active")

        if self._input is None:
            try:
                self._input = create_input(always_prefer_tty=True)
            except (OSError, ValueError) as e:
                raise TerminalError(f"No usable terminal for input: {e}") from e

        raw_mode = self._input.raw_mode()
        try:
            raw_mode.__enter__()
        except Exception as e:
            raise TerminalError(f"Could not enable raw mode: {e}") from e

        self._raw_mode = raw_mode
        log_debug("Raw input mode enabled")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        raw_mode, self._raw_mode = self._raw_mode, None
        if raw_mode is None:
            return

        try:
            raw_mode.__exit__(exc_type, exc, tb)
        except Exception as e:
            raise TerminalError(f"Could not restore terminal mode: {e}") from e
        log_debug("Raw input mode restored")

    def read_keys(self) -> List[KeyPress]:
        """
        Block until at least one key press arrives.

        Returns:
            Key presses decoded from the input, in the order they were typed

        Raises:
            TerminalInputClosed: If the input stream has been closed
        """
        if not self.active:
            raise TerminalError("Terminal session is not active")

        while True:
            if self._input.closed:
                raise TerminalInputClosed("Terminal input stream closed")

            select.select([self._input.fileno()], [], [])

            # A lone ESC byte stays buffered in the parser as the possible
            # start of an escape sequence; flushing turns it into the Escape key.
            keys = self._input.read_keys() + self._input.flush_keys()
            if keys:
                return keys
