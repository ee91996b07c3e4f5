"""
Poem Viewer - Viewer Loop
Full-screen display of one poem at a time with arrow-key navigation
"""

from enum import Enum
from typing import Iterable, Optional, Sequence

from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys
from rich.console import Console
from rich.control import Control
from rich.segment import ControlType, Segment
from rich.text import Text

import config
from core.documents import Document
from core.logger import log_debug
from interface.terminal import TerminalSession

# Erase saved lines (CSI 3 J). rich has no ControlType for it.
PURGE_SCROLLBACK = "\x1b[3J"


class KeyAction(Enum):
    """What a recognized key press asks the viewer to do."""
    QUIT = "quit"
    PREVIOUS = "previous"
    NEXT = "next"


_KEY_ACTIONS = {
    "q": KeyAction.QUIT,
    "Q": KeyAction.QUIT,
    Keys.Escape: KeyAction.QUIT,
    Keys.Left: KeyAction.PREVIOUS,
    Keys.Right: KeyAction.NEXT,
}


def classify_key(key_press: KeyPress) -> Optional[KeyAction]:
    """Map a key press to a viewer action, or None for keys the viewer ignores."""
    return _KEY_ACTIONS.get(key_press.key)


def purge_scrollback() -> Control:
    """Control that drops the terminal's scrollback buffer."""
    control = Control()
    control.segment = Segment(PURGE_SCROLLBACK, None, [(ControlType.CLEAR,)])
    return control


class DocumentViewer:
    """
    Owns the poem collection and the cursor into it.

    The collection is fixed for the viewer's lifetime. Only the cursor
    moves, and it wraps around at both ends.
    """

    def __init__(self, documents: Sequence[Document], console: Optional[Console] = None):
        self.documents = tuple(documents)
        self.index = 0
        self.console = console or Console(highlight=False)
        self._running = False

    @property
    def current(self) -> Optional[Document]:
        """The document under the cursor, or None when there are none."""
        if not self.documents:
            return None
        return self.documents[self.index]

    @property
    def running(self) -> bool:
        """True while the viewer loop holds the terminal."""
        return self._running

    def next_document(self) -> None:
        """Move to the next document, wrapping from the last to the first."""
        if self.documents:
            self.index = (self.index + 1) % len(self.documents)

    def previous_document(self) -> None:
        """Move to the previous document, wrapping from the first to the last."""
        if self.documents:
            self.index = (self.index - 1) % len(self.documents)

    def status_line(self) -> str:
        """Title and position of the current document, e.g. ' ODE (2/5)'."""
        document = self.current
        if document is None:
            return ""
        return f" {document.title.upper()} ({self.index + 1}/{len(self.documents)})"

    def clear_screen(self) -> None:
        """Wipe the screen and scrollback and put the cursor top-left."""
        self.console.control(Control.clear(), purge_scrollback(), Control.home())

    def render(self) -> None:
        """
        Redraw the whole screen for the current document.

        Everything is buffered inside the console context and written in
        one go when it exits, then flushed.
        """
        with self.console:
            self.clear_screen()

            document = self.current
            if document is None:
                self.console.print(config.EMPTY_MESSAGE, markup=False)
                return

            self.console.print(Text(document.content, style=config.BODY_STYLE))
            self.console.print()

            for line in (
                config.FOOTER_RULE,
                config.HELP_HINT,
                self.status_line(),
                config.FOOTER_RULE,
            ):
                self.console.print(Text(line, style=config.CHROME_STYLE))

    def handle_key(self, key_press: KeyPress) -> bool:
        """
        Apply one key press.

        Returns:
            False once the viewer should stop, True otherwise
        """
        action = classify_key(key_press)

        if action is KeyAction.QUIT:
            log_debug("Quit requested")
            return False

        if action is KeyAction.PREVIOUS:
            self.previous_document()
            self.render()
        elif action is KeyAction.NEXT:
            self.next_document()
            self.render()

        return True

    def handle_keys(self, key_presses: Iterable[KeyPress]) -> bool:
        """Apply key presses in order, ignoring anything typed after a quit."""
        for key_press in key_presses:
            if not self.handle_key(key_press):
                return False
        return True

    def run(self, terminal: Optional[TerminalSession] = None) -> None:
        """
        Show the viewer until the user quits.

        Raw input mode is held for the whole loop and released on every
        way out of it, including errors raised while reading input.

        Args:
            terminal: Session to read keys from (defaults to the real terminal)
        """
        terminal = terminal or TerminalSession()
        log_debug(f"Viewer starting with {len(self.documents)} document(s)")

        with terminal:
            self._running = True
            try:
                self.render()
                while self.handle_keys(terminal.read_keys()):
                    pass
                self.clear_screen()
            finally:
                self._running = False

        log_debug("Viewer stopped")
