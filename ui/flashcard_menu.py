import curses
import logging

from ui.base_ui import BaseUI
from ui.presentation import build_view, render_lines
from operations.session import FlashcardSession, KeyPress, Mode
from utils.keys import key_name

logger = logging.getLogger(__name__)

POLL_INTERVAL_MS = 100


class FlashcardMenu(BaseUI):
    def __init__(self, stdscr, session: FlashcardSession):
        super().__init__(stdscr)
        self.session = session

        # Ctrl+C arrives as a key instead of KeyboardInterrupt
        curses.raw()
        stdscr.keypad(True)
        stdscr.timeout(POLL_INTERVAL_MS)

    def draw(self):
        self.stdscr.erase()
        lines = render_lines(build_view(self.session), max(1, self.width - 1))
        self.draw_lines(lines, y=1, x=0)
        self.stdscr.noutrefresh()
        self.draw_status()
        curses.doupdate()

    def draw_status(self):
        state = self.session.state
        if state.mode is Mode.ADDING:
            self.draw_message("Adding card")
        elif state.loading_example:
            self.draw_message("Fetching example...")
        else:
            self.draw_message(f"{self.session.store.size()} cards")

    def read_key(self):
        """Return the next key name, or None when the poll interval passes without input"""
        try:
            key = self.stdscr.get_wch()
        except curses.error:
            return None
        return key_name(key)

    def run(self):
        """Main loop: draw, read one key, apply queued events"""
        logger.info("Session started with %d cards", self.session.store.size())
        while self.session.running:
            self.update_dimensions()
            self.draw()

            key = self.read_key()
            if key == "resize":
                curses.update_lines_cols()
            elif key is not None:
                self.session.post(KeyPress(key))

            self.session.process_pending()
        logger.info("Session ended with %d cards", self.session.store.size())
