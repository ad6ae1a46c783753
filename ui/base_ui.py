import curses
from typing import Dict, List, Optional

from rich.cells import cell_len
from rich.segment import Segment
from rich.style import Style

from config import colors


class BaseUI:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self._color_pairs: Dict[int, int] = {}

        # Setup curses
        curses.curs_set(0)  # Disable cursor
        self.init_colors()

        # Create status bar window
        self.height, self.width = stdscr.getmaxyx()
        self.status_bar = curses.newwin(1, self.width, self.height-1, 0)
        self.status_bar.bkgd(' ', curses.color_pair(1))

    def init_colors(self):
        """Initialize the status bar color pair"""
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(1, self.fit_color(colors["foreground"]), self.fit_color(colors["status_bar"]))

    @staticmethod
    def fit_color(number: int) -> int:
        """Fall back to the basic palette on terminals without 256 colors"""
        if number < curses.COLORS:
            return number
        return -1

    def color_pair(self, number: int) -> int:
        """Color pair for a foreground color on the default background, allocated on first use"""
        if number not in self._color_pairs:
            pair = len(self._color_pairs) + 2
            if pair >= curses.COLOR_PAIRS:
                return 0
            curses.init_pair(pair, self.fit_color(number), -1)
            self._color_pairs[number] = pair
        return curses.color_pair(self._color_pairs[number])

    def attr_for(self, style: Optional[Style]) -> int:
        """Translate a rich style into curses attributes"""
        if style is None:
            return curses.A_NORMAL
        attr = curses.A_NORMAL
        if style.bold:
            attr |= curses.A_BOLD
        if style.italic and hasattr(curses, "A_ITALIC"):
            attr |= curses.A_ITALIC
        if style.color is not None and style.color.number is not None:
            attr |= self.color_pair(style.color.number)
        return attr

    def draw_lines(self, lines: List[List[Segment]], y: int = 0, x: int = 0):
        """Draw rendered rich lines starting at (y, x)"""
        for row, line in enumerate(lines):
            if y + row >= self.height - 1:
                break
            col = x
            for segment in line:
                if segment.control or not segment.text:
                    continue
                try:
                    self.stdscr.addstr(y + row, col, segment.text, self.attr_for(segment.style))
                except curses.error:
                    # Writing past the right edge, the rest of the line is clipped
                    break
                col += cell_len(segment.text)

    def draw_message(self, message: str):
        """Draw a message in the status bar"""
        self.status_bar.erase()
        message_x = max(0, (self.width - cell_len(message)) // 2)
        try:
            self.status_bar.addstr(0, message_x, message[:max(0, self.width - 1)])
        except curses.error:
            pass
        self.status_bar.refresh()

    def update_dimensions(self):
        """Update terminal dimensions and status bar position"""
        self.height, self.width = self.stdscr.getmaxyx()
        self.status_bar.resize(1, self.width)
        self.status_bar.mvwin(self.height-1, 0)

    def run(self):
        """Run method to be implemented by derived classes"""
        raise NotImplementedError("Subclasses must implement the run method")
