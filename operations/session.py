import logging
import queue
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from operations.example_fetcher import FetchResult
from operations.form_buffer import FormBuffer
from operations.vocabulary import VocabularyStore, WordCard

logger = logging.getLogger(__name__)

QUIT_KEYS = ("q", "ctrl+c")
NEXT_KEYS = ("right", "l")
PREVIOUS_KEYS = ("left", "h")
TOGGLE_KEYS = (" ", "enter")
ADD_KEYS = ("a",)
CANCEL_KEYS = ("esc", "ctrl+c")


class Mode(Enum):
    BROWSING = "browsing"
    ADDING = "adding"


@dataclass
class SessionState:
    mode: Mode = Mode.BROWSING
    current_index: int = 0
    show_details: bool = False
    loading_example: bool = False


@dataclass
class KeyPress:
    key: str


Event = Union[KeyPress, FetchResult]


class FlashcardSession:
    """Owns the deck, the add card form and the session state.

    Key presses and fetch results are posted to ``events`` and applied
    one at a time by ``process_pending`` on the thread that owns the
    session. Background fetches only ever post, never mutate.
    """

    def __init__(self, store: VocabularyStore, fetcher, form: Optional[FormBuffer] = None):
        self.store = store
        self.fetcher = fetcher
        self.form = form if form is not None else FormBuffer()
        self.state = SessionState()
        self.events: "queue.Queue[Event]" = queue.Queue()
        self.running = True

    def post(self, event: Event):
        self.events.put(event)

    def process_pending(self) -> int:
        """Apply every queued event in arrival order. Returns how many ran."""
        handled = 0
        while True:
            try:
                event = self.events.get_nowait()
            except queue.Empty:
                return handled
            self.dispatch(event)
            handled += 1

    def dispatch(self, event: Event):
        if isinstance(event, FetchResult):
            self.apply_result(event)
        elif isinstance(event, KeyPress):
            self.handle_key(event.key)
        else:
            raise TypeError(f"unsupported event: {event!r}")

    def current_card(self) -> Optional[WordCard]:
        if self.store.size() == 0:
            return None
        return self.store.get(self.state.current_index)

    def handle_key(self, key: str):
        if self.state.mode is Mode.ADDING:
            self._handle_adding_key(key)
        else:
            self._handle_browsing_key(key)

    def _handle_adding_key(self, key: str):
        if key in CANCEL_KEYS:
            self.state.mode = Mode.BROWSING
        elif key == "tab":
            self.form.advance_focus(1)
        elif key == "shift+tab":
            self.form.advance_focus(-1)
        elif key == "enter":
            self.save_card()
        elif key == "backspace":
            self.form.backspace()
        elif len(key) == 1 and key.isprintable():
            self.form.insert(key)

    def _handle_browsing_key(self, key: str):
        if key in QUIT_KEYS:
            self.running = False
        elif key in ADD_KEYS:
            self.state.mode = Mode.ADDING
            self.form.focus(0)
        elif self.store.size() == 0:
            return
        elif key in NEXT_KEYS:
            self.move(1)
        elif key in PREVIOUS_KEYS:
            self.move(-1)
        elif key in TOGGLE_KEYS:
            self.toggle_details()

    def move(self, step: int):
        size = self.store.size()
        self.state.current_index = (self.state.current_index + step + size) % size
        self.state.show_details = False
        self.state.loading_example = False

    def toggle_details(self):
        if self.state.show_details:
            # An outstanding fetch is not cancelled, its result still lands.
            self.state.show_details = False
            self.state.loading_example = False
            return

        index = self.state.current_index
        self.state.show_details = True
        self.state.loading_example = True
        self.fetcher.fetch(self.store.get(index), index)

    def save_card(self) -> bool:
        if not self.form.is_complete():
            return False
        card = self.form.to_card()
        self.store.append(card)
        self.state.mode = Mode.BROWSING
        self.state.current_index = self.store.size() - 1
        self.state.show_details = False
        self.state.loading_example = False
        self.form.reset()
        logger.info("Added card %s (%s)", card.chinese, card.pinyin)
        return True

    def apply_result(self, result: FetchResult):
        self.state.loading_example = False
        if result.error:
            logger.info("Example fetch for card %d failed: %s", result.index, result.error)
            self.store.set_example(result.index, f"Error: {result.error}")
        else:
            self.store.set_example(result.index, result.example)
