from typing import List, Optional

from config import char_limit
from operations.vocabulary import WordCard

FIELD_COUNT = 4
CHINESE, PINYIN, DEFINITION, EXAMPLE = range(FIELD_COUNT)
REQUIRED_FIELDS = (CHINESE, PINYIN, DEFINITION)


class FormBuffer:
    """Text buffers of the add card form.

    Focus is a single index rather than a flag per buffer, so at most one
    buffer can ever be focused. ``focus_index`` is None while the form is
    not being edited.
    """

    def __init__(self, limit: int = char_limit):
        self.limit = limit
        self.values: List[str] = [""] * FIELD_COUNT
        self.focus_index: Optional[int] = None

    def focus(self, index: int):
        if 0 <= index < FIELD_COUNT:
            self.focus_index = index

    def blur(self, index: int):
        if self.focus_index == index:
            self.focus_index = None

    def blur_all(self):
        self.focus_index = None

    def is_focused(self, index: int) -> bool:
        return self.focus_index == index

    def advance_focus(self, direction: int):
        current = self.focus_index if self.focus_index is not None else 0
        self.focus_index = (current + direction + FIELD_COUNT) % FIELD_COUNT

    def value(self, index: int) -> str:
        return self.values[index]

    def set_value(self, index: int, text: str):
        self.values[index] = text[:self.limit]

    def insert(self, text: str):
        if self.focus_index is None:
            return
        self.set_value(self.focus_index, self.values[self.focus_index] + text)

    def backspace(self):
        if self.focus_index is None:
            return
        self.values[self.focus_index] = self.values[self.focus_index][:-1]

    def reset(self):
        self.values = [""] * FIELD_COUNT
        self.focus_index = 0

    def is_complete(self) -> bool:
        return all(self.values[i] != "" for i in REQUIRED_FIELDS)

    def to_card(self) -> WordCard:
        return WordCard(
            chinese=self.values[CHINESE],
            pinyin=self.values[PINYIN],
            definition=self.values[DEFINITION],
            example=self.values[EXAMPLE],
        )
