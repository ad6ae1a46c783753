import copy
from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass
class WordCard:
    chinese: str
    pinyin: str
    definition: str
    example: str = ""


EXAMPLE_WORDS = [
    WordCard("你好", "nǐ hǎo", "Hello"),
    WordCard("谢谢", "xiè xiè", "Thank you"),
    WordCard("早", "zǎo", "Morning", "Zǎo, good morning!"),
    WordCard("朋友", "péngyou", "Friend", "Wǒ de péngyou hěn hǎo."),
    WordCard("吃饭", "chī fàn", "Eat meal", "Wǒmen qù chī fàn."),
    WordCard("好", "hǎo", "Good", "Hěn hǎo, that's good!"),
    WordCard("水", "shuǐ", "Water", "Wǒ yào yī bēi shuǐ."),
    WordCard("爱", "ài", "Love", "Wǒ ài nǐ means I love you."),
    WordCard("人", "rén", "Person", "Měi gè rén dōu bù tóng."),
    WordCard("家", "jiā", "Home/Family", "Wǒ de jiā zài Běijīng."),
]


class VocabularyStore:
    """Ordered deck of word cards. Insertion order is browsing order."""

    def __init__(self, cards: Optional[List[WordCard]] = None):
        if cards is None:
            cards = EXAMPLE_WORDS
        self._cards: List[WordCard] = [copy.copy(card) for card in cards]

    def append(self, card: WordCard):
        self._cards.append(card)

    def get(self, index: int) -> WordCard:
        if not 0 <= index < len(self._cards):
            raise IndexError(f"card index {index} out of range for deck of {len(self._cards)}")
        return self._cards[index]

    def set_example(self, index: int, text: str):
        self.get(index).example = text

    def size(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[WordCard]:
        return iter(self._cards)
