import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from operations.session import FlashcardSession
from operations.vocabulary import VocabularyStore, WordCard


class RecordingFetcher:
    """Stands in for ExampleFetcher; records requests instead of calling the API."""

    def __init__(self):
        self.calls = []

    def fetch(self, word, index):
        self.calls.append((word.chinese, index))


@pytest.fixture
def fetcher():
    return RecordingFetcher()


@pytest.fixture
def store():
    return VocabularyStore([
        WordCard("你好", "ni hao", "Hello"),
        WordCard("谢谢", "xie xie", "Thank you"),
    ])


@pytest.fixture
def session(store, fetcher):
    return FlashcardSession(store, fetcher)


