import pytest

from operations.vocabulary import EXAMPLE_WORDS, VocabularyStore, WordCard


class TestVocabularyStore:

    def test_default_deck_is_seed_words(self):
        store = VocabularyStore()
        assert store.size() == len(EXAMPLE_WORDS) == 10
        assert store.get(0).chinese == "你好"
        assert store.get(9).definition == "Home/Family"

    def test_seed_words_are_not_mutated(self):
        store = VocabularyStore()
        store.set_example(0, "changed")
        assert EXAMPLE_WORDS[0].example == ""
        assert VocabularyStore().get(0).example == ""

    def test_append_keeps_insertion_order(self):
        store = VocabularyStore([])
        store.append(WordCard("水", "shuǐ", "Water"))
        store.append(WordCard("人", "rén", "Person"))
        assert [card.chinese for card in store] == ["水", "人"]
        assert len(store) == 2

    def test_get_out_of_range(self):
        store = VocabularyStore([WordCard("水", "shuǐ", "Water")])
        with pytest.raises(IndexError):
            store.get(1)
        with pytest.raises(IndexError):
            store.get(-1)

    def test_set_example_only_touches_example(self):
        store = VocabularyStore([WordCard("水", "shuǐ", "Water", "old")])
        store.set_example(0, "Wǒ yào shuǐ.")
        card = store.get(0)
        assert card == WordCard("水", "shuǐ", "Water", "Wǒ yào shuǐ.")
