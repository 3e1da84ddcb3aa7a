import pytest

from baybayin.pipeline import BaybayinTranscriber
from baybayin.transliteration.tables import SymbolTable


@pytest.fixture
def transcriber():
    return BaybayinTranscriber()


@pytest.fixture
def synthetic_table():
    return SymbolTable(
        symbols={"a": "A", "i": "I", "b": "B", "t": "T", "k": "K"},
        vowel_marks={"i": "^"},
    )


@pytest.fixture
def sample_words():
    return [
        "bata", "bukas", "aklat", "tuktok", "aalis", "baon", "trabaho",
        "ŋayon", "aŋ", "ŋ", "kumain", "bahay", "isda", "sampu", "a",
    ]
