import pytest

from translation_overlay.errors import InvalidConfigurationError
from translation_overlay.wrapping import normalize_line_text, wrap_line_wordwise, wrap_text

SAMPLES = [
    "",
    "   ",
    "'Kiyomi': Hello.",
    "a very long singleword",
    "abcdefghijklmnopqrstuvw",
    "short abcdefghijklmnopqrstuvwxyz tail words here",
    "The quick brown fox jumps over the lazy dog near the riverbank at dawn",
    "x" * 61 + " y",
]


def _rebuild(lines):
    text = ""
    for line in lines:
        if line.endswith("-"):
            text += line[:-1]
        else:
            text += line + " "
    return text.split()


def test_short_words_wrap_at_limit():
    assert wrap_line_wordwise("a very long singleword", 10) == ["a very", "long", "singleword"]


def test_overlong_word_is_hyphenated():
    lines = wrap_line_wordwise("abcdefghijklmnopqrstuvw", 10)

    assert lines == ["abcdefghi-", "jklmnopqr-", "stuvw"]
    assert all(len(line) <= 10 for line in lines)


def test_remainder_keeps_accumulating():
    assert wrap_line_wordwise("go abcdefghijk ok", 10) == ["go", "abcdefghi-", "jk ok"]


@pytest.mark.parametrize("max_len", [2, 3, 5, 10, 60])
@pytest.mark.parametrize("text", SAMPLES)
def test_lines_fit_and_words_survive(text, max_len):
    lines = wrap_line_wordwise(text, max_len)

    assert all(0 < len(line) <= max_len for line in lines)
    assert _rebuild(lines) == text.split()


def test_rejects_too_small_limit():
    with pytest.raises(InvalidConfigurationError):
        wrap_line_wordwise("abc", 1)


def test_wrap_text_splits_paragraphs():
    assert wrap_text("USE\nGO!!\n\nLOAD SAVE", 60) == ["USE", "GO!!", "LOAD SAVE"]


def test_normalize_line_text():
    assert normalize_line_text("  Wait… what…  ") == "Wait. what."
