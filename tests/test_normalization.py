import pytest

from fasttag.normalization import strip_special_characters


@pytest.mark.parametrize(
    "word, expected",
    [
        ("dog,", "dog"),
        ("(quickly)", "quickly"),
        ('"Hello!"', "Hello"),
        ("...3.5%", "3.5"),
        ("well-known", "well-known"),
        ("don't.", "don't"),
        ("--x--", "x"),
        ("¿qué?", "qué"),
        ("«Москва»", "Москва"),
        ("x²", "x"),
        ("½cup", "cup"),
        ("ⅫX", "X"),
        ("٣٤!", "٣٤"),
    ],
)
def test_strips_surrounding_punctuation(word, expected):
    assert strip_special_characters(word) == expected


@pytest.mark.parametrize("word", ["", ".", "a", "?", "-"])
def test_single_characters_unchanged(word):
    assert strip_special_characters(word) == word


@pytest.mark.parametrize("word", ["...", "?!", "--", "#$%", "²½"])
def test_no_alphanumeric_returns_original(word):
    assert strip_special_characters(word) == word


def test_idempotent_on_stripped_words():
    for word in ["dog", "well-known", "A1", "3.5"]:
        once = strip_special_characters(word)
        assert once == word
        assert strip_special_characters(once) == once
