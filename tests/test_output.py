import json

import pytest

from fasttag.doc import TaggedWord
from fasttag.output import format_sentence, get_output

SENTENCE = [TaggedWord("the", "DT"), TaggedWord("dog", "NN"), TaggedWord("x", "x^")]


def test_brackets():
    assert format_sentence(SENTENCE) == "[the DT]\n[dog NN]\n[x x^]"


def test_slash():
    assert format_sentence(SENTENCE, "slash") == "the/DT dog/NN x/x^"
    assert format_sentence(SENTENCE, "plain-tagged") == "the/DT dog/NN x/x^"


def test_tsv():
    assert format_sentence(SENTENCE, "tsv") == "the\tDT\ndog\tNN\nx\tx^\n"


def test_json():
    data = json.loads(format_sentence(SENTENCE, "json"))
    assert data == [
        {"word": "the", "tag": "DT"},
        {"word": "dog", "tag": "NN"},
        {"word": "x", "tag": "x^"},
    ]


def test_table_includes_descriptions():
    table = format_sentence(SENTENCE, "table")
    assert "Determiner" in table
    assert "Noun, singular or mass" in table
    assert "Unknown word" in table


def test_unknown_format():
    with pytest.raises(ValueError):
        get_output("xml")
