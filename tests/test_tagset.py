from fasttag.tagset import TAG_DESCRIPTIONS, describe_tag, is_unknown_marker, unknown_word_tag


def test_describe_tag():
    assert describe_tag("VBG") == "Verb, gerund or present participle"
    assert describe_tag("?^") == "Unknown word"
    assert describe_tag("") == ""
    assert describe_tag("XYZ") == ""


def test_unknown_marker():
    assert unknown_word_tag("x") == "x^"
    assert is_unknown_marker("x^")
    assert is_unknown_marker("^^")
    assert not is_unknown_marker("^")
    assert not is_unknown_marker("NN")


def test_rule_tags_are_described():
    for tag in ["NN", "NNS", "VB", "VBD", "VBP", "VBN", "VBG", "DT", "CD", "RB", "JJ"]:
        assert tag in TAG_DESCRIPTIONS
