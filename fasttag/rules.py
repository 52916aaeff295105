"""
Contextual transformation rules for fasttag.

Tagging runs in two steps. First every token gets a base tag from the
lexicon (``resolve_base_tags``). Then ``apply_rules`` walks the tokens left to
right and patches each base tag using suffix cues and the neighbouring token.

The base tags are kept as a fixed snapshot while the rules run: the
determiner rule looks at the *base* tag of the previous token, never at a tag
the rules already rewrote.
"""
from __future__ import annotations

from typing import List, Sequence

from .lexicon import Lexicon
from .normalization import strip_special_characters
from .tagset import CD, DEFAULT_TAG, DT, JJ, NN, NNS, NO_TAG, RB, VB, VBD, VBG, VBN, VBP, unknown_word_tag

# Verb tags a determiner turns into a noun ("the run", "the walk")
_VERBS_AFTER_DETERMINER = frozenset({VBD, VBP, VB})


def resolve_tag(word: str, lexicon: Lexicon, clean_words: bool = True) -> str:
    """Return the lexicon tag for a single token."""
    if not word:
        return NO_TAG
    if clean_words:
        word = strip_special_characters(word)
        if not word:
            return NO_TAG

    candidates = lexicon.lookup(word)
    if candidates is None:
        if len(word) == 1:
            return unknown_word_tag(word)
        return DEFAULT_TAG
    if not candidates:
        # Known word whose lexicon line listed no tags
        return NO_TAG
    return candidates[0]


def resolve_base_tags(words: Sequence[str], lexicon: Lexicon, clean_words: bool = True) -> List[str]:
    """Look up the base tag of every token."""
    return [resolve_tag(word, lexicon, clean_words=clean_words) for word in words]


def _is_number(word: str) -> bool:
    try:
        float(word)
    except (ValueError, OverflowError):
        return False
    return True


def apply_rule_sequence(words: Sequence[str], base_tags: Sequence[str], i: int) -> str:
    """
    Apply the transformation rules to the token at position ``i``.

    Args:
        words: Original tokens (suffix tests use these, not the stripped forms)
        base_tags: Base tags of all tokens, before any rule ran
        i: Position of the token to retag

    Returns:
        The final tag of token ``i``
    """
    word = words[i]
    tag = base_tags[i]

    # rule 1: DT, {VBD | VBP | VB} --> DT, NN
    if i > 0 and base_tags[i - 1] == DT and tag in _VERBS_AFTER_DETERMINER:
        tag = NN

    if tag.startswith("N"):
        # rule 2: a noun that parses as a number is a cardinal number
        if _is_number(word):
            tag = CD
        # rule 3: a noun ending in "ed" is a past participle
        elif word.endswith("ed"):
            tag = VBN

    # rule 4: anything ending in "ly" is an adverb
    if word.endswith("ly"):
        tag = RB
    # rule 5: a common noun ending in "al" is an adjective
    elif tag.startswith("NN") and word.endswith("al"):
        tag = JJ
    # rule 6: a noun after "would" is a verb
    elif tag.startswith("NN") and i > 0 and words[i - 1] == "would":
        tag = VB
    # rule 7: a common noun ending in "s" is plural
    elif tag == NN and word.endswith("s"):
        tag = NNS

    # rule 8: a common noun ending in "ing" is a gerund
    if tag.startswith("NN") and word.endswith("ing"):
        tag = VBG

    return tag


def apply_rules(words: Sequence[str], base_tags: Sequence[str]) -> List[str]:
    """Run the rule pass over a whole token sequence."""
    if len(words) != len(base_tags):
        raise ValueError(f"Got {len(words)} words but {len(base_tags)} base tags")
    snapshot = tuple(base_tags)
    final_tags: List[str] = []
    for i in range(len(words)):
        final_tags.append(apply_rule_sequence(words, snapshot, i))
    return final_tags
