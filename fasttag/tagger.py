"""
Tagger for fasttag.

``FastTagger`` owns a lexicon and tags sentences or pre-split token lists
with it. It keeps no state between calls, so one instance can serve many
threads at once.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .doc import TaggedWord
from .lexicon import Lexicon, load_lexicon
from .rules import apply_rules, resolve_base_tags

logger = logging.getLogger(__name__)


class FastTagger:
    """Lexicon and rule based part-of-speech tagger."""

    def __init__(self, lexicon: Lexicon) -> None:
        self.lexicon = lexicon

    @classmethod
    def from_text(cls, corpus_text: str) -> "FastTagger":
        """Create a tagger from lexicon corpus text."""
        return cls(Lexicon.from_text(corpus_text))

    @classmethod
    def from_source(cls, source: Union[str, Path]) -> "FastTagger":
        """Create a tagger from a lexicon file path or URL."""
        return cls(load_lexicon(source))

    def word_in_lexicon(self, word: str) -> bool:
        """Check if the provided word exists in the lexicon."""
        return self.lexicon.contains_word(word)

    def tag_sentence(self, sentence: Optional[str]) -> List[TaggedWord]:
        """
        Tag a sentence.

        The sentence is split on single spaces. Runs of spaces are not
        collapsed: each extra space produces an empty token that comes back
        with an empty tag, so positions line up with ``sentence.split(" ")``.
        """
        if not sentence:
            return []
        return self.tag_tokens(sentence.split(" "))

    def tag_tokens(self, words: Optional[Sequence[str]], clean_words: bool = True) -> List[TaggedWord]:
        """
        Tag a list of tokens.

        Args:
            words: Tokens to tag
            clean_words: Strip surrounding punctuation before the lexicon
                lookup (the returned words are never modified)

        Returns:
            One TaggedWord per token, in input order
        """
        if not words:
            return []
        base_tags = resolve_base_tags(words, self.lexicon, clean_words=clean_words)
        final_tags = apply_rules(words, base_tags)
        logger.debug("Tagged %d token(s)", len(final_tags))
        return [TaggedWord(word, tag) for word, tag in zip(words, final_tags)]

    def tag(self, value: Union[str, Sequence[str], None]) -> List[TaggedWord]:
        """Tag a sentence string or a token sequence."""
        if isinstance(value, str):
            return self.tag_sentence(value)
        return self.tag_tokens(value)
