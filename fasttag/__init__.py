"""
fasttag: deterministic part-of-speech tagger.

Tags come from a word -> tags lexicon and are then corrected by a fixed
sequence of contextual transformation rules.
"""

__version__ = "1.0.0"

from fasttag.config import FastTagConfig
from fasttag.doc import TaggedWord
from fasttag.lexicon import Lexicon, LexiconLoadError, load_lexicon
from fasttag.normalization import strip_special_characters
from fasttag.tagger import FastTagger

__all__ = [
    'FastTagConfig',
    'FastTagger',
    'Lexicon',
    'LexiconLoadError',
    'TaggedWord',
    'load_lexicon',
    'strip_special_characters',
    '__version__',
]
