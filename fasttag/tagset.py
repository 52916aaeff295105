"""Central definitions for the fasttag tagset."""

from __future__ import annotations

from typing import Dict

NN = "NN"
NNS = "NNS"
VB = "VB"
VBD = "VBD"
VBP = "VBP"
VBN = "VBN"
VBG = "VBG"
DT = "DT"
CD = "CD"
RB = "RB"
JJ = "JJ"

# Default tag for multi-character words missing from the lexicon
DEFAULT_TAG = NN

# Appended to single-character words missing from the lexicon ("x" -> "x^")
UNKNOWN_MARKER = "^"

# Placeholder for empty tokens and words with no recorded tag
NO_TAG = ""

TAG_DESCRIPTIONS: Dict[str, str] = {
    "CC": "Coordinating conjunction",
    CD: "Cardinal number",
    DT: "Determiner",
    "EX": "Existential there",
    "FW": "Foreign word",
    "IN": "Preposition or subordinating conjunction",
    JJ: "Adjective",
    "JJR": "Adjective, comparative",
    "JJS": "Adjective, superlative",
    "LS": "List item marker",
    "MD": "Modal",
    NN: "Noun, singular or mass",
    NNS: "Noun, plural",
    "NNP": "Proper noun, singular",
    "NNPS": "Proper noun, plural",
    "PDT": "Predeterminer",
    "POS": "Possessive ending",
    "PRP": "Personal pronoun",
    "PRP$": "Possessive pronoun",
    RB: "Adverb",
    "RBR": "Adverb, comparative",
    "RBS": "Adverb, superlative",
    "RP": "Particle",
    "SYM": "Symbol",
    "TO": "to",
    "UH": "Interjection",
    VB: "Verb, base form",
    VBD: "Verb, past tense",
    VBG: "Verb, gerund or present participle",
    VBN: "Verb, past participle",
    VBP: "Verb, non-3rd person singular present",
    "VBZ": "Verb, 3rd person singular present",
    "WDT": "Wh-determiner",
    "WP": "Wh-pronoun",
    "WP$": "Possessive wh-pronoun",
    "WRB": "Wh-adverb",
}


def unknown_word_tag(word: str) -> str:
    """Return the marker pseudo-tag for an unknown single-character word."""
    return word + UNKNOWN_MARKER


def is_unknown_marker(tag: str) -> bool:
    return len(tag) > 1 and tag.endswith(UNKNOWN_MARKER)


def describe_tag(tag: str) -> str:
    """Human-readable description of ``tag`` ("" when the tag is not known)."""
    if tag in TAG_DESCRIPTIONS:
        return TAG_DESCRIPTIONS[tag]
    if is_unknown_marker(tag):
        return "Unknown word"
    return ""
