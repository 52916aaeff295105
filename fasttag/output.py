"""Formatters for tagged sentences."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from tabulate import tabulate

from .doc import TaggedWord
from .tagset import describe_tag

Sentence = Sequence[TaggedWord]


def format_brackets(sentence: Sentence) -> str:
    """One ``[word tag]`` line per token."""
    return "\n".join(str(tagged) for tagged in sentence)


def format_slash(sentence: Sentence) -> str:
    """``word/TAG`` pairs on a single line."""
    return " ".join(f"{tagged.word}/{tagged.tag}" for tagged in sentence)


def format_tsv(sentence: Sentence) -> str:
    lines = [f"{tagged.word}\t{tagged.tag}" for tagged in sentence]
    # Blank line between sentences, as in CoNLL-style files
    lines.append("")
    return "\n".join(lines)


def format_json(sentence: Sentence) -> str:
    return json.dumps([tagged.to_dict() for tagged in sentence], ensure_ascii=False)


def format_table(sentence: Sentence) -> str:
    rows = [
        [index, tagged.word, tagged.tag, describe_tag(tagged.tag)]
        for index, tagged in enumerate(sentence, 1)
    ]
    return tabulate(rows, headers=["#", "Word", "Tag", "Description"])


@dataclass
class OutputEntry:
    name: str
    aliases: tuple[str, ...]
    formatter: Callable[[Sentence], str]
    description: str = ""


OUTPUTS: List[OutputEntry] = [
    OutputEntry("brackets", ("bracket",), format_brackets, "[word tag] per line"),
    OutputEntry("slash", ("plain-tagged",), format_slash, "word/TAG per sentence line"),
    OutputEntry("tsv", ("tab",), format_tsv, "word<TAB>tag per line"),
    OutputEntry("json", (), format_json, "JSON list per sentence"),
    OutputEntry("table", (), format_table, "Aligned table with tag descriptions"),
]

_OUTPUT_LOOKUP: Dict[str, OutputEntry] = {}
for _entry in OUTPUTS:
    _OUTPUT_LOOKUP[_entry.name] = _entry
    for _alias in _entry.aliases:
        _OUTPUT_LOOKUP[_alias] = _entry


def get_output(name: str) -> OutputEntry:
    entry = _OUTPUT_LOOKUP.get(name.lower())
    if entry is None:
        raise ValueError(f"Unknown output format '{name}'. Choose from: {', '.join(e.name for e in OUTPUTS)}")
    return entry


def format_sentence(sentence: Sentence, output_format: str = "brackets") -> str:
    """Render a tagged sentence in the named output format."""
    return get_output(output_format).formatter(sentence)
