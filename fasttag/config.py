"""
Configuration classes for fasttag.
"""

from dataclasses import dataclass, fields
from typing import Optional

OUTPUT_FORMATS = ("brackets", "slash", "tsv", "json", "table")


@dataclass
class FastTagConfig:
    """Configuration for the fasttag command line."""
    lexicon: Optional[str] = None  # Path or http(s) URL of the lexicon corpus
    output_format: str = "brackets"  # One of OUTPUT_FORMATS
    clean_words: bool = True  # Strip surrounding punctuation before lexicon lookup
    verbose: bool = False  # Enable debug logging

    @classmethod
    def from_dict(cls, data: dict) -> "FastTagConfig":
        known = {f.name for f in fields(cls)}
        config = cls(**{key: value for key, value in data.items() if key in known})
        if config.output_format not in OUTPUT_FORMATS:
            config.output_format = "brackets"
        return config
