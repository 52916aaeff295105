"""
Lexicon for fasttag.

The lexicon maps word forms to their candidate tags, most likely tag first.
It is read from a plain-text corpus with one entry per line::

    dog NN VB
    the DT

Fields are separated by single spaces; there is no quoting, escaping or
comment syntax. The lexicon is read-only once built, so a single instance can
be shared between threads.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union
from urllib.parse import urlparse

import requests

logger = logging.getLogger(__name__)

# Seconds to wait for a remote lexicon
DOWNLOAD_TIMEOUT_SECONDS = 60


class LexiconLoadError(RuntimeError):
    """Raised when a lexicon cannot be fetched from a remote source."""


def _parse_line(line: str) -> Optional[Tuple[str, Tuple[str, ...]]]:
    """Parse a corpus line into (word, tags), or None if the line has no word."""
    fields = line.split(" ")
    word = fields[0]
    if not word:
        return None
    tags = tuple(tag for tag in fields[1:] if tag)
    return word, tags


def _split_lines(text: str) -> List[str]:
    # Only CR and LF end a line; form feeds, U+2028 etc. stay inside the line
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


class Lexicon:
    """Word form -> candidate tags table."""

    def __init__(self, entries: Optional[Dict[str, Tuple[str, ...]]] = None) -> None:
        self._entries: Dict[str, Tuple[str, ...]] = dict(entries or {})

    @classmethod
    def from_text(cls, corpus_text: str) -> "Lexicon":
        """
        Build a lexicon from corpus text.

        Lines end at LF, CRLF or CR. Empty lines and lines that start
        with a space are skipped. A word that appears on several lines keeps
        the tags of its last line. Repeated spaces between tags are ignored,
        so "dog  NN" lists the single tag NN.

        Args:
            corpus_text: Whole corpus as a single string

        Returns:
            The populated lexicon
        """
        entries: Dict[str, Tuple[str, ...]] = {}
        skipped = 0
        for line_num, line in enumerate(_split_lines(corpus_text), 1):
            parsed = _parse_line(line)
            if parsed is None:
                if line:
                    logger.debug("Skipping lexicon line %d without a word: %r", line_num, line)
                    skipped += 1
                continue
            word, tags = parsed
            entries[word] = tags
        if skipped:
            logger.debug("Skipped %d malformed lexicon line(s)", skipped)
        return cls(entries)

    @classmethod
    def from_file(cls, file_path: Union[str, Path], encoding: str = "utf-8") -> "Lexicon":
        """
        Build a lexicon from a corpus file on disk.

        Raises:
            FileNotFoundError: If the file does not exist
            UnicodeDecodeError: If the file is not valid in ``encoding``
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Lexicon file not found: {path}")
        lexicon = cls.from_text(path.read_text(encoding=encoding))
        logger.info("Loaded %d lexicon entries from %s", len(lexicon), path)
        return lexicon

    def lookup(self, word: str) -> Optional[Tuple[str, ...]]:
        """
        Return the candidate tags of ``word``.

        The exact form is tried first and the lowercased form second, so an
        entry for "Dog" is not found by looking up "dog".

        Returns:
            The candidate tags (possibly empty when the corpus line listed no
            tags), or None when the word is unknown.
        """
        tags = self._entries.get(word)
        if tags is None:
            tags = self._entries.get(word.lower())
        return tags

    def contains_word(self, word: str) -> bool:
        """Check if the word or its lowercased form is in the lexicon."""
        return word in self._entries or word.lower() in self._entries

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains_word(word)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Lexicon({len(self._entries)} entries)"


def _is_url(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


def fetch_lexicon_text(url: str, timeout: int = DOWNLOAD_TIMEOUT_SECONDS) -> str:
    """Download corpus text from an http(s) URL."""
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise LexiconLoadError(f"Failed to download lexicon from {url}: {exc}") from exc
    if not response.encoding:
        response.encoding = "utf-8"
    return response.text


def load_lexicon(source: Union[str, Path], encoding: str = "utf-8") -> Lexicon:
    """
    Load a lexicon from a file path or an http(s) URL.

    Args:
        source: Path to a corpus file, or URL of one
        encoding: Encoding of a local file

    Returns:
        The loaded lexicon

    Raises:
        FileNotFoundError: If a local file does not exist
        UnicodeDecodeError: If a local file is not valid in ``encoding``
        LexiconLoadError: If a remote file cannot be downloaded
    """
    if isinstance(source, str) and _is_url(source):
        lexicon = Lexicon.from_text(fetch_lexicon_text(source))
        logger.info("Loaded %d lexicon entries from %s", len(lexicon), source)
        return lexicon
    return Lexicon.from_file(Path(source).expanduser(), encoding=encoding)
