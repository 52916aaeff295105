from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class TaggedWord:
    """A token together with the tag assigned to it.

    ``word`` is the token exactly as it was passed in, punctuation included.
    """

    word: str
    tag: str

    def __iter__(self) -> Iterator[str]:
        yield self.word
        yield self.tag

    def __str__(self) -> str:
        return f"[{self.word} {self.tag}]"

    @classmethod
    def from_dict(cls, data: dict) -> "TaggedWord":
        return cls(word=data.get("word", ""), tag=data.get("tag", ""))

    def to_dict(self) -> dict:
        return {"word": self.word, "tag": self.tag}
