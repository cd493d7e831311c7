"""Dataclasses and enums shared across the rhyme tools."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

from .phonetics import Pronunciation

SUPPORTED_LANGUAGES = ("en", "es")


@dataclass(frozen=True)
class WordEntry:
    frequency: int
    pronunciations: Tuple[Pronunciation, ...]


@dataclass(frozen=True)
class Lexicon:
    """Read-only word dictionary and rhyme index loaded once per process."""

    words: Mapping[str, WordEntry]
    index: Mapping[str, Tuple[str, ...]]

    @classmethod
    def from_mappings(
        cls,
        words: Mapping[str, WordEntry],
        index: Mapping[str, Sequence[str]],
    ) -> "Lexicon":
        frozen_index = {signature: tuple(members) for signature, members in index.items()}
        return cls(MappingProxyType(dict(words)), MappingProxyType(frozen_index))

    def pronunciations(self, word: str, language: str = "en") -> Tuple[Pronunciation, ...]:
        """Return every known pronunciation of ``word``.

        Only English data exists. Spanish lookups reuse it as a placeholder.
        """

        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unexpected language {language!r}")
        entry = self.words.get(word)
        if entry is None:
            return ()
        return entry.pronunciations

    def frequency(self, word: str) -> int:
        entry = self.words.get(word)
        return entry.frequency if entry is not None else 0

    def words_for_signature(self, signature: str) -> Tuple[str, ...]:
        return self.index.get(signature, ())


class Goal(str, Enum):
    RHYMES = "rhymes"
    RELATED = "related"
    SET_RELATED = "set_related"
    PAIR_RELATED = "pair_related"
    RELATED_RHYMES = "related_rhymes"


class ResultKind(str, Enum):
    WORDS = "words"
    TUPLES = "tuples"
    BAD_INPUT = "bad_input"
    VACUOUS = "vacuous"
    ERROR = "error"


@dataclass
class LookupResult:
    kind: ResultKind
    header: str
    words: List[str] = field(default_factory=list)
    rare_words: List[str] = field(default_factory=list)
    tuples: List[Tuple[str, ...]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.words or self.rare_words or self.tuples)


RhymeIndex = Dict[str, List[str]]
