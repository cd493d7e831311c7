"""High level rhyme and related-word lookups over a :class:`Lexicon`."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .datamuse import DatamuseClient
from .models import Lexicon
from .phonetics import Pronunciation

LOGGER = logging.getLogger(__name__)


class RhymeAssistant:
    """Combine the local rhyme index with Datamuse relatedness queries."""

    def __init__(self, lexicon: Lexicon, datamuse: Optional[DatamuseClient] = None):
        self.lexicon = lexicon
        self.datamuse = datamuse if datamuse is not None else DatamuseClient()

    def pronunciations(self, word: str, language: str = "en") -> Tuple[Pronunciation, ...]:
        return self.lexicon.pronunciations(word, language)

    def rhymes_for_pronunciation(self, pronunciation: Pronunciation) -> Tuple[str, ...]:
        return self.lexicon.words_for_signature(pronunciation.rhyme_signature())

    def rhymes_of(self, word: str, language: str = "en") -> List[str]:
        """Return every word sharing a rhyme signature with any pronunciation of ``word``."""

        rhymes = set()
        for pronunciation in self.pronunciations(word, language):
            rhymes.update(self.rhymes_for_pronunciation(pronunciation))
        rhymes.discard(word)
        return sorted(rhymes)

    def split_rare_words(self, words: Iterable[str]) -> Tuple[List[str], List[str]]:
        """Split ``words`` into common ones and ones with no frequency data."""

        common: List[str] = []
        rare: List[str] = []
        for word in words:
            (rare if self.lexicon.frequency(word) == 0 else common).append(word)
        return common, rare

    def rhymes_with(self, word1: str, word2: str, language: str = "en") -> bool:
        return word2 in self.rhymes_of(word1, language)

    # ------------------------------------------------------------------
    # Datamuse backed lookups
    # ------------------------------------------------------------------
    def related_words(self, word: str, include_self: bool = False, language: str = "en") -> List[str]:
        return self.datamuse.related_words(word, include_self, language)

    def is_related(self, word1: str, word2: str, language: str = "en") -> bool:
        return word2 in self.related_words(word1, language=language)

    def related_rhymes(self, rhyme: str, related: str, language: str = "en") -> List[str]:
        return self.datamuse.related_rhymes(rhyme, related, language)

    def rhyming_tuples(self, word: str, language: str = "en") -> List[Tuple[str, ...]]:
        """Sets of mutually rhyming words that are all related to ``word``."""

        relateds = self.related_words(word, include_self=True, language=language)
        related_set = set(relateds)
        groups: Dict[str, set] = {}
        for related in relateds:
            for pronunciation in self.pronunciations(related, language):
                signature = pronunciation.rhyme_signature()
                for rhyme in self.rhymes_for_pronunciation(pronunciation):
                    if rhyme in related_set:
                        groups.setdefault(signature, set()).add(rhyme)
        tuples = [tuple(sorted(members)) for members in groups.values() if len(members) > 1]
        LOGGER.debug("Found %s rhyming sets related to %s", len(tuples), word)
        return sorted(tuples)

    def rhyming_pairs(self, word1: str, word2: str, language: str = "en") -> List[Tuple[str, str]]:
        """Rhyming pairs whose first word relates to ``word1`` and second to ``word2``."""

        relateds1 = self.related_words(word1, include_self=True, language=language)
        relateds2 = set(self.related_words(word2, include_self=True, language=language))
        pairs: List[Tuple[str, str]] = []
        seen = set()
        for related in relateds1:
            for rhyme in self.rhymes_of(related, language):
                pair = (related, rhyme)
                if rhyme in relateds2 and pair not in seen:
                    seen.add(pair)
                    pairs.append(pair)
        LOGGER.debug("Found %s rhyming pairs for %s / %s", len(pairs), word1, word2)
        return pairs
