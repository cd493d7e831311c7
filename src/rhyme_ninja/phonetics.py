"""Utilities for working with ARPABET pronunciations and rhyme signatures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

ARPABET_VOWELS = {
    "AA",
    "AE",
    "AH",
    "AO",
    "AW",
    "AY",
    "EH",
    "ER",
    "EY",
    "IH",
    "IY",
    "OW",
    "OY",
    "UH",
    "UW",
}

# Stop markers for the backward scans, strongest stress first.
STRESS_PRIORITY = ("1", "2", "0")


class SignatureError(ValueError):
    """Raised when a pronunciation carries no stress digit at all."""


@dataclass(frozen=True)
class Pronunciation:
    """Structured representation of a pronunciation."""

    phonemes: Tuple[str, ...]

    @property
    def text(self) -> str:
        """Return the pronunciation as a space separated string."""

        return " ".join(self.phonemes)

    @property
    def syllable_count(self) -> int:
        """Number of syllables in the pronunciation."""

        return sum(1 for p in self.phonemes if is_vowel(p))

    @property
    def stress_pattern(self) -> str:
        """Return stress digits for vowels in order."""

        stresses: List[str] = []
        for phoneme in self.phonemes:
            if is_vowel(phoneme):
                stress = phoneme[-1]
                stresses.append(stress if stress.isdigit() else "0")
        return "".join(stresses)

    def rhyme_signature(self) -> str:
        """Return the canonical rhyme key for this pronunciation."""

        return rhyme_signature(self.phonemes)


def tokens(pronunciation: str) -> List[str]:
    """Split a CMU pronunciation string into tokens."""

    return [part for part in pronunciation.strip().split() if part]


def is_vowel(phoneme: str) -> bool:
    """Return ``True`` if the phoneme represents a vowel."""

    base = strip_stress(phoneme)
    return base in ARPABET_VOWELS


def strip_stress(phoneme: str) -> str:
    """Remove stress digits from a phoneme."""

    return phoneme.rstrip("0123456789")


def to_pronunciation(pronunciation: Iterable[str] | str) -> Pronunciation:
    """Create a :class:`Pronunciation` instance from input."""

    if isinstance(pronunciation, str):
        phonemes = tokens(pronunciation)
    else:
        phonemes = list(pronunciation)
    return Pronunciation(tuple(phonemes))


def normalize(pronunciation: Iterable[str] | str) -> Pronunciation:
    """Merge vowel variants the dictionary distinguishes but listeners do not.

    cmudict writes "beer" as ``B IH1 R`` and "ear" as ``IY1 R``; every ``IH``
    directly followed by ``R`` is rewritten to ``IY`` with its stress digit
    kept, so both land on the same rhyme signature. Nothing else changes.
    """

    phonemes = list(to_pronunciation(pronunciation).phonemes)
    for index, phoneme in enumerate(phonemes[:-1]):
        if phonemes[index + 1] != "R":
            continue
        if strip_stress(phoneme) == "IH" and phoneme[2:] in {"0", "1", "2"}:
            phonemes[index] = "IY" + phoneme[2:]
    return Pronunciation(tuple(phonemes))


def rhyme_signature_array(phonemes: Sequence[str]) -> Tuple[str, ...]:
    """Return everything from the most stressed vowel to the end of the word.

    The final primary-stressed (``1``) symbol starts the signature. Words
    without one fall back to the final secondary-stressed (``2``) symbol, and
    failing that the final unstressed (``0``) one. Stress digits are stripped,
    so ``F ER1 Z`` and ``Y ER0 Z`` both give ``("ER", "Z")``::

        >>> rhyme_signature_array("IH0 N S IH1 ZH AH0 N".split())
        ('IH', 'ZH', 'AH', 'N')
    """

    for stress in STRESS_PRIORITY:
        signature: List[str] = []
        for phoneme in reversed(phonemes):
            signature.append(strip_stress(phoneme))
            if stress in phoneme:
                signature.reverse()
                return tuple(signature)
    raise SignatureError(f"No stressed vowel in pronunciation: {' '.join(phonemes)!r}")


def rhyme_signature(phonemes: Sequence[str]) -> str:
    """Return :func:`rhyme_signature_array` joined into a lookup key."""

    return " ".join(rhyme_signature_array(phonemes))
