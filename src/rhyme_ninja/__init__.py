"""Rhyme Ninja: rhymes and related words from cmudict and Datamuse."""

from .database import RhymeDatabase, load_lexicon
from .lookup import lookup
from .models import Goal, Lexicon, LookupResult, ResultKind
from .phonetics import normalize, rhyme_signature, rhyme_signature_array
from .rhymes import RhymeAssistant

__all__ = [
    "Goal",
    "Lexicon",
    "LookupResult",
    "ResultKind",
    "RhymeAssistant",
    "RhymeDatabase",
    "load_lexicon",
    "lookup",
    "normalize",
    "rhyme_signature",
    "rhyme_signature_array",
]
