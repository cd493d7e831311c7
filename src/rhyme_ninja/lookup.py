"""Map a user goal and one or two input words to a typed result."""
from __future__ import annotations

import logging
from typing import Optional

from .datamuse import DEFAULT_DATAMUSE_MAX, DatamuseClient, DatamuseError
from .models import SUPPORTED_LANGUAGES, Goal, Lexicon, LookupResult, ResultKind
from .rhymes import RhymeAssistant

LOGGER = logging.getLogger(__name__)


def _localize(language: str, english: str, spanish: str) -> str:
    return spanish if language == "es" else english


def parse_goal(goal: Goal | str) -> Goal:
    """Return ``goal`` as a :class:`Goal`, raising ``ValueError`` if unknown."""

    if isinstance(goal, Goal):
        return goal
    return Goal(goal.strip().lower())


def lookup(
    lexicon: Lexicon,
    word1: str,
    word2: str,
    goal: Goal | str,
    language: str = "en",
    max_results: int = DEFAULT_DATAMUSE_MAX,
    client: Optional[DatamuseClient] = None,
) -> LookupResult:
    """Run one lookup request.

    Both words blank is vacuous rather than an error. An unsupported
    language tag is bad input for every goal. When only ``word2`` is
    given the two are swapped. Datamuse failures produce
    :attr:`ResultKind.ERROR` so callers can tell them apart from an empty
    result.
    """

    word1 = (word1 or "").strip().lower()
    word2 = (word2 or "").strip().lower()
    if not word1 and not word2:
        return LookupResult(ResultKind.VACUOUS, "")
    if language not in SUPPORTED_LANGUAGES:
        return LookupResult(ResultKind.BAD_INPUT, f"Unsupported language: {language}")
    if not word1:
        word1, word2 = word2, word1

    try:
        selected = parse_goal(goal)
    except ValueError:
        return LookupResult(
            ResultKind.BAD_INPUT, _localize(language, "Invalid selection.", "Selección inválida.")
        )

    assistant = RhymeAssistant(lexicon, client or DatamuseClient(max_results=max_results))
    try:
        result = _dispatch(assistant, selected, word1, word2, language)
    except DatamuseError as exc:
        LOGGER.error("%s", exc)
        return LookupResult(
            ResultKind.ERROR,
            _localize(
                language,
                "Error connecting to the Datamuse API. Try again later.",
                "Error al conectar con la API de Datamuse. Inténtalo más tarde.",
            ),
        )
    LOGGER.debug("result kind=%s words=%s tuples=%s", result.kind.value, result.words, result.tuples)
    return result


def _dispatch(
    assistant: RhymeAssistant, goal: Goal, word1: str, word2: str, language: str
) -> LookupResult:
    if goal is Goal.RHYMES:
        header = _localize(language, "Rhymes for", "Rimas para") + f' "{word1}":'
        common, rare = assistant.split_rare_words(assistant.rhymes_of(word1, language))
        return LookupResult(ResultKind.WORDS, header, words=common, rare_words=rare)

    if goal is Goal.RELATED:
        header = _localize(language, "Words related to", "Palabras relacionadas con") + f' "{word1}":'
        common, rare = assistant.split_rare_words(assistant.related_words(word1, language=language))
        return LookupResult(ResultKind.WORDS, header, words=common, rare_words=rare)

    if goal is Goal.SET_RELATED:
        header = (
            _localize(language, "Rhyming word sets related to", "Conjuntos de rimas relacionadas con")
            + f' "{word1}":'
        )
        return LookupResult(ResultKind.TUPLES, header, tuples=assistant.rhyming_tuples(word1, language))

    if goal is Goal.PAIR_RELATED:
        if not word2:
            return LookupResult(
                ResultKind.BAD_INPUT,
                _localize(
                    language,
                    'I need two words to find rhyming pairs. For example, Word 1 = "crime", Word 2 = "heaven".',
                    "Necesito dos palabras para buscar pares de rimas.",
                ),
            )
        header = (
            _localize(
                language,
                "Rhyming word pairs where the first word is related to",
                "Pares de palabras que riman, la primera relacionada con",
            )
            + f' "{word1}" '
            + _localize(language, "and the second word is related to", "y la segunda relacionada con")
            + f' "{word2}":'
        )
        pairs = assistant.rhyming_pairs(word1, word2, language)
        return LookupResult(ResultKind.TUPLES, header, tuples=list(pairs))

    if goal is Goal.RELATED_RHYMES:
        if not word2:
            return LookupResult(
                ResultKind.BAD_INPUT,
                _localize(
                    language,
                    'I need two words to find related rhymes. For example, Word 1 = "please", Word 2 = "cats".',
                    "Necesito dos palabras para buscar rimas relacionadas.",
                ),
            )
        header = (
            _localize(language, "Rhymes for", "Rimas para")
            + f' "{word1}" '
            + _localize(language, "that are related to", "que están relacionadas con")
            + f' "{word2}":'
        )
        return LookupResult(
            ResultKind.WORDS, header, words=assistant.related_rhymes(word1, word2, language)
        )

    raise AssertionError(f"Unhandled goal: {goal}")
