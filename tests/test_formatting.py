import pytest

import _bootstrap  # noqa: F401

from rhyme_ninja.formatting import render
from rhyme_ninja.models import LookupResult, ResultKind


def test_text_lists_common_then_rare_words(sample_lexicon):
    result = LookupResult(ResultKind.WORDS, 'Rhymes for "cat":', words=["hat"], rare_words=["bat"])
    assert render(result, sample_lexicon) == 'Rhymes for "cat":\nhat\n\nLess common:\nbat'


def test_text_shows_frequencies_on_request(sample_lexicon):
    result = LookupResult(ResultKind.WORDS, "h", words=["time", "crime", "time"])
    assert render(result, sample_lexicon, show_frequencies=True) == "h\ncrime (20)\ntime (100)"


def test_text_tuples_and_empty_results(sample_lexicon):
    tuples = LookupResult(ResultKind.TUPLES, "sets:", tuples=[("dog", "log"), ("bat", "cat", "hat")])
    assert render(tuples, sample_lexicon) == "sets:\nbat / cat / hat\ndog / log"

    empty = LookupResult(ResultKind.WORDS, "nothing:")
    assert render(empty, sample_lexicon) == "nothing:\nNo results."
    assert render(empty, sample_lexicon, language="es") == "nothing:\nSin resultados."


def test_vacuous_and_error_results(sample_lexicon):
    assert render(LookupResult(ResultKind.VACUOUS, ""), sample_lexicon) == ""
    error = LookupResult(ResultKind.ERROR, "Try again later.")
    assert render(error, sample_lexicon) == "Try again later."
    assert "class='error'" in render(error, sample_lexicon, output_format="html")


def test_html_links_only_words_with_pronunciations(sample_lexicon):
    result = LookupResult(ResultKind.WORDS, 'Related to "<pet>":', words=["cat", "kitten"])
    output = render(result, sample_lexicon, output_format="html")
    assert "&lt;pet&gt;" in output
    assert "<a href='?word1=cat&amp;lang=en'>cat</a>" in output
    assert "kitten</span>" in output
    assert "word1=kitten" not in output


def test_html_tuples(sample_lexicon):
    result = LookupResult(ResultKind.TUPLES, "pairs:", tuples=[("cat", "hat")])
    output = render(result, sample_lexicon, output_format="html", language="es")
    assert "<div class='tuple'><a href='?word1=cat&amp;lang=es'>cat</a> / " in output


def test_unknown_format_is_rejected(sample_lexicon):
    with pytest.raises(ValueError):
        render(LookupResult(ResultKind.WORDS, "h"), sample_lexicon, output_format="pdf")
