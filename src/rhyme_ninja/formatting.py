"""Text and HTML rendering of lookup results."""
from __future__ import annotations

import html
from typing import Iterable, List
from urllib.parse import urlencode

from .models import Lexicon, LookupResult, ResultKind


def render(
    result: LookupResult,
    lexicon: Lexicon,
    output_format: str = "text",
    language: str = "en",
    show_frequencies: bool = False,
) -> str:
    if output_format == "html":
        return render_html(result, lexicon, language, show_frequencies)
    if output_format == "text":
        return render_text(result, lexicon, language, show_frequencies)
    raise ValueError(f"Unknown output format: {output_format}")


def render_text(
    result: LookupResult, lexicon: Lexicon, language: str = "en", show_frequencies: bool = False
) -> str:
    if result.kind is ResultKind.VACUOUS:
        return ""
    lines: List[str] = [result.header]
    if result.kind in (ResultKind.BAD_INPUT, ResultKind.ERROR):
        return "\n".join(lines)
    if result.is_empty:
        lines.append(_no_results(language))
        return "\n".join(lines)

    for word in _sorted_unique(result.words):
        lines.append(_text_word(word, lexicon, show_frequencies))
    if result.rare_words:
        lines.append("")
        lines.append(_less_common(language))
        for word in _sorted_unique(result.rare_words):
            lines.append(_text_word(word, lexicon, show_frequencies))
    for group in sorted(set(result.tuples)):
        lines.append(" / ".join(group))
    return "\n".join(lines)


def render_html(
    result: LookupResult, lexicon: Lexicon, language: str = "en", show_frequencies: bool = False
) -> str:
    if result.kind is ResultKind.VACUOUS:
        return ""
    parts: List[str] = [f"<div class='header'>{html.escape(result.header)}</div>"]
    if result.kind in (ResultKind.BAD_INPUT, ResultKind.ERROR):
        parts.insert(0, f"<div class='{result.kind.value}'>")
        parts.append("</div>")
        return "\n".join(parts)

    parts.append("<div class='results'>")
    if result.is_empty:
        parts.append(f"<div class='empty'>{html.escape(_no_results(language))}</div>")
    for word in _sorted_unique(result.words):
        parts.append(_html_word_row(word, lexicon, language, show_frequencies))
    if result.rare_words:
        parts.append(f"<div class='dregs'><div class='subheader'>{html.escape(_less_common(language))}</div>")
        for word in _sorted_unique(result.rare_words):
            parts.append(_html_word_row(word, lexicon, language, show_frequencies))
        parts.append("</div>")
    for group in sorted(set(result.tuples)):
        links = " / ".join(_html_word(word, lexicon, language) for word in group)
        parts.append(f"<div class='tuple'>{links}</div>")
    parts.append("</div>")
    return "\n".join(parts)


def _sorted_unique(words: Iterable[str]) -> List[str]:
    return sorted(set(words))


def _no_results(language: str) -> str:
    return "Sin resultados." if language == "es" else "No results."


def _less_common(language: str) -> str:
    return "Menos comunes:" if language == "es" else "Less common:"


def _text_word(word: str, lexicon: Lexicon, show_frequencies: bool) -> str:
    if show_frequencies:
        return f"{word} ({lexicon.frequency(word)})"
    return word


def _html_word(word: str, lexicon: Lexicon, language: str) -> str:
    escaped = html.escape(word)
    # Only words with a pronunciation can be looked up again.
    if not lexicon.pronunciations(word, language):
        return escaped
    query = urlencode({"word1": word, "lang": language})
    return f"<a href='?{html.escape(query)}'>{escaped}</a>"


def _html_word_row(word: str, lexicon: Lexicon, language: str, show_frequencies: bool) -> str:
    text = _html_word(word, lexicon, language)
    if show_frequencies:
        text += f" ({lexicon.frequency(word)})"
    return f"<div class='output_tuple'><span class='output_word'>{text}</span></div>"
