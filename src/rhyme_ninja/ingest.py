"""Offline construction of the rhyme index and word dictionary."""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Set, Tuple

import nltk
from nltk.corpus import cmudict
from tqdm import tqdm

from .database import RhymeDatabase
from .models import RhymeIndex, WordEntry
from .phonetics import Pronunciation, normalize

LOGGER = logging.getLogger(__name__)

# Most apostrophe-initial cmudict entries are junk; these are real words.
WHITELISTED_APOSTROPHE_WORDS = {
    "'allo",
    "'bout",
    "'cause",
    "'em",
    "'til",
    "'tis",
    "'twas",
    "'kay",
    "'gain",
}

VARIANT_RE = re.compile(r"\(\d+\)$")

Pronunciations = Dict[str, List[Pronunciation]]


def useful_cmudict_word(word: str) -> bool:
    """Return ``True`` for entries that start with a letter or are whitelisted."""

    if not word:
        return False
    if word.startswith("'"):
        return word.lower() in WHITELISTED_APOSTROPHE_WORDS
    return word[0].isascii() and word[0].isalpha()


def clean_cmudict_word(word: str) -> str:
    word = word.lower().replace("_", " ")
    return VARIANT_RE.sub("", word)


def parse_cmudict(path: Path) -> Iterator[Tuple[str, Pronunciation]]:
    """Yield ``(word, pronunciation)`` from a CMU dictionary file."""

    with Path(path).open("r", encoding="latin-1") as handle:
        for line in handle:
            # the headword must start in column one
            parts = line.split(None, 1)
            if line[:1].isspace() or len(parts) < 2 or not useful_cmudict_word(parts[0]):
                LOGGER.debug("Ignoring cmudict line: %s", line.rstrip("\n"))
                continue
            yield clean_cmudict_word(parts[0]), normalize(parts[1])


def load_cmudict(path: Path) -> Pronunciations:
    """Return ``word -> [pronunciation, ...]`` in file order."""

    pronunciations: Pronunciations = {}
    for word, pron in tqdm(parse_cmudict(path), desc="CMU"):
        pronunciations.setdefault(word, []).append(pron)
    LOGGER.info("Loaded %s words from cmudict", len(pronunciations))
    return pronunciations


def ensure_nltk_data() -> None:
    """Ensure the CMU dictionary corpus is available."""

    try:
        nltk.data.find("corpora/cmudict")
    except LookupError:
        LOGGER.info("Downloading cmudict corpus via NLTK…")
        nltk.download("cmudict")


def load_nltk_cmudict() -> Pronunciations:
    """Return the same mapping as :func:`load_cmudict` from NLTK's corpus."""

    ensure_nltk_data()
    pronunciations: Pronunciations = {}
    for word, phones in tqdm(cmudict.entries(), desc="CMU"):
        if not useful_cmudict_word(word):
            continue
        pronunciations.setdefault(clean_cmudict_word(word), []).append(normalize(phones))
    LOGGER.info("Loaded %s words from the NLTK cmudict corpus", len(pronunciations))
    return pronunciations


def load_blacklist(path: Path) -> List[str]:
    with Path(path).open("r", encoding="utf8") as handle:
        return [line.strip().lower() for line in handle if line.strip()]


def remove_blacklisted(pronunciations: Pronunciations, blacklist: Iterable[str]) -> int:
    """Delete blacklisted words in place and return how many were present."""

    count = 0
    for word in blacklist:
        if pronunciations.pop(word, None) is not None:
            count += 1
    LOGGER.info("Removed %s blacklisted words from the dictionary", count)
    return count


def parse_frequency_line(line: str) -> Tuple[List[str], int]:
    """Parse ``word[/count] -> alt1,alt2`` into the words it credits and the count."""

    entry, _, altforms = line.strip().partition(" -> ")
    word, _, count = entry.partition("/")
    frequency = int(count) if count else 1
    words = [word.strip()]
    words.extend(form.strip() for form in altforms.split(",") if form.strip())
    return words, frequency


def load_frequencies(path: Path) -> Dict[str, int]:
    """Return ``word -> usage count`` from a lemma frequency list."""

    frequencies: Dict[str, int] = {}
    with Path(path).open("r", encoding="utf8") as handle:
        for line in handle:
            if line.startswith(";") or not line.strip():
                LOGGER.debug("Ignoring frequency line: %s", line.rstrip("\n"))
                continue
            words, frequency = parse_frequency_line(line)
            for word in words:
                frequencies[word] = frequencies.get(word, 0) + frequency
    LOGGER.info("Loaded %s words from the frequency data", len(frequencies))
    return frequencies


def build_rhyme_index(pronunciations: Mapping[str, Iterable[Pronunciation]]) -> RhymeIndex:
    """Group words by rhyme signature, keeping only signatures with rhymes."""

    buckets: RhymeIndex = {}
    for word, prons in tqdm(pronunciations.items(), desc="Signatures"):
        for pron in prons:
            signature = pron.rhyme_signature()
            bucket = buckets.get(signature)
            if bucket is None:
                bucket = buckets[signature] = []
            bucket.append(word)
    LOGGER.info("Identified %s unique rhyme signatures", len(buckets))

    index: RhymeIndex = {}
    for signature, words in buckets.items():
        members = sorted(set(words))
        if len(members) > 1:
            index[signature] = members
    LOGGER.info("%s signatures have at least one rhyme", len(index))
    return index


def filter_word_dict(
    pronunciations: Mapping[str, Iterable[Pronunciation]], index: Mapping[str, object]
) -> Pronunciations:
    """Keep only pronunciations that rhyme with something."""

    filtered: Pronunciations = {}
    for word, prons in pronunciations.items():
        kept = [pron for pron in prons if pron.rhyme_signature() in index]
        if kept:
            filtered[word] = kept
    LOGGER.info(
        "%s entries remain in the pronunciation dictionary after removing words with no rhymes",
        len(filtered),
    )
    return filtered


def add_frequency_info(
    pronunciations: Mapping[str, Iterable[Pronunciation]], frequencies: Mapping[str, int]
) -> Dict[str, WordEntry]:
    word_dict: Dict[str, WordEntry] = {}
    known = 0
    for word, prons in pronunciations.items():
        frequency = frequencies.get(word, 0)
        if frequency > 0:
            known += 1
        word_dict[word] = WordEntry(frequency, tuple(prons))
    LOGGER.info("%s of those entries have frequency data", known)
    return word_dict


def build_dictionaries(
    pronunciations: Mapping[str, Iterable[Pronunciation]],
    frequencies: Optional[Mapping[str, int]] = None,
) -> Tuple[RhymeIndex, Dict[str, WordEntry]]:
    """Build the rhyme index and the frequency-annotated word dictionary."""

    index = build_rhyme_index(pronunciations)
    filtered = filter_word_dict(pronunciations, index)
    word_dict = add_frequency_info(filtered, frequencies or {})
    return index, word_dict


def _require(path: Path | str) -> Path:
    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(source)
    return source


def build_database(
    database_path: Path | str,
    cmu_source: Optional[Path | str] = None,
    frequency_source: Optional[Path | str] = None,
    blacklist_source: Optional[Path | str] = None,
) -> Path:
    """Rebuild the rhyme database from the raw data sources."""

    if cmu_source is None:
        LOGGER.info("No cmudict file given, using the NLTK corpus")
        pronunciations = load_nltk_cmudict()
    else:
        cmu_path = _require(cmu_source)
        LOGGER.info("Ingesting pronunciations from %s", cmu_path)
        pronunciations = load_cmudict(cmu_path)

    if blacklist_source is not None:
        blacklist: Set[str] = set(load_blacklist(_require(blacklist_source)))
        remove_blacklisted(pronunciations, blacklist)

    frequencies: Dict[str, int] = {}
    if frequency_source is not None:
        frequencies = load_frequencies(_require(frequency_source))
    else:
        LOGGER.warning("No frequency data given, every word will be marked rare")

    index, word_dict = build_dictionaries(pronunciations, frequencies)

    db_path = Path(database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    db = RhymeDatabase(db_path)
    try:
        db.initialize()
        db.clear()
        db.save_rhyme_index(index)
        db.save_word_dict(word_dict)
    finally:
        db.close()
    LOGGER.info("Wrote %s signatures and %s words to %s", len(index), len(word_dict), db_path)
    return db_path
