from __future__ import annotations

import _bootstrap  # noqa: F401
import pytest

from rhyme_ninja.datamuse import DatamuseError
from rhyme_ninja.ingest import build_database, build_dictionaries
from rhyme_ninja.models import Lexicon
from rhyme_ninja.phonetics import normalize

CMUDICT_LINES = [
    ";;; CMU pronouncing dictionary sample",
    "!EXCLAMATION-POINT  EH2 K S K L AH0 M EY1 SH AH0 N P OY2 N T",
    "'BOUT  B AW1 T",
    "'N  EH1 N",
    "ABOUT  AH0 B AW1 T",
    "BAT  B AE1 T",
    "BEER  B IH1 R",
    "CAT  K AE1 T",
    "CRIME  K R AY1 M",
    "DAMN  D AE1 M",
    "DOG  D AO1 G",
    "EAR  IY1 R",
    "HAT  HH AE1 T",
    "HEAVEN  HH EH1 V AH0 N",
    "LAMB  L AE1 M",
    "LOG  L AO1 G",
    "NEED  N IY1 D",
    "ORANGE  AO1 R AH0 N JH",
    "READ  R IY1 D",
    "READ(1)  R EH1 D",
    "RED  R EH1 D",
    "SEVEN  S EH1 V AH0 N",
    "TIME  T AY1 M",
]

FREQUENCY_LINES = [
    "; lemma frequency sample",
    "cat/50 -> cats",
    "hat/30 -> hats",
    "dog/40 -> dogs",
    "log/5 -> logs,logged",
    "time/100 -> times",
    "seven/60",
    "red/45 -> reds",
    "read/70 -> reads,reading",
    "need/80 -> needs",
    "crime/20 -> crimes",
    "heaven/8 -> heavens",
    "beer -> beers",
    "ear/12 -> ears",
    "about/90",
]

SAMPLE_WORDS = {
    "cat": (50, ["K AE1 T"]),
    "hat": (30, ["HH AE1 T"]),
    "bat": (0, ["B AE1 T"]),
    "dog": (40, ["D AO1 G"]),
    "log": (5, ["L AO1 G"]),
    "crime": (20, ["K R AY1 M"]),
    "time": (100, ["T AY1 M"]),
    "heaven": (8, ["HH EH1 V AH0 N"]),
    "seven": (60, ["S EH1 V AH0 N"]),
    "read": (70, ["R IY1 D", "R EH1 D"]),
    "need": (80, ["N IY1 D"]),
    "red": (45, ["R EH1 D"]),
    "beer": (1, ["B IH1 R"]),
    "ear": (12, ["IY1 R"]),
    "orange": (3, ["AO1 R AH0 N JH"]),
}


class StubDatamuse:
    """Stand-in for :class:`DatamuseClient` with canned answers."""

    def __init__(self, related=None, rhymes=None, fail=False):
        self.related = related or {}
        self.rhymes = rhymes or {}
        self.fail = fail
        self.calls = []

    def _check(self):
        if self.fail:
            raise DatamuseError("Error connecting to Datamuse API: connection refused")

    def related_words(self, word, include_self=False, language="en"):
        self.calls.append(("related", word, language))
        self._check()
        words = list(self.related.get(word, []))
        if include_self:
            words.append(word)
        return words

    def related_rhymes(self, rhyme, related, language="en"):
        self.calls.append(("related_rhymes", rhyme, related, language))
        self._check()
        return list(self.rhymes.get((rhyme, related), []))


@pytest.fixture()
def sample_lexicon():
    pronunciations = {
        word: [normalize(pron) for pron in prons] for word, (_, prons) in SAMPLE_WORDS.items()
    }
    frequencies = {word: frequency for word, (frequency, _) in SAMPLE_WORDS.items()}
    index, word_dict = build_dictionaries(pronunciations, frequencies)
    return Lexicon.from_mappings(word_dict, index)


@pytest.fixture()
def stub_datamuse():
    return StubDatamuse(
        related={
            "pet": ["cat", "hat", "dog", "log", "bat"],
            "fashion": ["hat", "cap"],
            "sin": ["crime", "heaven"],
        },
        rhymes={("please", "cats"): ["fleas", "sneeze"]},
    )


@pytest.fixture()
def cmudict_file(tmp_path):
    path = tmp_path / "cmudict.sample"
    path.write_text("\n".join(CMUDICT_LINES) + "\n", encoding="latin-1")
    return path


@pytest.fixture()
def frequency_file(tmp_path):
    path = tmp_path / "lemma.en.txt"
    path.write_text("\n".join(FREQUENCY_LINES) + "\n", encoding="utf8")
    return path


@pytest.fixture()
def blacklist_file(tmp_path):
    path = tmp_path / "blacklist.txt"
    path.write_text("damn\n", encoding="utf8")
    return path


@pytest.fixture()
def sample_db(tmp_path, cmudict_file, frequency_file, blacklist_file):
    return build_database(
        database_path=tmp_path / "rhyme_ninja.db",
        cmu_source=cmudict_file,
        frequency_source=frequency_file,
        blacklist_source=blacklist_file,
    )


@pytest.fixture()
def failing_datamuse():
    return StubDatamuse(fail=True)
