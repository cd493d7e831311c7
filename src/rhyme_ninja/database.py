"""SQLite persistence for the rhyme index and word dictionary."""
from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Dict, List, Mapping, Sequence, Tuple

from .models import Lexicon, WordEntry
from .phonetics import Pronunciation, to_pronunciation

SCHEMA = """
PRAGMA foreign_keys = ON;

CREATE TABLE IF NOT EXISTS words (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    word TEXT NOT NULL UNIQUE,
    frequency INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS pronunciations (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    word_id INTEGER NOT NULL,
    pronunciation TEXT NOT NULL,
    rhyme_signature TEXT NOT NULL,
    FOREIGN KEY(word_id) REFERENCES words(id) ON DELETE CASCADE,
    UNIQUE(word_id, pronunciation)
);

CREATE TABLE IF NOT EXISTS rhyme_index (
    signature TEXT NOT NULL,
    word TEXT NOT NULL,
    PRIMARY KEY(signature, word)
);

CREATE INDEX IF NOT EXISTS idx_pronunciations_word_id ON pronunciations(word_id);
CREATE INDEX IF NOT EXISTS idx_pronunciations_signature ON pronunciations(rhyme_signature);
"""


class DictionaryMissingError(FileNotFoundError):
    """Raised when the precomputed dictionary has not been built yet."""

    def __init__(self, path: Path):
        super().__init__(
            f"Dictionary database {path} does not exist. "
            "Rebuild the dictionary first with 'rhyme-ninja build'."
        )
        self.path = path


class RhymeDatabase:
    """High level database manager."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.conn = sqlite3.connect(self.path)
        self.conn.row_factory = sqlite3.Row

    def close(self) -> None:
        self.conn.close()

    def initialize(self) -> None:
        """Create schema if it does not already exist."""

        with self.conn:
            self.conn.executescript(SCHEMA)

    def clear(self) -> None:
        """Drop all rows so a rebuild starts from scratch."""

        with self.conn:
            self.conn.execute("DELETE FROM rhyme_index")
            self.conn.execute("DELETE FROM pronunciations")
            self.conn.execute("DELETE FROM words")

    # ------------------------------------------------------------------
    # bulk writers
    # ------------------------------------------------------------------
    def save_word_dict(self, word_dict: Mapping[str, WordEntry]) -> None:
        """Persist every word and pronunciation in a single transaction."""

        words = sorted(word_dict)
        with self.conn:
            self.conn.executemany(
                "INSERT OR IGNORE INTO words(word, frequency) VALUES (?, ?)",
                [(word, word_dict[word].frequency) for word in words],
            )
            word_ids = {
                row["word"]: int(row["id"]) for row in self.conn.execute("SELECT id, word FROM words")
            }
            self.conn.executemany(
                """
                INSERT OR IGNORE INTO pronunciations (word_id, pronunciation, rhyme_signature)
                VALUES (?, ?, ?)
                """,
                [
                    (word_ids[word], pron.text, pron.rhyme_signature())
                    for word in words
                    for pron in word_dict[word].pronunciations
                ],
            )

    def save_rhyme_index(self, index: Mapping[str, Sequence[str]]) -> None:
        with self.conn:
            self.conn.executemany(
                "INSERT OR IGNORE INTO rhyme_index(signature, word) VALUES (?, ?)",
                [(signature, word) for signature in sorted(index) for word in index[signature]],
            )

    # ------------------------------------------------------------------
    # query helpers
    # ------------------------------------------------------------------
    def pronunciations_for_word(self, word: str) -> List[sqlite3.Row]:
        word = word.lower()
        query = """
            SELECT pronunciations.*, words.frequency
            FROM pronunciations
            JOIN words ON words.id = pronunciations.word_id
            WHERE words.word = ?
            ORDER BY pronunciations.id
        """
        return list(self.conn.execute(query, (word,)))

    def load_word_dict(self) -> Dict[str, WordEntry]:
        query = """
            SELECT words.word, words.frequency, pronunciations.pronunciation
            FROM words
            JOIN pronunciations ON pronunciations.word_id = words.id
            ORDER BY words.word, pronunciations.id
        """
        frequencies: Dict[str, int] = {}
        pronunciations: Dict[str, List[Pronunciation]] = {}
        for row in self.conn.execute(query):
            word = row["word"]
            frequencies[word] = int(row["frequency"])
            pronunciations.setdefault(word, []).append(to_pronunciation(row["pronunciation"]))
        return {
            word: WordEntry(frequencies[word], tuple(prons))
            for word, prons in pronunciations.items()
        }

    def load_rhyme_index(self) -> Dict[str, Tuple[str, ...]]:
        buckets: Dict[str, List[str]] = {}
        rows = self.conn.execute("SELECT signature, word FROM rhyme_index ORDER BY signature, word")
        for row in rows:
            buckets.setdefault(row["signature"], []).append(row["word"])
        return {signature: tuple(words) for signature, words in buckets.items()}


def load_lexicon(path: str | Path) -> Lexicon:
    """Load the prebuilt dictionary into an immutable :class:`Lexicon`."""

    db_path = Path(path)
    if not db_path.exists():
        raise DictionaryMissingError(db_path)
    db = RhymeDatabase(db_path)
    try:
        return Lexicon.from_mappings(db.load_word_dict(), db.load_rhyme_index())
    finally:
        db.close()
