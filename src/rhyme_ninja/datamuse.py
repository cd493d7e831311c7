"""Client for the Datamuse word-association API."""
from __future__ import annotations

import logging
from typing import Dict, List

import requests

LOGGER = logging.getLogger(__name__)

DATAMUSE_URL = "https://api.datamuse.com/words"
DATAMUSE_DEFAULT_MAX = 100
DEFAULT_DATAMUSE_MAX = 550
DEFAULT_TIMEOUT = 10.0


class DatamuseError(RuntimeError):
    """Raised when the Datamuse API cannot be reached or returns nothing."""


class DatamuseClient:
    """Thin wrapper around ``GET /words``.

    Each call issues exactly one request and blocks until it answers or
    ``timeout`` seconds pass.
    """

    def __init__(
        self,
        base_url: str = DATAMUSE_URL,
        max_results: int = DEFAULT_DATAMUSE_MAX,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url
        self.max_results = max_results
        self.timeout = timeout

    def build_params(self, rhyme: str = "", related: str = "", language: str = "en") -> Dict[str, str]:
        params: Dict[str, str] = {}
        if language != "en":
            params["v"] = language
        if rhyme:
            params["rel_rhy"] = rhyme
        if related:
            params["ml"] = related
        if self.max_results != DATAMUSE_DEFAULT_MAX:
            params["max"] = str(self.max_results)
        return params

    def words(self, rhyme: str = "", related: str = "", language: str = "en") -> List[str]:
        """Return candidate words for the given rhyme and meaning constraints."""

        params = self.build_params(rhyme, related, language)
        LOGGER.debug("Datamuse request %s %s", self.base_url, params)
        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise DatamuseError(f"Error connecting to Datamuse API: {exc}") from exc
        if not response.text.strip():
            raise DatamuseError(f"Empty response from Datamuse API for {params}")
        try:
            results = response.json()
        except ValueError as exc:
            raise DatamuseError("Datamuse API returned malformed JSON") from exc
        if not isinstance(results, list):
            raise DatamuseError("Datamuse API returned an unexpected payload")
        return [result["word"] for result in results if "word" in result]

    def related_words(self, word: str, include_self: bool = False, language: str = "en") -> List[str]:
        words = self.words(related=word, language=language)
        if include_self:
            words.append(word)
        return words

    def related_rhymes(self, rhyme: str, related: str, language: str = "en") -> List[str]:
        return self.words(rhyme=rhyme, related=related, language=language)
