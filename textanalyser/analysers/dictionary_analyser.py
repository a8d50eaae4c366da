"""Dictionary analyser."""
import logging
from typing import List, Set

from ..core.word_reader import DEFAULT_ENCODING, PathLike
from .base_analyser import BaseAnalyser

logger = logging.getLogger(__name__)


class DictionaryAnalyser(BaseAnalyser):
    """Identifies which words are present within a dictionary of known words.

    The dictionary is kept across analyses; only the known and unknown word
    sets are rebuilt on each run. Dictionary entries are stored lower-case
    while analysed words are matched exactly as given, so capitalised words
    in the text are reported as unknown.
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        super().__init__(
            "Dictionary Analyser",
            "checks for words which are present within a dictionary of known words",
            encoding=encoding,
        )
        self._encoding = encoding
        self._dictionary: Set[str] = set()
        self._known_words: Set[str] = set()
        self._unknown_words: Set[str] = set()

    def add_to_dictionary(self, path: PathLike) -> None:
        """Add the words listed in a file to the dictionary.

        The file holds one word per line. Blank lines are ignored, words are
        trimmed and stored lower-case. Existing dictionary content is kept.

        Args:
            path: Path to the dictionary file

        Raises:
            OSError: If the file cannot be opened or read
        """
        before = len(self._dictionary)
        with open(path, "r", encoding=self._encoding, errors="replace") as f:
            for line in f:
                entry = line.lower().strip()
                if entry:
                    self._dictionary.add(entry)

        logger.debug(
            "Added %d words from %s (dictionary size %d)",
            len(self._dictionary) - before, path, len(self._dictionary)
        )

    def perform_analysis(self, path: PathLike) -> None:
        self._known_words.clear()
        self._unknown_words.clear()

        for word in self._read_words(path):
            if word in self._dictionary:
                self._known_words.add(word)
            else:
                self._unknown_words.add(word)

    def _report_lines(self) -> List[str]:
        return [
            f"The dictionary word count is {len(self._dictionary)}",
            f"The number of words not present in the dictionary is {len(self._unknown_words)}",
            f"The number of words present in the dictionary is {len(self._known_words)}",
        ]

    def clear_dictionary(self) -> None:
        self._dictionary.clear()

    def get_dictionary(self) -> Set[str]:
        return self._dictionary

    def get_known_words(self) -> Set[str]:
        """Get the known words found during the most recent analysis."""
        return self._known_words

    def get_unknown_words(self) -> Set[str]:
        """Get the unknown words found during the most recent analysis."""
        return self._unknown_words
