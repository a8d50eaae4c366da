"""Word frequency analyser."""
import math
from typing import Dict, List, Optional

from ..core.word_reader import DEFAULT_ENCODING, PathLike
from .base_analyser import BaseAnalyser


class WordFrequencyAnalyser(BaseAnalyser):
    """Counts the occurrences of each unique word within the text.

    Words are counted exactly as the tokenizer yields them, so "The" and
    "the" are different words.
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        super().__init__(
            "Word Frequency Analyser",
            "counts the number of unique word occurrences within the text",
            encoding=encoding,
        )
        self._word_counts: Dict[str, int] = {}

    def perform_analysis(self, path: PathLike) -> None:
        self._word_counts.clear()

        for word in self._read_words(path):
            self._word_counts[word] = self._word_counts.get(word, 0) + 1

    def _report_lines(self) -> List[str]:
        return [
            f"Most popular word is '{self.get_most_popular_word()}' "
            f"with an occurrence count of {self.get_most_popular_word_count()}",
            f"Least popular word is '{self.get_least_popular_word()}' "
            f"with an occurrence count of {self.get_least_popular_word_count()}",
            f"Unique word count is {self.get_unique_word_count()}",
        ]

    def get_most_popular_word(self) -> str:
        """Get the most popular word of the most recent analysis.

        If several words share the highest count, the first one seen is
        returned.

        Returns:
            The most popular word, or an empty string if nothing has been
            analysed
        """
        most_popular = ""
        max_count = 0
        for word, count in self._word_counts.items():
            if count > max_count:
                max_count = count
                most_popular = word
        return most_popular

    def get_most_popular_word_count(self) -> int:
        if not self._word_counts:
            return 0
        return self._word_counts[self.get_most_popular_word()]

    def get_least_popular_word(self) -> str:
        """Get the least popular word of the most recent analysis.

        If several words share the lowest count, the first one seen is
        returned.

        Returns:
            The least popular word, or an empty string if nothing has been
            analysed
        """
        least_popular = ""
        min_count = math.inf
        for word, count in self._word_counts.items():
            if count < min_count:
                min_count = count
                least_popular = word
        return least_popular

    def get_least_popular_word_count(self) -> int:
        if not self._word_counts:
            return 0
        return self._word_counts[self.get_least_popular_word()]

    def get_unique_word_count(self) -> int:
        return len(self._word_counts)

    def get_count_of(self, word: Optional[str]) -> int:
        """Get how often a word appeared in the most recent analysis.

        Returns:
            Occurrence count, 0 for None, empty or unseen words
        """
        if not word:
            return 0
        return self._word_counts.get(word, 0)
