"""Character frequency analyser."""
from typing import Dict, List, Optional

from ..core.word_reader import DEFAULT_ENCODING, PathLike
from .base_analyser import BaseAnalyser

# Lowercase only; uppercase vowels are counted as non-vowels
VOWELS = frozenset("aeiou")


class CharFrequencyAnalyser(BaseAnalyser):
    """Counts the occurrences of each individual character within the text."""

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        super().__init__(
            "Character Frequency Analyser",
            "counts the number of unique character occurrences within the text",
            encoding=encoding,
        )
        # Insertion order decides ties for the most popular character
        self._char_counts: Dict[str, int] = {}
        self._vowel_count = 0
        self._single_char_count = 0

    def perform_analysis(self, path: PathLike) -> None:
        self._char_counts.clear()
        self._vowel_count = 0
        self._single_char_count = 0

        for word in self._read_words(path):
            for char in word:
                self._char_counts[char] = self._char_counts.get(char, 0) + 1
                if char in VOWELS:
                    self._vowel_count += 1

            if len(word) == 1:
                self._single_char_count += 1

    def _report_lines(self) -> List[str]:
        return [
            f"Most popular character is '{self.get_most_popular_char()}' "
            f"with an occurrence count of {self.get_most_popular_char_count()}",
            f"Unique character count is {self.get_unique_char_count()}",
        ]

    def get_most_popular_char(self) -> Optional[str]:
        """Get the most popular character of the most recent analysis.

        If several characters share the highest count, the first one seen
        is returned.

        Returns:
            The most popular character, or None if nothing has been analysed
        """
        most_popular = None
        max_count = 0
        for char, count in self._char_counts.items():
            if count > max_count:
                max_count = count
                most_popular = char
        return most_popular

    def get_most_popular_char_count(self) -> int:
        most_popular = self.get_most_popular_char()
        if most_popular is None:
            return 0
        return self._char_counts[most_popular]

    def get_unique_char_count(self) -> int:
        return len(self._char_counts)

    def get_vowel_count(self) -> int:
        return self._vowel_count

    def get_non_vowel_count(self) -> int:
        return self.result.get_total_chars() - self._vowel_count

    def get_single_character_word_count(self) -> int:
        return self._single_char_count

    def get_multi_character_word_count(self) -> int:
        return self.result.get_word_count() - self._single_char_count

    def get_count_of(self, char: Optional[str]) -> int:
        """Get how often a character appeared in the most recent analysis.

        Returns:
            Occurrence count, 0 if the character never appeared
        """
        return self._char_counts.get(char, 0)
