"""Base analyser class and the shared word-level result accumulator."""
import logging
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, TextIO

from ..core.word_reader import DEFAULT_ENCODING, PathLike, WordReader

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Word-level statistics recorded during an analysis run."""
    word_count: int = 0
    total_chars: int = 0
    longest_word: str = ""
    shortest_word: str = ""
    last_word: str = ""
    reset_count: int = 0

    def record_word(self, word: Optional[str]) -> None:
        """Record a word, updating the counts and length extremes.

        Surrounding whitespace is trimmed before the word is recorded. When
        several words share the longest (or shortest) length, the first one
        recorded is kept.

        Args:
            word: Word to record (None or empty words are ignored)
        """
        if not word:
            return

        trimmed = word.strip()
        if self.word_count == 0:
            self.longest_word = trimmed
            self.shortest_word = trimmed
        elif len(trimmed) > len(self.longest_word):
            self.longest_word = trimmed
        elif len(trimmed) < len(self.shortest_word):
            self.shortest_word = trimmed

        self.last_word = trimmed
        self.word_count += 1
        self.total_chars += len(trimmed)

    def get_total_chars(self) -> int:
        return self.total_chars

    def get_word_count(self) -> int:
        return self.word_count

    def get_reset_count(self) -> int:
        """Get the number of times reset() has been called."""
        return self.reset_count

    def get_longest_word(self) -> str:
        return self.longest_word

    def get_shortest_word(self) -> str:
        return self.shortest_word

    def get_last_word(self) -> str:
        return self.last_word

    def get_ave_word_length(self) -> float:
        """Get the average length of all recorded words.

        Returns:
            Mean word length, or 0.0 if no words have been recorded
        """
        if self.word_count > 0:
            return self.total_chars / self.word_count
        return 0.0

    def reset(self) -> None:
        """Clear the recorded statistics and bump the reset count."""
        self.reset_count += 1
        self.word_count = 0
        self.total_chars = 0
        self.longest_word = ""
        self.shortest_word = ""
        self.last_word = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word_count": self.word_count,
            "total_chars": self.total_chars,
            "ave_word_length": self.get_ave_word_length(),
            "longest_word": self.longest_word,
            "shortest_word": self.shortest_word,
            "last_word": self.last_word,
            "reset_count": self.reset_count,
        }


class BaseAnalyser(ABC):
    """Abstract base class for text analysers.

    Subclasses pull words through read_next_word(), which records every word
    in the shared AnalysisResult before handing it back.
    """

    def __init__(self, name: str, description: str, encoding: str = DEFAULT_ENCODING):
        self._name = name
        self._description = description
        self._result = AnalysisResult()
        self._reader = WordReader(encoding=encoding)

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def result(self) -> AnalysisResult:
        return self._result

    def get_result(self) -> AnalysisResult:
        """Get the result of the most recent analysis."""
        return self._result

    def select_input_file(self, path: PathLike) -> None:
        """Start a new analysis cycle on the given file.

        Args:
            path: Path to the text file to analyse

        Raises:
            OSError: If the file cannot be opened
        """
        self._result.reset()
        self._reader.select_input_file(path)

    def read_next_word(self) -> Optional[str]:
        """Read and record the next word of the selected file.

        Returns:
            The next word, or None when no words remain
        """
        word = self._reader.next_word()
        if word is not None:
            self._result.record_word(word)
        return word

    def generate_header(self, out: TextIO) -> None:
        out.write(f"{self._name}: {self._description}\n")

    def _read_words(self, path: PathLike) -> Iterator[str]:
        """Select a file and yield its words, closing it on every exit path."""
        self.select_input_file(path)
        try:
            word = self.read_next_word()
            while word is not None:
                yield word
                word = self.read_next_word()
        finally:
            self._reader.close()
        logger.debug(
            "%s read %d words from %s",
            self._name, self._result.word_count, path
        )

    @abstractmethod
    def perform_analysis(self, path: PathLike) -> None:
        """Analyse the words of a file.

        Args:
            path: Path to the text file to analyse

        Raises:
            OSError: If the file cannot be opened or read
        """
        pass

    def generate_report(self, out: Optional[TextIO] = None) -> None:
        """Write the report header and analysis results.

        Args:
            out: Text stream to write the report to (defaults to stdout)
        """
        if out is None:
            out = sys.stdout

        self.generate_header(out)
        for line in self._report_lines():
            out.write(line + "\n")

    @abstractmethod
    def _report_lines(self) -> List[str]:
        """Get the analyser-specific report lines, without the header."""
        pass
