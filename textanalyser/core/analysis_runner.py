"""Analysis dispatcher."""
import logging
from typing import Dict, Iterable, List

from ..analysers.base_analyser import BaseAnalyser
from ..analysers.char_frequency_analyser import CharFrequencyAnalyser
from ..analysers.dictionary_analyser import DictionaryAnalyser
from ..analysers.word_frequency_analyser import WordFrequencyAnalyser
from .word_reader import DEFAULT_ENCODING, PathLike

logger = logging.getLogger(__name__)

ANALYSER_KEYS = ("chars", "words", "dictionary")


class AnalysisRunner:
    """Dispatches analysis to the analyser selected by key."""

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        """Initialize one analyser of each kind."""
        self.dictionary_analyser = DictionaryAnalyser(encoding=encoding)
        self.analysers: Dict[str, BaseAnalyser] = {
            "chars": CharFrequencyAnalyser(encoding=encoding),
            "words": WordFrequencyAnalyser(encoding=encoding),
            "dictionary": self.dictionary_analyser,
        }

    def get_analyser(self, key: str) -> BaseAnalyser:
        """Get the analyser registered under a key.

        Raises:
            ValueError: If the key is not a known analyser
        """
        analyser = self.analysers.get(key)
        if analyser is None:
            raise ValueError(
                f"Unknown analyser '{key}' (choose from {', '.join(ANALYSER_KEYS)})"
            )
        return analyser

    def load_dictionaries(self, paths: Iterable[PathLike]) -> int:
        """Add each dictionary file, in order, to the dictionary analyser.

        Returns:
            Dictionary size after loading

        Raises:
            OSError: If a dictionary file cannot be read
        """
        for path in paths:
            self.dictionary_analyser.add_to_dictionary(path)
        return len(self.dictionary_analyser.get_dictionary())

    def run(self, key: str, path: PathLike) -> BaseAnalyser:
        """Run one analyser over a file.

        Args:
            key: Analyser key (see ANALYSER_KEYS)
            path: Text file to analyse

        Returns:
            The analyser, holding the results of this run

        Raises:
            ValueError: If the key is not a known analyser
            OSError: If the file cannot be read
        """
        analyser = self.get_analyser(key)
        logger.info("Running %s on %s", analyser.name, path)
        analyser.perform_analysis(path)
        logger.debug("Finished %s: %s", analyser.name, analyser.result.to_dict())
        return analyser

    def run_many(self, keys: Iterable[str], path: PathLike) -> List[BaseAnalyser]:
        """Run several analysers over the same file, in the given order."""
        keys = list(keys)
        # Validate every key before reading the file
        for key in keys:
            self.get_analyser(key)
        return [self.run(key, path) for key in keys]
