"""Whitespace tokenizer that streams words from a text file.

Words are produced lazily, one at a time, so large files are never loaded
into memory in full.
"""
import logging
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"

PathLike = Union[str, Path]


def iter_words(handle: TextIO) -> Iterator[str]:
    """Yield whitespace-delimited words from an open text stream.

    The stream is closed once the words are exhausted, or when the
    generator is closed early.

    Args:
        handle: Open text stream

    Yields:
        Each word in file order
    """
    with handle:
        for line in handle:
            for word in line.split():
                yield word


class WordReader:
    """Reads words from a selected file, one call at a time."""

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        self.encoding = encoding
        self._path: Optional[str] = None
        self._handle: Optional[TextIO] = None
        self._words: Optional[Iterator[str]] = None

    @property
    def is_open(self) -> bool:
        """Check if a file is currently selected and not yet exhausted."""
        return self._words is not None

    @property
    def path(self) -> Optional[str]:
        """Path of the most recently selected file."""
        return self._path

    def select_input_file(self, path: PathLike) -> None:
        """Select the file to read words from.

        Any previously selected file is closed first.

        Args:
            path: Path to a text file

        Raises:
            OSError: If the file cannot be opened
        """
        self.close()
        handle = open(path, "r", encoding=self.encoding, errors="replace")
        self._path = str(path)
        self._handle = handle
        self._words = iter_words(handle)
        logger.debug("Selected input file %s", self._path)

    def next_word(self) -> Optional[str]:
        """Get the next word from the selected file.

        Returns:
            The next word, or None once the file is exhausted (or if no
            file is selected)
        """
        if self._words is None:
            return None
        try:
            return next(self._words)
        except StopIteration:
            self.close()
            return None

    def close(self) -> None:
        """Release the selected file. Safe to call more than once."""
        if self._words is not None:
            words, self._words = self._words, None
            words.close()
        if self._handle is not None:
            handle, self._handle = self._handle, None
            # A generator closed before its first word never entered its with block
            handle.close()
