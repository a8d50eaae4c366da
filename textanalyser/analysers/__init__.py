"""Text analysers."""
from .base_analyser import AnalysisResult, BaseAnalyser
from .char_frequency_analyser import CharFrequencyAnalyser
from .dictionary_analyser import DictionaryAnalyser
from .word_frequency_analyser import WordFrequencyAnalyser

__all__ = [
    "AnalysisResult",
    "BaseAnalyser",
    "CharFrequencyAnalyser",
    "DictionaryAnalyser",
    "WordFrequencyAnalyser",
]
