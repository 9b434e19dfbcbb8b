"""
한국어 텍스트를 표준 발음으로 변환하고 로마자로 표기하는 패키지
"""

from .errors import ConfigurationError, HangulPronunciationError, InvalidConsonantError
from .g2p.hangul import Syllable, compose, decompose, is_complete_hangul, is_hangul_alphabet, is_hangul_character
from .g2p.romanize import Romanizer, romanize
from .g2p.standardize import PronunciationStandardizer, StandardizeOptions, standardize_pronunciation

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "HangulPronunciationError",
    "InvalidConsonantError",
    "PronunciationStandardizer",
    "Romanizer",
    "StandardizeOptions",
    "Syllable",
    "compose",
    "decompose",
    "is_complete_hangul",
    "is_hangul_alphabet",
    "is_hangul_character",
    "romanize",
    "standardize_pronunciation",
]
