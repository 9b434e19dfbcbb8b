"""
표준 발음을 로마자로 변환하는 모듈
"""

from typing import List, Optional

from ..errors import InvalidConsonantError
from .hangul import can_be_initial, decompose, split_consonant
from .roman_map import VOWELS, get_final_roman, get_initial_roman, get_vowel_roman
from .standardize import PronunciationStandardizer, StandardizeOptions


def romanize_character(chars: List[str], index: int) -> str:
    """변환된 문자열의 한 글자를 로마자로 바꿉니다.

    'ㄹ' 은 모음 앞에서 'r' 로 적지만, 앞 음절 받침도 'ㄹ' 이면 'll' 이 되도록 'l' 로 적습니다.
    (울릉 -> ulleung, 대관령 -> daegwallyeong)

    Args:
        chars (List[str]): 표준 발음으로 변환된 글자 리스트
        index (int): 변환할 글자 위치

    Returns:
        str: 로마자

    Raises:
        InvalidConsonantError: 겹자음을 이루는 자음이 초성으로 쓰일 수 없는 경우
    """
    char = chars[index]

    # 완성된 음절
    syllable = decompose(char)
    if syllable is not None:
        initial = get_initial_roman(syllable.first)

        if syllable.first == 'ㄹ' and index > 0:
            previous = decompose(chars[index - 1])
            if previous is not None and previous.last == 'ㄹ':
                initial = 'l'

        return initial + get_vowel_roman(syllable.middle) + get_final_roman(syllable.last)

    # 단독 모음
    if char in VOWELS:
        return VOWELS[char]

    # 단독 자음: 겹자음은 나누어 각 자음의 초성 소리로 적는다. 'ㄳ' -> 'gs'
    consonants = split_consonant(char)
    if consonants:
        romans = []
        for consonant in consonants:
            if not can_be_initial(consonant):
                raise InvalidConsonantError(f"초성으로 쓸 수 없는 자음입니다: {consonant} ({char})")
            romans.append(get_initial_roman(consonant))
        return ''.join(romans)

    return char


class Romanizer:
    """한국어 텍스트를 로마자로 변환하는 클래스

    로마자 표기는 된소리되기를 반영하지 않으므로 된소리되기를 끈 채로 표준 발음을 구합니다.
    """

    def __init__(self, complete: Optional[str] = None):
        options = StandardizeOptions(hard_conversion=False, complete=complete)
        self.standardizer = PronunciationStandardizer(options)

    def romanize(self, text: str) -> str:
        """텍스트를 로마자로 변환합니다.

        Args:
            text (str): 한국어 텍스트

        Returns:
            str: 로마자 텍스트
        """
        chars = list(self.standardizer.standardize(text))
        return ''.join(romanize_character(chars, index) for index in range(len(chars)))

    def batch_convert(self, texts: List[str]) -> List[str]:
        return [self.romanize(text) for text in texts]


def romanize(text: str, complete: Optional[str] = None) -> str:
    """한국어 텍스트를 로마자로 변환하는 편의 함수입니다.

    Args:
        text (str): 한국어 텍스트
        complete (Optional[str]): 단독 자모 완성 방식 ('phonetic', 'letterName', None)

    Returns:
        str: 로마자 텍스트
    """
    return Romanizer(complete).romanize(text)
