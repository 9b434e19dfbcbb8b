"""
어절을 분해 가능한 음절과 그 외 문자로 나누고, 변환 후 다시 합치는 모듈
"""

from dataclasses import dataclass
from typing import List, Tuple

from .hangul import Syllable, compose_syllable, decompose, is_hangul_alphabet, is_hangul_character


@dataclass(frozen=True)
class NotHangul:
    """분해하지 않고 원래 위치에 되돌려 놓을 문자"""

    index: int
    literal: str


def segment_word(word: str) -> Tuple[List[Syllable], List[NotHangul]]:
    """어절을 음절 리스트와 비한글 문자 리스트로 분리합니다.

    한글이 아닌 문자와 단독 자모는 NotHangul 로 분리되며,
    index 는 원래 어절에서의 문자 위치입니다.

    Args:
        word (str): 공백이 없는 어절

    Returns:
        Tuple[List[Syllable], List[NotHangul]]: (음절 리스트, 비한글 문자 리스트)
    """
    syllables: List[Syllable] = []
    not_hangul: List[NotHangul] = []

    for index, char in enumerate(word):
        if not is_hangul_character(char) or is_hangul_alphabet(char):
            not_hangul.append(NotHangul(index=index, literal=char))
            continue

        syllable = decompose(char)
        if syllable is not None:
            syllables.append(syllable)

    return syllables, not_hangul


def assemble_word(syllables: List[Syllable], not_hangul: List[NotHangul]) -> str:
    """변환된 음절과 비한글 문자를 원래 위치에 맞춰 합칩니다.

    Args:
        syllables (List[Syllable]): 변환된 음절 리스트
        not_hangul (List[NotHangul]): 분리해 둔 비한글 문자 (index 오름차순)

    Returns:
        str: 합쳐진 어절
    """
    chars = [compose_syllable(syllable) for syllable in syllables]

    for token in not_hangul:
        chars.insert(token.index, token.literal)

    return ''.join(chars)
