"""
한글 음절을 초성/중성/종성으로 분해하고 다시 조합하는 모듈
"""

from dataclasses import dataclass
from typing import Dict, Optional

# 한글 음절 유니코드 범위 (가 ~ 힣)
HANGUL_START = 0xAC00
HANGUL_END = 0xD7A3

# 호환용 한글 자모 범위 (ㄱ ~ ㅣ)
JAMO_START = 0x3131
JAMO_END = 0x3163

# 중성과 종성의 개수
VOWEL_COUNT = 21
FINAL_COUNT = 28

# 초성 자음 리스트
INITIAL_CONSONANTS = [
    'ㄱ', 'ㄲ', 'ㄴ', 'ㄷ', 'ㄸ', 'ㄹ', 'ㅁ', 'ㅂ', 'ㅃ', 'ㅅ',
    'ㅆ', 'ㅇ', 'ㅈ', 'ㅉ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ'
]

# 중성 모음 리스트
MEDIAL_VOWELS = [
    'ㅏ', 'ㅐ', 'ㅑ', 'ㅒ', 'ㅓ', 'ㅔ', 'ㅕ', 'ㅖ', 'ㅗ', 'ㅘ',
    'ㅙ', 'ㅚ', 'ㅛ', 'ㅜ', 'ㅝ', 'ㅞ', 'ㅟ', 'ㅠ', 'ㅡ', 'ㅢ', 'ㅣ'
]

# 종성 자음 리스트 ('' 는 받침 없음)
FINAL_CONSONANTS = [
    '', 'ㄱ', 'ㄲ', 'ㄳ', 'ㄴ', 'ㄵ', 'ㄶ', 'ㄷ', 'ㄹ', 'ㄺ',
    'ㄻ', 'ㄼ', 'ㄽ', 'ㄾ', 'ㄿ', 'ㅀ', 'ㅁ', 'ㅂ', 'ㅄ', 'ㅅ',
    'ㅆ', 'ㅇ', 'ㅈ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ'
]

_INITIAL_INDEX = {jamo: i for i, jamo in enumerate(INITIAL_CONSONANTS)}
_MEDIAL_INDEX = {jamo: i for i, jamo in enumerate(MEDIAL_VOWELS)}
_FINAL_INDEX = {jamo: i for i, jamo in enumerate(FINAL_CONSONANTS)}

# 자음 글자를 구성 자음으로 분리 (겹자음은 두 글자로)
DISASSEMBLED_CONSONANTS_BY_CONSONANT: Dict[str, str] = {
    'ㄱ': 'ㄱ', 'ㄲ': 'ㄲ', 'ㄳ': 'ㄱㅅ', 'ㄴ': 'ㄴ', 'ㄵ': 'ㄴㅈ',
    'ㄶ': 'ㄴㅎ', 'ㄷ': 'ㄷ', 'ㄸ': 'ㄸ', 'ㄹ': 'ㄹ', 'ㄺ': 'ㄹㄱ',
    'ㄻ': 'ㄹㅁ', 'ㄼ': 'ㄹㅂ', 'ㄽ': 'ㄹㅅ', 'ㄾ': 'ㄹㅌ', 'ㄿ': 'ㄹㅍ',
    'ㅀ': 'ㄹㅎ', 'ㅁ': 'ㅁ', 'ㅂ': 'ㅂ', 'ㅃ': 'ㅃ', 'ㅄ': 'ㅂㅅ',
    'ㅅ': 'ㅅ', 'ㅆ': 'ㅆ', 'ㅇ': 'ㅇ', 'ㅈ': 'ㅈ', 'ㅉ': 'ㅉ',
    'ㅊ': 'ㅊ', 'ㅋ': 'ㅋ', 'ㅌ': 'ㅌ', 'ㅍ': 'ㅍ', 'ㅎ': 'ㅎ'
}


@dataclass(frozen=True)
class Syllable:
    """분해된 한 음절 (초성, 중성, 종성)

    종성이 없으면 ``last`` 는 빈 문자열입니다.
    """

    first: str
    middle: str
    last: str = ''

    @property
    def has_final(self) -> bool:
        return bool(self.last)


def is_complete_hangul(char: str) -> bool:
    """문자가 완성형 한글 음절인지 확인합니다.

    Args:
        char (str): 확인할 문자

    Returns:
        bool: 완성형 음절 여부
    """
    return len(char) == 1 and HANGUL_START <= ord(char) <= HANGUL_END


def is_hangul_alphabet(char: str) -> bool:
    """문자가 단독으로 쓰인 한글 자모(ㄱ~ㅣ)인지 확인합니다.

    Args:
        char (str): 확인할 문자

    Returns:
        bool: 자모 여부
    """
    return len(char) == 1 and JAMO_START <= ord(char) <= JAMO_END


def is_hangul_character(char: str) -> bool:
    """문자가 한글(완성형 음절 또는 자모)인지 확인합니다."""
    return is_complete_hangul(char) or is_hangul_alphabet(char)


def can_be_initial(jamo: str) -> bool:
    """초성으로 쓰일 수 있는 자음인지 확인합니다."""
    return jamo in _INITIAL_INDEX


def decompose(char: str) -> Optional[Syllable]:
    """한글 음절을 초성, 중성, 종성으로 분해합니다.

    완성형 한글 음절이 아니면 예외 대신 None 을 반환합니다.

    Args:
        char (str): 한글 음절

    Returns:
        Optional[Syllable]: 분해된 음절 또는 None
    """
    if not is_complete_hangul(char):
        return None

    code = ord(char) - HANGUL_START

    final_index = code % FINAL_COUNT
    vowel_index = (code // FINAL_COUNT) % VOWEL_COUNT
    consonant_index = code // (FINAL_COUNT * VOWEL_COUNT)

    return Syllable(
        first=INITIAL_CONSONANTS[consonant_index],
        middle=MEDIAL_VOWELS[vowel_index],
        last=FINAL_CONSONANTS[final_index],
    )


def compose(first: str, middle: str, last: str = '') -> str:
    """초성, 중성, 종성을 한글 음절로 조합합니다.

    Args:
        first (str): 초성
        middle (str): 중성
        last (str): 종성 (없으면 '')

    Returns:
        str: 조합된 한글 음절

    Raises:
        ValueError: 올바른 자모 조합이 아닌 경우
    """
    try:
        consonant_index = _INITIAL_INDEX[first]
        vowel_index = _MEDIAL_INDEX[middle]
        final_index = _FINAL_INDEX[last]
    except KeyError:
        raise ValueError(
            f"조합할 수 없는 자모입니다: first={first!r} middle={middle!r} last={last!r}"
        ) from None

    code = (consonant_index * VOWEL_COUNT + vowel_index) * FINAL_COUNT + final_index
    return chr(HANGUL_START + code)


def compose_syllable(syllable: Syllable) -> str:
    return compose(syllable.first, syllable.middle, syllable.last)


def split_consonant(letter: str) -> str:
    """자음 글자를 구성 자음 문자열로 분리합니다. 'ㄳ' -> 'ㄱㅅ'

    Args:
        letter (str): 자음 글자

    Returns:
        str: 구성 자음들 (분리할 수 없으면 빈 문자열)
    """
    return DISASSEMBLED_CONSONANTS_BY_CONSONANT.get(letter, '')
