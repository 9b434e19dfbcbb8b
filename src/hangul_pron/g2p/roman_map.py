"""
한국어 자모를 로마자(국어의 로마자 표기법)로 매핑하는 모듈
"""

# 초성 자음 매핑
INITIALS = {
    'ㄱ': 'g', 'ㄲ': 'kk', 'ㄴ': 'n', 'ㄷ': 'd', 'ㄸ': 'tt',
    'ㄹ': 'r', 'ㅁ': 'm', 'ㅂ': 'b', 'ㅃ': 'pp', 'ㅅ': 's',
    'ㅆ': 'ss', 'ㅇ': '', 'ㅈ': 'j', 'ㅉ': 'jj', 'ㅊ': 'ch',
    'ㅋ': 'k', 'ㅌ': 't', 'ㅍ': 'p', 'ㅎ': 'h'
}

# 모음 매핑
VOWELS = {
    'ㅏ': 'a', 'ㅐ': 'ae', 'ㅑ': 'ya', 'ㅒ': 'yae', 'ㅓ': 'eo',
    'ㅔ': 'e', 'ㅕ': 'yeo', 'ㅖ': 'ye', 'ㅗ': 'o', 'ㅘ': 'wa',
    'ㅙ': 'wae', 'ㅚ': 'oe', 'ㅛ': 'yo', 'ㅜ': 'u', 'ㅝ': 'wo',
    'ㅞ': 'we', 'ㅟ': 'wi', 'ㅠ': 'yu', 'ㅡ': 'eu', 'ㅢ': 'ui',
    'ㅣ': 'i'
}

# 종성 매핑 (표준 발음 변환 뒤에는 대표음 7개만 남지만 모든 받침을 받는다)
FINALS = {
    '': '', 'ㄱ': 'k', 'ㄴ': 'n', 'ㄷ': 't', 'ㄹ': 'l',
    'ㅁ': 'm', 'ㅂ': 'p', 'ㅇ': 'ng',
    'ㄲ': 'k', 'ㅋ': 'k', 'ㄳ': 'k', 'ㄺ': 'k',
    'ㅅ': 't', 'ㅆ': 't', 'ㅈ': 't', 'ㅊ': 't', 'ㅌ': 't', 'ㅎ': 't',
    'ㅍ': 'p', 'ㅄ': 'p', 'ㄿ': 'p',
    'ㄵ': 'n', 'ㄶ': 'n', 'ㄻ': 'm',
    'ㄼ': 'l', 'ㄽ': 'l', 'ㄾ': 'l', 'ㅀ': 'l'
}


def get_initial_roman(char):
    """초성 자음의 로마자를 반환합니다.

    Args:
        char (str): 한국어 자음

    Returns:
        str: 로마자
    """
    return INITIALS.get(char, char)


def get_vowel_roman(char):
    """모음의 로마자를 반환합니다.

    Args:
        char (str): 한국어 모음

    Returns:
        str: 로마자
    """
    return VOWELS.get(char, char)


def get_final_roman(char):
    """종성 자음의 로마자를 반환합니다.

    Args:
        char (str): 받침 ('' 이면 받침 없음)

    Returns:
        str: 로마자
    """
    return FINALS.get(char, char)
