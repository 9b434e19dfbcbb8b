"""
단독으로 쓰인 한글 자모를 읽는 소리대로 완성된 음절로 바꾸는 모듈

- phonetic: 음가대로 읽기 (ㄱ -> 그)
- letterName: 자모 이름으로 읽기 (ㄱ -> 기역)
"""

import re
from typing import Dict

from ..errors import validate_completion_mode

_VOWEL_COMPLETIONS = {
    'ㅏ': '아', 'ㅑ': '야', 'ㅓ': '어', 'ㅕ': '여', 'ㅗ': '오',
    'ㅛ': '요', 'ㅜ': '우', 'ㅠ': '유', 'ㅡ': '으', 'ㅣ': '이',
    'ㅐ': '애', 'ㅒ': '얘', 'ㅔ': '에', 'ㅖ': '예', 'ㅘ': '와',
    'ㅙ': '왜', 'ㅚ': '외', 'ㅝ': '워', 'ㅞ': '웨', 'ㅟ': '위', 'ㅢ': '의'
}

COMPLETION_MAPS: Dict[str, Dict[str, str]] = {
    'phonetic': {
        'ㄱ': '그', 'ㄴ': '느', 'ㄷ': '드', 'ㄹ': '르', 'ㅁ': '므',
        'ㅂ': '브', 'ㅅ': '스', 'ㅇ': '으', 'ㅈ': '즈', 'ㅊ': '츠',
        'ㅋ': '크', 'ㅌ': '트', 'ㅍ': '프', 'ㅎ': '흐',
        'ㄲ': '끄', 'ㄸ': '뜨', 'ㅃ': '쁘', 'ㅆ': '쓰', 'ㅉ': '쯔',
        'ㄳ': '그스', 'ㄵ': '느즈', 'ㄶ': '느흐', 'ㄺ': '르그', 'ㄻ': '르므',
        'ㄼ': '르브', 'ㄽ': '르스', 'ㄾ': '르트', 'ㄿ': '르프', 'ㅀ': '르흐',
        'ㅄ': '브스',
        **_VOWEL_COMPLETIONS,
    },
    'letterName': {
        'ㄱ': '기역', 'ㄴ': '니은', 'ㄷ': '디귿', 'ㄹ': '리을', 'ㅁ': '미음',
        'ㅂ': '비읍', 'ㅅ': '시옷', 'ㅇ': '이응', 'ㅈ': '지읒', 'ㅊ': '치읓',
        'ㅋ': '키읔', 'ㅌ': '티읕', 'ㅍ': '피읖', 'ㅎ': '히읗',
        'ㄲ': '쌍기역', 'ㄸ': '쌍디귿', 'ㅃ': '쌍비읍', 'ㅆ': '쌍시옷', 'ㅉ': '쌍지읒',
        'ㄳ': '기역시옷', 'ㄵ': '니은지읒', 'ㄶ': '니은히읗', 'ㄺ': '리을기역',
        'ㄻ': '리을미음', 'ㄼ': '리을비읍', 'ㄽ': '리을시옷', 'ㄾ': '리을티읕',
        'ㄿ': '리을피읖', 'ㅀ': '리을히읗', 'ㅄ': '비읍시옷',
        **_VOWEL_COMPLETIONS,
    },
}

_JAMO_PATTERN = re.compile('[ㄱ-ㅣ]')


def complete_hangul_syllables(text: str, mode: str) -> str:
    """텍스트 안의 단독 자모를 완성된 음절로 바꿉니다.

    Args:
        text (str): 변환할 텍스트
        mode (str): 'phonetic' 또는 'letterName' (None 이면 그대로 반환)

    Returns:
        str: 자모가 음절로 바뀐 텍스트
    """
    if validate_completion_mode(mode) is None:
        return text

    completion_map = COMPLETION_MAPS[mode]
    return _JAMO_PATTERN.sub(lambda m: completion_map.get(m.group(0), m.group(0)), text)
