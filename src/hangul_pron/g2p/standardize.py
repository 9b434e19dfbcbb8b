"""
한국어 텍스트를 표준 발음으로 변환하는 메인 모듈
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from ..errors import ConfigurationError, validate_completion_mode, validate_text
from .completion import complete_hangul_syllables
from .hangul import Syllable, compose_syllable
from .phrase import assemble_word, segment_word
from .rules import (
    PAIR_RULES,
    RuleContext,
    RuleResult,
    transform_9th_10th_11th,
    transform_12th,
    transform_13th_and_14th,
    transform_hard_conversion,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StandardizeOptions:
    """표준 발음 변환 옵션

    Attributes:
        hard_conversion (bool): 된소리되기 적용 여부
        complete (Optional[str]): 단독 자모 완성 방식 ('phonetic', 'letterName', None)
    """

    hard_conversion: bool = True
    complete: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.hard_conversion, bool):
            raise ConfigurationError(f"hard_conversion 은 bool 이어야 합니다: {self.hard_conversion!r}")
        validate_completion_mode(self.complete)

    @classmethod
    def from_dict(cls, config: Optional[Mapping]) -> 'StandardizeOptions':
        """설정 딕셔너리로부터 옵션을 만듭니다.

        Args:
            config (Optional[Mapping]): 'standardize' 설정 섹션

        Returns:
            StandardizeOptions: 변환 옵션

        Raises:
            ConfigurationError: 알 수 없는 키가 있거나 값이 잘못된 경우
        """
        config = dict(config or {})
        unknown = sorted(set(config) - {'hard_conversion', 'complete'})
        if unknown:
            raise ConfigurationError(f"알 수 없는 설정 키입니다: {', '.join(unknown)}")
        return cls(**config)


def apply_rules(current: Syllable, next_: Optional[Syllable], context: RuleContext) -> RuleResult:
    """현재 음절과 다음 음절에 음운 규칙을 정해진 순서대로 적용합니다.

    Args:
        current (Syllable): 현재 음절
        next_ (Optional[Syllable]): 다음 음절 (마지막 음절이면 None)
        context (RuleContext): 규칙 적용 문맥

    Returns:
        RuleResult: 변환된 (현재 음절, 다음 음절)
    """
    if next_ is not None and context.hard_conversion:
        current, next_ = transform_hard_conversion(current, next_, context)

    if next_ is not None:
        for rule in PAIR_RULES:
            current, next_ = rule(current, next_, context)

    current, next_ = transform_12th(current, next_, context)

    if next_ is not None:
        current, next_ = transform_13th_and_14th(current, next_, context)

    current, next_ = transform_9th_10th_11th(current, next_, context)

    return current, next_


class PronunciationStandardizer:
    """한국어 텍스트를 표준 발음으로 변환하는 클래스"""

    def __init__(self, options: Optional[StandardizeOptions] = None, cache_size: int = 10000):
        self.options = options or StandardizeOptions()
        self.cache_size = cache_size
        self.word_cache: Dict[str, str] = {}  # 어절 단위 변환 결과 캐시 (오래된 것부터 버림)

    def standardize(self, text: str) -> str:
        """텍스트를 표준 발음으로 변환합니다.

        어절은 공백(' ') 단위로 나누어 각각 변환하며, 규칙은 어절 경계를 넘지 않습니다.

        Args:
            text (str): 한국어 텍스트

        Returns:
            str: 표준 발음 텍스트
        """
        validate_text(text)
        if not text:
            return ''

        return ' '.join(self.standardize_word(word) for word in text.split(' '))

    def standardize_word(self, word: str) -> str:
        """한 어절을 표준 발음으로 변환합니다.

        Args:
            word (str): 공백이 없는 어절

        Returns:
            str: 표준 발음 어절
        """
        if word in self.word_cache:
            return self.word_cache[word]

        phrase = word
        if self.options.complete:
            phrase = complete_hangul_syllables(phrase, self.options.complete)

        syllables, not_hangul = segment_word(phrase)
        self._process_syllables(syllables)
        result = assemble_word(syllables, not_hangul)

        if result != word:
            logger.debug("표준 발음 변환: %s -> %s", word, result)

        if self.cache_size > 0:
            if len(self.word_cache) >= self.cache_size:
                self.word_cache.pop(next(iter(self.word_cache)))
            self.word_cache[word] = result
        return result

    def _process_syllables(self, syllables: List[Syllable]) -> List[Syllable]:
        """음절 리스트를 왼쪽부터 한 번 훑으며 규칙을 적용합니다.

        변환된 다음 음절은 바로 리스트에 다시 써서, 다음 단계에서 현재 음절로 읽힙니다.
        """
        word = ''.join(compose_syllable(syllable) for syllable in syllables)
        last_index = len(syllables) - 1

        for index in range(len(syllables)):
            current = syllables[index]
            next_ = syllables[index + 1] if index < last_index else None
            context = RuleContext(index=index, word=word, hard_conversion=self.options.hard_conversion)

            current, next_ = apply_rules(current, next_, context)

            syllables[index] = current
            if next_ is not None:
                syllables[index + 1] = next_

        return syllables

    def batch_convert(self, texts: List[str]) -> List[str]:
        """여러 텍스트를 일괄 변환합니다.

        Args:
            texts (List[str]): 한국어 텍스트 리스트

        Returns:
            List[str]: 표준 발음 텍스트 리스트
        """
        return [self.standardize(text) for text in texts]

    def clear_cache(self):
        """변환 결과 캐시를 클리어합니다."""
        self.word_cache.clear()


def standardize_pronunciation(text: str, hard_conversion: bool = True,
                              complete: Optional[str] = None) -> str:
    """한국어 텍스트를 표준 발음으로 변환하는 편의 함수입니다.

    Args:
        text (str): 한국어 텍스트
        hard_conversion (bool): 된소리되기 적용 여부 (기본값 True)
        complete (Optional[str]): 단독 자모 완성 방식. 'phonetic': ㄱ -> 그,
            'letterName': ㄱ -> 기역. 설정하지 않으면 자모를 그대로 둡니다.

    Returns:
        str: 표준 발음 텍스트
    """
    options = StandardizeOptions(hard_conversion=hard_conversion, complete=complete)
    return PronunciationStandardizer(options).standardize(text)
