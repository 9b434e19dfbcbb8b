"""
표준 발음법의 음운 규칙들

각 규칙은 (현재 음절, 다음 음절, 문맥)을 받아 (현재 음절, 다음 음절)을 돌려주는
순수 함수입니다. 조건에 맞지 않으면 입력을 그대로 돌려줍니다.
"""

from dataclasses import dataclass, replace
from typing import Callable, Optional, Tuple

from .hangul import Syllable, split_consonant

RuleResult = Tuple[Syllable, Optional[Syllable]]


@dataclass(frozen=True)
class RuleContext:
    """규칙 적용 문맥

    Attributes:
        index (int): 현재 음절의 위치
        word (str): 어절의 한글 음절만 이어 붙인 원문 (index 로 바로 접근)
        hard_conversion (bool): 된소리되기 적용 여부
    """

    index: int
    word: str = ''
    hard_conversion: bool = True


Rule = Callable[[Syllable, Optional[Syllable], RuleContext], RuleResult]

# 된소리 (경음)
TENSE_CONSONANTS = {'ㄱ': 'ㄲ', 'ㄷ': 'ㄸ', 'ㅂ': 'ㅃ', 'ㅅ': 'ㅆ', 'ㅈ': 'ㅉ'}

# 받침 대표음별 묶음
K_FINALS = frozenset(['ㄱ', 'ㄲ', 'ㅋ', 'ㄳ', 'ㄺ'])
T_FINALS = frozenset(['ㄷ', 'ㅅ', 'ㅆ', 'ㅈ', 'ㅊ', 'ㅌ', 'ㅎ'])
P_FINALS = frozenset(['ㅂ', 'ㅍ', 'ㄼ', 'ㄿ', 'ㅄ'])

# 제23항: 된소리되기를 일으키는 받침
HARDENING_FINALS = (K_FINALS | T_FINALS | P_FINALS) - {'ㅎ'}
# 제24·25항: 용언 어간에만 나타나는 겹받침
STEM_CLUSTER_FINALS = frozenset(['ㄵ', 'ㄻ', 'ㄾ'])

# 제16항: 한글 자모 이름의 특별한 연음
LETTER_NAME_LIAISON = {
    '디귿': 'ㅅ', '지읒': 'ㅅ', '치읓': 'ㅅ', '키읔': 'ㄱ',
    '티읕': 'ㅅ', '피읖': 'ㅂ', '히읗': 'ㅅ'
}

# 제17항: 받침 -> (남는 받침, 구개음화된 초성)
PALATALIZATION = {'ㄷ': ('', 'ㅈ'), 'ㅌ': ('', 'ㅊ'), 'ㄾ': ('ㄹ', 'ㅊ')}

# 제19항: 뒤 음절 'ㄹ' 을 [ㄴ] 으로 바꾸는 받침
LIQUID_NASALIZING_FINALS = frozenset(['ㅁ', 'ㅇ']) | K_FINALS | P_FINALS

# 제18항: 비음화
NASALIZATION = {
    **{final: 'ㅇ' for final in K_FINALS},
    **{final: 'ㄴ' for final in T_FINALS},
    **{final: 'ㅁ' for final in P_FINALS},
}

# 제12항: ㅎ 받침 -> ㅎ 을 뺀 나머지 받침
H_FINALS = {'ㅎ': '', 'ㄶ': 'ㄴ', 'ㅀ': 'ㄹ'}
ASPIRATED_CONSONANTS = {'ㄱ': 'ㅋ', 'ㄷ': 'ㅌ', 'ㅈ': 'ㅊ', 'ㅂ': 'ㅍ'}
# 제12항 [붙임]: 받침 -> (남는 받침, 뒤 'ㅎ' 과 합쳐진 초성)
ASPIRATION_BEFORE_H = {
    'ㄱ': ('', 'ㅋ'), 'ㄺ': ('ㄹ', 'ㅋ'),
    'ㄷ': ('', 'ㅌ'), 'ㅅ': ('', 'ㅌ'), 'ㅊ': ('', 'ㅌ'), 'ㅌ': ('', 'ㅌ'),
    'ㅂ': ('', 'ㅍ'), 'ㄼ': ('ㄹ', 'ㅍ'),
    'ㅈ': ('', 'ㅊ'), 'ㄵ': ('ㄴ', 'ㅊ'),
}

# 제9·10·11항: 받침 대표음
REPRESENTATIVE_FINALS = {
    'ㄲ': 'ㄱ', 'ㅋ': 'ㄱ', 'ㄳ': 'ㄱ', 'ㄺ': 'ㄱ',
    'ㅅ': 'ㄷ', 'ㅆ': 'ㄷ', 'ㅈ': 'ㄷ', 'ㅊ': 'ㄷ', 'ㅌ': 'ㄷ', 'ㅎ': 'ㄷ',
    'ㅍ': 'ㅂ', 'ㅄ': 'ㅂ', 'ㄿ': 'ㅂ',
    'ㄵ': 'ㄴ', 'ㄶ': 'ㄴ',
    'ㄻ': 'ㅁ',
    'ㄼ': 'ㄹ', 'ㄽ': 'ㄹ', 'ㄾ': 'ㄹ', 'ㅀ': 'ㄹ',
}

SILENT_INITIAL = 'ㅇ'


def transform_hard_conversion(current: Syllable, next_: Optional[Syllable],
                              context: RuleContext) -> RuleResult:
    """된소리되기 (제23~25항): 받침 뒤의 'ㄱ, ㄷ, ㅂ, ㅅ, ㅈ' 을 된소리로 바꿉니다."""
    if next_ is None or next_.first not in TENSE_CONSONANTS:
        return current, next_

    if current.last in HARDENING_FINALS or current.last in STEM_CLUSTER_FINALS:
        next_ = replace(next_, first=TENSE_CONSONANTS[next_.first])

    return current, next_


def transform_16th(current: Syllable, next_: Optional[Syllable],
                   context: RuleContext) -> RuleResult:
    """제16항: 한글 자모 이름의 받침은 모음 앞에서 정해진 소리로 연음합니다.

    디귿이[디그시], 키읔이[키으기], 피읖에[피으베]
    """
    if next_ is None or not current.has_final or next_.first != SILENT_INITIAL:
        return current, next_
    if context.index < 1:
        return current, next_

    letter_name = context.word[context.index - 1:context.index + 1]
    initial = LETTER_NAME_LIAISON.get(letter_name)
    if initial is None:
        return current, next_

    return replace(current, last=''), replace(next_, first=initial)


def transform_17th(current: Syllable, next_: Optional[Syllable],
                   context: RuleContext) -> RuleResult:
    """제17항 구개음화: 받침 'ㄷ, ㅌ(ㄾ)' 이 'ㅣ' 와 만나면 [ㅈ, ㅊ] 으로 발음합니다.

    굳이[구지], 밭이[바치], 벼훑이[벼훌치], 굳히다[구치다]
    """
    if next_ is None or next_.middle != 'ㅣ':
        return current, next_

    if next_.first == SILENT_INITIAL and current.last in PALATALIZATION:
        last, initial = PALATALIZATION[current.last]
        return replace(current, last=last), replace(next_, first=initial)

    if next_.first == 'ㅎ' and current.last == 'ㄷ':
        return replace(current, last=''), replace(next_, first='ㅊ')

    return current, next_


def transform_19th(current: Syllable, next_: Optional[Syllable],
                   context: RuleContext) -> RuleResult:
    """제19항: 받침 'ㅁ, ㅇ, ㄱ, ㅂ' 뒤의 'ㄹ' 은 [ㄴ] 으로 발음합니다. 다음 음절만 바뀝니다."""
    if next_ is None or next_.first != 'ㄹ':
        return current, next_

    if current.last in LIQUID_NASALIZING_FINALS:
        next_ = replace(next_, first='ㄴ')

    return current, next_


def transform_nl_assimilation(current: Syllable, next_: Optional[Syllable],
                              context: RuleContext) -> RuleResult:
    """제20항 유음화: 'ㄴ' 은 'ㄹ' 의 앞이나 뒤에서 [ㄹ] 로 발음합니다.

    신라[실라], 칼날[칼랄]
    """
    if next_ is None:
        return current, next_

    if current.last == 'ㄴ' and next_.first == 'ㄹ':
        return replace(current, last='ㄹ'), next_
    if current.last == 'ㄹ' and next_.first == 'ㄴ':
        return current, replace(next_, first='ㄹ')

    return current, next_


def transform_18th(current: Syllable, next_: Optional[Syllable],
                   context: RuleContext) -> RuleResult:
    """제18항 비음화: 'ㄴ, ㅁ' 앞의 파열음 받침을 [ㅇ, ㄴ, ㅁ] 으로 바꿉니다. 현재 음절만 바뀝니다."""
    if next_ is None or next_.first not in ('ㄴ', 'ㅁ'):
        return current, next_

    nasal = NASALIZATION.get(current.last)
    if nasal is not None:
        current = replace(current, last=nasal)

    return current, next_


def transform_20th(current: Syllable, next_: Optional[Syllable],
                   context: RuleContext) -> RuleResult:
    """제20항 [붙임]: 'ㄾ, ㅀ' 뒤의 'ㄴ' 은 [ㄹ] 로 발음합니다. 닳는[달른], 뚫는[뚤른]"""
    if next_ is None or next_.first != 'ㄴ' or current.last not in ('ㄾ', 'ㅀ'):
        return current, next_

    return replace(current, last='ㄹ'), replace(next_, first='ㄹ')


def transform_12th(current: Syllable, next_: Optional[Syllable],
                   context: RuleContext) -> RuleResult:
    """제12항: 받침 'ㅎ' 과 초성 'ㅎ' 의 발음

    1. ㅎ(ㄶ, ㅀ) + ㄱ, ㄷ, ㅈ -> [ㅋ, ㅌ, ㅊ]  놓고[노코]
       ㄱ(ㄺ), ㄷ, ㅂ(ㄼ), ㅈ(ㄵ) + ㅎ -> [ㅋ, ㅌ, ㅍ, ㅊ]  각하[가카]
    2. ㅎ(ㄶ, ㅀ) + ㅅ -> [ㅆ]  닿소[다쏘]
    3. ㅎ + ㄴ -> [ㄴ], ㄶ/ㅀ + ㄴ 은 ㅎ 탈락  놓는[논는], 않네[안네]
    4. ㅎ(ㄶ, ㅀ) + 모음 -> ㅎ 탈락  낳은[나은], 많아[마나]
    """
    if next_ is None:
        return current, next_

    if current.last in H_FINALS:
        rest = H_FINALS[current.last]

        if next_.first in ('ㄱ', 'ㄷ', 'ㅈ'):
            return replace(current, last=rest), replace(next_, first=ASPIRATED_CONSONANTS[next_.first])
        if next_.first == 'ㅅ':
            if context.hard_conversion:
                next_ = replace(next_, first='ㅆ')
            return replace(current, last=rest), next_
        if next_.first == 'ㄴ':
            return replace(current, last=rest or 'ㄴ'), next_
        if next_.first == SILENT_INITIAL:
            return replace(current, last=rest), next_

        return current, next_

    if next_.first == 'ㅎ' and current.last in ASPIRATION_BEFORE_H:
        last, initial = ASPIRATION_BEFORE_H[current.last]
        return replace(current, last=last), replace(next_, first=initial)

    return current, next_


def transform_13th_and_14th(current: Syllable, next_: Optional[Syllable],
                            context: RuleContext) -> RuleResult:
    """제13·14항 연음: 받침을 모음으로 시작하는 뒤 음절의 첫소리로 옮깁니다.

    겹받침은 뒤엣것만 옮기며, 이때 'ㅅ' 은 된소리로 발음합니다.
    옷이[오시], 깎아[까까], 닭을[달글], 값을[갑쓸]
    """
    if next_ is None or next_.first != SILENT_INITIAL:
        return current, next_
    if not current.has_final or current.last == 'ㅇ':
        return current, next_

    parts = split_consonant(current.last)
    if len(parts) == 2:
        last, initial = parts[0], parts[1]
        if initial == 'ㅅ' and context.hard_conversion:
            initial = 'ㅆ'
    else:
        last, initial = '', current.last

    return replace(current, last=last), replace(next_, first=initial)


def _keeps_p_sound(current: Syllable, next_: Optional[Syllable]) -> bool:
    # 제10항 다만: '밟-' 은 자음 앞에서 [밥], '넓-' 은 '넓죽하다, 넓둥글다' 에서 [넙]
    if current.first == 'ㅂ' and current.middle == 'ㅏ':
        return next_ is None or next_.first != SILENT_INITIAL
    if current.first == 'ㄴ' and current.middle == 'ㅓ' and next_ is not None and next_.middle == 'ㅜ':
        return (next_.first in ('ㅈ', 'ㅉ') and next_.last == 'ㄱ') or \
            (next_.first in ('ㄷ', 'ㄸ') and next_.last == 'ㅇ')
    return False


def transform_9th_10th_11th(current: Syllable, next_: Optional[Syllable],
                            context: RuleContext) -> RuleResult:
    """제9·10·11항: 받침을 7개 대표음 [ㄱ, ㄴ, ㄷ, ㄹ, ㅁ, ㅂ, ㅇ] 중 하나로 발음합니다.

    용언 어간 'ㄺ' 은 'ㄱ' 앞에서 [ㄹ] 로 발음합니다. 맑게[말께]
    """
    final = current.last
    if final not in REPRESENTATIVE_FINALS:
        return current, next_

    if final == 'ㄺ' and next_ is not None and next_.first in ('ㄱ', 'ㄲ'):
        representative = 'ㄹ'
    elif final == 'ㄼ' and _keeps_p_sound(current, next_):
        representative = 'ㅂ'
    else:
        representative = REPRESENTATIVE_FINALS[final]

    return replace(current, last=representative), next_


# 다음 음절이 있을 때 된소리되기 다음에 순서대로 적용하는 규칙들
PAIR_RULES: Tuple[Rule, ...] = (
    transform_16th,
    transform_17th,
    transform_19th,
    transform_nl_assimilation,
    transform_18th,
    transform_20th,
)
