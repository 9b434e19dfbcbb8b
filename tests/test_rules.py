from hangul_pron.g2p.hangul import decompose
from hangul_pron.g2p.rules import (
    RuleContext,
    transform_9th_10th_11th,
    transform_12th,
    transform_13th_and_14th,
    transform_16th,
    transform_17th,
    transform_18th,
    transform_19th,
    transform_20th,
    transform_hard_conversion,
    transform_nl_assimilation,
)


def apply(rule, pair, index=0, word='', hard_conversion=True):
    """두 글자를 분해해 규칙을 적용하고 결과 음절을 돌려준다 (다음 음절 없음은 None)"""
    current = decompose(pair[0])
    next_ = decompose(pair[1]) if len(pair) > 1 else None
    context = RuleContext(index=index, word=word or pair, hard_conversion=hard_conversion)
    return rule(current, next_, context)


def test_hard_conversion():
    """받침 'ㄱ' 뒤의 'ㅂ' 은 된소리"""
    current, next_ = apply(transform_hard_conversion, '국밥')
    assert current == decompose('국')
    assert next_ == decompose('빱')


def test_hard_conversion_stem_cluster():
    _, next_ = apply(transform_hard_conversion, '앉다')
    assert next_ == decompose('따')


def test_hard_conversion_ignores_sonorant_final():
    _, next_ = apply(transform_hard_conversion, '신고')
    assert next_ == decompose('고')


def test_16th_letter_name():
    """자모 이름은 정해진 소리로 연음"""
    current, next_ = apply(transform_16th, '귿이', index=1, word='디귿이')
    assert current == decompose('그')
    assert next_ == decompose('시')


def test_16th_needs_letter_name():
    current, next_ = apply(transform_16th, '귿이', index=1, word='마귿이')
    assert current == decompose('귿')
    assert next_ == decompose('이')


def test_16th_first_syllable_unchanged():
    current, _ = apply(transform_16th, '귿이', index=0, word='귿이')
    assert current == decompose('귿')


def test_17th_palatalization():
    current, next_ = apply(transform_17th, '굳이')
    assert (current, next_) == (decompose('구'), decompose('지'))

    current, next_ = apply(transform_17th, '훑이')
    assert (current, next_) == (decompose('훌'), decompose('치'))

    current, next_ = apply(transform_17th, '닫히')
    assert (current, next_) == (decompose('다'), decompose('치'))


def test_19th_changes_next_only():
    current, next_ = apply(transform_19th, '담력')
    assert current == decompose('담')
    assert next_ == decompose('녁')


def test_nl_assimilation():
    current, next_ = apply(transform_nl_assimilation, '신라')
    assert (current, next_) == (decompose('실'), decompose('라'))

    current, next_ = apply(transform_nl_assimilation, '칼날')
    assert (current, next_) == (decompose('칼'), decompose('랄'))


def test_18th_changes_current_only():
    """비음화는 현재 음절 받침만 바꾸고 다음 음절은 그대로 둔다"""
    current, next_ = apply(transform_18th, '국물')
    assert current == decompose('궁')
    assert next_ == decompose('물')

    current, _ = apply(transform_18th, '없는')
    assert current == decompose('엄')


def test_20th_both_sides():
    current, next_ = apply(transform_20th, '닳는')
    assert (current, next_) == (decompose('달'), decompose('른'))


def test_12th_aspiration():
    assert apply(transform_12th, '놓고') == (decompose('노'), decompose('코'))
    assert apply(transform_12th, '많고') == (decompose('만'), decompose('코'))
    assert apply(transform_12th, '각하') == (decompose('가'), decompose('카'))
    assert apply(transform_12th, '앉히') == (decompose('안'), decompose('치'))


def test_12th_h_before_s_follows_hard_conversion():
    assert apply(transform_12th, '닿소') == (decompose('다'), decompose('쏘'))
    assert apply(transform_12th, '닿소', hard_conversion=False) == (decompose('다'), decompose('소'))


def test_12th_h_before_n_and_vowel():
    assert apply(transform_12th, '놓는') == (decompose('논'), decompose('는'))
    assert apply(transform_12th, '않네') == (decompose('안'), decompose('네'))
    assert apply(transform_12th, '낳은') == (decompose('나'), decompose('은'))


def test_12th_without_next():
    current, next_ = apply(transform_12th, '좋')
    assert current == decompose('좋')
    assert next_ is None


def test_13th_single_final_liaison():
    assert apply(transform_13th_and_14th, '옷이') == (decompose('오'), decompose('시'))
    assert apply(transform_13th_and_14th, '깎아') == (decompose('까'), decompose('까'))


def test_13th_keeps_ng_final():
    assert apply(transform_13th_and_14th, '강아') == (decompose('강'), decompose('아'))


def test_liaison_rules_skip_open_syllable():
    """받침이 없는 음절에는 연음 규칙이 적용되지 않는다"""
    assert apply(transform_13th_and_14th, '가이') == (decompose('가'), decompose('이'))
    assert apply(transform_16th, '디이', index=1, word='디디이') == (decompose('디'), decompose('이'))


def test_14th_cluster_liaison():
    assert apply(transform_13th_and_14th, '닭을') == (decompose('달'), decompose('글'))
    assert apply(transform_13th_and_14th, '값이') == (decompose('갑'), decompose('씨'))
    assert apply(transform_13th_and_14th, '값이', hard_conversion=False) == (decompose('갑'), decompose('시'))


def test_9th_10th_11th_representative_finals():
    assert apply(transform_9th_10th_11th, '닭')[0] == decompose('닥')
    assert apply(transform_9th_10th_11th, '꽃')[0] == decompose('꼳')
    assert apply(transform_9th_10th_11th, '값')[0] == decompose('갑')
    assert apply(transform_9th_10th_11th, '넓다')[0] == decompose('널')


def test_9th_10th_11th_exceptions():
    assert apply(transform_9th_10th_11th, '맑께')[0] == decompose('말')
    assert apply(transform_9th_10th_11th, '밟따')[0] == decompose('밥')
    assert apply(transform_9th_10th_11th, '넓쭉')[0] == decompose('넙')


def test_9th_10th_11th_keeps_simple_finals():
    current, next_ = apply(transform_9th_10th_11th, '산')
    assert current == decompose('산')
    assert next_ is None
