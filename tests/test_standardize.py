import pytest

from hangul_pron.errors import ConfigurationError
from hangul_pron.g2p.hangul import decompose
from hangul_pron.g2p.rules import TENSE_CONSONANTS, RuleContext, transform_18th, transform_19th
from hangul_pron.g2p.standardize import (
    PronunciationStandardizer,
    StandardizeOptions,
    apply_rules,
    standardize_pronunciation,
)


@pytest.mark.parametrize("text, expected", [
    ("안녕하세요", "안녕하세요"),
    ("학교", "학꾜"),
    ("국물", "궁물"),
    ("신라", "실라"),
    ("칼날", "칼랄"),
    ("담력", "담녁"),
    ("같이", "가치"),
    ("굳히다", "구치다"),
    ("좋고", "조코"),
    ("놓는", "논는"),
    ("많아", "마나"),
    ("닭을", "달글"),
    ("닭", "닥"),
    ("값이", "갑씨"),
    ("읽고", "일꼬"),
    ("맑게", "말께"),
    ("밟다", "밥따"),
    ("닳는", "달른"),
    ("없는", "엄는"),
    ("맏형", "마텽"),
    ("디귿이", "디그시"),
    ("히읗이", "히으시"),
    ("키읔이", "키으기"),
])
def test_standardize_words(text, expected):
    assert standardize_pronunciation(text) == expected


def test_empty_input():
    assert standardize_pronunciation("") == ""
    assert standardize_pronunciation("", hard_conversion=False, complete="phonetic") == ""


def test_words_are_independent():
    """규칙은 공백을 넘어 적용되지 않는다"""
    assert standardize_pronunciation("국물 신라") == "궁물 실라"
    assert standardize_pronunciation("국 물") == "국 물"
    assert standardize_pronunciation("옷  이") == "옫  이"


def test_liaison_moves_final_to_next_syllable():
    assert standardize_pronunciation("옷이") == "오시"


def test_carry_forward_between_steps():
    """앞 단계에서 바뀐 다음 음절을 다음 단계가 현재 음절로 읽는다"""
    assert standardize_pronunciation("국밥이") == "국빠비"


def test_pipeline_order():
    """'ㄹ' 의 비음화(제19항)가 받침 비음화(제18항)보다 먼저 적용된다"""
    assert standardize_pronunciation("백리") == "뱅니"
    assert standardize_pronunciation("협력") == "혐녁"

    current, next_ = decompose('백'), decompose('리')
    context = RuleContext(index=0, word='백리')
    current, next_ = transform_18th(current, next_, context)
    current, next_ = transform_19th(current, next_, context)
    assert (current, next_) == (decompose('백'), decompose('니'))


def test_apply_rules_last_syllable():
    current, next_ = apply_rules(decompose('꽃'), None, RuleContext(index=0, word='꽃'))
    assert current == decompose('꼳')
    assert next_ is None


def test_non_hangul_positions_preserved():
    assert standardize_pronunciation("A국물!") == "A궁물!"
    assert standardize_pronunciation("디귿이?") == "디그시?"
    assert standardize_pronunciation("2024년") == "2024년"
    assert standardize_pronunciation("hello, world") == "hello, world"


def test_isolated_jamo_pass_through():
    assert standardize_pronunciation("ㄱ") == "ㄱ"
    assert standardize_pronunciation("ㅋㅋ사과") == "ㅋㅋ사과"
    assert standardize_pronunciation("ㅋㅋ웃겨") == "ㅋㅋ욷껴"


def test_completion_modes():
    """같은 자모도 완성 방식에 따라 다르게 읽는다"""
    assert standardize_pronunciation("ㄱ", complete="phonetic") == "그"
    assert standardize_pronunciation("ㄱ", complete="letterName") == "기역"
    assert standardize_pronunciation("ㄱㄴ", complete="phonetic") == "그느"
    assert standardize_pronunciation("ㄱㄴ", complete="letterName") == "기영니은"
    assert standardize_pronunciation("ㅎ", complete="letterName") == "히읃"


def test_hard_conversion_disabled():
    assert standardize_pronunciation("학교", hard_conversion=False) == "학교"
    assert standardize_pronunciation("국밥", hard_conversion=False) == "국밥"
    assert standardize_pronunciation("닿소", hard_conversion=False) == "다소"


@pytest.mark.parametrize("text", [
    "학교", "국밥", "숟가락", "값이", "닿소", "앉다", "맑게", "넋이", "꽃다발", "읽지", "접시",
])
def test_hard_conversion_disabled_never_tensifies(text):
    """된소리되기를 끄면 평음 초성이 된소리로 바뀌지 않는다"""
    result = standardize_pronunciation(text, hard_conversion=False)
    assert len(result) == len(text)

    for before, after in zip(text, result):
        original = decompose(before)
        changed = decompose(after)
        assert changed.first != TENSE_CONSONANTS.get(original.first)


def test_invalid_input_type():
    with pytest.raises(TypeError):
        standardize_pronunciation(None)


def test_options_validation():
    with pytest.raises(ConfigurationError):
        StandardizeOptions(complete="simple")
    with pytest.raises(ConfigurationError):
        StandardizeOptions(hard_conversion="yes")
    with pytest.raises(ConfigurationError):
        StandardizeOptions.from_dict({"hard_conversion": True, "speed": 1})


def test_options_from_dict():
    options = StandardizeOptions.from_dict({"hard_conversion": False, "complete": "letterName"})
    assert options == StandardizeOptions(hard_conversion=False, complete="letterName")
    assert StandardizeOptions.from_dict(None) == StandardizeOptions()


def test_standardizer_cache_and_batch():
    standardizer = PronunciationStandardizer()

    assert standardizer.batch_convert(["국물", "신라 국물"]) == ["궁물", "실라 궁물"]
    assert standardizer.word_cache["국물"] == "궁물"

    standardizer.clear_cache()
    assert standardizer.word_cache == {}


def test_standardizer_cache_is_bounded():
    """캐시가 가득 차면 가장 먼저 들어온 어절부터 버린다"""
    standardizer = PronunciationStandardizer(cache_size=2)

    assert standardizer.standardize("국물 신라 학교") == "궁물 실라 학꾜"
    assert list(standardizer.word_cache) == ["신라", "학교"]
    assert standardizer.standardize("국물") == "궁물"
    assert list(standardizer.word_cache) == ["학교", "국물"]


def test_standardizer_without_cache():
    standardizer = PronunciationStandardizer(cache_size=0)

    assert standardizer.standardize("국물 국물") == "궁물 궁물"
    assert standardizer.word_cache == {}
