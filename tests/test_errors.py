import pytest

from hangul_pron.errors import (
    ConfigurationError,
    HangulPronunciationError,
    InvalidConsonantError,
    handle_pronunciation_error,
    validate_completion_mode,
    validate_text,
)


def test_error_hierarchy():
    assert issubclass(InvalidConsonantError, HangulPronunciationError)
    assert issubclass(ConfigurationError, HangulPronunciationError)
    assert issubclass(ConfigurationError, ValueError)


def test_handle_pronunciation_error():
    assert handle_pronunciation_error(InvalidConsonantError("ㅏ")) == "자음 테이블 오류: ㅏ"
    assert handle_pronunciation_error(ConfigurationError("bad"), context="cli") == "[cli] 설정 오류: bad"
    assert handle_pronunciation_error(RuntimeError("x")).startswith("알 수 없는 오류")


def test_validate_completion_mode():
    assert validate_completion_mode(None) is None
    assert validate_completion_mode("phonetic") == "phonetic"
    assert validate_completion_mode("letterName") == "letterName"
    with pytest.raises(ConfigurationError):
        validate_completion_mode("verbose")


def test_validate_text():
    assert validate_text("국물") == "국물"
    with pytest.raises(TypeError):
        validate_text(b"bytes")
