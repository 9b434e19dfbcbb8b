"""
표준 발음 변환 관련 오류 처리를 위한 예외 클래스들
"""

from typing import Optional

COMPLETION_MODES = ('phonetic', 'letterName')


class HangulPronunciationError(Exception):
    """표준 발음 변환 관련 기본 예외 클래스"""
    pass


class InvalidConsonantError(HangulPronunciationError):
    """겹자음을 이루는 자음이 초성으로 쓰일 수 없는 경우 (자음 테이블 오류)"""
    pass


class ConfigurationError(HangulPronunciationError, ValueError):
    """설정 관련 오류"""
    pass


def handle_pronunciation_error(error: Exception, context: str = "") -> str:
    """변환 오류를 처리하고 사용자 친화적인 메시지를 반환합니다.

    Args:
        error (Exception): 발생한 오류
        context (str): 오류 발생 컨텍스트

    Returns:
        str: 사용자 친화적인 오류 메시지
    """
    prefix = f"[{context}] " if context else ""

    if isinstance(error, InvalidConsonantError):
        return f"{prefix}자음 테이블 오류: {error}"
    elif isinstance(error, ConfigurationError):
        return f"{prefix}설정 오류: {error}"
    elif isinstance(error, FileNotFoundError):
        return f"{prefix}파일 오류: {error}"
    elif isinstance(error, TypeError):
        return f"{prefix}입력 오류: {error}"
    else:
        return f"{prefix}알 수 없는 오류: {error}"


def validate_completion_mode(mode: Optional[str]) -> Optional[str]:
    """자모 완성 방식의 유효성을 검사합니다.

    Args:
        mode (Optional[str]): 'phonetic', 'letterName' 또는 None

    Returns:
        Optional[str]: 검사를 통과한 완성 방식

    Raises:
        ConfigurationError: 지원하지 않는 완성 방식인 경우
    """
    if mode is None or mode in COMPLETION_MODES:
        return mode

    raise ConfigurationError(
        f"지원하지 않는 자모 완성 방식입니다: {mode!r} (가능한 값: {', '.join(COMPLETION_MODES)})"
    )


def validate_text(text) -> str:
    """변환할 입력이 문자열인지 확인합니다.

    Raises:
        TypeError: 문자열이 아닌 경우
    """
    if not isinstance(text, str):
        raise TypeError(f"문자열을 입력해야 합니다: {type(text).__name__}")
    return text
