import os
import logging
from typing import Optional

from .io import ensure_dir

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(output_dir: Optional[str] = None, level: str = 'INFO',
                  name: str = 'hangul_pron') -> logging.Logger:
    """로깅을 설정합니다.

    콘솔 핸들러를 붙이고, output_dir 이 주어지면 파일 핸들러도 붙입니다.

    Args:
        output_dir (Optional[str]): 로그 파일을 저장할 디렉토리
        level (str): 로그 레벨
        name (str): 로거 이름

    Returns:
        logging.Logger: 설정된 로거
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())

    # 다시 호출해도 핸들러가 중복되지 않도록
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if output_dir:
        ensure_dir(output_dir)
        log_file = os.path.join(output_dir, 'hangul_pron.log')
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
