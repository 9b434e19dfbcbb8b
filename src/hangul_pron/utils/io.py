"""
설정 파일 및 텍스트 입출력을 위한 유틸리티 함수들
"""

import os
import json
from pathlib import Path
from typing import Any, Dict, List

import yaml


def ensure_dir(directory: str) -> str:
    """디렉토리가 존재하지 않으면 생성합니다.

    Args:
        directory (str): 디렉토리 경로

    Returns:
        str: 생성된 디렉토리 경로
    """
    if directory:
        os.makedirs(directory, exist_ok=True)
    return directory


def save_json(data: Any, file_path: str, ensure_ascii: bool = False, indent: int = 2):
    """데이터를 JSON 파일로 저장합니다.

    Args:
        data: 저장할 데이터
        file_path (str): 저장할 파일 경로
        ensure_ascii (bool): ASCII 인코딩 강제 여부
        indent (int): 들여쓰기 크기
    """
    ensure_dir(os.path.dirname(file_path))

    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=ensure_ascii, indent=indent)


def load_json(file_path: str) -> Any:
    """JSON 파일을 로드합니다.

    Args:
        file_path (str): 로드할 파일 경로

    Returns:
        로드된 데이터
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def load_yaml(file_path: str) -> Any:
    """YAML 파일을 로드합니다.

    Args:
        file_path (str): 로드할 파일 경로

    Returns:
        로드된 데이터
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


def load_config(file_path: str) -> Dict:
    """설정 파일을 로드합니다.

    'inherit' 키가 있으면 같은 디렉토리의 기본 설정 파일을 먼저 읽고
    그 위에 현재 파일의 설정을 덮어씁니다.

    Args:
        file_path (str): 설정 파일 경로

    Returns:
        Dict: 설정
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"설정 파일이 존재하지 않습니다: {file_path}")

    config = load_yaml(file_path) or {}
    if "inherit" in config:
        base_path = Path(file_path).parent / config["inherit"]
        base = load_config(str(base_path))
        base.update({k: v for k, v in config.items() if k != "inherit"})
        config = base

    return config


def load_text_lines(file_path: str, encoding: str = 'utf-8') -> List[str]:
    """텍스트 파일을 줄 단위로 로드합니다 (줄바꿈 문자 제외).

    Args:
        file_path (str): 로드할 파일 경로
        encoding (str): 파일 인코딩

    Returns:
        List[str]: 줄 리스트
    """
    with open(file_path, 'r', encoding=encoding) as f:
        return [line.rstrip('\r\n') for line in f]


def save_text_lines(lines: List[str], file_path: str, encoding: str = 'utf-8'):
    """줄 리스트를 텍스트 파일로 저장합니다.

    Args:
        lines (List[str]): 저장할 줄 리스트
        file_path (str): 저장할 파일 경로
        encoding (str): 파일 인코딩
    """
    ensure_dir(os.path.dirname(file_path))

    with open(file_path, 'w', encoding=encoding) as f:
        for line in lines:
            f.write(line + '\n')
