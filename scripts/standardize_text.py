#!/usr/bin/env python3
"""
텍스트를 표준 발음(또는 로마자)으로 변환하는 스크립트
한 줄에 한 문장씩 읽어 변환한 결과를 같은 순서로 출력합니다.
"""

import sys
import argparse
from typing import Dict, List

from tqdm import tqdm

from hangul_pron.errors import COMPLETION_MODES, HangulPronunciationError, handle_pronunciation_error
from hangul_pron.g2p.romanize import Romanizer
from hangul_pron.g2p.standardize import PronunciationStandardizer, StandardizeOptions
from hangul_pron.utils.io import load_config, load_text_lines, save_text_lines
from hangul_pron.utils.logging_utils import setup_logging


def build_options(config: Dict, args: argparse.Namespace) -> StandardizeOptions:
    """설정 파일 값 위에 명령행 인자를 덮어써 변환 옵션을 만듭니다."""
    section = dict(config.get('standardize') or {})

    if args.no_hard_conversion:
        section['hard_conversion'] = False
    if args.complete is not None:
        section['complete'] = args.complete

    return StandardizeOptions.from_dict(section)


def convert_lines(lines: List[str], options: StandardizeOptions, use_romanize: bool = False) -> List[str]:
    """여러 줄을 변환합니다.

    Args:
        lines (List[str]): 변환할 줄 리스트
        options (StandardizeOptions): 변환 옵션
        use_romanize (bool): 로마자로 변환할지 여부

    Returns:
        List[str]: 변환된 줄 리스트
    """
    if use_romanize:
        converter = Romanizer(options.complete).romanize
    else:
        converter = PronunciationStandardizer(options).standardize

    return [converter(line) for line in tqdm(lines, desc="변환", disable=len(lines) < 2)]


def main():
    parser = argparse.ArgumentParser(description="한국어 표준 발음 변환")
    parser.add_argument('--config', type=str, default='configs/default.yaml', help='설정 파일 경로')
    parser.add_argument('--text', type=str, help='변환할 문장')
    parser.add_argument('--input', type=str, help='변환할 텍스트 파일 (한 줄에 한 문장)')
    parser.add_argument('--output', type=str, help='결과를 저장할 파일 (없으면 표준 출력)')
    parser.add_argument('--romanize', action='store_true', help='로마자로 변환')
    parser.add_argument('--no-hard-conversion', action='store_true', help='된소리되기를 적용하지 않음')
    parser.add_argument('--complete', choices=COMPLETION_MODES, help='단독 자모 완성 방식')

    args = parser.parse_args()

    if (args.text is None) == (args.input is None):
        parser.error("--text 와 --input 중 하나만 지정해야 합니다")

    try:
        config = load_config(args.config)
        logger = setup_logging(level=config.get('logging', {}).get('level', 'INFO'))
        encoding = config.get('io', {}).get('encoding', 'utf-8')

        options = build_options(config, args)
        logger.info(f"설정 파일 로드 완료: {args.config} ({options})")

        lines = [args.text] if args.text is not None else load_text_lines(args.input, encoding)
        results = convert_lines(lines, options, use_romanize=args.romanize)
    except (HangulPronunciationError, FileNotFoundError) as e:
        print(handle_pronunciation_error(e, context="standardize_text"), file=sys.stderr)
        sys.exit(1)

    if args.output:
        save_text_lines(results, args.output, encoding)
        logger.info(f"변환 결과 저장: {args.output} ({len(results)}줄)")
    else:
        for line in results:
            print(line)


if __name__ == "__main__":
    main()
