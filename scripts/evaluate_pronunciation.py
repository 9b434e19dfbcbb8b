#!/usr/bin/env python3
"""
표준 발음 변환 평가 스크립트
원문과 기대 발음이 담긴 매니페스트로 변환 정확도와 CER/WER 을 계산합니다.
"""

import sys
import argparse

from hangul_pron.errors import HangulPronunciationError, handle_pronunciation_error
from hangul_pron.g2p.standardize import PronunciationStandardizer, StandardizeOptions
from hangul_pron.metrics.pron_metrics import evaluate_pronunciations
from hangul_pron.utils.io import load_config, load_json, save_json
from hangul_pron.utils.logging_utils import setup_logging


def main():
    parser = argparse.ArgumentParser(description="표준 발음 변환 평가")
    parser.add_argument('--config', type=str, default='configs/default.yaml', help='설정 파일 경로')
    parser.add_argument('--manifest', type=str, default='data/reference_pronunciations.json',
                        help='평가 매니페스트 ({"text", "pronunciation"} 리스트)')
    parser.add_argument('--output', type=str, help='평가 결과를 저장할 JSON 파일')
    parser.add_argument('--output_dir', type=str, help='로그 파일 디렉토리')

    args = parser.parse_args()

    try:
        config = load_config(args.config)
        logger = setup_logging(args.output_dir, level=config.get('logging', {}).get('level', 'INFO'))
        logger.info(f"설정 파일 로드 완료: {args.config}")

        options = StandardizeOptions.from_dict(config.get('standardize'))
        pairs = load_json(args.manifest)
        logger.info(f"매니페스트 로드 완료: {args.manifest} ({len(pairs)}개)")

        report = evaluate_pronunciations(pairs, PronunciationStandardizer(options))
    except (HangulPronunciationError, FileNotFoundError) as e:
        print(handle_pronunciation_error(e, context="evaluate_pronunciation"), file=sys.stderr)
        sys.exit(1)

    logger.info("=== 평가 결과 ===")
    if report['total']:
        logger.info(f"  정확도: {report['accuracy']:.4f} ({report['correct']}/{report['total']})")
        if report['cer'] is not None:
            logger.info(f"  CER: {report['cer']:.4f}")
            logger.info(f"  WER: {report['wer']:.4f}")
    else:
        logger.info("  평가할 항목이 없습니다")

    for item in report['items']:
        if not item['correct']:
            logger.info(f"  불일치: {item['text']} -> {item['predicted']} (기대: {item['expected']})")

    if args.output:
        save_json(report, args.output)
        logger.info(f"평가 결과 저장: {args.output}")


if __name__ == "__main__":
    main()
