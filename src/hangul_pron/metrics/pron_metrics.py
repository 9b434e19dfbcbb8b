"""
표준 발음 변환 결과의 평가 메트릭
변환 결과를 기대 발음과 비교해 정확도와 오류율을 계산합니다.
"""

from typing import Dict, List, Mapping, Optional

from jiwer import cer, wer

from ..g2p.standardize import PronunciationStandardizer


def compute_metrics(refs: List[str], hyps: List[str]) -> Dict:
    return {
        "wer": wer(refs, hyps),
        "cer": cer(refs, hyps),
    }


def calculate_wer(reference: str, prediction: str) -> float:
    """Word Error Rate를 계산합니다."""
    return wer([reference], [prediction])


def calculate_cer(reference: str, prediction: str) -> float:
    """Character Error Rate를 계산합니다."""
    return cer([reference], [prediction])


def evaluate_pronunciations(pairs: List[Mapping[str, str]],
                            standardizer: Optional[PronunciationStandardizer] = None) -> Dict:
    """원문과 기대 발음 쌍으로 표준 발음 변환을 평가합니다.

    Args:
        pairs (List[Mapping[str, str]]): {'text': 원문, 'pronunciation': 기대 발음} 리스트
        standardizer (Optional[PronunciationStandardizer]): 사용할 변환기 (기본 옵션이면 None)

    Returns:
        Dict: 정확도, CER/WER, 항목별 결과
    """
    if standardizer is None:
        standardizer = PronunciationStandardizer()

    refs = []
    hyps = []
    items = []

    for pair in pairs:
        text = pair['text']
        expected = pair['pronunciation']
        predicted = standardizer.standardize(text)

        # jiwer 는 빈 참조 문자열을 받지 않으므로 오류율은 기대 발음이 있는 항목만으로 계산
        if expected:
            refs.append(expected)
            hyps.append(predicted)
        items.append({
            'text': text,
            'expected': expected,
            'predicted': predicted,
            'correct': predicted == expected,
        })

    total = len(items)
    if total == 0:
        return {
            'total': 0,
            'correct': 0,
            'accuracy': None,
            'wer': None,
            'cer': None,
            'items': [],
        }

    correct = sum(1 for item in items if item['correct'])

    if refs:
        metrics = compute_metrics(refs, hyps)
    else:
        metrics = {'wer': None, 'cer': None}

    return {
        'total': total,
        'correct': correct,
        'accuracy': correct / total,
        'wer': metrics['wer'],
        'cer': metrics['cer'],
        'items': items,
    }
