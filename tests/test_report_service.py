"""Report Service 테스트"""
from types import SimpleNamespace

import pytest

from app.services import report_service


@pytest.mark.parametrize(
    "part, total, expected",
    [
        (0, 0, 0),
        (5, 0, 0),
        (1, 3, 33),
        (2, 3, 67),
        (1, 2, 50),
        (1, 8, 13),
        (3, 3, 100),
    ],
)
def test_percentage(part, total, expected):
    """반올림한 정수 %, 분모가 0이면 0"""
    assert report_service.percentage(part, total) == expected


def test_percentage_is_clamped():
    assert report_service.percentage(5, 3) == 100
    assert report_service.percentage(-1, 3) == 0


def test_build_response_stats():
    """상태별 응답 수로 정확도/확신도/숙달도 계산"""
    row = SimpleNamespace(
        total_responses=4,
        sure_correct=2,
        not_sure_correct=1,
        sure_incorrect=1,
        not_sure_incorrect=0,
    )

    stats = report_service.build_response_stats(row)

    assert stats["correct_answers"] == 3
    assert stats["incorrect_answers"] == 1
    assert stats["confident_responses"] == 3
    assert stats["unsure_responses"] == 1
    assert stats["mastered_questions"] == 2
    assert stats["accuracy"] == 75
    assert stats["confidence"] == 75
    assert stats["mastery"] == 50


def test_build_response_stats_no_responses():
    """응답이 없으면 모든 비율이 0"""
    row = SimpleNamespace(
        total_responses=0,
        sure_correct=None,
        not_sure_correct=None,
        sure_incorrect=None,
        not_sure_incorrect=None,
    )

    stats = report_service.build_response_stats(row)

    assert stats["total_responses"] == 0
    assert stats["accuracy"] == 0
    assert stats["confidence"] == 0
    assert stats["mastery"] == 0
