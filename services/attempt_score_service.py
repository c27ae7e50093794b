"""
Attempt Score Service - Tổng hợp điểm của một lần làm bài
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from models.question_response import QuestionResponse


@dataclass(frozen=True)
class AttemptScore:
    """Điểm tổng của một lần làm bài"""
    attempt_id: str
    score: float
    max_score: float
    percentage: float
    normalized_score: float
    answered_count: int
    correct_count: int


class AttemptScoreService:
    """
    Service tổng hợp verdict của từng câu thành điểm của cả lần làm bài

    Chỉ dùng score_awarded / score_max. normalized_score nằm trong [0, 1],
    là giá trị gửi về LMS khi passback điểm.
    """

    @staticmethod
    def summarize(attempt_id: str, responses: List[QuestionResponse]) -> AttemptScore:
        """
        Tính điểm tổng

        Args:
            attempt_id: ID lần làm bài
            responses: Các câu trả lời đã chấm của lần làm bài đó

        Returns:
            AttemptScore
        """
        if not responses:
            return AttemptScore(
                attempt_id=attempt_id,
                score=0.0,
                max_score=0.0,
                percentage=0.0,
                normalized_score=0.0,
                answered_count=0,
                correct_count=0,
            )

        awarded = np.array([r.verdict.score_awarded for r in responses], dtype=float)
        maximum = np.array([r.verdict.score_max for r in responses], dtype=float)

        score = float(np.sum(awarded))
        max_score = float(np.sum(maximum))
        normalized = score / max_score if max_score > 0 else 0.0
        normalized = max(0.0, min(1.0, normalized))

        return AttemptScore(
            attempt_id=attempt_id,
            score=score,
            max_score=max_score,
            percentage=round(normalized * 100.0, 2),
            normalized_score=normalized,
            answered_count=len(responses),
            correct_count=sum(1 for r in responses if r.verdict.is_correct),
        )
