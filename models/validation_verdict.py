"""
ValidationVerdict Model
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ValidationVerdict:
    """Kết quả chấm một câu trả lời"""
    is_correct: bool
    score_awarded: float
    score_max: float
    feedback_shown: str

    def to_dict(self) -> Dict:
        """Dạng lưu trữ (camelCase) cho bản ghi câu trả lời"""
        return {
            "isCorrect": self.is_correct,
            "scoreAwarded": self.score_awarded,
            "scoreMax": self.score_max,
            "feedbackShown": self.feedback_shown,
        }
