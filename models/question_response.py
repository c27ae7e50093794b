"""
QuestionResponse Model
"""

from dataclasses import dataclass
from typing import Any

from models.validation_verdict import ValidationVerdict


@dataclass
class QuestionResponse:
    """Câu trả lời đã được chấm của học sinh trong một lần làm bài"""
    response_id: str
    question_id: str
    attempt_id: str
    student_id: str
    submitted_answer: Any
    verdict: ValidationVerdict
    time_spent: float = 0.0
    submitted_at: int = 0
    status: str = "graded"
