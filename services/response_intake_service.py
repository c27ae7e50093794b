"""
Response Intake Service - Nhận, chấm và lưu câu trả lời của học sinh
"""

import logging
import threading
import time
import uuid
from typing import Any, Dict, List, Optional, Tuple

from models.exceptions import (
    DuplicateResponseError,
    QuestionConfigurationError,
    QuestionNotFoundError,
)
from models.question import Question
from models.question_response import QuestionResponse
from services.answer_validator_service import AnswerValidatorService

logger = logging.getLogger(__name__)


class QuestionRepository:
    """
    Kho câu hỏi trong bộ nhớ
    """

    def __init__(self, questions: Optional[List[Question]] = None):
        self._questions: Dict[str, Question] = {}
        self._lock = threading.Lock()
        for question in questions or []:
            self.add(question)

    def add(self, question: Question, replace: bool = True) -> Question:
        """
        Thêm câu hỏi vào kho

        Args:
            question: Câu hỏi đã được kiểm tra
            replace: Cho phép ghi đè câu hỏi cùng question_id

        Raises:
            ValueError: question_id rỗng, hoặc đã tồn tại khi replace=False
        """
        if not question.question_id:
            raise ValueError("question_id is required")
        with self._lock:
            if not replace and question.question_id in self._questions:
                raise ValueError(f"Question {question.question_id} already exists")
            self._questions[question.question_id] = question
        return question

    def get(self, question_id: str) -> Question:
        question = self._questions.get(question_id)
        if question is None:
            raise QuestionNotFoundError(f"Question {question_id} not found")
        return question

    def list_all(self) -> List[Question]:
        return list(self._questions.values())

    def __len__(self) -> int:
        return len(self._questions)


class ResponseIntakeService:
    """
    Service nhận câu trả lời cho (question_id, attempt_id)

    Luồng: load câu hỏi -> AnswerValidatorService.validate -> lưu verdict cùng
    câu trả lời gốc. Mỗi câu hỏi chỉ được trả lời một lần trong một lần làm bài
    (trừ khi bật allow_resubmission).
    """

    def __init__(self, question_repository: QuestionRepository, allow_resubmission: bool = False):
        self.question_repository = question_repository
        self.allow_resubmission = allow_resubmission
        self._responses: Dict[Tuple[str, str], QuestionResponse] = {}
        self._lock = threading.Lock()

    def submit_answer(self,
                      question_id: str,
                      attempt_id: str,
                      student_id: str,
                      submitted_answer: Any,
                      time_spent: float = 0.0) -> QuestionResponse:
        """
        Chấm và lưu một câu trả lời

        Args:
            question_id: ID câu hỏi
            attempt_id: ID lần làm bài
            student_id: ID học sinh
            submitted_answer: Câu trả lời thô
            time_spent: Thời gian làm câu hỏi (giây)

        Returns:
            QuestionResponse đã lưu

        Raises:
            QuestionNotFoundError: không có câu hỏi
            DuplicateResponseError: đã trả lời câu này trong lần làm bài này
            QuestionConfigurationError: câu hỏi cấu hình sai (lỗi nội bộ)
        """
        question = self.question_repository.get(question_id)
        key = (question_id, attempt_id)

        with self._lock:
            if key in self._responses and not self.allow_resubmission:
                raise DuplicateResponseError(
                    f"Question {question_id} was already answered in attempt {attempt_id}"
                )

            try:
                verdict = AnswerValidatorService.validate(question, submitted_answer)
            except QuestionConfigurationError:
                logger.exception("Question %s is misconfigured, cannot grade attempt %s",
                                 question_id, attempt_id)
                raise

            response = QuestionResponse(
                response_id=uuid.uuid4().hex,
                question_id=question_id,
                attempt_id=attempt_id,
                student_id=student_id,
                submitted_answer=submitted_answer,
                verdict=verdict,
                time_spent=max(0.0, float(time_spent or 0.0)),
                submitted_at=int(time.time() * 1000),
            )
            self._responses[key] = response

        logger.debug("Graded question %s for attempt %s: correct=%s score=%s/%s",
                     question_id, attempt_id, verdict.is_correct,
                     verdict.score_awarded, verdict.score_max)
        return response

    def get_responses_for_attempt(self, attempt_id: str) -> List[QuestionResponse]:
        """Các câu trả lời của một lần làm bài, theo thứ tự nộp"""
        with self._lock:
            responses = [r for (_, a_id), r in self._responses.items() if a_id == attempt_id]
        return sorted(responses, key=lambda r: r.submitted_at)
