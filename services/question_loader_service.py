"""
Question Loader Service - Tạo Question từ dữ liệu soạn câu hỏi
"""

import json
import logging
from typing import Dict, List

from models.exceptions import QuestionConfigurationError, UnknownQuestionTypeError
from models.question import (
    QUESTION_CLASSES,
    MultipleChoiceQuestion,
    NumericQuestion,
    Question,
    QuestionFeedback,
    QuestionType,
    ShortTextQuestion,
)

logger = logging.getLogger(__name__)


class QuestionLoaderService:
    """
    Service để chuyển payload soạn câu hỏi (camelCase) thành Question

    Đây là chỗ chặn câu hỏi sai cấu hình (thiếu đáp án, tolerance âm,
    đáp án không khớp loại câu hỏi) trước khi chúng đến được AnswerValidatorService.
    """

    @staticmethod
    def build_question(data: Dict) -> Question:
        """
        Tạo Question từ một payload

        Args:
            data: {questionId, type, correctAnswer, config, points, feedback}

        Returns:
            Subclass Question tương ứng với `type`

        Raises:
            UnknownQuestionTypeError: `type` không hợp lệ
            QuestionConfigurationError: thiếu trường hoặc sai định dạng
        """
        if not isinstance(data, dict):
            raise QuestionConfigurationError("Question payload must be an object")

        question_id = str(data.get('questionId', '') or '')
        raw_type = data.get('type')
        try:
            question_type = QuestionType(raw_type)
        except ValueError:
            raise UnknownQuestionTypeError(f"Question {question_id}: unsupported type {raw_type!r}")

        if data.get('correctAnswer') is None:
            raise QuestionConfigurationError(f"Question {question_id}: correctAnswer is required")

        config = data.get('config') or {}
        if not isinstance(config, dict):
            raise QuestionConfigurationError(f"Question {question_id}: config must be an object")

        common = {
            'question_id': question_id,
            'points': data.get('points'),
            'feedback': QuestionLoaderService._build_feedback(question_id, data.get('feedback')),
            'correct_answer': data['correctAnswer'],
        }

        question_class = QUESTION_CLASSES[question_type]
        if issubclass(question_class, MultipleChoiceQuestion):
            options = config.get('options') or []
            if not isinstance(options, list):
                raise QuestionConfigurationError(f"Question {question_id}: options must be a list")
            return question_class(options=tuple(options), **common)

        if issubclass(question_class, ShortTextQuestion):
            alternatives = config.get('acceptedAlternatives') or []
            if not isinstance(alternatives, list):
                raise QuestionConfigurationError(f"Question {question_id}: acceptedAlternatives must be a list")
            return question_class(
                case_sensitive=config.get('caseSensitive') or False,
                accepted_alternatives=tuple(alternatives),
                **common
            )

        if issubclass(question_class, NumericQuestion):
            return question_class(tolerance=config.get('tolerance'), **common)

        return question_class(**common)

    @staticmethod
    def _build_feedback(question_id: str, data) -> QuestionFeedback:
        if not isinstance(data, dict):
            raise QuestionConfigurationError(f"Question {question_id}: feedback is required")
        return QuestionFeedback(
            on_correct=data.get('onCorrect'),
            on_incorrect=data.get('onIncorrect'),
            explanation=data.get('explanation'),
            hint=data.get('hint'),
        )

    @staticmethod
    def load_questions(rows: List[Dict]) -> List[Question]:
        """
        Tạo danh sách câu hỏi, dừng ở câu đầu tiên bị lỗi

        Args:
            rows: Danh sách payload câu hỏi

        Returns:
            Danh sách Question
        """
        return [QuestionLoaderService.build_question(row) for row in rows]

    @staticmethod
    def load_questions_from_file(path: str) -> List[Question]:
        """Đọc ngân hàng câu hỏi từ file JSON (một mảng payload)"""
        with open(path, 'r', encoding='utf-8') as f:
            rows = json.load(f)

        if not isinstance(rows, list):
            raise QuestionConfigurationError(f"{path}: expected a JSON array of questions")

        questions = QuestionLoaderService.load_questions(rows)
        logger.info("Loaded %d questions from %s", len(questions), path)
        return questions
