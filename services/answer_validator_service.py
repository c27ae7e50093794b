"""
Answer Validator Service
"""

import math
from typing import Any, Callable, Dict, Optional

from models.exceptions import QuestionConfigurationError, UnknownQuestionTypeError
from models.question import (
    MultipleChoiceQuestion,
    NumericQuestion,
    Question,
    QuestionType,
    ShortTextQuestion,
    TrueFalseQuestion,
    is_option_index,
)
from models.validation_verdict import ValidationVerdict

# Sai số float tương đối khi so với tolerance (4.01 - 4 = 0.00999999999999979)
FLOAT_REL_SLACK = 1e-9


class AnswerValidatorService:
    """
    Service chấm câu trả lời của học sinh

    Hàm thuần (không I/O, không state): cùng (question, submitted_answer) luôn
    cho cùng một verdict. Câu trả lời sai định dạng luôn được chấm là sai chứ
    không raise; chỉ câu hỏi cấu hình sai mới raise QuestionConfigurationError.
    """

    @staticmethod
    def validate(question: Question, submitted_answer: Any) -> ValidationVerdict:
        """
        Chấm một câu trả lời

        Args:
            question: Câu hỏi đã hợp lệ
            submitted_answer: Câu trả lời thô của học sinh (không tin cậy)

        Returns:
            ValidationVerdict

        Raises:
            UnknownQuestionTypeError: loại câu hỏi không được hỗ trợ
            QuestionConfigurationError: câu hỏi cấu hình sai
        """
        question_type = getattr(question, "type", None)
        checker = _CHECKERS.get(question_type)
        if checker is None:
            raise UnknownQuestionTypeError(f"Unsupported question type: {question_type!r}")
        if not isinstance(question, Question):
            raise QuestionConfigurationError(f"Expected a Question, got {type(question).__name__}")

        question.check_definition()
        is_correct = checker(question, submitted_answer)

        return ValidationVerdict(
            is_correct=is_correct,
            score_awarded=question.points if is_correct else 0,
            score_max=question.points,
            feedback_shown=question.feedback.on_correct if is_correct else question.feedback.on_incorrect,
        )

    @staticmethod
    def check_multiple_choice(question: MultipleChoiceQuestion, submitted_answer: Any) -> bool:
        """So sánh tập index (nhiều đáp án) hoặc một index (một đáp án)"""
        if question.is_multi_select:
            if not isinstance(submitted_answer, (list, tuple)) or not submitted_answer:
                return False
            if not all(is_option_index(i) for i in submitted_answer):
                return False
            return set(submitted_answer) == set(question.correct_answer)

        return is_option_index(submitted_answer) and submitted_answer == question.correct_answer

    @staticmethod
    def check_true_false(question: TrueFalseQuestion, submitted_answer: Any) -> bool:
        """Không ép kiểu: "true" (string) là sai"""
        return isinstance(submitted_answer, bool) and submitted_answer == question.correct_answer

    @staticmethod
    def check_text(question: ShortTextQuestion, submitted_answer: Any) -> bool:
        """
        So khớp chuỗi với đáp án hoặc một trong các đáp án thay thế

        Cả hai phía đều được strip, và lowercase nếu không phân biệt hoa thường.
        Dùng chung cho short_text và math_expression (chỉ so sánh chuỗi).
        """
        if not isinstance(submitted_answer, str):
            return False

        submitted = _normalize_text(submitted_answer, question.case_sensitive)
        if not submitted:
            return False

        accepted = {_normalize_text(question.correct_answer, question.case_sensitive)}
        accepted.update(
            _normalize_text(alt, question.case_sensitive) for alt in question.accepted_alternatives
        )
        accepted.discard("")
        return submitted in accepted

    @staticmethod
    def check_numeric(question: NumericQuestion, submitted_answer: Any) -> bool:
        """abs(submitted - correct) <= tolerance, biên được tính là đúng"""
        parsed = parse_number(submitted_answer)
        if parsed is None:
            return False

        diff = abs(parsed - question.correct_answer)
        if diff <= question.tolerance:
            return True
        return math.isclose(diff, question.tolerance, rel_tol=FLOAT_REL_SLACK, abs_tol=0.0)


def parse_number(value: Any) -> Optional[float]:
    """
    Parse câu trả lời dạng số

    Returns:
        float hữu hạn, hoặc None nếu không parse được (bool, NaN, inf, text)
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            parsed = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return None
        try:
            parsed = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(parsed):
        return None
    return parsed


def _normalize_text(text: str, case_sensitive: bool) -> str:
    text = text.strip()
    return text if case_sensitive else text.lower()


_CHECKERS: Dict[QuestionType, Callable[[Question, Any], bool]] = {
    QuestionType.MULTIPLE_CHOICE: AnswerValidatorService.check_multiple_choice,
    QuestionType.TRUE_FALSE: AnswerValidatorService.check_true_false,
    QuestionType.SHORT_TEXT: AnswerValidatorService.check_text,
    QuestionType.NUMERIC: AnswerValidatorService.check_numeric,
    QuestionType.MATH_EXPRESSION: AnswerValidatorService.check_text,
}
