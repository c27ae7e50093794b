"""
Question Model
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union

from models.exceptions import QuestionConfigurationError


class QuestionType(str, Enum):
    """Các loại câu hỏi được hỗ trợ"""
    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_FALSE = "true_false"
    SHORT_TEXT = "short_text"
    NUMERIC = "numeric"
    MATH_EXPRESSION = "math_expression"


@dataclass(frozen=True)
class QuestionFeedback:
    """Feedback hiển thị sau khi chấm"""
    on_correct: str
    on_incorrect: str
    explanation: Optional[str] = None
    hint: Optional[str] = None


def is_option_index(value) -> bool:
    """Index phương án hợp lệ về kiểu: int nhưng không phải bool"""
    return isinstance(value, int) and not isinstance(value, bool)


def _is_finite_number(value) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


@dataclass(frozen=True)
class Question:
    """
    Câu hỏi (không đổi trong suốt một lần làm bài)

    Mỗi loại câu hỏi là một subclass riêng, `type` xác định chiến lược chấm.
    """
    question_id: str
    points: float
    feedback: QuestionFeedback

    type: ClassVar[QuestionType]

    def __post_init__(self):
        self.check_definition()

    def check_definition(self) -> None:
        """
        Kiểm tra câu hỏi có hợp lệ không

        Raises:
            QuestionConfigurationError: nếu câu hỏi bị cấu hình sai
        """
        if not _is_finite_number(self.points) or self.points < 0:
            raise QuestionConfigurationError(
                f"Question {self.question_id}: points must be a non-negative number, got {self.points!r}"
            )
        if not isinstance(self.feedback, QuestionFeedback):
            raise QuestionConfigurationError(f"Question {self.question_id}: feedback is missing")
        if not isinstance(self.feedback.on_correct, str) or not isinstance(self.feedback.on_incorrect, str):
            raise QuestionConfigurationError(
                f"Question {self.question_id}: feedback.on_correct and feedback.on_incorrect must be strings"
            )


@dataclass(frozen=True)
class MultipleChoiceQuestion(Question):
    """Trắc nghiệm: một đáp án (int) hoặc nhiều đáp án (tuple index)"""
    correct_answer: Union[int, Tuple[int, ...]] = None
    options: Tuple[str, ...] = ()

    type: ClassVar[QuestionType] = QuestionType.MULTIPLE_CHOICE

    def __post_init__(self):
        if isinstance(self.correct_answer, list):
            object.__setattr__(self, "correct_answer", tuple(self.correct_answer))
        if isinstance(self.options, list):
            object.__setattr__(self, "options", tuple(self.options))
        super().__post_init__()

    @property
    def is_multi_select(self) -> bool:
        return isinstance(self.correct_answer, tuple)

    def check_definition(self) -> None:
        super().check_definition()
        if self.is_multi_select:
            indices = self.correct_answer
            if not indices or not all(is_option_index(i) for i in indices):
                raise QuestionConfigurationError(
                    f"Question {self.question_id}: correct_answer must be a non-empty list of option indices"
                )
        elif is_option_index(self.correct_answer):
            indices = (self.correct_answer,)
        else:
            raise QuestionConfigurationError(
                f"Question {self.question_id}: correct_answer must be an option index or a list of indices"
            )

        if not isinstance(self.options, tuple) or not all(isinstance(o, str) for o in self.options):
            raise QuestionConfigurationError(f"Question {self.question_id}: options must be a list of strings")
        if len(self.options) < 2:
            raise QuestionConfigurationError(
                f"Question {self.question_id}: multiple choice needs at least 2 options"
            )
        if any(i < 0 or i >= len(self.options) for i in indices):
            raise QuestionConfigurationError(
                f"Question {self.question_id}: correct index out of range for {len(self.options)} options"
            )


@dataclass(frozen=True)
class TrueFalseQuestion(Question):
    """Đúng / Sai"""
    correct_answer: bool = None

    type: ClassVar[QuestionType] = QuestionType.TRUE_FALSE

    def check_definition(self) -> None:
        super().check_definition()
        if not isinstance(self.correct_answer, bool):
            raise QuestionConfigurationError(f"Question {self.question_id}: correct_answer must be a boolean")


@dataclass(frozen=True)
class ShortTextQuestion(Question):
    """Trả lời ngắn, so sánh chuỗi sau khi chuẩn hóa"""
    correct_answer: str = None
    case_sensitive: bool = False
    accepted_alternatives: Tuple[str, ...] = ()

    type: ClassVar[QuestionType] = QuestionType.SHORT_TEXT

    def __post_init__(self):
        if isinstance(self.accepted_alternatives, list):
            object.__setattr__(self, "accepted_alternatives", tuple(self.accepted_alternatives))
        super().__post_init__()

    def check_definition(self) -> None:
        super().check_definition()
        if not isinstance(self.correct_answer, str) or not self.correct_answer.strip():
            raise QuestionConfigurationError(f"Question {self.question_id}: correct_answer must be a non-empty string")
        if not isinstance(self.case_sensitive, bool):
            raise QuestionConfigurationError(f"Question {self.question_id}: case_sensitive must be a boolean")
        if not isinstance(self.accepted_alternatives, tuple) or not all(
            isinstance(a, str) for a in self.accepted_alternatives
        ):
            raise QuestionConfigurationError(
                f"Question {self.question_id}: accepted_alternatives must be a list of strings"
            )


@dataclass(frozen=True)
class MathExpressionQuestion(ShortTextQuestion):
    """
    Biểu thức toán học

    Chỉ so sánh theo chuỗi (giống ShortTextQuestion), KHÔNG kiểm tra tương đương
    đại số: "2x+2" và "2(x+1)" được coi là khác nhau.
    """
    type: ClassVar[QuestionType] = QuestionType.MATH_EXPRESSION


@dataclass(frozen=True)
class NumericQuestion(Question):
    """Câu hỏi số, chấp nhận sai số tuyệt đối `tolerance`"""
    correct_answer: float = None
    tolerance: float = 0.0

    type: ClassVar[QuestionType] = QuestionType.NUMERIC

    def __post_init__(self):
        if isinstance(self.correct_answer, str):
            try:
                object.__setattr__(self, "correct_answer", float(self.correct_answer.strip()))
            except ValueError:
                raise QuestionConfigurationError(
                    f"Question {self.question_id}: correct_answer {self.correct_answer!r} is not a number"
                )
        if self.tolerance is None:
            object.__setattr__(self, "tolerance", 0.0)
        super().__post_init__()

    def check_definition(self) -> None:
        super().check_definition()
        if not _is_finite_number(self.correct_answer):
            raise QuestionConfigurationError(f"Question {self.question_id}: correct_answer must be a finite number")
        if not _is_finite_number(self.tolerance) or self.tolerance < 0:
            raise QuestionConfigurationError(
                f"Question {self.question_id}: tolerance must be a non-negative number, got {self.tolerance!r}"
            )


QUESTION_CLASSES = {
    QuestionType.MULTIPLE_CHOICE: MultipleChoiceQuestion,
    QuestionType.TRUE_FALSE: TrueFalseQuestion,
    QuestionType.SHORT_TEXT: ShortTextQuestion,
    QuestionType.NUMERIC: NumericQuestion,
    QuestionType.MATH_EXPRESSION: MathExpressionQuestion,
}
