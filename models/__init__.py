"""
Models module - Các class định nghĩa dữ liệu
"""

from .question import (
    QuestionType,
    QuestionFeedback,
    Question,
    MultipleChoiceQuestion,
    TrueFalseQuestion,
    ShortTextQuestion,
    NumericQuestion,
    MathExpressionQuestion,
)
from .validation_verdict import ValidationVerdict
from .question_response import QuestionResponse
from .exceptions import (
    QuestionConfigurationError,
    UnknownQuestionTypeError,
    QuestionNotFoundError,
    DuplicateResponseError,
)

__all__ = [
    'QuestionType',
    'QuestionFeedback',
    'Question',
    'MultipleChoiceQuestion',
    'TrueFalseQuestion',
    'ShortTextQuestion',
    'NumericQuestion',
    'MathExpressionQuestion',
    'ValidationVerdict',
    'QuestionResponse',
    'QuestionConfigurationError',
    'UnknownQuestionTypeError',
    'QuestionNotFoundError',
    'DuplicateResponseError',
]
