"""
Services module - Business logic
"""

from .answer_validator_service import AnswerValidatorService
from .question_loader_service import QuestionLoaderService
from .response_intake_service import QuestionRepository, ResponseIntakeService
from .attempt_score_service import AttemptScore, AttemptScoreService

__all__ = [
    'AnswerValidatorService',
    'QuestionLoaderService',
    'QuestionRepository',
    'ResponseIntakeService',
    'AttemptScore',
    'AttemptScoreService'
]
