"""
Shared utilities và dependencies cho tất cả API routes
"""

import logging
import os
from typing import List

from models.question import Question
from services.question_loader_service import QuestionLoaderService
from services.response_intake_service import QuestionRepository, ResponseIntakeService

logger = logging.getLogger(__name__)

# Cache variables
_question_repository_cache = None
_intake_service_cache = None

# Config
QUESTIONS_FILE = os.getenv("QUESTIONS_FILE", "questions.json")
ALLOW_RESUBMISSION = os.getenv("ALLOW_RESUBMISSION", "false").strip().lower() in ("1", "true", "yes")


def load_seed_questions() -> List[Question]:
    """Load ngân hàng câu hỏi ban đầu từ QUESTIONS_FILE (bỏ qua nếu không có file)"""
    if not os.path.exists(QUESTIONS_FILE):
        logger.info("Seed file %s not found, starting with an empty question bank", QUESTIONS_FILE)
        return []
    return QuestionLoaderService.load_questions_from_file(QUESTIONS_FILE)


def get_question_repository() -> QuestionRepository:
    """Dependency trả về kho câu hỏi (có cache)"""
    global _question_repository_cache

    if _question_repository_cache is None:
        _question_repository_cache = QuestionRepository(load_seed_questions())

    return _question_repository_cache


def get_intake_service() -> ResponseIntakeService:
    """Dependency trả về ResponseIntakeService (có cache)"""
    global _intake_service_cache

    if _intake_service_cache is None:
        _intake_service_cache = ResponseIntakeService(
            get_question_repository(),
            allow_resubmission=ALLOW_RESUBMISSION,
        )

    return _intake_service_cache


def clear_cache():
    """Clear tất cả cache - dùng cho testing hoặc reload data"""
    global _question_repository_cache, _intake_service_cache

    _question_repository_cache = None
    _intake_service_cache = None
