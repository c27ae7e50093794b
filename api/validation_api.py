"""
Validation API endpoints
API chấm thử câu trả lời với một câu hỏi gửi kèm (không lưu)
"""

from fastapi import APIRouter, HTTPException
from api.schemas import ValidateAnswerRequest, ValidationVerdictSchema
from models.exceptions import QuestionConfigurationError
from services.answer_validator_service import AnswerValidatorService
from services.question_loader_service import QuestionLoaderService

router = APIRouter(prefix="/api/validation", tags=["Validation"])


@router.post("/validate",
             response_model=ValidationVerdictSchema,
             summary="Chấm một câu trả lời với câu hỏi gửi kèm")
async def validate_answer(request: ValidateAnswerRequest):
    """
    Chấm câu trả lời mà không lưu lại

    Câu hỏi được kiểm tra như khi tạo mới; câu hỏi sai cấu hình trả về 400
    vì ở đây người gọi chính là người gửi định nghĩa câu hỏi.
    """
    try:
        question = QuestionLoaderService.build_question(request.question.to_payload())
    except QuestionConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    verdict = AnswerValidatorService.validate(question, request.submitted_answer)
    return ValidationVerdictSchema.from_verdict(verdict)
